import pytest

from anagram.counts import build_counts
from anagram.search import SearchContext, all_touched, anagramize
from anagram.trie import LexiconTrie
from anagram.walker import words_in


def search(words: list[str], phrase: str, limit=20):
    trie, _ = LexiconTrie.create_from_wordlist(words)
    counts = build_counts(phrase)
    ctx = SearchContext.for_phrase(trie, counts, limit)
    anagrams = anagramize(ctx, counts)
    return ctx, [[ctx.word_cache.word(w) for w in anagram] for anagram in anagrams]


def multisets(anagrams):
    return {tuple(sorted(words)) for words in anagrams}


@pytest.mark.parametrize("limit", [0, 1, 2, 20])
def test_abc(limit):
    _, anagrams = search(["a", "b", "c", "ab", "bc", "ac", "abc"], "abc", limit)
    assert len(anagrams) == 5
    assert multisets(anagrams) == {
        ("a", "b", "c"),
        ("a", "bc"),
        ("ab", "c"),
        ("abc",),
        ("ac", "b"),
    }


def test_empty_counts():
    trie, _ = LexiconTrie.create_from_wordlist(["a"])
    counts = build_counts("a")
    ctx = SearchContext.for_phrase(trie, counts, 20)
    assert anagramize(ctx, [0] * len(counts)) == [()]


def test_dedupe_by_multiset():
    _, anagrams = search(["a", "aa"], "aaa")
    assert anagrams == [["a", "a", "a"], ["a", "aa"]]


def test_untouched_letter_is_a_dead_end():
    # Nothing spells the "c", so no decomposition exists.
    ctx, anagrams = search(["ab", "b"], "abc")
    assert anagrams == []
    assert ctx.cache == {(1, 1, 1): []}


def test_pruned_branch_contributes_nothing():
    # Taking "ab" first leaves a "c" which no word can use on its own.
    ctx, anagrams = search(["ab", "ca", "b"], "abc")
    assert anagrams == [["ca", "b"]]
    assert ctx.cache[(0, 0, 1)] == []


def test_all_touched_keeps_words_using_lowest_letter():
    trie, _ = LexiconTrie.create_from_wordlist(["a", "b", "ab", "bb"])
    counts = build_counts("abb")
    ctx = SearchContext.for_phrase(trie, counts, 20)
    words = words_in(ctx.trie, ctx.jumps, ctx.word_cache, counts, 3)
    assert sorted(ctx.word_cache.word(w) for w, _ in words) == ["a", "ab", "b", "bb"]

    kept = all_touched(ctx, counts, words)
    assert sorted(ctx.word_cache.word(w) for w, _ in kept) == ["a", "ab"]


def test_limit_bounds_cache():
    words = ["a", "b", "c", "ab", "bc", "ac", "abc"]
    ctx, uncached = search(words, "abc", limit=0)
    assert ctx.cache == {}

    ctx, cached = search(words, "abc", limit=1)
    assert all(sum(key) <= 1 for key in ctx.cache)

    ctx, cached_all = search(words, "abc", limit=20)
    assert (1, 1, 1) in ctx.cache
    assert multisets(uncached) == multisets(cached) == multisets(cached_all)
