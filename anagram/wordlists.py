from typing import Iterable


def read_word_list(dict_input: str) -> list[str]:
    """Read a dictionary file with one word per line."""
    words = []
    with open(dict_input, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return words


def tiers_by_length(
    words: Iterable[str], cutoffs: tuple[int, ...] = (7, 6, 5, 4, 3)
) -> list[list[str]]:
    """Split a word list into tiers for a cascading search.

    Tier i holds the words at least cutoffs[i] long (and shorter than
    cutoffs[i - 1]); a final tier holds whatever is shorter than cutoffs[-1].
    With the default cutoffs that's 7+, 6, 5, 4, 3 and 1-2 letter words.
    Empty tiers are dropped.
    """
    assert cutoffs
    assert list(cutoffs) == sorted(cutoffs, reverse=True)
    tiers: list[list[str]] = [[] for _ in range(len(cutoffs) + 1)]
    for word in words:
        n = len(word)
        for i, cutoff in enumerate(cutoffs):
            if n >= cutoff:
                tiers[i].append(word)
                break
        else:
            tiers[-1].append(word)
    return [tier for tier in tiers if tier]
