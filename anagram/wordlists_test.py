from anagram.test_utils import WORDS_FILE
from anagram.wordlists import read_word_list, tiers_by_length


def test_read_word_list():
    words = read_word_list(WORDS_FILE)
    assert len(words) == 12
    assert words[:3] == ["stop", "pots", "tops"]
    assert words[-2:] == ["Listen", "silent"]


def test_tiers_by_length():
    words = ["a", "to", "cat", "tree", "house", "orange", "zebras1", "elephant"]
    assert tiers_by_length(words) == [
        ["zebras1", "elephant"],
        ["orange"],
        ["house"],
        ["tree"],
        ["cat"],
        ["a", "to"],
    ]
    assert tiers_by_length(words, (5, 3)) == [
        ["house", "orange", "zebras1", "elephant"],
        ["cat", "tree"],
        ["a", "to"],
    ]


def test_tiers_by_length_drops_empty_tiers():
    assert tiers_by_length(["stop", "so", "pt"]) == [["stop"], ["so", "pt"]]
    assert tiers_by_length([]) == []
