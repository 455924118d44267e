"""Standard command-line arguments shared across the anagram tools."""

import argparse
import logging

from anagram.anagrammer import LIMIT, Anagrammer
from anagram.trie import clean
from anagram.wordlists import read_word_list, tiers_by_length


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        required=True,
        help="Path to dictionary file with one word per line, e.g. /usr/share/dict/words.",
    )
    parser.add_argument(
        "--tiered",
        action="store_true",
        help="Split the dictionary into tiers by word length, longest words "
        "first, and only fall back to shorter words when needed.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=LIMIT,
        help="Only cache anagrams for states with at most this many letters. "
        "Lower this to save memory on long phrases.",
    )
    parser.add_argument(
        "--min",
        type=int,
        dest="min_anagrams",
        default=None,
        help="With --tiered, move on to the next tier until at least this "
        "many anagrams are found.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log which tiers are searched.",
    )


def get_anagrammer_from_args(args: argparse.Namespace) -> Anagrammer:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    words = read_word_list(args.dictionary)
    if args.tiered:
        word_lists = tiers_by_length([clean(w) for w in words])
    else:
        word_lists = words
    return Anagrammer(
        word_lists, limit=args.limit, min_anagrams=args.min_anagrams
    )
