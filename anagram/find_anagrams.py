#!/usr/bin/env python
"""Find all the anagrams of a phrase and print them."""

import argparse
import time

from tqdm import tqdm

from anagram.args import add_standard_args, get_anagrammer_from_args


def main():
    parser = argparse.ArgumentParser(
        prog="find_anagrams",
        description="Print every way to spell a phrase with dictionary words.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Sort words within each anagram, and anagrams shortest first.",
    )
    parser.add_argument(
        "--input_file",
        type=str,
        help="Read phrases from this file, one per line, instead of the command line.",
    )
    parser.add_argument("phrases", nargs="*", help="Phrases to anagram.")
    args = parser.parse_args()

    if args.input_file:
        with open(args.input_file, encoding="utf-8") as f:
            phrases = [line.strip() for line in f if line.strip()]
    else:
        phrases = args.phrases
    if not phrases:
        parser.error("Specify at least one phrase or --input_file.")

    anagrammer = get_anagrammer_from_args(args)

    it = tqdm(phrases, smoothing=0) if args.input_file else phrases
    for phrase in it:
        start_s = time.time()
        anagrams = anagrammer.anagrams(phrase, sort=args.sorted)
        elapsed_s = time.time() - start_s
        print(f"{phrase}:")
        for words in anagrams:
            print(" ".join(words))
        print(f"{len(anagrams)} anagrams in {elapsed_s:.02f}s.")


if __name__ == "__main__":
    main()
