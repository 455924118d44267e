#!/usr/bin/env python
"""I/O-free performance test.

Times the search for each phrase, without printing the anagrams:

$ python -m anagram.perf --dictionary /usr/share/dict/words --tiered --min 100 \
    "Ada Hyacinth Melton-Houghton"
"""

import argparse
import time

from anagram.args import add_standard_args, get_anagrammer_from_args


def main():
    parser = argparse.ArgumentParser(
        prog="Anagram perf test",
        description="Measure the speed of anagram search, free from I/O.",
    )
    add_standard_args(parser)
    parser.add_argument("phrases", nargs="+", help="Phrases to anagram.")
    args = parser.parse_args()

    start_s = time.time()
    anagrammer = get_anagrammer_from_args(args)
    end_s = time.time()
    sizes = ", ".join(str(tier.num_words) for tier in anagrammer.tiers)
    print(f"Built {len(anagrammer.tiers)} tier(s) ({sizes} words) in {end_s - start_s:.02f}s.")

    total_s = 0.0
    for phrase in args.phrases:
        start_s = time.time()
        n = len(anagrammer.anagrams(phrase))
        elapsed_s = time.time() - start_s
        total_s += elapsed_s
        print(f"{phrase!r}: {n} anagrams, {elapsed_s:.02f}s")
    print(f"{total_s:.02f}s total")


if __name__ == "__main__":
    main()
