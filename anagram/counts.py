"""Letter counts for a phrase, and the jump table used to step between them."""

from typing import Collection

from anagram.trie import to_codes

# Jump table value meaning "no more codes".
NO_MORE = -1


def build_counts(phrase: str) -> list[int]:
    codes = to_codes(phrase)
    if not codes:
        return []
    counts = [0] * (max(codes) + 1)
    for c in codes:
        counts[c] += 1
    return counts


def build_jumps(counts: list[int]) -> list[int]:
    """jumps[c] is the next code after c with a nonzero count.

    jumps[0] is the first code present, since cursors start at the terminal
    code. Codes not on the chain are never visited and stay 0.
    """
    jumps = [0] * len(counts)
    j = 0
    for i in range(1, len(counts)):
        if counts[i]:
            jumps[j] = i
            j = i
    if jumps:
        jumps[j] = NO_MORE
    return jumps


def indices(counts: list[int]) -> list[int]:
    return [i for i, n in enumerate(counts) if n]


def all_known(counts: list[int], known: Collection[int]) -> bool:
    return all(i in known for i in indices(counts))
