"""Ranking: competition ranks for contributors ordered by commit count.

Invariants:
    - Input counts are already sorted descending
    - Equal counts share a rank; the next distinct count skips ("1, 2, 2, 4")
"""


def competition_ranks(counts: list[int]) -> list[int]:
    ranks: list[int] = []
    for position, count in enumerate(counts, start=1):
        if ranks and count == counts[position - 2]:
            ranks.append(ranks[-1])
        else:
            ranks.append(position)
    return ranks
