# app/domain/grouping.py
"""
Pure partition building for rotation rounds.

A candidate round is built in three steps:
- shuffle_members: uniform permutation of 1..n
- chunk_by_five: slice into groups of five, keep the tail as remainder
- distribute_remainder: fold the remainder into the groups by size policy

All functions work on plain lists and take the random source as an argument,
nothing here holds state between calls.
"""
from typing import List, Tuple, Iterable
import random

CHUNK_SIZE = 5
MIN_SIZE = 3
MAX_SIZE = 6


def canonical_key(group: Iterable[int]) -> str:
    """
    Order independent identity of a group.

    Example:
    >>> canonical_key([3, 10, 2])
    '02-03-10'
    """
    return "-".join(f"{m:02d}" for m in sorted(group))


def shuffle_members(n: int, rng: random.Random) -> List[int]:
    ids = list(range(1, n + 1))
    rng.shuffle(ids)
    return ids


def chunk_by_five(ids: List[int]) -> Tuple[List[List[int]], List[int]]:
    """
    Cut the id sequence into groups of exactly five.
    Returns (groups, remainder) where remainder has fewer than five ids.

    Example:
    >>> chunk_by_five([1, 2, 3, 4, 5, 6, 7])
    ([[1, 2, 3, 4, 5]], [6, 7])
    """
    groups = []
    idx = 0
    while idx + CHUNK_SIZE <= len(ids):
        groups.append(ids[idx: idx + CHUNK_SIZE])
        idx += CHUNK_SIZE
    return groups, ids[idx:]


def borrow_into_new_group(groups: List[List[int]], stray: int) -> Tuple[List[List[int]], List[int]]:
    """
    Seed a new group with `stray` and borrow one member from each of the
    largest groups until it reaches MIN_SIZE.

    Only groups with more than MIN_SIZE members lend, and they lend their last
    member. Groups are visited by size descending (stable on ties), one member
    per group per pass; another pass runs while the new group is short and
    someone can still lend (a single full group, N=7).
    Input lists are not modified; returns (new_groups, new_group) where
    new_groups does not yet contain new_group.
    """
    new_groups = [list(g) for g in groups]
    new_group = [stray]

    while len(new_group) < MIN_SIZE:
        lent = False
        order = sorted(range(len(new_groups)), key=lambda i: len(new_groups[i]), reverse=True)
        for i in order:
            if len(new_group) >= MIN_SIZE:
                break
            g = new_groups[i]
            if len(g) > MIN_SIZE:
                new_group.append(g.pop())
                lent = True
        if not lent:
            break

    return new_groups, new_group


def _place_strays(groups: List[List[int]], remainder: List[int], rotation: int) -> List[List[int]]:
    ptr = rotation % max(1, len(groups))

    for member in remainder:
        placed = False
        for _ in range(len(groups)):
            g = groups[ptr]
            ptr = (ptr + 1) % len(groups)
            if len(g) < MAX_SIZE:
                g.append(member)
                placed = True
                break

        if not placed:
            # every group is full: open a new one and borrow into it.
            # may stay short if nobody can lend, conflict detection flags it
            groups, new_group = borrow_into_new_group(groups, member)
            groups.append(new_group)

    return groups


def _greedy_slices(remainder: List[int]) -> List[List[int]]:
    slices = []
    i = 0
    while i < len(remainder):
        left = len(remainder) - i
        take = min(MAX_SIZE, left)
        slices.append(remainder[i: i + take])
        i += take
    return slices


def distribute_remainder(groups: List[List[int]], remainder: List[int], rotation: int = 0) -> List[List[int]]:
    """
    Fold the leftover members into the round.

    - r=0: nothing to do
    - r=1/2: join existing groups round-robin from `rotation`, max 6 per group
    - r=3/4: the remainder is its own group
    - r=8/9: split into 5 + rest (not produced by chunk_by_five, kept for
      other chunking strategies)
    - anything else: greedy slices of at most 6

    With no five-groups at all and 3 <= r <= 6 the remainder is the round.
    Mutates and returns `groups`.
    """
    r = len(remainder)
    if r == 0:
        return groups

    if not groups and MIN_SIZE <= r <= MAX_SIZE:
        groups.append(list(remainder))
        return groups

    if r in (1, 2):
        return _place_strays(groups, remainder, rotation)

    if r in (3, 4):
        groups.append(list(remainder))
    elif r in (8, 9):
        groups.append(remainder[:CHUNK_SIZE])
        groups.append(remainder[CHUNK_SIZE:])
    else:
        groups.extend(_greedy_slices(remainder))
    return groups


def build_partition(n: int, rng: random.Random, rotation: int = 0) -> List[List[int]]:
    """One full candidate partition of 1..n."""
    groups, remainder = chunk_by_five(shuffle_members(n, rng))
    return distribute_remainder(groups, remainder, rotation)
