# app/domain/conflicts.py
"""
History of accepted groups and conflict detection against it.

A group conflicts when:
- its size is outside [3, 6]
- the exact same member set was accepted in an earlier round
- it has six members and one of its 5-member subsets was accepted
  as a five-group earlier (five-core reuse)
"""
from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Set

from app.domain.grouping import canonical_key, CHUNK_SIZE, MIN_SIZE, MAX_SIZE


@dataclass
class HistoryStore:
    exact: Set[str] = field(default_factory=set)
    five_core: Set[str] = field(default_factory=set)

    def register(self, groups: List[List[int]]) -> None:
        """Record an accepted round. Sets only grow."""
        for g in groups:
            key = canonical_key(g)
            self.exact.add(key)
            if len(g) == CHUNK_SIZE:
                self.five_core.add(key)

    def __contains__(self, group) -> bool:
        return canonical_key(group) in self.exact

    def __len__(self) -> int:
        return len(self.exact)


def five_cores(group: List[int]) -> List[List[int]]:
    """
    The 5-member subsets of a six-group, each formed by leaving one member out.

    Example:
    >>> five_cores([1, 2, 3, 4, 5, 6])[0]
    [1, 2, 3, 4, 5]
    """
    if len(group) != MAX_SIZE:
        return []
    return [list(c) for c in combinations(sorted(group), CHUNK_SIZE)]


def is_conflict(group: List[int], history: HistoryStore) -> bool:
    if len(group) < MIN_SIZE or len(group) > MAX_SIZE:
        return True

    if canonical_key(group) in history.exact:
        return True

    return any(canonical_key(core) in history.five_core for core in five_cores(group))


def conflicting_group_indices(groups: List[List[int]], history: HistoryStore) -> List[int]:
    """Indices of groups in conflict, recomputed over the whole round."""
    return [i for i, g in enumerate(groups) if is_conflict(g, history)]
