# app/services/group_service.py
"""
Round driver: builds R rounds of groups for members 1..N while avoiding
repeated groups and reused five-cores from earlier rounds.

Each round gets a bounded number of attempts (build, repair, keep the best).
The first conflict free attempt is accepted; otherwise the least conflicting
one is accepted and flagged as best effort.
"""
import logging
import random
from typing import List, Optional

from app.config.settings import Settings, settings as default_settings
from app.domain.conflicts import HistoryStore
from app.domain.grouping import build_partition, MIN_SIZE
from app.domain.local_search import repair_groups
from app.domain.models import RoundDTO

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    pass


def validate_arguments(n: int, rounds: int) -> None:
    if n < MIN_SIZE:
        raise InvalidArgumentError(f"N must be >= {MIN_SIZE}")
    if rounds < 1:
        raise InvalidArgumentError("R must be >= 1")


class GroupAssignmentGenerator:
    """
    Owns the random source, the history of accepted groups and the rotation
    offset used when folding stray members into groups. Not thread safe;
    use one instance per caller.
    """

    def __init__(self, seed: Optional[int] = None, settings: Settings = None):
        self.settings = settings or default_settings
        self.seed = seed
        self.history = HistoryStore()
        self.rotation = 0
        self._rng = random.Random(seed) if seed is not None else random.Random()

    def generate_all_rounds(self, n: int, rounds: int) -> List[RoundDTO]:
        validate_arguments(n, rounds)
        return [self.generate_round(n, index=i) for i in range(rounds)]

    def generate_round(self, n: int, index: int = 0) -> RoundDTO:
        best_groups = None
        best_conflicts = None
        attempts = 0

        for attempt in range(self.settings.ATTEMPTS_PER_ROUND):
            attempts += 1
            groups = build_partition(n, self._rng, self.rotation)
            groups, conflicts = repair_groups(
                groups,
                self.history,
                self._rng,
                max_iterations=self.settings.REPAIR_ITERATIONS,
                partner_retries=self.settings.PARTNER_RETRIES,
            )
            logger.debug(f"Round {index} attempt {attempt}: {conflicts} conflicts")

            if best_conflicts is None or conflicts < best_conflicts:
                best_conflicts = conflicts
                best_groups = [list(g) for g in groups]

            if conflicts == 0:
                break

        result = RoundDTO(
            index=index,
            groups=best_groups,
            conflicts=best_conflicts,
            attempts=attempts,
            best_effort=best_conflicts > 0,
        )
        if result.best_effort:
            logger.warning(
                f"Round {index}: no conflict free grouping after {attempts} attempts, "
                f"accepting best candidate with {best_conflicts} conflicts"
            )

        self._accept(best_groups)
        logger.info(f"Round {index} accepted: {len(best_groups)} groups, sizes {result.sizes}")
        return result

    def _accept(self, groups: List[List[int]]) -> None:
        self.history.register(groups)
        self.rotation = 0 if not groups else (self.rotation + 1) % len(groups)


def generate(n: int, rounds: int, seed: Optional[int] = None, settings: Settings = None) -> List[RoundDTO]:
    """
    Build `rounds` rounds of groups for members 1..n.

    Example:
    >>> [r.sizes for r in generate(10, 1, seed=1)]
    [[5, 5]]
    """
    generator = GroupAssignmentGenerator(seed, settings=settings)
    return generator.generate_all_rounds(n, rounds)
