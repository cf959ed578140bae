# app/domain/local_search.py
"""
Stochastic local search used to repair candidate rounds.

local_search is the generic accept-if-not-worse hill climber; it knows
nothing about groups. repair_groups plugs the member swap move and the
conflict detector into it.
"""
from typing import Any, Callable, List, Optional, Tuple, TypeVar
import random

from app.domain.conflicts import HistoryStore, conflicting_group_indices

State = TypeVar("State")
Move = Any

# evaluate(state) -> indices in violation; must not modify state
Evaluator = Callable[[Any], List[int]]
# propose(state, violations) -> applied move, or None to skip the iteration
Proposer = Callable[[Any, List[int]], Optional[Move]]
Undo = Callable[[Any, Move], None]


def local_search(
    state: State,
    max_iterations: int,
    evaluate: Evaluator,
    propose: Proposer,
    undo: Undo,
) -> Tuple[State, int]:
    """
    Greedy hill climbing that keeps lateral moves.

    Each iteration asks `propose` to apply one move in place. The move is kept
    when the violation count does not grow, otherwise `undo` reverts it.
    Stops early at zero violations. Returns (state, residual violations).
    """
    violations = evaluate(state)

    for _ in range(max_iterations):
        if not violations:
            break

        move = propose(state, violations)
        if move is None:
            continue

        candidate = evaluate(state)
        if len(candidate) <= len(violations):
            violations = candidate
        else:
            undo(state, move)

    return state, len(evaluate(state))


def repair_groups(
    groups: List[List[int]],
    history: HistoryStore,
    rng: random.Random,
    max_iterations: int = 20,
    partner_retries: int = 10,
) -> Tuple[List[List[int]], int]:
    """
    Swap single members between a conflicting group and a random partner
    group to reduce the number of conflicting groups. Modifies `groups`.
    """

    def evaluate(state):
        return conflicting_group_indices(state, history)

    def propose(state, violations):
        a = violations[rng.randrange(len(violations))]
        b = a
        for _ in range(partner_retries):
            if b != a:
                break
            b = rng.randrange(len(state))
        if a == b:
            return None

        ga, gb = state[a], state[b]
        if not ga or not gb:
            return None

        ai = rng.randrange(len(ga))
        bi = rng.randrange(len(gb))
        ga[ai], gb[bi] = gb[bi], ga[ai]
        return a, ai, b, bi

    def undo(state, move):
        a, ai, b, bi = move
        state[a][ai], state[b][bi] = state[b][bi], state[a][ai]

    return local_search(groups, max_iterations, evaluate, propose, undo)
