"""
Search for the escalation divisor that gives the best starting solution.
"""
import logging
from typing import Iterable, Optional, Tuple

from .deadline import Deadline
from .escalator import CongestionEscalator
from .pruner import DeadWeightPruner
from .seeding import build_naive_schedule
from ..domain.entities import Problem
from ..domain.protocols import OrderingHeuristic, SimulationOracle

logger = logging.getLogger(__name__)

def tune_escalation_divisor(
    problem: Problem,
    oracle: SimulationOracle,
    ordering: OrderingHeuristic,
    divisors: Iterable[int],
    stagnation_rounds: int = 10,
    deadline: Optional[Deadline] = None
) -> Tuple[int, int]:
    """
    Replays ordering, escalation and pruning for each divisor and returns
    (divisor, score) of the best run. The first divisor wins ties.
    """
    pruner = DeadWeightPruner(problem, oracle)
    best_divisor, best_score = None, -1

    for divisor in divisors:
        if deadline is not None and deadline.expired():
            break
        schedule = build_naive_schedule(problem)
        ordering.apply(schedule, set())
        schedule = CongestionEscalator(oracle, divisor, stagnation_rounds).run(schedule)
        schedule = pruner.run(schedule)

        score = oracle.run_simulation_lite(schedule)
        if score > best_score:
            best_divisor, best_score = divisor, score
            logger.info(f"Found. Score: {score}, Divisor: {divisor}")

    return best_divisor, best_score
