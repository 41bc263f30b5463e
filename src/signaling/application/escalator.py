"""
Duration escalation driven by the simulator's congestion diagnostics.
"""
import logging
from typing import Dict, Optional

from .deadline import Deadline
from ..domain.protocols import SimulationOracle
from ..domain.schedule import Schedule

logger = logging.getLogger(__name__)

class CongestionEscalator:
    """
    Gives one more second of green to the most blocked street of the
    worst intersections, round after round.

    Each round runs the full simulation, ranks the intersections with blocked
    traffic (most blocked first) and lengthens the top count // divisor of
    them. A larger divisor makes smaller edits per round. Stops once
    `stagnation_rounds` consecutive rounds did not beat the best score and
    returns the best schedule seen, which need not be the last one.
    """
    def __init__(self, oracle: SimulationOracle, divisor: int = 50, stagnation_rounds: int = 10):
        self.oracle = oracle
        self.divisor = divisor
        self.stagnation_rounds = stagnation_rounds

    def run(
        self,
        schedule: Schedule,
        start_score: int = -1,
        deadline: Optional[Deadline] = None
    ) -> Schedule:
        best_schedule, best_score = schedule, start_score
        working = schedule.clone()
        rounds_since_best = 0

        while rounds_since_best < self.stagnation_rounds:
            if deadline is not None and deadline.expired():
                break
            rounds_since_best += 1

            result = self.oracle.run_simulation(working)
            if result.score > best_score:
                best_schedule, best_score = working.clone(), result.score
                rounds_since_best = 0
            logger.debug(
                f"Score: {result.score}, Max blocked traffic: {result.max_blocked_traffic()}, "
                f"Cars not finished: {len(result.unfinished_cars)}, Best score: {best_score}"
            )

            congested = sorted(
                (s for s in result.intersection_stats if s.max_blocked_traffic > 0),
                key=lambda s: s.max_blocked_traffic,
                reverse=True
            )
            # Nothing to optimize
            if not congested:
                break

            selected = congested[:len(congested) // self.divisor]
            # Following rounds would simulate the same schedule again
            if not selected:
                break

            for stats in selected:
                for phase in working[stats.intersection_id].phases:
                    if phase.street.name == stats.max_blocked_street_name:
                        phase.duration += 1

        return best_schedule

class GreenWaitEscalator:
    """
    Lengthens, one intersection at a time, the phase whose street had the
    longest queue while green, keeping each edit only if it beats the score
    the round started from.

    A (street, wait) pair that was already rejected is not retried until the
    wait changes. Stops as soon as a round fails to beat the best score.
    """
    def __init__(self, oracle: SimulationOracle):
        self.oracle = oracle

    def run(self, schedule: Schedule, deadline: Optional[Deadline] = None) -> Schedule:
        best_schedule, best_score = schedule, -1
        working = schedule.clone()
        rejected_wait: Dict[int, int] = {}

        while deadline is None or not deadline.expired():
            result = self.oracle.run_simulation(working)
            if result.score <= best_score:
                break
            best_schedule, best_score = working.clone(), result.score

            waiting = sorted(
                (s for s in result.intersection_stats if s.max_green_wait > 0),
                key=lambda s: s.max_green_wait,
                reverse=True
            )
            if not waiting:
                break

            start_score = result.score
            for stats in waiting:
                if deadline is not None and deadline.expired():
                    break
                street_id = stats.max_green_wait_street_id
                if rejected_wait.get(street_id) == stats.max_green_wait:
                    continue
                phase = next(
                    (p for p in working[stats.intersection_id].phases if p.street.id == street_id),
                    None
                )
                if phase is None:
                    continue

                phase.duration += 1
                score = self.oracle.run_simulation_lite(working)
                if score <= start_score:
                    phase.duration -= 1
                    rejected_wait[street_id] = stats.max_green_wait
                else:
                    rejected_wait.pop(street_id, None)

        return best_schedule
