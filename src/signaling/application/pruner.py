"""
Removal of green phases that only serve cars unable to finish in time.
"""
import logging
from typing import Dict, List, Optional, Sequence

from .deadline import Deadline
from ..domain.entities import CarTrace, Problem
from ..domain.protocols import SimulationOracle
from ..domain.schedule import Schedule

logger = logging.getLogger(__name__)

class DeadWeightPruner:
    """
    Removes green phases that only serve cars which will not finish anyway.

    A street's usage minus the legs of the unfinished cars is its useful
    usage; phases of streets whose useful usage drops to zero are deleted,
    freeing their cycle time. Some of those cars may finish once others are
    out of the way, so single cars are then spared from the exclusion set,
    closest to finishing first, keeping every strict improvement.
    """
    def __init__(self, problem: Problem, oracle: SimulationOracle):
        self.problem = problem
        self.oracle = oracle

    def prune(self, schedule: Schedule, cars: Sequence[CarTrace]) -> Schedule:
        """
        Returns a copy of the schedule without the phases of streets used
        only by the given cars.
        """
        usage: Dict[int, int] = {
            street.id: street.incoming_usage_count for street in self.problem.streets.values()
        }
        for trace in cars:
            for street in trace.car.route[:-1]:
                usage[street.id] -= 1

        candidate = schedule.clone()
        for trace in cars:
            for street in trace.car.route[:-1]:
                if usage[street.id] != 0:
                    continue
                plan = candidate[street.end]
                plan.phases = [p for p in plan.phases if p.street.id != street.id]
        return candidate

    def run(self, schedule: Schedule, deadline: Optional[Deadline] = None) -> Schedule:
        result = self.oracle.run_simulation(schedule)

        # Nothing to optimize here
        if not result.unfinished_cars:
            return schedule

        best_schedule, best_score = schedule, result.score

        candidate = self.prune(schedule, result.unfinished_cars)
        score = self.oracle.run_simulation_lite(candidate)
        if score > best_score:
            best_schedule, best_score = candidate, score
            logger.info(f"Pruned streets of {len(result.unfinished_cars)} unfinished cars, score {best_score}")

        excluded: List[CarTrace] = sorted(result.unfinished_cars, key=lambda c: c.time_left_on_drive)

        while True:
            spared = None
            for i in range(len(excluded)):
                if deadline is not None and deadline.expired():
                    return best_schedule
                candidate = self.prune(schedule, excluded[:i] + excluded[i + 1:])
                score = self.oracle.run_simulation_lite(candidate)
                if score > best_score:
                    best_schedule, best_score = candidate, score
                    spared = i
                    break
            if spared is None:
                break
            logger.debug(f"Sparing car {excluded[spared].car.id}, score {best_score}")
            del excluded[spared]

        return best_schedule
