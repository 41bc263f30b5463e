from typing import AbstractSet, Dict

from ..domain.entities import Problem
from ..domain.protocols import OrderingHeuristic
from ..domain.schedule import Schedule

class ArrivalOrderHeuristic(OrderingHeuristic):
    """
    Orders each cycle by when the first car could reach each light,
    assuming no car ever waits. Busier streets win ties; the sort is
    stable so remaining ties keep the current order.
    """
    def __init__(self, problem: Problem):
        self.problem = problem
        self.first_arrival = self._free_flow_arrivals(problem)

    @staticmethod
    def _free_flow_arrivals(problem: Problem) -> Dict[int, int]:
        first: Dict[int, int] = {}
        for car in problem.cars:
            t = 0
            for index, street in enumerate(car.route[:-1]):
                if index > 0:
                    t += street.length
                if street.id not in first or t < first[street.id]:
                    first[street.id] = t
        return first

    def apply(self, schedule: Schedule, excluded_ids: AbstractSet[int]) -> None:
        never = self.problem.duration + 1
        for plan in schedule:
            if plan.intersection_id in excluded_ids:
                continue
            plan.phases.sort(key=lambda p: (
                self.first_arrival.get(p.street.id, never),
                -p.street.incoming_usage_count
            ))
