from collections import defaultdict, deque
from typing import Deque, Dict, List, Set, Tuple

from ..domain.entities import CarTrace, IntersectionStats, Problem, SimulationResult
from ..domain.protocols import SimulationOracle
from ..domain.schedule import Schedule

class TrafficSimulator(SimulationOracle):
    """
    Second-by-second simulation of all cars under a schedule.

    At every second the cars reaching the end of a street join its queue,
    then every queue whose light is green lets its head car cross. A car
    finishing its last street at time T <= D scores F + (D - T).
    """
    def __init__(self, problem: Problem):
        self.problem = problem

    def run_simulation_lite(self, schedule: Schedule) -> int:
        return self._simulate(schedule, diagnostics=False).score

    def run_simulation(self, schedule: Schedule) -> SimulationResult:
        return self._simulate(schedule, diagnostics=True)

    @staticmethod
    def _green_slots(schedule: Schedule) -> Dict[int, List[int]]:
        """Intersection id -> street id that is green at each second of the cycle."""
        slots = {}
        for plan in schedule:
            cycle: List[int] = []
            for phase in plan.active_phases:
                cycle.extend([phase.street.id] * phase.duration)
            if cycle:
                slots[plan.intersection_id] = cycle
        return slots

    def _simulate(self, schedule: Schedule, diagnostics: bool) -> SimulationResult:
        problem = self.problem
        duration = problem.duration
        bonus = problem.bonus_per_car
        streets = problem.streets
        cars = problem.cars
        slots = self._green_slots(schedule)

        queues: Dict[int, Deque[int]] = defaultdict(deque)
        waiting: Set[int] = set()
        arrivals: Dict[int, List[Tuple[int, int]]] = defaultdict(list)
        legs = [0] * len(cars)
        finished = [False] * len(cars)
        time_left: Dict[int, int] = {}
        blocked: Dict[int, int] = defaultdict(int)
        green_wait: Dict[int, int] = defaultdict(int)
        score = 0

        for car in cars:
            if len(car.route) == 1:
                score += bonus + duration
                finished[car.id] = True
                continue
            queues[car.route[0].id].append(car.id)
            waiting.add(car.route[0].id)

        t = 0
        while t < duration:
            for car_id, street_id in arrivals.pop(t, ()):
                queues[street_id].append(car_id)
                waiting.add(street_id)

            for street_id in list(waiting):
                queue = queues[street_id]
                cycle = slots.get(streets[street_id].end)
                green = cycle is not None and cycle[t % len(cycle)] == street_id
                if diagnostics:
                    if green:
                        green_wait[street_id] += len(queue) - 1
                    else:
                        blocked[street_id] += len(queue)
                if not green:
                    continue

                car_id = queue.popleft()
                if not queue:
                    waiting.discard(street_id)

                route = cars[car_id].route
                legs[car_id] += 1
                street = route[legs[car_id]]
                arrive = t + street.length
                if legs[car_id] == len(route) - 1:
                    if arrive <= duration:
                        score += bonus + duration - arrive
                        finished[car_id] = True
                    else:
                        time_left[car_id] = arrive - duration
                elif arrive < duration:
                    arrivals[arrive].append((car_id, street.id))
                else:
                    time_left[car_id] = arrive - duration

            if waiting:
                t += 1
            elif arrivals:
                t = min(arrivals)
            else:
                break

        if not diagnostics:
            return SimulationResult(score=score)

        unfinished = [
            CarTrace(car=car, time_left_on_drive=time_left.get(car.id, 0))
            for car in cars if not finished[car.id]
        ]
        return SimulationResult(
            score=score,
            unfinished_cars=unfinished,
            intersection_stats=self._intersection_stats(blocked, green_wait)
        )

    def _intersection_stats(
        self,
        blocked: Dict[int, int],
        green_wait: Dict[int, int]
    ) -> List[IntersectionStats]:
        stats = []
        for intersection in self.problem.intersections:
            entry = IntersectionStats(intersection_id=intersection.id)
            for street in intersection.incoming_streets:
                if blocked.get(street.id, 0) > entry.max_blocked_traffic:
                    entry.max_blocked_traffic = blocked[street.id]
                    entry.max_blocked_street_name = street.name
                if green_wait.get(street.id, 0) > entry.max_green_wait:
                    entry.max_green_wait = green_wait[street.id]
                    entry.max_green_wait_street_id = street.id
            stats.append(entry)
        return stats
