"""
Starting schedules: one second per incoming street, optionally rescaled by
street usage.
"""
from typing import Optional

from .deadline import Deadline
from ..domain.entities import Problem
from ..domain.protocols import SimulationOracle
from ..domain.schedule import IntersectionPlan, Phase, Schedule

def build_naive_schedule(problem: Problem) -> Schedule:
    """
    Every incoming street gets one second of green, in input order.
    """
    schedule = Schedule.empty(len(problem.intersections))
    for intersection in problem.intersections:
        schedule.plans[intersection.id] = IntersectionPlan(
            intersection_id=intersection.id,
            phases=[Phase(street=street, duration=1) for street in intersection.incoming_streets]
        )
    return schedule

def scale_durations_by_usage(
    oracle: SimulationOracle,
    schedule: Schedule,
    max_divisor: int = 50,
    deadline: Optional[Deadline] = None
) -> Schedule:
    """
    Tries durations proportional to street usage, usage // d for every
    d below max_divisor (at least one second), keeping the best.
    """
    best_schedule = schedule
    best_score = oracle.run_simulation_lite(schedule)

    for d in range(1, max_divisor):
        if deadline is not None and deadline.expired():
            break
        candidate = schedule.clone()
        for plan in candidate:
            for phase in plan.phases:
                phase.duration = max(1, phase.street.incoming_usage_count // d)

        score = oracle.run_simulation_lite(candidate)
        if score > best_score:
            best_schedule, best_score = candidate, score

    return best_schedule
