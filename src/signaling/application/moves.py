"""
Local edits of a schedule. Every move returns a new schedule and leaves
its input untouched.
"""
from typing import Optional

from ..domain.schedule import IntersectionPlan, Schedule
from ...common.exceptions import InvalidMoveError

def _check_position(plan: IntersectionPlan, pos: int):
    if not 0 <= pos < len(plan.phases):
        raise InvalidMoveError(
            f"Intersection {plan.intersection_id} has no phase at position {pos}"
        )

def swap_phases(schedule: Schedule, intersection_id: int, pos1: int, pos2: int) -> Schedule:
    """Exchanges the phases at pos1 < pos2."""
    if pos1 >= pos2:
        raise InvalidMoveError(f"Swap needs pos1 < pos2, got {pos1} and {pos2}")
    _check_position(schedule[intersection_id], pos2)
    _check_position(schedule[intersection_id], pos1)

    candidate = schedule.clone()
    phases = candidate[intersection_id].phases
    phases[pos1], phases[pos2] = phases[pos2], phases[pos1]
    return candidate

def relocate_phase(schedule: Schedule, intersection_id: int, pos1: int, pos2: int) -> Schedule:
    """Removes the phase at pos1 and reinserts it at pos2."""
    _check_position(schedule[intersection_id], pos1)
    _check_position(schedule[intersection_id], pos2)

    candidate = schedule.clone()
    phases = candidate[intersection_id].phases
    phases.insert(pos2, phases.pop(pos1))
    return candidate

def delta_duration(schedule: Schedule, intersection_id: int, pos: int, delta: int) -> Optional[Schedule]:
    """
    Adds delta seconds to one phase. Returns None when the duration would
    become negative.
    """
    _check_position(schedule[intersection_id], pos)
    if schedule[intersection_id].phases[pos].duration + delta < 0:
        return None

    candidate = schedule.clone()
    candidate[intersection_id].phases[pos].duration += delta
    return candidate
