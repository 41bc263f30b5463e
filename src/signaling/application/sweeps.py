"""
Greedy one-pass sweeps over every intersection, one move type each.

Candidates are visited in a fixed order: ascending intersection id, then the
position order documented on each sweep. An accepted candidate immediately
becomes the base of the following candidates (first improvement), so the
result depends on that order. The deadline is checked before every
intersection and every candidate; when it passes the best schedule so far is
returned.
"""
import logging

from .deadline import Deadline
from .moves import delta_duration, relocate_phase, swap_phases
from ..domain.protocols import SimulationOracle
from ..domain.schedule import Schedule

logger = logging.getLogger(__name__)

def effective_max_position(schedule: Schedule, requested: int) -> int:
    """Caps the position window at the longest plan of the schedule."""
    return min(requested, schedule.max_plan_length())

def swap_sweep(oracle: SimulationOracle, schedule: Schedule, max_pos: int, deadline: Deadline) -> Schedule:
    """
    Tries every swap with pos1 < pos2 < max_pos, ordered by pos2 then pos1.
    Accepts strictly better scores only.
    """
    best_score = oracle.run_simulation_lite(schedule)

    for i in range(len(schedule)):
        if deadline.expired():
            return schedule
        loop_pos = min(max_pos, len(schedule[i]))

        for pos2 in range(1, loop_pos):
            for pos1 in range(pos2):
                if deadline.expired():
                    return schedule
                candidate = swap_phases(schedule, i, pos1, pos2)
                score = oracle.run_simulation_lite(candidate)
                if score > best_score:
                    schedule, best_score = candidate, score
                    logger.debug(f"New best: {best_score} [swap {i}: {pos1}<->{pos2}]")

    return schedule

def relocate_sweep(oracle: SimulationOracle, schedule: Schedule, max_pos: int, deadline: Deadline) -> Schedule:
    """
    Tries moving the phase at pos1 to pos2 for every ordered pair below
    max_pos, ordered by pos2 then pos1. Pairs with |pos1 - pos2| <= 1 are
    skipped; adjacent moves are swaps. Accepts strictly better scores only.
    """
    best_score = oracle.run_simulation_lite(schedule)

    for i in range(len(schedule)):
        if deadline.expired():
            return schedule
        loop_pos = min(max_pos, len(schedule[i]))

        for pos2 in range(loop_pos):
            for pos1 in range(loop_pos):
                if deadline.expired():
                    return schedule
                if abs(pos1 - pos2) <= 1:
                    continue
                candidate = relocate_phase(schedule, i, pos1, pos2)
                score = oracle.run_simulation_lite(candidate)
                if score > best_score:
                    schedule, best_score = candidate, score
                    logger.debug(f"New best: {best_score} [move {i}: {pos1}->{pos2}]")

    return schedule

def delta_duration_sweep(
    oracle: SimulationOracle,
    schedule: Schedule,
    max_pos: int,
    delta: int,
    deadline: Deadline
) -> Schedule:
    """
    Adds delta to each phase below max_pos in ascending position order.
    Accepts better scores, and equal scores when delta is negative so that
    unused green time is given back. Negative durations are skipped.
    """
    best_score = oracle.run_simulation_lite(schedule)

    for i in range(len(schedule)):
        if deadline.expired():
            return schedule
        loop_pos = min(max_pos, len(schedule[i]))

        for pos in range(loop_pos):
            if deadline.expired():
                return schedule
            candidate = delta_duration(schedule, i, pos, delta)
            if candidate is None:
                continue
            score = oracle.run_simulation_lite(candidate)
            if score > best_score or (score == best_score and delta < 0):
                schedule, best_score = candidate, score
                logger.debug(f"New best: {best_score} [delta {delta:+d} {i}:{pos}]")

    return schedule
