"""
Domain module initialization.
"""
from .entities import (
    Street,
    Car,
    Intersection,
    Problem,
    CarTrace,
    IntersectionStats,
    SimulationResult
)
from .schedule import Phase, IntersectionPlan, Schedule
from .protocols import SimulationOracle, OrderingHeuristic
from .repositories import ScheduleRepository
