"""
Domain protocols for the Signaling module.
"""
from typing import AbstractSet, Protocol
from .entities import SimulationResult
from .schedule import Schedule

class SimulationOracle(Protocol):
    """
    Scores a schedule against the static network.
    """
    def run_simulation_lite(self, schedule: Schedule) -> int:
        ...

    def run_simulation(self, schedule: Schedule) -> SimulationResult:
        ...

class OrderingHeuristic(Protocol):
    """
    Reorders the phases of every plan in place.
    """
    def apply(self, schedule: Schedule, excluded_ids: AbstractSet[int]) -> None:
        ...
