"""
Domain entities for the Signaling module.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass(eq=False)
class Street:
    """
    A one-way street ending at a traffic light.
    """
    id: int
    name: str
    start: int # intersection id
    end: int # intersection id, owner of the light
    length: int # seconds to drive it
    incoming_usage_count: int = 0 # cars using it as a non-final leg

    def __repr__(self) -> str:
        return f"Street({self.id}, {self.name!r})"

@dataclass(eq=False)
class Car:
    """
    A car following a fixed route. It starts queued at the end of route[0].
    """
    id: int
    route: List[Street]

    @property
    def drive_time(self) -> int:
        """Seconds spent driving once the first light is crossed."""
        return sum(street.length for street in self.route[1:])

@dataclass(eq=False)
class Intersection:
    id: int
    incoming_streets: List[Street] = field(default_factory=list)
    outgoing_streets: List[Street] = field(default_factory=list)

@dataclass
class Problem:
    """
    Static road network, cars and scoring rules of one instance.
    """
    duration: int
    bonus_per_car: int
    intersections: List[Intersection]
    streets: Dict[int, Street]
    cars: List[Car]
    _streets_by_name: Dict[str, Street] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        self._streets_by_name = {s.name: s for s in self.streets.values()}

    def street_by_name(self, name: str) -> Optional[Street]:
        return self._streets_by_name.get(name)

    def calculate_score_upper_bound(self) -> int:
        """
        Score if no car ever waited at a red light.
        """
        total = 0
        for car in self.cars:
            drive_time = car.drive_time
            if drive_time <= self.duration:
                total += self.bonus_per_car + self.duration - drive_time
        return total

    def remove_unused_streets(self) -> int:
        """
        Drops streets no car waits on from the intersections' incoming lists,
        so they never get a green light. Returns how many were removed.
        """
        removed = 0
        for intersection in self.intersections:
            used = [s for s in intersection.incoming_streets if s.incoming_usage_count > 0]
            removed += len(intersection.incoming_streets) - len(used)
            intersection.incoming_streets = used
        return removed

@dataclass
class CarTrace:
    """
    A car that had not finished its route when the simulation ended.
    """
    car: Car
    time_left_on_drive: int # seconds left on the current leg, 0 if queued

@dataclass
class IntersectionStats:
    """
    Congestion hot-spots observed at one intersection during a simulation.
    """
    intersection_id: int
    max_blocked_street_name: Optional[str] = None
    max_blocked_traffic: int = 0 # car-seconds queued at a red light
    max_green_wait_street_id: Optional[int] = None
    max_green_wait: int = 0 # car-seconds queued behind another car on green

@dataclass
class SimulationResult:
    score: int
    unfinished_cars: List[CarTrace] = field(default_factory=list)
    intersection_stats: List[IntersectionStats] = field(default_factory=list)

    def max_blocked_traffic(self) -> int:
        return max((s.max_blocked_traffic for s in self.intersection_stats), default=0)
