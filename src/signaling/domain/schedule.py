"""
Mutable solution of an instance: the green-light cycle of every intersection.
"""
from dataclasses import dataclass, field
from typing import Iterator, List
from .entities import Street

@dataclass
class Phase:
    """
    One (street, duration) entry of a cycle. A duration of 0 keeps the
    phase in place but out of the cycle.
    """
    street: Street
    duration: int = 1

    def copy(self) -> "Phase":
        return Phase(street=self.street, duration=self.duration)

@dataclass
class IntersectionPlan:
    intersection_id: int
    phases: List[Phase] = field(default_factory=list)

    def copy(self) -> "IntersectionPlan":
        return IntersectionPlan(
            intersection_id=self.intersection_id,
            phases=[phase.copy() for phase in self.phases]
        )

    @property
    def active_phases(self) -> List[Phase]:
        return [phase for phase in self.phases if phase.duration > 0]

    @property
    def cycle_length(self) -> int:
        return sum(phase.duration for phase in self.phases if phase.duration > 0)

    def __len__(self) -> int:
        return len(self.phases)

@dataclass
class Schedule:
    """
    One plan per intersection, indexed by intersection id.
    Streets are shared read-only references; plans and phases are owned.
    """
    plans: List[IntersectionPlan]

    @classmethod
    def empty(cls, intersection_count: int) -> "Schedule":
        return cls(plans=[IntersectionPlan(intersection_id=i) for i in range(intersection_count)])

    def clone(self) -> "Schedule":
        """Independent deep copy. Editing the clone never touches self."""
        return Schedule(plans=[plan.copy() for plan in self.plans])

    def max_plan_length(self) -> int:
        return max((len(plan) for plan in self.plans), default=0)

    def count_active_intersections(self) -> int:
        return sum(1 for plan in self.plans if plan.active_phases)

    def __getitem__(self, intersection_id: int) -> IntersectionPlan:
        return self.plans[intersection_id]

    def __iter__(self) -> Iterator[IntersectionPlan]:
        return iter(self.plans)

    def __len__(self) -> int:
        return len(self.plans)
