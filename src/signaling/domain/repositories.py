"""
Domain repositories for the Signaling module.
"""
from pathlib import Path
from typing import Protocol
from .schedule import Schedule

class ScheduleRepository(Protocol):
    """
    Abstract base class for saving finished schedules.
    """
    def save(self, schedule: Schedule, instance_name: str) -> Path:
        ...
