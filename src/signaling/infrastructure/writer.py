import os
from pathlib import Path
from typing import List

from ..domain.repositories import ScheduleRepository
from ..domain.schedule import Schedule

def render_schedule(schedule: Schedule) -> str:
    """
    Submission format: number of intersections with a positive phase, then
    per such intersection its id, its positive phase count and one
    "<street name> <duration>" line per positive phase.
    """
    lines: List[str] = [str(schedule.count_active_intersections())]
    for plan in schedule:
        active = plan.active_phases
        # Skip intersection - always red
        if not active:
            continue
        lines.append(str(plan.intersection_id))
        lines.append(str(len(active)))
        lines.extend(f"{phase.street.name} {phase.duration}" for phase in active)
    return "\n".join(lines) + "\n"

class SubmissionFileRepository(ScheduleRepository):
    """
    Saves schedules as submission files, one per instance.
    """
    def __init__(self, output_dir: str, suffix: str = ".out"):
        self.output_dir = output_dir
        self.suffix = suffix
        os.makedirs(self.output_dir, exist_ok=True)

    def save(self, schedule: Schedule, instance_name: str) -> Path:
        path = Path(self.output_dir) / f"{instance_name}{self.suffix}"
        with open(path, mode='w', encoding='utf-8') as f:
            f.write(render_schedule(schedule))
        return path
