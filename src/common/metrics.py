from dataclasses import dataclass, field
from typing import Dict, List, Optional
import time

@dataclass
class StageMetrics:
    """Score and wall time of a single optimization stage"""
    stage: str
    score: int
    seconds: float

    def to_dict(self) -> Dict:
        return {
            'stage': self.stage,
            'score': self.score,
            'seconds': round(self.seconds, 3)
        }


@dataclass
class OptimizationMetrics:
    """Collects per-stage scores and timings of one solve"""
    stages: List[StageMetrics] = field(default_factory=list)
    hill_climb_passes: int = 0
    start_time: float = field(default_factory=time.time)

    def record_stage(self, stage: str, score: int, seconds: float):
        self.stages.append(StageMetrics(stage=stage, score=score, seconds=seconds))

    def increment_passes(self):
        self.hill_climb_passes += 1

    @property
    def best_score(self) -> Optional[int]:
        if not self.stages:
            return None
        return max(s.score for s in self.stages)

    def to_dict(self) -> Dict:
        return {
            'stages': [s.to_dict() for s in self.stages],
            'hill_climb_passes': self.hill_climb_passes,
            'best_score': self.best_score,
            'elapsed_seconds': round(time.time() - self.start_time, 3)
        }
