from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class OptimizerConfig:
    escalation_divisor: int = 50
    stagnation_rounds: int = 10
    max_position: Optional[int] = None # None = whole plan
    deltas: List[int] = field(default_factory=lambda: [1, 2, 3])
    relocate_sweep: bool = True
    usage_seeding: bool = False
    usage_seeding_max_divisor: int = 50
    green_wait_escalation: bool = False
    max_stagnant_passes: Optional[int] = None # None = climb until the deadline

@dataclass
class OutputConfig:
    dir: str = "outputs"
    suffix: str = ".out"

@dataclass
class TuningConfig:
    min_divisor: int = 1
    max_divisor: int = 199 # inclusive

@dataclass
class SignalingConfig:
    instances: List[str] = field(default_factory=list)
    exec_duration_seconds: float = 300.0
    log_level: str = "INFO"
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    tuning: TuningConfig = field(default_factory=TuningConfig)
