from .deadline import Deadline
from .moves import swap_phases, relocate_phase, delta_duration
from .sweeps import swap_sweep, relocate_sweep, delta_duration_sweep, effective_max_position
from .escalator import CongestionEscalator, GreenWaitEscalator
from .pruner import DeadWeightPruner
from .seeding import build_naive_schedule, scale_durations_by_usage
from .optimizer import ScheduleOptimizer
from .tuning import tune_escalation_divisor
