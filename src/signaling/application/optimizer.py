"""
Top-level optimization pipeline for one instance.
"""
import logging
import time
from typing import Callable, Optional

from .deadline import Deadline
from .escalator import CongestionEscalator, GreenWaitEscalator
from .pruner import DeadWeightPruner
from .seeding import build_naive_schedule, scale_durations_by_usage
from .sweeps import delta_duration_sweep, effective_max_position, relocate_sweep, swap_sweep
from ..domain.entities import Problem
from ..domain.protocols import OrderingHeuristic, SimulationOracle
from ..domain.schedule import Schedule
from ...common.config.models import OptimizerConfig
from ...common.logging import log_execution_time
from ...common.metrics import OptimizationMetrics

logger = logging.getLogger(__name__)

class ScheduleOptimizer:
    """
    Runs the optimization stages in order:

        naive schedule -> ordering -> [usage seeding] -> congestion escalation
        -> [green-wait escalation] -> pruning -> hill climbing until the deadline

    Every stage result is re-scored; a stage that would lower the score is
    discarded, so the score never drops between stages.
    """
    def __init__(
        self,
        problem: Problem,
        oracle: SimulationOracle,
        ordering: OrderingHeuristic,
        config: Optional[OptimizerConfig] = None,
        metrics: Optional[OptimizationMetrics] = None
    ):
        self.problem = problem
        self.oracle = oracle
        self.ordering = ordering
        self.config = config or OptimizerConfig()
        self.metrics = metrics or OptimizationMetrics()

    @log_execution_time(logger)
    def optimize(self, deadline: Deadline) -> Schedule:
        start = time.time()
        schedule = build_naive_schedule(self.problem)
        score = self.oracle.run_simulation_lite(schedule)
        self.metrics.record_stage("init", score, time.time() - start)

        schedule, score = self._stage("order", self._order, schedule, score)
        if self.config.usage_seeding:
            schedule, score = self._stage(
                "usage_seeding",
                lambda s: scale_durations_by_usage(
                    self.oracle, s, self.config.usage_seeding_max_divisor, deadline
                ),
                schedule, score
            )
        escalator = CongestionEscalator(
            self.oracle,
            divisor=self.config.escalation_divisor,
            stagnation_rounds=self.config.stagnation_rounds
        )
        schedule, score = self._stage(
            "escalate", lambda s: escalator.run(s, deadline=deadline), schedule, score
        )
        if self.config.green_wait_escalation:
            schedule, score = self._stage(
                "green_wait", lambda s: GreenWaitEscalator(self.oracle).run(s, deadline), schedule, score
            )
        pruner = DeadWeightPruner(self.problem, self.oracle)
        schedule, score = self._stage("prune", lambda s: pruner.run(s, deadline), schedule, score)

        logger.info(f"Initial solution score: {score}")
        return self.hill_climb(schedule, deadline)

    def _order(self, schedule: Schedule) -> Schedule:
        candidate = schedule.clone()
        self.ordering.apply(candidate, set())
        return candidate

    def _stage(
        self,
        name: str,
        step: Callable[[Schedule], Schedule],
        schedule: Schedule,
        score: int
    ):
        start = time.time()
        candidate = step(schedule)
        candidate_score = self.oracle.run_simulation_lite(candidate)
        if candidate_score < score:
            logger.warning(f"Stage {name} lowered the score ({score} -> {candidate_score}), discarded")
            candidate, candidate_score = schedule, score
        self.metrics.record_stage(name, candidate_score, time.time() - start)
        logger.debug(f"Stage {name}: score {candidate_score}")
        return candidate, candidate_score

    def hill_climb(self, schedule: Schedule, deadline: Deadline) -> Schedule:
        """
        Repeats full passes of swap, relocate and +/- delta sweeps until the
        deadline. With max_stagnant_passes unset, passes that change nothing
        keep running until the deadline.
        """
        last_score = self.oracle.run_simulation_lite(schedule)
        requested = self.config.max_position or schedule.max_plan_length()
        max_pos = effective_max_position(schedule, requested)
        stagnant_passes = 0

        while not deadline.expired():
            start = time.time()
            schedule = swap_sweep(self.oracle, schedule, max_pos, deadline)
            if self.config.relocate_sweep:
                schedule = relocate_sweep(self.oracle, schedule, max_pos, deadline)
            for delta in self.config.deltas:
                schedule = delta_duration_sweep(self.oracle, schedule, max_pos, delta, deadline)
                schedule = delta_duration_sweep(self.oracle, schedule, max_pos, -delta, deadline)

            score = self.oracle.run_simulation_lite(schedule)
            self.metrics.increment_passes()
            self.metrics.record_stage("hill_climb", score, time.time() - start)
            if score == last_score:
                stagnant_passes += 1
                if self.config.max_stagnant_passes and stagnant_passes >= self.config.max_stagnant_passes:
                    logger.info(f"No improvement in {stagnant_passes} passes, stopping early")
                    break
                continue

            logger.info(f"Done full loop, score {score}, starting again")
            last_score = score
            stagnant_passes = 0

        return schedule
