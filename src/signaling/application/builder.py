"""
Wires the signaling components from a configuration.
"""
import logging
from omegaconf import DictConfig, OmegaConf
from typing import Dict, Optional

from .optimizer import ScheduleOptimizer
from ..domain import OrderingHeuristic, Problem, ScheduleRepository, SimulationOracle
from ..infrastructure.ordering import ArrivalOrderHeuristic
from ..infrastructure.parser import load_problem
from ..infrastructure.simulator import TrafficSimulator
from ..infrastructure.writer import SubmissionFileRepository
from ...common.config.models import OptimizerConfig
from ...common.metrics import OptimizationMetrics

logger = logging.getLogger(__name__)

class SignalingApplicationBuilder:
    """
    Builder pattern for constructing the schedule optimizer of one instance.
    Centralizes component instantiation and wiring.
    """
    
    def __init__(self, config: DictConfig):
        self.config = config
        self.metrics = OptimizationMetrics()
        
        # Components
        self.problem: Optional[Problem] = None
        self.simulator: Optional[SimulationOracle] = None
        self.ordering: Optional[OrderingHeuristic] = None
        self.repository: Optional[ScheduleRepository] = None
        self.optimizer: Optional[ScheduleOptimizer] = None

    def build_problem(self, instance_path: str) -> 'SignalingApplicationBuilder':
        self.problem = load_problem(instance_path)
        logger.info(
            f"{instance_path}, Duration: {self.problem.duration}, "
            f"Intersections: {len(self.problem.intersections)}, "
            f"Bonus Per Car: {self.problem.bonus_per_car}, "
            f"Streets: {len(self.problem.streets)}, Cars: {len(self.problem.cars)}"
        )
        logger.info(f"Score upper bound: {self.problem.calculate_score_upper_bound()}")

        # Streets no car waits on never need a green light
        removed = self.problem.remove_unused_streets()
        logger.info(f"Removed streets: {removed}")
        return self

    def build_simulator(self) -> 'SignalingApplicationBuilder':
        self.simulator = TrafficSimulator(self.problem)
        return self

    def build_ordering(self) -> 'SignalingApplicationBuilder':
        self.ordering = ArrivalOrderHeuristic(self.problem)
        return self

    def build_repository(self) -> 'SignalingApplicationBuilder':
        output_cfg = self.config.get('output', {})
        self.repository = SubmissionFileRepository(
            output_dir=output_cfg.get('dir', 'outputs'),
            suffix=output_cfg.get('suffix', '.out')
        )
        return self

    def build_optimizer(self) -> ScheduleOptimizer:
        if not self.simulator:
            self.build_simulator()
        if not self.ordering:
            self.build_ordering()

        optimizer_cfg = OptimizerConfig(
            **OmegaConf.to_container(self.config.optimizer, resolve=True)
        )
        self.optimizer = ScheduleOptimizer(
            problem=self.problem,
            oracle=self.simulator,
            ordering=self.ordering,
            config=optimizer_cfg,
            metrics=self.metrics
        )
        return self.optimizer

    def get_components(self) -> Dict:
        return {
            'problem': self.problem,
            'simulator': self.simulator,
            'ordering': self.ordering,
            'repository': self.repository,
            'optimizer': self.optimizer,
            'metrics': self.metrics
        }
