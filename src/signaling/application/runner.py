"""
Multi-instance driver: one deadline, one optimizer and one submission per
instance.
"""
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from omegaconf import DictConfig

from .builder import SignalingApplicationBuilder
from .deadline import Clock, Deadline
from .tuning import tune_escalation_divisor

logger = logging.getLogger(__name__)

@dataclass
class SolveReport:
    instance: str
    score: int
    upper_bound: int
    seconds: float
    output_path: Optional[Path] = None
    metrics: Dict = field(default_factory=dict)

def solve_instance(cfg: DictConfig, instance_path: str, clock: Clock = time.time) -> SolveReport:
    # The budget covers loading too
    deadline = Deadline.after(cfg.exec_duration_seconds, clock=clock)
    start = time.time()

    builder = SignalingApplicationBuilder(cfg)
    optimizer = (
        builder
        .build_problem(instance_path)
        .build_simulator()
        .build_ordering()
        .build_repository()
        .build_optimizer()
    )
    schedule = optimizer.optimize(deadline)

    components = builder.get_components()
    score = components['simulator'].run_simulation_lite(schedule)
    logger.info(f"Score: {score}")

    output_path = components['repository'].save(schedule, Path(instance_path).name)
    seconds = time.time() - start
    logger.info(f"Solve time: {seconds:.1f}s, written to {output_path}")
    metrics = components['metrics'].to_dict()
    logger.info(f"Metrics: {metrics}")

    return SolveReport(
        instance=instance_path,
        score=score,
        upper_bound=components['problem'].calculate_score_upper_bound(),
        seconds=seconds,
        output_path=output_path,
        metrics=metrics
    )

def solve_all(cfg: DictConfig) -> List[SolveReport]:
    start = time.time()
    reports = [solve_instance(cfg, instance) for instance in cfg.instances]
    total = sum(r.score for r in reports)
    logger.info(f"Runtime: {time.time() - start:.1f}s, total score: {total}")
    return reports

def tune_all(cfg: DictConfig) -> Dict[str, Tuple[int, int]]:
    """Best escalation divisor and its score per instance."""
    results = {}
    divisors = range(cfg.tuning.min_divisor, cfg.tuning.max_divisor + 1)
    for instance in cfg.instances:
        builder = SignalingApplicationBuilder(cfg).build_problem(instance).build_simulator().build_ordering()
        components = builder.get_components()
        results[instance] = tune_escalation_divisor(
            components['problem'],
            components['simulator'],
            components['ordering'],
            divisors,
            stagnation_rounds=cfg.optimizer.stagnation_rounds
        )
        logger.info(f"{instance}: best divisor {results[instance][0]}, score {results[instance][1]}")
    return results
