import pytest
from unittest.mock import MagicMock
from src.common.config.models import OptimizerConfig
from src.common.metrics import OptimizationMetrics
from src.signaling.application.deadline import Deadline
from src.signaling.application.optimizer import ScheduleOptimizer
from src.signaling.application.seeding import build_naive_schedule
from src.signaling.infrastructure.ordering import ArrivalOrderHeuristic
from src.signaling.infrastructure.simulator import TrafficSimulator

def make_optimizer(problem, ordering=None, **config):
    config.setdefault("max_stagnant_passes", 1)
    return ScheduleOptimizer(
        problem=problem,
        oracle=TrafficSimulator(problem),
        ordering=ordering or ArrivalOrderHeuristic(problem),
        config=OptimizerConfig(**config),
        metrics=OptimizationMetrics()
    )

def test_optimize_reaches_upper_bound(example_problem):
    example_problem.remove_unused_streets()
    optimizer = make_optimizer(example_problem)

    schedule = optimizer.optimize(Deadline.after(60))

    assert optimizer.oracle.run_simulation_lite(schedule) == example_problem.calculate_score_upper_bound()
    stages = [s.stage for s in optimizer.metrics.stages]
    assert stages[:4] == ["init", "order", "escalate", "prune"]
    assert optimizer.metrics.hill_climb_passes >= 1

def test_optimize_output_has_no_negative_durations(two_car_problem):
    optimizer = make_optimizer(two_car_problem)
    schedule = optimizer.optimize(Deadline.after(60))

    for plan in schedule:
        assert all(phase.duration >= 0 for phase in plan.phases)
    assert optimizer.oracle.run_simulation_lite(schedule) >= 206

def test_stage_lowering_score_is_discarded(two_car_problem):
    ordering = MagicMock()
    # Puts the unused street first, delaying the second car
    ordering.apply.side_effect = lambda schedule, excluded: schedule[1].phases.reverse()
    optimizer = make_optimizer(two_car_problem, ordering=ordering)

    optimizer.optimize(Deadline.after(60))

    order_stage = next(s for s in optimizer.metrics.stages if s.stage == "order")
    assert order_stage.score == 206
    scores = [s.score for s in optimizer.metrics.stages]
    assert scores == sorted(scores)

def test_optional_stages_are_recorded(two_car_problem):
    optimizer = make_optimizer(two_car_problem, usage_seeding=True, green_wait_escalation=True)
    optimizer.optimize(Deadline.after(60))

    stages = [s.stage for s in optimizer.metrics.stages]
    assert "usage_seeding" in stages
    assert "green_wait" in stages

def test_hill_climb_with_expired_deadline_returns_input(two_car_problem):
    optimizer = make_optimizer(two_car_problem)
    schedule = build_naive_schedule(two_car_problem)

    assert optimizer.hill_climb(schedule, Deadline(at=0)) is schedule
    assert optimizer.metrics.hill_climb_passes == 0

def test_hill_climb_runs_until_deadline_without_stagnation_exit(two_car_problem):
    now = [0.0]
    deadline = Deadline(at=1.0, clock=lambda: now[0])
    oracle = MagicMock()

    def score(schedule):
        # Move the clock past the deadline after a few passes
        if oracle.run_simulation_lite.call_count > 30:
            now[0] = 2.0
        return 0
    oracle.run_simulation_lite.side_effect = score

    optimizer = ScheduleOptimizer(
        problem=two_car_problem,
        oracle=oracle,
        ordering=MagicMock(),
        config=OptimizerConfig(relocate_sweep=False, deltas=[1])
    )
    optimizer.hill_climb(build_naive_schedule(two_car_problem), deadline)

    assert optimizer.metrics.hill_climb_passes > 1

def test_hill_climb_records_every_pass(two_car_problem):
    oracle = MagicMock()
    oracle.run_simulation_lite.return_value = 7

    optimizer = ScheduleOptimizer(
        problem=two_car_problem,
        oracle=oracle,
        ordering=MagicMock(),
        config=OptimizerConfig(max_stagnant_passes=3)
    )
    optimizer.hill_climb(build_naive_schedule(two_car_problem), Deadline.after(60))

    # Passes without improvement are recorded too
    passes = [s for s in optimizer.metrics.stages if s.stage == "hill_climb"]
    assert len(passes) == optimizer.metrics.hill_climb_passes == 3
    assert all(s.score == 7 for s in passes)
