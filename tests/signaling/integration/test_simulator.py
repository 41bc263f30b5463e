import pytest
from src.signaling.application.seeding import build_naive_schedule
from src.signaling.domain import Schedule
from src.signaling.infrastructure.simulator import TrafficSimulator

def test_reference_submission_scores_1002(example_simulator, example_schedule):
    assert example_simulator.run_simulation_lite(example_schedule) == 1002

def test_full_simulation_matches_lite_score(example_simulator, example_schedule):
    result = example_simulator.run_simulation(example_schedule)
    assert result.score == example_simulator.run_simulation_lite(example_schedule)

def test_unfinished_car_trace(example_simulator, example_schedule):
    result = example_simulator.run_simulation(example_schedule)

    assert len(result.unfinished_cars) == 1
    trace = result.unfinished_cars[0]
    assert trace.car.id == 0
    # Enters rue-de-rome (2s) at t=5 in a 6s simulation
    assert trace.time_left_on_drive == 1

def test_blocked_traffic_stats(example_simulator, example_schedule):
    result = example_simulator.run_simulation(example_schedule)
    stats = {s.intersection_id: s for s in result.intersection_stats}

    # Car 0 waits one second on amsterdam while athenes is green
    assert stats[1].max_blocked_street_name == "rue-d-amsterdam"
    assert stats[1].max_blocked_traffic == 1
    assert stats[0].max_blocked_traffic == 0
    assert stats[0].max_blocked_street_name is None
    assert result.max_blocked_traffic() == 1

def test_green_wait_stats(two_car_problem):
    simulator = TrafficSimulator(two_car_problem)
    result = simulator.run_simulation(build_naive_schedule(two_car_problem))
    stats = result.intersection_stats[1]

    assert stats.max_green_wait == 1
    assert stats.max_green_wait_street_id == two_car_problem.street_by_name("a").id
    assert stats.max_blocked_street_name == "a"

def test_empty_schedule_scores_nothing(example_problem, example_simulator):
    result = example_simulator.run_simulation(Schedule.empty(len(example_problem.intersections)))

    assert result.score == 0
    assert [t.time_left_on_drive for t in result.unfinished_cars] == [0, 0]

def test_zero_duration_phase_is_skipped(example_simulator, example_schedule):
    example_schedule[1].phases[0].duration = 0
    # Athenes never turns green: car 1 is stuck, car 0 arrives right at the deadline
    assert example_simulator.run_simulation_lite(example_schedule) == 1000

def test_score_upper_bound_and_unused_streets(example_problem):
    assert example_problem.calculate_score_upper_bound() == 1000 + 1002
    assert example_problem.remove_unused_streets() == 1
    assert example_problem.intersections[3].incoming_streets == []
