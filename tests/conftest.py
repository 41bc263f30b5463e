import pytest
from src.signaling.domain import IntersectionPlan, Phase, Schedule
from src.signaling.infrastructure.parser import parse_problem
from src.signaling.infrastructure.simulator import TrafficSimulator

EXAMPLE_INSTANCE = """\
6 4 5 2 1000
2 0 rue-de-londres 1
0 1 rue-d-amsterdam 1
3 1 rue-d-athenes 1
2 3 rue-de-rome 2
1 2 rue-de-moscou 3
4 rue-de-londres rue-d-amsterdam rue-de-moscou rue-de-rome
3 rue-d-athenes rue-de-moscou rue-de-londres
"""

# Two cars queued on street "a"; "c" is never used and "b" is final
TWO_CAR_INSTANCE = """\
6 2 3 2 100
0 1 a 1
1 0 b 2
0 1 c 1
2 a b
2 a b
"""

# Car 0 can never finish: "long" takes 5s in a 3s simulation
DEAD_WEIGHT_INSTANCE = """\
3 3 4 2 10
0 1 s1 1
2 1 s2 1
1 2 long 5
1 0 o 1
2 s1 long
2 s2 o
"""

@pytest.fixture
def example_problem():
    return parse_problem(EXAMPLE_INSTANCE)

@pytest.fixture
def example_simulator(example_problem):
    return TrafficSimulator(example_problem)

@pytest.fixture
def example_schedule(example_problem):
    """The reference submission for the example instance, worth 1002 points."""
    street = example_problem.street_by_name
    schedule = Schedule.empty(len(example_problem.intersections))
    schedule.plans[1] = IntersectionPlan(1, [
        Phase(street("rue-d-athenes"), 2),
        Phase(street("rue-d-amsterdam"), 1)
    ])
    schedule.plans[0] = IntersectionPlan(0, [Phase(street("rue-de-londres"), 2)])
    schedule.plans[2] = IntersectionPlan(2, [Phase(street("rue-de-moscou"), 1)])
    return schedule

@pytest.fixture
def two_car_problem():
    return parse_problem(TWO_CAR_INSTANCE)

@pytest.fixture
def dead_weight_problem():
    return parse_problem(DEAD_WEIGHT_INSTANCE)

@pytest.fixture
def example_instance_path(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text(EXAMPLE_INSTANCE)
    return path
