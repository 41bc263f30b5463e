import pytest
from src.common.exceptions import ProblemFormatError
from src.signaling.infrastructure.parser import load_problem, parse_problem

def test_parse_example(example_problem):
    assert example_problem.duration == 6
    assert example_problem.bonus_per_car == 1000
    assert len(example_problem.intersections) == 4
    assert len(example_problem.streets) == 5
    assert [len(car.route) for car in example_problem.cars] == [4, 3]

    moscou = example_problem.street_by_name("rue-de-moscou")
    assert (moscou.start, moscou.end, moscou.length) == (1, 2, 3)
    assert moscou.incoming_usage_count == 2
    assert example_problem.street_by_name("rue-de-rome").incoming_usage_count == 0
    assert [s.name for s in example_problem.intersections[1].incoming_streets] == [
        "rue-d-amsterdam", "rue-d-athenes"
    ]

def test_load_problem_from_file(tmp_path):
    path = tmp_path / "tiny.txt"
    path.write_text("2 2 1 1 5\n0 1 only 1\n1 only\n")

    problem = load_problem(path)
    assert problem.street_by_name("only").end == 1

def test_missing_file():
    with pytest.raises(ProblemFormatError):
        load_problem("does/not/exist.txt")

@pytest.mark.parametrize("text", [
    "",
    "6 4 1 0\n0 1 a 1\n",
    "6 2 1 0 10\n0 1 a 0\n",
    "6 2 1 0 10\n0 5 a 1\n",
    "6 2 2 0 10\n0 1 a 1\n1 0 a 1\n",
    "6 2 1 1 10\n0 1 a 1\n2 a b\n",
    "6 2 1 1 10\n0 1 a 1\n3 a a\n",
    "6 2 1 1 10\n0 1 a 1\n",
])
def test_malformed_instances(text):
    with pytest.raises(ProblemFormatError):
        parse_problem(text)
