import logging
from pathlib import Path
from typing import Dict, List, Union
from pydantic import ValidationError

from ..domain.entities import Car, Intersection, Problem, Street
from ...common.schemas import CarRecord, ProblemHeader, StreetRecord
from ...common.exceptions import ProblemFormatError
from ...common.logging import log_execution_time

logger = logging.getLogger(__name__)

@log_execution_time(logger)
def load_problem(path: Union[str, Path]) -> Problem:
    """
    Reads a problem instance from disk.
    """
    path = Path(path)
    if not path.exists():
        raise ProblemFormatError(f"Problem file not found: {path}")
    return parse_problem(path.read_text(encoding="utf-8"))

def parse_problem(text: str) -> Problem:
    """
    Parses the instance format:

        D I S V F
        B E street-name L         (S lines)
        P street-1 ... street-P   (V lines)
    """
    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ProblemFormatError("Empty problem file")

    header = _validate(ProblemHeader, 1, lines[0], ["duration", "intersection_count", "street_count", "car_count", "bonus_per_car"])
    expected = 1 + header.street_count + header.car_count
    if len(lines) != expected:
        raise ProblemFormatError(f"Expected {expected} non-empty lines, found {len(lines)}")

    intersections = [Intersection(id=i) for i in range(header.intersection_count)]
    streets: Dict[int, Street] = {}
    by_name: Dict[str, Street] = {}

    for offset, tokens in enumerate(lines[1:1 + header.street_count]):
        line_no = offset + 2
        record = _validate(StreetRecord, line_no, tokens, ["start", "end", "name", "length"])
        for endpoint in (record.start, record.end):
            if endpoint >= header.intersection_count:
                raise ProblemFormatError(f"Line {line_no}: unknown intersection {endpoint}")
        if record.name in by_name:
            raise ProblemFormatError(f"Line {line_no}: duplicate street name {record.name!r}")

        street = Street(
            id=offset,
            name=record.name,
            start=record.start,
            end=record.end,
            length=record.length
        )
        streets[street.id] = street
        by_name[street.name] = street
        intersections[street.start].outgoing_streets.append(street)
        intersections[street.end].incoming_streets.append(street)

    cars: List[Car] = []
    for offset, tokens in enumerate(lines[1 + header.street_count:]):
        line_no = offset + 2 + header.street_count
        try:
            record = CarRecord(path_length=tokens[0], street_names=tokens[1:])
        except ValidationError as e:
            raise ProblemFormatError(f"Line {line_no}: invalid car: {e}") from e

        route = []
        for name in record.street_names:
            if name not in by_name:
                raise ProblemFormatError(f"Line {line_no}: unknown street {name!r}")
            route.append(by_name[name])
        for street in route[:-1]:
            street.incoming_usage_count += 1
        cars.append(Car(id=offset, route=route))

    return Problem(
        duration=header.duration,
        bonus_per_car=header.bonus_per_car,
        intersections=intersections,
        streets=streets,
        cars=cars
    )

def _validate(schema, line_no: int, tokens: List[str], fields: List[str]):
    if len(tokens) != len(fields):
        raise ProblemFormatError(f"Line {line_no}: expected {len(fields)} fields, found {len(tokens)}")
    try:
        return schema(**dict(zip(fields, tokens)))
    except ValidationError as e:
        raise ProblemFormatError(f"Line {line_no}: {e}") from e
