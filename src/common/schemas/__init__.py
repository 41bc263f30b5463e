from .problem import ProblemHeader, StreetRecord, CarRecord

__all__ = [
    "ProblemHeader",
    "StreetRecord",
    "CarRecord",
]
