from .parser import load_problem, parse_problem
from .simulator import TrafficSimulator
from .ordering import ArrivalOrderHeuristic
from .writer import render_schedule, SubmissionFileRepository
