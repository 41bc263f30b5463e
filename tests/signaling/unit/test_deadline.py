import itertools
from src.signaling.application.deadline import Deadline

def test_deadline_with_fake_clock():
    now = [100.0]
    deadline = Deadline.after(10, clock=lambda: now[0])
    assert not deadline.expired()
    assert deadline.remaining() == 10

    now[0] = 110.0
    assert deadline.expired()
    assert deadline.remaining() == 0.0

def test_deadline_expires_after_ticks():
    ticks = itertools.count()
    deadline = Deadline.after(3, clock=lambda: next(ticks))
    assert [deadline.expired() for _ in range(4)] == [False, False, True, True]
