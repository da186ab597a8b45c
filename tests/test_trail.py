from collections import deque

import numpy as np
import pytest

from gravtrails import constants as C
from gravtrails.errors import InvalidArgument
from gravtrails.trail import Trail, record


def test_trail_keeps_most_recent_points():
    trail = Trail(cap=5)
    for k in range(12):
        trail.record([k, 0.0, 0.0])
    assert len(trail) == 5
    assert [p[0] for p in trail.points] == [7.0, 8.0, 9.0, 10.0, 11.0]


def test_trail_below_cap_keeps_everything():
    trail = Trail(cap=5)
    for k in range(3):
        trail.record([k, k, k])
    assert len(trail) == 3
    assert trail.points[0].tolist() == [0.0, 0.0, 0.0]


def test_unbounded_trail():
    trail = Trail(cap=C.UNBOUNDED_TRAIL)
    for k in range(C.DEFAULT_TRAIL_LENGTH + 10):
        trail.record([k, 0.0, 0.0])
    assert len(trail) == C.DEFAULT_TRAIL_LENGTH + 10


def test_zero_cap_keeps_nothing():
    trail = Trail(cap=0)
    trail.record([1.0, 2.0, 3.0])
    assert len(trail) == 0


@pytest.mark.parametrize("cap", [-2, 2.5, "long", None])
def test_invalid_cap(cap):
    with pytest.raises(InvalidArgument):
        Trail(cap=cap)


def test_points_recorded_by_value():
    trail = Trail(cap=3)
    pos = np.array([1.0, 2.0, 3.0])
    trail.record(pos)
    pos += 10.0
    assert trail.points[0].tolist() == [1.0, 2.0, 3.0]


def test_record_on_plain_deque():
    points = deque()
    for k in range(4):
        record(points, [k, 0.0, 0.0], cap=2)
    assert [p[0] for p in points] == [2.0, 3.0]


def test_as_array_shapes():
    trail = Trail()
    assert trail.as_array().shape == (0, 3)
    trail.record([1.0, 2.0, 3.0])
    trail.record([4.0, 5.0, 6.0])
    arr = trail.as_array()
    assert arr.shape == (2, 3)
    assert arr[1].tolist() == [4.0, 5.0, 6.0]


def test_returned_points_cannot_change_the_trail():
    trail = Trail(cap=3)
    trail.record([1.0, 2.0, 3.0])
    trail.points[0][0] = 99.0
    for p in trail:
        p[1] = 99.0
    assert trail.points[0].tolist() == [1.0, 2.0, 3.0]
    assert trail.as_array().tolist() == [[1.0, 2.0, 3.0]]
