import copy

import matplotlib
import pytest

matplotlib.use("Agg")

SHARE_POINTS = [
    {"source": "TV", "overall": 32, "dem": 28, "rep": 38, "age18": 12},
    {"source": "Social", "overall": 27, "dem": 29, "rep": 24, "age18": 55},
    {"source": "Web", "overall": 22, "dem": 26, "rep": 18, "age18": 20},
    {"source": "Family", "overall": 18, "dem": 17, "rep": 19, "age18": 27},
    {"source": "Radio", "overall": 12, "dem": 9, "rep": 16, "age18": 5},
    {"source": "Print", "overall": 9, "dem": 11, "rep": 7, "age18": 3},
    {"source": "Podcasts", "overall": 8, "dem": 9, "rep": 8, "age18": 17},
    {"source": "Apps", "overall": 5, "dem": 5, "rep": None},
]

DIFFERENCE_POINTS = [
    {"source": "TV", "overall": 9.5, "dem": -2.1, "rep": 12.4},
    {"source": "Social", "overall": -6.2, "dem": 3.4, "rep": -8.8},
    {"source": "Web", "overall": 4.1, "dem": 6.6, "rep": -1.9},
    {"source": "Cable", "overall": 12.6, "dem": 5.5, "rep": 25.0},
    {"source": "Public radio", "overall": -8.9, "dem": 6.3, "rep": -16.2},
    {"source": "Apps", "overall": 0.6, "dem": 1.5},
]


@pytest.fixture
def share_points():
    return copy.deepcopy(SHARE_POINTS)


@pytest.fixture
def difference_points():
    return copy.deepcopy(DIFFERENCE_POINTS)


@pytest.fixture
def scenario_points():
    return [
        {"source": "P1", "overall": 30, "dem": 10},
        {"source": "P2", "overall": 20, "dem": 40},
        {"source": "P3", "overall": 5, "dem": 5},
    ]
