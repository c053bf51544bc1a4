"""Force solver and the settling/at-rest layout driver."""

import math

import pytest

from chart_builder.layout import LayoutDriver, SETTLING, AT_REST
from chart_builder.solver import ForceSimulation


def _points(n):
    return [{"source": f"S{i}", "v": float(i % 5) * 10} for i in range(n)]


def _driver(points, **kw):
    return LayoutDriver(points, target_y=300, x_strength=0.5, y_strength=0.08, padding=2, seed=1, **kw)


def test_driver_starts_at_rest_with_initial_positions():
    points = _points(5)
    driver = _driver(points)
    assert driver.state == AT_REST
    assert all(not math.isnan(p["x"]) and not math.isnan(p["y"]) for p in points)
    assert driver.step() is False
    assert driver.ticks == 0


def test_restart_settles_and_comes_to_rest():
    points = _points(12)
    driver = _driver(points)
    driver.restart(lambda p: 100 + p["v"] * 10, lambda p: 8)
    assert driver.state == SETTLING
    ticks = driver.run()
    assert driver.state == AT_REST
    # default alpha decay reaches alpha_min in ~300 ticks
    assert 250 < ticks < 350
    assert driver.restarts == 1


def test_settled_points_approach_targets_without_overlap():
    points = [{"source": "a", "v": 10.0}, {"source": "b", "v": 60.0}, {"source": "c", "v": 35.0}]
    driver = _driver(points)
    driver.restart(lambda p: p["v"] * 10, lambda p: 5)
    driver.run()
    for p in points:
        assert p["x"] == pytest.approx(p["v"] * 10, abs=5)
        assert p["y"] == pytest.approx(300, abs=15)
    assert driver.overlapping_pairs() == []


def test_collision_pushes_crowded_points_apart():
    points = [{"source": f"s{i}", "v": 0.0} for i in range(10)]
    driver = _driver(points)
    driver.restart(lambda p: 400, lambda p: 10)
    crowded = len(driver.overlapping_pairs())
    assert crowded >= 5
    driver.run()
    # everyone wants the same spot; collision keeps them mostly apart
    assert len(driver.overlapping_pairs(tolerance=2)) < crowded
    xs = [p["x"] for p in points]
    ys = [p["y"] for p in points]
    assert (max(xs) - min(xs)) + (max(ys) - min(ys)) > 60


def test_tick_callback_receives_all_points():
    points = _points(4)
    seen = []
    driver = _driver(points, on_tick=lambda pts: seen.append([(p["x"], p["y"]) for p in pts]))
    driver.restart(lambda p: 200, lambda p: 4)
    driver.run(max_ticks=3)
    assert len(seen) == 3
    assert all(len(frame) == 4 for frame in seen)
    assert driver.state == SETTLING


def test_interrupt_stops_ticks_without_moving_points():
    points = _points(4)
    driver = _driver(points)
    driver.restart(lambda p: 200, lambda p: 4)
    driver.run(max_ticks=5)
    before = [(p["x"], p["y"]) for p in points]
    driver.interrupt()
    assert driver.state == AT_REST
    assert driver.run() == 0
    assert [(p["x"], p["y"]) for p in points] == before


def test_restart_reenergises_after_rest():
    points = _points(4)
    driver = _driver(points)
    driver.restart(lambda p: 200, lambda p: 4)
    driver.run()
    driver.restart(lambda p: 600, lambda p: 4)
    assert driver.sim.alpha == 1.0
    driver.run()
    assert all(p["x"] > 500 for p in points)


def test_solver_keeps_given_positions_and_places_missing():
    sim = ForceSimulation([5.0, float("nan")], [7.0, float("nan")], seed=0)
    assert (sim.x[0], sim.y[0]) == (5.0, 7.0)
    assert not math.isnan(sim.x[1])


def test_solver_separates_coincident_points():
    sim = ForceSimulation([100.0, 100.0], [100.0, 100.0], seed=3)
    sim.force_collide([10, 10])
    for _ in range(300):
        sim.tick()
    assert math.hypot(sim.x[0] - sim.x[1], sim.y[0] - sim.y[1]) > 19


def test_solver_rejects_mismatched_arrays():
    with pytest.raises(ValueError):
        ForceSimulation([1.0, 2.0], [1.0])
