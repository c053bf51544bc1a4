from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional

import params
from .solver import ForceSimulation

SETTLING = "settling"
AT_REST = "at-rest"

TickCallback = Callable[[List[Dict[str, Any]]], None]


class LayoutDriver:
    """Relax bubble positions toward per-point targets without overlap.

    The driver owns the x/y fields of the point dicts. Each tick it copies
    the solver's positions back into the points and hands the whole list to
    every registered tick callback; rendering the new positions is up to
    those callbacks.
    """

    def __init__(self, points: List[Dict[str, Any]], target_y: float, x_strength: float,
                 y_strength: float, padding: float = 2, seed: Optional[int] = None,
                 on_tick: Optional[TickCallback] = None):
        self.points = points
        self.target_y = target_y
        self.x_strength = x_strength
        self.y_strength = y_strength
        self.padding = padding
        self.state = AT_REST
        self.ticks = 0
        self.restarts = 0
        self._callbacks: List[TickCallback] = []
        if on_tick is not None:
            self._callbacks.append(on_tick)

        start_x = [p.get("x", math.nan) for p in points]
        start_y = [p.get("y", math.nan) for p in points]
        self.sim = ForceSimulation(start_x, start_y, seed=seed)
        self._write_back()

    def add_tick_callback(self, callback: TickCallback):
        self._callbacks.append(callback)

    def remove_tick_callback(self, callback: TickCallback):
        self._callbacks.remove(callback)

    @property
    def settling(self) -> bool:
        return self.state == SETTLING

    def restart(self, target_x_fn: Callable[[Dict[str, Any]], float],
                radius_fn: Callable[[Dict[str, Any]], float]):
        """Swap in new x targets and collision radii and re-energise."""
        self.sim.force_x([target_x_fn(p) for p in self.points], self.x_strength)
        self.sim.force_y([self.target_y] * len(self.points), self.y_strength)
        self.sim.force_collide([radius_fn(p) + self.padding for p in self.points])
        self.sim.reheat(1.0)
        self.state = SETTLING
        self.restarts += 1

    def interrupt(self):
        self.state = AT_REST

    def step(self) -> bool:
        """Advance one tick; return True while still settling."""
        if self.state != SETTLING:
            return False
        self.sim.tick()
        self.ticks += 1
        self._write_back()
        for callback in list(self._callbacks):
            callback(self.points)
        if self.sim.converged:
            self.state = AT_REST
        return self.state == SETTLING

    def run(self, max_ticks: Optional[int] = None) -> int:
        n = 0
        while self.state == SETTLING:
            if max_ticks is not None and n >= max_ticks:
                break
            self.step()
            n += 1
        return n

    def overlapping_pairs(self, tolerance: float = 0.0):
        return [(self.points[i][params.ID_KEY], self.points[j][params.ID_KEY])
                for i, j in self.sim.overlapping_pairs(tolerance)]

    def _write_back(self):
        for p, x, y in zip(self.points, self.sim.x, self.sim.y):
            p["x"] = float(x)
            p["y"] = float(y)
