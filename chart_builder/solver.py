"""Iterative force solver used by the layout driver.

Follows the d3-force velocity Verlet scheme: a cooling ``alpha`` scales the
positioning forces each tick, velocities are damped by ``velocity_decay``,
and a collision pass pushes overlapping circles apart. The solver has no
idea what the points mean; it only sees position, velocity and radius
arrays.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np
from scipy.spatial import cKDTree

INITIAL_RADIUS = 10
INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))


class ForceSimulation:
    def __init__(self, x: Sequence[float], y: Sequence[float], alpha_min: float = 0.001,
                 alpha_decay: Optional[float] = None, alpha_target: float = 0.0,
                 velocity_decay: float = 0.4, seed: Optional[int] = None):
        self.x = np.asarray(x, dtype=float).copy()
        self.y = np.asarray(y, dtype=float).copy()
        if self.x.shape != self.y.shape:
            raise ValueError("x and y must have the same length")
        self.n = len(self.x)
        self.vx = np.zeros(self.n)
        self.vy = np.zeros(self.n)
        self.alpha = 1.0
        self.alpha_min = alpha_min
        self.alpha_decay = alpha_decay if alpha_decay is not None else 1 - alpha_min ** (1 / 300)
        self.alpha_target = alpha_target
        self.velocity_decay = velocity_decay
        self.rng = np.random.default_rng(seed)

        self._x_force = None
        self._y_force = None
        self._radii = None
        self._collide_strength = 1.0
        self._collide_iterations = 1

        self._place_missing()

    def _place_missing(self):
        # phyllotaxis spiral for points that arrive without a position
        for i in range(self.n):
            if math.isnan(self.x[i]) or math.isnan(self.y[i]):
                radius = INITIAL_RADIUS * math.sqrt(0.5 + i)
                angle = i * INITIAL_ANGLE
                self.x[i] = radius * math.cos(angle)
                self.y[i] = radius * math.sin(angle)

    def _jiggle(self) -> float:
        return (self.rng.random() - 0.5) * 1e-6

    def force_x(self, targets: Sequence[float], strength: float):
        self._x_force = (np.asarray(targets, dtype=float), float(strength))

    def force_y(self, targets: Sequence[float], strength: float):
        self._y_force = (np.asarray(targets, dtype=float), float(strength))

    def force_collide(self, radii: Sequence[float], strength: float = 1.0, iterations: int = 1):
        self._radii = np.asarray(radii, dtype=float)
        self._collide_strength = float(strength)
        self._collide_iterations = int(iterations)

    def reheat(self, alpha: float = 1.0):
        self.alpha = alpha

    @property
    def converged(self) -> bool:
        return self.alpha < self.alpha_min

    def tick(self):
        self.alpha += (self.alpha_target - self.alpha) * self.alpha_decay

        if self._x_force is not None:
            tx, strength = self._x_force
            self.vx += (tx - self.x) * strength * self.alpha
        if self._y_force is not None:
            ty, strength = self._y_force
            self.vy += (ty - self.y) * strength * self.alpha
        if self._radii is not None:
            for _ in range(self._collide_iterations):
                self._collide()

        self.vx *= 1 - self.velocity_decay
        self.vy *= 1 - self.velocity_decay
        self.x += self.vx
        self.y += self.vy

    def _collide(self):
        if self.n < 2:
            return
        radii = self._radii
        px = self.x + self.vx
        py = self.y + self.vy
        tree = cKDTree(np.column_stack([px, py]))
        neighbours = [[] for _ in range(self.n)]
        for i, j in sorted(tree.query_pairs(2 * float(radii.max()))):
            neighbours[i].append(j)

        x, y, vx, vy = self.x, self.y, self.vx, self.vy
        strength = self._collide_strength
        for i in range(self.n):
            if not neighbours[i]:
                continue
            ri = radii[i]
            ri2 = ri * ri
            xi = x[i] + vx[i]
            yi = y[i] + vy[i]
            for j in neighbours[i]:
                rj = radii[j]
                dx = xi - x[j] - vx[j]
                dy = yi - y[j] - vy[j]
                dist2 = dx * dx + dy * dy
                r = ri + rj
                if dist2 >= r * r:
                    continue
                if dx == 0:
                    dx = self._jiggle()
                    dist2 += dx * dx
                if dy == 0:
                    dy = self._jiggle()
                    dist2 += dy * dy
                dist = math.sqrt(dist2)
                push = (r - dist) / dist * strength
                dx *= push
                dy *= push
                rj2 = rj * rj
                share = rj2 / (ri2 + rj2)
                vx[i] += dx * share
                vy[i] += dy * share
                vx[j] -= dx * (1 - share)
                vy[j] -= dy * (1 - share)

    def overlapping_pairs(self, tolerance: float = 0.0):
        """Index pairs whose circles overlap by more than ``tolerance`` px."""
        if self._radii is None or self.n < 2:
            return []
        tree = cKDTree(np.column_stack([self.x, self.y]))
        out = []
        for i, j in sorted(tree.query_pairs(2 * float(self._radii.max()))):
            d = math.hypot(self.x[i] - self.x[j], self.y[i] - self.y[j])
            if d < self._radii[i] + self._radii[j] - tolerance:
                out.append((i, j))
        return out
