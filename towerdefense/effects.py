"""Short-lived visual effects: fading marks, frame animations and the plane strike."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from enum import IntEnum
from typing import Protocol

Vector = tuple[float, float]

EXPLOSION_FRAMES: tuple[str, ...] = tuple(f"play/explosion-{i}.png" for i in range(1, 6))
HEALTH_FRAMES: tuple[str, ...] = tuple(f"play/light-{i}.png" for i in range(1, 6))
LIGHT_FRAMES: tuple[str, ...] = tuple(f"play/light-{i}.png" for i in range(1, 11))

PLANE_IMAGE = "play/plane.png"
SHOCKWAVE_IMAGE = "play/shockwave.png"
SHOCKWAVE_SOUND = "shockwave.ogg"
# Nominal size of the plane sprite, used for the off-screen check.
PLANE_SIZE: Vector = (256.0, 256.0)


class FadeEffect:
    """A ground mark with a random rotation that fades out over `time_span` seconds."""

    def __init__(self, time_span: float, rng: random.Random | None = None) -> None:
        if time_span <= 0:
            raise ValueError("time_span must be positive")
        self.time_span = float(time_span)
        self.alpha = 1.0
        self.tint_alpha = 255
        generator = rng if rng is not None else random.Random()
        self.rotation = generator.uniform(-math.pi, math.pi)
        self.finished = False

    def update(self, delta_time: float) -> bool:
        """Advance the fade; return False once the effect has vanished."""
        if self.finished:
            return False
        self.alpha -= delta_time / self.time_span
        if self.alpha <= 0:
            self.finished = True
            return False
        self.tint_alpha = int(self.alpha * 255)
        return True


class FrameAnimation:
    """Plays `frames` evenly over `time_span` seconds, once."""

    def __init__(self, frames: Sequence[str], time_span: float = 0.5) -> None:
        if not frames:
            raise ValueError("an animation needs at least one frame")
        if time_span <= 0:
            raise ValueError("time_span must be positive")
        self.frames = tuple(frames)
        self.time_span = float(time_span)
        self.time_ticks = 0.0
        self.frame: str | None = self.frames[0]
        self.finished = False

    def update(self, delta_time: float) -> str | None:
        """Advance the clock; return the current frame, or None when done."""
        if self.finished:
            return None
        self.time_ticks += delta_time
        if self.time_ticks >= self.time_span:
            self.finished = True
            self.frame = None
            return None
        phase = math.floor(self.time_ticks / self.time_span * len(self.frames))
        self.frame = self.frames[phase]
        return self.frame


class Collidable(Protocol):
    """An enemy the shockwave can strike."""

    position: Vector
    collision_radius: float


class PlaneStage(IntEnum):
    """Phases of the plane strike."""

    FLYING = 0
    LIGHT = 1
    SHOCKWAVE = 2
    DONE = 3


def _rects_overlap(min1: Vector, max1: Vector, min2: Vector, max2: Vector) -> bool:
    return (min1[0] < max2[0] and max1[0] > min2[0]
            and min1[1] < max2[1] and max1[1] > min2[1])


class PlaneStrike:
    """A plane crosses the map, then a growing shockwave destroys what it touches."""

    TIME_SPAN_LIGHT = 1.0
    TIME_SPAN_SHOCKWAVE = 1.0
    SHOCKWAVE_RADIUS = 180.0
    MIN_SCALE = 1.0 / 8
    MAX_SCALE = 8.0
    SPEED = 800.0

    def __init__(self, client_width: float, client_height: float) -> None:
        self.client_width = float(client_width)
        self.client_height = float(client_height)
        self.position: Vector = (-100.0, self.client_height / 2)
        self.velocity: Vector = (self.SPEED, 0.0)
        self.size: Vector = PLANE_SIZE
        self.stage = PlaneStage.FLYING
        self.time_ticks = 0.0
        self.scale = 1.0
        self.collision_radius = 0.0
        self.frame = PLANE_IMAGE
        self.shockwave_played = False

    @property
    def finished(self) -> bool:
        return self.stage is PlaneStage.DONE

    def _scale_at(self, ticks: float) -> float:
        total = self.TIME_SPAN_LIGHT + self.TIME_SPAN_SHOCKWAVE
        exponent = ((total - ticks) * math.log2(self.MIN_SCALE)
                    + ticks * math.log2(self.MAX_SCALE)) / total
        return 2 ** exponent

    def _grow(self) -> None:
        self.scale = self._scale_at(self.time_ticks)
        self.collision_radius = self.SHOCKWAVE_RADIUS * self.scale

    def update(self, delta_time: float, enemies: Sequence[Collidable] = ()) -> list[Collidable]:
        """Advance the strike; return the enemies the shockwave hits this step."""
        hits: list[Collidable] = []
        if self.stage is PlaneStage.FLYING:
            half_w, half_h = self.size[0] / 2, self.size[1] / 2
            x, y = self.position
            if not _rects_overlap((x - half_w, y - half_h), (x + half_w, y + half_h),
                                  (-100.0, 0.0), (self.client_width, self.client_height)):
                self.position = (self.client_width / 2, self.client_height / 2)
                self.velocity = (0.0, 0.0)
                self.frame = LIGHT_FRAMES[0]
                self.scale = self.MIN_SCALE
                self.stage = PlaneStage.LIGHT
        elif self.stage is PlaneStage.LIGHT:
            self.time_ticks += delta_time
            if self.time_ticks >= self.TIME_SPAN_LIGHT:
                self.frame = SHOCKWAVE_IMAGE
                self.stage = PlaneStage.SHOCKWAVE
                self.shockwave_played = True
            else:
                self._grow()
                phase = math.floor(self.time_ticks / self.TIME_SPAN_LIGHT * len(LIGHT_FRAMES))
                self.frame = LIGHT_FRAMES[phase]
        elif self.stage is PlaneStage.SHOCKWAVE:
            self.time_ticks += delta_time
            if self.time_ticks >= self.TIME_SPAN_LIGHT + self.TIME_SPAN_SHOCKWAVE:
                self.time_ticks = 0.0
                self.stage = PlaneStage.DONE
            else:
                self._grow()
                cx, cy = self.position
                hits = [
                    enemy for enemy in enemies
                    if math.hypot(enemy.position[0] - cx, enemy.position[1] - cy)
                    < self.collision_radius + enemy.collision_radius
                ]
        else:
            return hits
        self.position = (self.position[0] + self.velocity[0] * delta_time,
                         self.position[1] + self.velocity[1] * delta_time)
        return hits