"""Turret kinds, target tracking, barrel aiming and the shots they fire."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

Vector = tuple[float, float]

_BARREL_LENGTH = 36.0
_LASER_SPREAD = 6.0


class Targetable(Protocol):
    """Anything a turret can aim at."""

    position: Vector


class TurretKind(Enum):
    """The buildable turrets with their stats."""

    MACHINE_GUN = ("play/turret-1.png", 50, 200.0, 0.5, "gun.wav", "fire-bullet")
    LASER = ("play/turret-2.png", 200, 300.0, 0.5, "laser.wav", "laser-bullet")
    FIRE = ("play/turret-5.png", 10, 300.0, 0.5, "fireball-whoosh.wav", "fire")

    def __init__(self, image: str, price: int, radius: float, cooldown: float,
                 sound: str, bullet: str) -> None:
        self.image = image
        self.price = price
        self.radius = radius
        self.cooldown = cooldown
        self.sound = sound
        self.bullet = bullet


@dataclass(frozen=True)
class Shot:
    """A bullet leaving a barrel."""

    kind: TurretKind
    position: Vector
    direction: Vector
    rotation: float


def _sub(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1])


def _magnitude(v: Vector) -> float:
    return math.hypot(v[0], v[1])


def _normalize(v: Vector) -> Vector:
    length = _magnitude(v)
    if length == 0:
        return v
    return (v[0] / length, v[1] / length)


def _facing(rotation: float) -> Vector:
    # Sprites point upward, so a rotation of zero faces negative y.
    return (math.cos(rotation - math.pi / 2), math.sin(rotation - math.pi / 2))


class Turret:
    """A placed (or previewed) turret that locks onto and fires at enemies."""

    def __init__(self, kind: TurretKind, x: float, y: float) -> None:
        self.kind = kind
        self.x = float(x)
        self.y = float(y)
        self.rotation = 0.0
        self.reload = 0.0
        self.rotate_radian = 2 * math.pi
        self.enabled = True
        self.preview = False
        self.target: Targetable | None = None

    @property
    def position(self) -> Vector:
        return (self.x, self.y)

    @property
    def price(self) -> int:
        return self.kind.price

    @property
    def radius(self) -> float:
        return self.kind.radius

    def update(self, delta_time: float, enemies: Sequence[Targetable]) -> list[Shot]:
        """Track a target, turn toward it and return any shots fired."""
        if not self.enabled:
            return []
        if self.target is not None:
            still_alive = any(enemy is self.target for enemy in enemies)
            out_of_range = _magnitude(_sub(self.target.position, self.position)) > self.radius
            if not still_alive or out_of_range:
                self.target = None
        if self.target is None:
            self.target = next(
                (enemy for enemy in enemies
                 if _magnitude(_sub(enemy.position, self.position)) <= self.radius),
                None,
            )
        if self.target is None:
            return []

        origin = _facing(self.rotation)
        wanted = _normalize(_sub(self.target.position, self.position))
        max_turn = self.rotate_radian * delta_time
        cos_theta = max(-1.0, min(1.0, origin[0] * wanted[0] + origin[1] * wanted[1]))
        radian = math.acos(cos_theta)
        if abs(radian) <= max_turn:
            heading = wanted
        else:
            rest = abs(radian) - max_turn
            heading = (
                (rest * origin[0] + max_turn * wanted[0]) / radian,
                (rest * origin[1] + max_turn * wanted[1]) / radian,
            )
        self.rotation = math.atan2(heading[1], heading[0]) + math.pi / 2

        self.reload -= delta_time
        if self.reload <= 0:
            self.reload = self.kind.cooldown
            return self.barrel_shots()
        return []

    def barrel_shots(self) -> list[Shot]:
        """Shots spawned at the barrel tip for the current rotation."""
        direction = _facing(self.rotation)
        rotation = math.atan2(direction[1], direction[0])
        nx, ny = _normalize(direction)
        tip = (self.x + nx * _BARREL_LENGTH, self.y + ny * _BARREL_LENGTH)
        if self.kind is TurretKind.LASER:
            normal = (-ny, nx)
            offsets = (-_LASER_SPREAD, _LASER_SPREAD)
            return [
                Shot(self.kind,
                     (tip[0] + normal[0] * offset, tip[1] + normal[1] * offset),
                     direction, rotation)
                for offset in offsets
            ]
        return [Shot(self.kind, tip, direction, rotation)]


def button_enabled(kind: TurretKind, money: int) -> bool:
    """Whether the shop button for `kind` can be pressed with `money`."""
    return money >= kind.price