"""Game state of a single stage: money, lives, placement, spawning and danger."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from towerdefense.cheat import CheatCode, Key
from towerdefense.tilemap import (
    BLOCK_SIZE,
    MAP_HEIGHT,
    MAP_WIDTH,
    SPAWN_GRID_POINT,
    TileType,
    bfs_distance,
    parse_map,
)
from towerdefense.turrets import Turret, TurretKind
from towerdefense.waves import parse_waves

DANGER_TIME = 7.61
STARTING_LIVES = 10
STARTING_MONEY = 150
CHEAT_REWARD = 10000
KNOWN_ENEMY_TYPES = frozenset({1, 2, 3, 4})
CLIENT_SIZE = (MAP_WIDTH * BLOCK_SIZE, MAP_HEIGHT * BLOCK_SIZE)
SPAWN_POSITION = (
    SPAWN_GRID_POINT[0] * BLOCK_SIZE + BLOCK_SIZE // 2,
    SPAWN_GRID_POINT[1] * BLOCK_SIZE + BLOCK_SIZE // 2,
)
TURRET_BUTTONS = (TurretKind.MACHINE_GUN, TurretKind.LASER, TurretKind.FIRE)


class PlacementError(ValueError):
    """Raised when a turret would block the path of the enemies."""


class Outcome(Enum):
    """How the stage stands."""

    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class Spawn:
    """An enemy to create at the spawn point, already `elapsed` seconds late."""

    enemy_type: int
    elapsed: float


@dataclass(frozen=True)
class Danger:
    """Result of the danger check: countdown, indicator alpha, music restart."""

    countdown: float
    alpha: int
    music_position: float | None


class PlayState:
    """Everything the play scene tracks besides drawing."""

    def __init__(self, map_text: str, wave_text: str) -> None:
        self.tiles = parse_map(map_text)
        self.distance = bfs_distance(self.tiles)
        self.waves = deque(parse_waves(wave_text))
        self.lives = STARTING_LIVES
        self.money = STARTING_MONEY
        self.speed_mult = 1
        self.ticks = 0.0
        self.death_countdown = -1.0
        self.debug_mode = False
        self.preview: TurretKind | None = None
        self.turrets: dict[tuple[int, int], Turret] = {}
        self.outcome = Outcome.PLAYING
        self._cheat = CheatCode()

    @property
    def money_text(self) -> str:
        return f"${self.money}"

    @property
    def lives_text(self) -> str:
        return f"Life: {self.lives}"

    def hit(self) -> Outcome:
        """An enemy reached the end: lose a life."""
        self.lives -= 1
        if self.lives <= 0:
            self.outcome = Outcome.LOSE
        return self.outcome

    def earn_money(self, amount: int) -> int:
        self.money += amount
        return self.money

    def select_turret(self, index: int) -> TurretKind | None:
        """Pick a shop button; an unaffordable choice keeps the current preview."""
        if 0 <= index < len(TURRET_BUTTONS):
            kind = TURRET_BUTTONS[index]
            if self.money >= kind.price:
                self.preview = kind
        return self.preview

    def check_space_valid(self, x: int, y: int,
                          enemy_positions: Iterable[tuple[float, float]] = ()) -> bool:
        """Occupy (x, y) if every enemy and the spawn can still reach the exit."""
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
            return False
        previous = self.tiles[y][x]
        self.tiles[y][x] = TileType.OCCUPIED
        distance = bfs_distance(self.tiles)
        self.tiles[y][x] = previous
        if distance[0][0] == -1:
            return False
        for px, py in enemy_positions:
            gx = min(max(math.floor(px / BLOCK_SIZE), 0), MAP_WIDTH - 1)
            gy = min(max(math.floor(py / BLOCK_SIZE), 0), MAP_HEIGHT - 1)
            if distance[gy][gx] == -1:
                return False
        self.tiles[y][x] = TileType.OCCUPIED
        self.distance = distance
        return True

    def place_turret(self, x: int, y: int,
                     enemy_positions: Sequence[tuple[float, float]] = ()) -> Turret | None:
        """Build the previewed turret on tile (x, y).

        Returns None when nothing is previewed, the tile is outside the map or
        already occupied; raises PlacementError when it would block a path.
        """
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
            return None
        if self.tiles[y][x] is TileType.OCCUPIED or self.preview is None:
            return None
        if not self.check_space_valid(x, y, enemy_positions):
            raise PlacementError(f"tile ({x}, {y}) would block the enemy path")
        kind = self.preview
        self.earn_money(-kind.price)
        turret = Turret(kind, x * BLOCK_SIZE + BLOCK_SIZE / 2, y * BLOCK_SIZE + BLOCK_SIZE / 2)
        self.turrets[(x, y)] = turret
        self.preview = None
        return turret

    def press_key(self, key: int) -> bool:
        """Handle a key press; return True when the cheat code was completed."""
        key = int(key)
        fired = False
        if key == Key.TAB:
            self.debug_mode = not self.debug_mode
        elif self._cheat.press(key):
            self.money += CHEAT_REWARD
            fired = True
        if key == Key.Q:
            self.select_turret(0)
        elif key == Key.W:
            self.select_turret(1)
        elif Key.DIGIT_0 <= key <= Key.DIGIT_9:
            self.speed_mult = key - Key.DIGIT_0
        return fired

    def spawn_due(self, delta_time: float, enemies_alive: int) -> list[Spawn]:
        """Advance the wave clock once per speed step and return enemies to spawn.

        Sets `outcome` to WIN once the waves are exhausted and no enemy remains.
        """
        spawns: list[Spawn] = []
        for _ in range(self.speed_mult):
            self.ticks += delta_time
            if not self.waves:
                if enemies_alive + len(spawns) == 0:
                    self.outcome = Outcome.WIN
                continue
            current = self.waves[0]
            if self.ticks < current.wait:
                continue
            self.ticks -= current.wait
            self.waves.popleft()
            if current.enemy_type in KNOWN_ENEMY_TYPES:
                spawns.append(Spawn(current.enemy_type, self.ticks))
        return spawns

    def danger_countdown(self, reach_end_times: Iterable[float]) -> Danger:
        """Work out whether enough enemies are close to the end to cost the game."""
        if self.speed_mult == 0:
            self.death_countdown = -1.0
        elif self.death_countdown != -1:
            self.speed_mult = 1

        countdown = -1.0
        alpha = 0
        music_position: float | None = None
        danger = self.lives
        for reach in sorted(reach_end_times):
            if reach > DANGER_TIME:
                continue
            danger -= 1
            if danger <= 0:
                position = DANGER_TIME - reach
                if reach > self.death_countdown and self.speed_mult != 0:
                    music_position = position
                ratio = position / DANGER_TIME
                alpha = max(0, min(255, int(ratio * ratio * 255)))
                countdown = reach
                break

        self.death_countdown = countdown
        if self.speed_mult == 0:
            self.death_countdown = -1.0
        return Danger(self.death_countdown, alpha, music_position)