import pytest

from towerdefense.cheat import KONAMI_CODE, Key
from towerdefense.play import (
    BLOCK_SIZE,
    CHEAT_REWARD,
    DANGER_TIME,
    Outcome,
    PlacementError,
    PlayState,
    Spawn,
)
from towerdefense.tilemap import TileType
from towerdefense.turrets import TurretKind

DIRT_MAP = "\n".join(["0" * 20] * 13)
CORRIDOR_MAP = "\n".join(
    ["0000" + "1" * 16] + ["0" + "1" * 19] * 11 + ["0" * 20]
)


def make(map_text=DIRT_MAP, waves=""):
    return PlayState(map_text, waves)


def test_initial_state():
    state = make()
    assert state.money == 150
    assert state.lives == 10
    assert state.money_text == "$150"
    assert state.outcome is Outcome.PLAYING


def test_hits_until_loss():
    state = make()
    results = [state.hit() for _ in range(10)]
    assert results[:-1] == [Outcome.PLAYING] * 9
    assert results[-1] is Outcome.LOSE
    assert state.lives_text == "Life: 0"


def test_select_keeps_preview_when_unaffordable():
    state = make()
    assert state.select_turret(0) is TurretKind.MACHINE_GUN
    assert state.select_turret(1) is TurretKind.MACHINE_GUN
    assert state.select_turret(2) is TurretKind.FIRE


def test_place_without_preview_does_nothing():
    state = make()
    assert state.place_turret(5, 5) is None
    assert state.money == 150


def test_place_turret_spends_money_and_occupies():
    state = make()
    state.select_turret(0)
    turret = state.place_turret(5, 5)
    assert state.turrets[(5, 5)] is turret
    assert state.money == 150 - TurretKind.MACHINE_GUN.price
    assert state.tiles[5][5] is TileType.OCCUPIED
    assert state.distance[5][5] == -1
    assert state.preview is None
    state.select_turret(2)
    assert state.place_turret(5, 5) is None


def test_blocking_spawn_path_rejected():
    state = make(CORRIDOR_MAP)
    state.select_turret(2)
    with pytest.raises(PlacementError):
        state.place_turret(0, 5)
    assert state.tiles[5][0] is TileType.DIRT
    assert state.money == 150


def test_trapping_enemy_rejected():
    state = make(CORRIDOR_MAP)
    enemy = (3 * BLOCK_SIZE + BLOCK_SIZE / 2, BLOCK_SIZE / 2)
    assert not state.check_space_valid(1, 0, [enemy])
    assert state.check_space_valid(1, 0, [])
    assert state.tiles[0][1] is TileType.OCCUPIED


def test_out_of_bounds_invalid():
    state = make()
    assert not state.check_space_valid(-1, 0)
    assert not state.check_space_valid(0, 13)


def test_cheat_code_grants_money():
    state = make()
    results = [state.press_key(key) for key in KONAMI_CODE]
    assert results[-1] is True
    assert not any(results[:-1])
    assert state.money == 150 + CHEAT_REWARD


def test_tab_toggles_debug():
    state = make()
    state.press_key(Key.TAB)
    assert state.debug_mode
    state.press_key(Key.TAB)
    assert not state.debug_mode


def test_hotkeys():
    state = make()
    state.press_key(Key.DIGIT_3)
    assert state.speed_mult == 3
    state.press_key(Key.Q)
    assert state.preview is TurretKind.MACHINE_GUN


def test_spawn_waits_for_wave_time():
    state = make(waves="1 2 3")
    assert state.spawn_due(1.0, 0) == []
    spawns = state.spawn_due(1.5, 0)
    assert spawns == [Spawn(1, pytest.approx(0.5))]
    assert len(state.waves) == 2


def test_unknown_enemy_type_consumed():
    state = make(waves="9 1 1")
    assert state.spawn_due(2.0, 0) == []
    assert not state.waves


def test_win_when_waves_and_enemies_gone():
    state = make()
    state.spawn_due(0.1, 1)
    assert state.outcome is Outcome.PLAYING
    state.spawn_due(0.1, 0)
    assert state.outcome is Outcome.WIN


def test_speed_zero_pauses():
    state = make(waves="1 1 1")
    state.speed_mult = 0
    assert state.spawn_due(5.0, 0) == []
    assert state.ticks == 0.0


def test_danger_when_enough_enemies_near_end():
    state = make()
    danger = state.danger_countdown([1.0] * 10)
    assert danger.countdown == 1.0
    assert 0 < danger.alpha <= 255
    assert danger.music_position == pytest.approx(DANGER_TIME - 1.0)
    state.speed_mult = 3
    state.danger_countdown([1.0] * 10)
    assert state.speed_mult == 1


def test_no_danger_with_fewer_enemies_than_lives():
    state = make()
    danger = state.danger_countdown([1.0] * 9)
    assert danger.countdown == -1
    assert danger.alpha == 0
    assert danger.music_position is None