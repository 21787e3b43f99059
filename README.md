# towerdefense

The rules of a grid-based tower defense game, with no graphics or audio
layer attached. You supply the frames, the input and the drawing. The package
keeps the state and applies the rules. It has no dependencies outside the
standard library.

## Modules

- **`towerdefense.tilemap`**: maps are 20 × 13 grids of `0` (dirt) and `1`
  (floor) cells, and whitespace between cells is ignored. `parse_map` turns
  map text into rows of `TileType` values. `read_map` does the same for a
  file. Either raises `MapError` for any other character or a wrong cell
  count. `bfs_distance` searches backwards from the bottom-right cell and
  gives every dirt cell its step distance to that cell. Cells that cannot
  reach it hold `-1`. If the bottom-right cell is not dirt, every cell holds
  `-1`.
- **`towerdefense.waves`**: `parse_waves` expands `type wait repeat` triples
  into a flat list of `Wave(enemy_type, wait)` entries. `read_waves` returns
  an empty list when the file is missing or cannot be read.
- **`towerdefense.cheat`**: `Key` lists the key codes the game uses.
  `CheatCode` collects key strokes given to `press` and returns `True` when
  they complete its sequence. The default sequence is `KONAMI_CODE`.
- **`towerdefense.turrets`**: there are three turret kinds, listed in
  `TurretKind`: machine gun, laser and fire. Each kind has a price, a range
  and a cooldown.
  - `Turret.update(delta_time, enemies)` locks onto the first enemy in range
    and turns toward it at a limited rate. It returns the `Shot` values fired
    once the turret has reloaded.
  - `Turret.barrel_shots` gives the shots for the current rotation. A laser
    turret fires two of them.
  - `button_enabled(kind, money)` tells whether a shop button can be pressed
    with the money at hand.
- **`towerdefense.play`**: `PlayState(map_text, wave_text)` holds one stage:
  lives, money, the speed multiplier, placed turrets and the `Outcome`.
  - `hit` removes a life.
  - `earn_money` changes the money.
  - `select_turret` chooses what to build.
  - `check_space_valid` and `place_turret` build turrets. `place_turret`
    raises `PlacementError` if the new turret would cut the path to the exit.
  - `press_key` handles the hotkeys, the speed keys, debug mode and the cheat
    code. The cheat code adds 10000 money.
  - `spawn_due` advances the wave clock and returns the `Spawn` entries that
    are due.
  - `danger_countdown` computes the `Danger` indicator from the enemies'
    times to reach the end.
- **`towerdefense.slider`**: `Slider` is a horizontal control. Its value is
  set with `set_value`, or dragged with `mouse_down`, `mouse_move` and
  `mouse_up`. It reports each change to an `on_change` callback.
- **`towerdefense.effects`**:
  - `FadeEffect` is a randomly rotated mark that fades out.
  - `FrameAnimation` plays a list of frames once. `EXPLOSION_FRAMES` and
    `HEALTH_FRAMES` are ready-made frame lists.
  - `PlaneStrike` flies across the map, then lets out a growing shockwave.
    Its `update` returns the enemies hit on each step.
- **`towerdefense.scoreboard`**:
  - `parse_scores` and `load_scores` read files of alternating score and name
    lines, sorted highest score first. `load_scores` returns an empty list
    for a missing file.
  - `append_score` adds a record to such a file.
  - `ScoreBoard` pages through entries, five at a time by default.
  - `NameEntry` turns key presses into a name of at most ten letters. The
    name is `UNKNOWN` if left empty.
- **`towerdefense.scenes`**: `Navigator` tracks the active `SceneName` and
  follows menu button labels given to `click`. It also handles
  `select_stage` and keeps the audio `Settings`, which `change_volume`
  adjusts through the settings scene's sliders.

## Example

```python
from towerdefense.tilemap import parse_map, bfs_distance

rows = ["0" * 20 for _ in range(13)]
tiles = parse_map("\n".join(rows))
distance = bfs_distance(tiles)

print(distance[12][19])  # 0: the exit itself
print(distance[0][0])    # 31: steps from the top-left corner to the exit
```

```python
from towerdefense.scoreboard import ScoreBoard, parse_scores

entries = parse_scores("120\nalice\n300\nbob\n")
board = ScoreBoard(entries)
for entry in board.page():
    print(entry.name, entry.score)  # bob 300, then alice 120
```

## What it does not do

- It opens no window and draws nothing.
- It plays no sound. Sound and image names appear only as plain strings.
- It provides no command to start a game.
- Enemies and bullets are not modelled. Turrets and the plane strike work
  with any object that has a `position`, plus a `collision_radius` for the
  plane strike. Moving enemies along the distance field, doing damage and
  calling `PlayState.hit` are left to the caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.