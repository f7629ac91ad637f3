# mazequest

The rules and world state of a small first-person maze game, kept apart from
any graphics API. The package tracks everything the game decides:

- the maze grid, with walls, notices and a single exit, and the vertex data
  for its floor tiles, outer walls, wall caps and wall blocks;
- the player, who walks, strafes and turns through the maze without passing
  through walls, carries a flashlight and fires bullets that fly in real time;
- a tiger that patrols the corridors, turning at dead ends and picking a
  turn at random at junctions;
- notices and the exit sign, billboards that turn about the y axis to face
  the player and report when the player stands on their tile;
- keyboard edge detection (pressed, held, released), a frame counter and a
  stopwatch.

## Modules

| Module | What it holds |
| --- | --- |
| `mazequest.config` | Constants, the map `MAP1`, `MoveDirection`, `CustomVertex`, `UIVertex`, colour helpers `xrgb` / `rgba`, `is_wall` |
| `mazequest.vecmath` | Vectors and 4×4 matrices on numpy in row-vector convention: `length`, `normalize`, `calculate_angle`, `identity`, `translation`, `scaling`, `rotation_y`, `rotation_axis`, `position_of` |
| `mazequest.stopwatch` | `Stopwatch` and the `milliseconds` clock |
| `mazequest.frame` | `FrameCounter`: frames per second plus a stopwatch |
| `mazequest.keyboard` | `KeyboardState` and `KeyPhase` |
| `mazequest.notice` | `Notice` billboards and the `ExitSign` with its on-screen button |
| `mazequest.maze` | `generate_maze_wall`, `make_wall_block`, `calculate_mid_point`, `calculate_division_points`, `MazeLayout` |
| `mazequest.player` | `Player`, `Bullet`, `Flashlight` |
| `mazequest.tiger` | `Tiger` |
| `mazequest.geometry` | `build_tile_vertices`, `build_tile_indices`, `build_outer_walls`, `build_wall_caps` |
| `mazequest.game` | `Game`, which ties the pieces together and handles keys and the mouse |

## Clocks and randomness

Everything that depends on time takes a `clock`: a callable that returns the
current time in milliseconds. `mazequest.stopwatch.milliseconds` is the real
one and is used when no clock is given. Pass a function you control to make
movement and timing reproducible:

```python
from mazequest.stopwatch import Stopwatch

now = 0
watch = Stopwatch(lambda: now)
watch.start()
now = 250
assert watch.check() == 250
assert watch.stop() == 250
assert not watch.is_working
```

`Player.move`, `Player.rotate` and `Tiger.move` act at most once every 10 ms
of that clock; `Player.move` returns `False` when called again too soon.

`Tiger` and `Game` also take an `rng` (a `random.Random`), so the tiger's
choices at junctions can be made repeatable with a seeded generator.

## Keyboard

`KeyboardState.update` takes a function that tells whether a key code is
held down at this moment, and moves each key through its phases. Keys may be
given as codes or as single characters:

```python
from mazequest.keyboard import KeyboardState

keys = KeyboardState()
held = {ord("1")}
keys.update(lambda code: code in held)
assert keys.key_down("1")
keys.update(lambda code: code in held)
assert keys.key("1") and not keys.key_down("1")
held.clear()
keys.update(lambda code: code in held)
assert keys.key_up("1")
```

## The maze

`generate_maze_wall(1)` builds the layout of the one map there is: a
`MazeLayout` with twenty vertices for each wall block, the notices and the
exit. Any other map number raises `ValueError`.

```python
from mazequest.maze import calculate_mid_point, generate_maze_wall

layout = generate_maze_wall(1)
mid = calculate_mid_point((0.0, 0.0, 0.0), (10.0, 0.0, -10.0))
```

## Running a game

Create a `Game` with a clock and a random generator, then on every frame call
`process_keys` with the same kind of key-state function that
`KeyboardState.update` takes. It advances bullets and the tiger (unless
paused or finished), then reads the keys:

- `A`/`D`/`W`/`S` or the arrow keys move the player; `Q`/`E` turn it;
- `1` toggles day and night (`light_on`, `lighting_enabled`);
- `2` toggles the top-down view (`sky_view`);
- `3` toggles the flashlight;
- `4` toggles free flight (`no_clip`); leaving it puts the player back where
  it was when it started;
- `Esc` toggles `paused`.

Standing on a notice's tile sets `interactive` and `sky_view`; standing on
the exit's tile ends the game (`playing` becomes `False`).

Forward mouse events to `mouse_down`, `mouse_move` and `mouse_up`.
`mouse_move` turns the player by the cursor's distance from the window
centre and returns the point to put the cursor back to, or `None` when the
cursor should be left free. `mouse_up` fires a bullet and returns `True`
once the exit button (shown while `cursor_visible`) has been clicked.

## What this package does not do

It draws nothing and opens no window: there is no renderer, no textures,
no sky box, no view culling and no loading of the tiger's model file. The
texture and model file names in `mazequest.config` are only names. There is
no command to run; a program that wants a playable game must supply the
window, the input polling and the drawing itself, reading the player, tiger,
notices, exit and vertex data from a `Game`.