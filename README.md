# puttgolf

A small top-down mini-golf game. You hold the mouse button to aim, release to
putt, and try to sink the ball in the hole. Levels are plain images in which
each pixel colour means something.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing

```
puttgolf [MAP] [--font FONT]
```

`MAP` defaults to `map1.png` and `--font` to `arial.ttf`, both looked up in
the current directory. If the map or font cannot be read, the command prints
an error and exits with status 1.

Press the mouse button while the ball is at rest to start aiming. While the
button is held, an aim line is drawn from the ball's centre pointing away from
the mouse, which is the way the ball will go. Release to shoot: the farther
the mouse is from the ball, the harder the shot (up to a fixed maximum). Each
shot adds one to the strike counter shown in the top-left corner. The ball
slows down by friction, bounces off the window edges and off walls.

When the ball reaches the hole, its speed is set to zero, the strike counter
goes back to 0, and the ball is drawn at the start point for that frame.

The playing field is 800 × 600 pixels. The level image is scaled to the
window width by whole-number steps, so a 100-pixel-wide image gives
8 × 8 pixel tiles.

## Level images

Each pixel of a level image is read by its exact RGB colour (alpha is
ignored):

| Colour          | RGB             | Meaning      |
|-----------------|-----------------|--------------|
| white           | (255, 255, 255) | grass        |
| black           | (0, 0, 0)       | wall         |
| lime green      | (168, 230, 29)  | start point  |
| red             | (237, 28, 36)   | hole         |

Walls are collected as rectangles from the black regions: a rectangle grows
right along its first row, then down along its last column. Rectangles
narrower or shorter than two pixels are dropped. If a marker colour appears
more than once, the last one in reading order is used; a missing marker is
placed at (0, 0).

## Inspecting a level

```
puttgolf-readmap [MAP] [--marker X Y]
```

prints the level as ASCII art (` ` grass, `w` wall, `S` start, `E` hole,
`x` anything else), with the cell given by `--marker` (default `43 26`) shown
as `X`. It then lists the wall rectangles found as `w: x, y, width, height`
lines in map pixels, followed by a `number of walls:` line whose figure is one
more than the number of rectangles listed.

## Using it as a library

- `puttgolf.mapdata` – `PixelType`, `pixel_type`, `load_grid`,
  `scan_wall_rects`, `build_walls`, `find_markers` and `load_layout`, which
  turn an image into a `MapLayout` of walls, a start point and a hole position.
- `puttgolf.wall` – `Wall` rectangles with `move_to`, `resize`, `bounds`,
  `contains` and `check_collision`, which returns a `Collision` telling whether
  the ball should bounce vertically or horizontally.
- `puttgolf.physics` – `Ball`, `Arrow`, `Hole`, `BallColor` and `distance`,
  with the friction model and the shot strength computed from the mouse
  distance.
- `puttgolf.game` – the `Game` state machine (`press`, `release`, `step`,
  `draw`), `run`, which opens the window, and `main`, the `puttgolf` command.
- `puttgolf.readmap` – `render_ascii`, `describe_walls` and `main`, the
  `puttgolf-readmap` command.

## What it does not do

The package ships no level images or fonts; you supply your own. There is a
single level per run, with no level sequence, scores kept between runs, menus
or sound.