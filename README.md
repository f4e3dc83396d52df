# snakeserver

Building blocks for a multiplayer snake game server. The package has a grid
engine and helpers that build the game's HTTP API responses. It has no
dependencies outside the standard library.

## Installation

```
pip install snakeserver
```

To run the test suite, install the `test` extra and run `pytest`.

## Engine

- `snakeserver.dot`: `Dot(x, y)` is an immutable point on the grid.
  `hash_code()` packs a dot into 16 bits, with x in the high byte.
  `hash_to_dot()` unpacks it again. `distance_to()` gives the Manhattan
  distance, and `to_json()` gives `[x,y]`.
- `snakeserver.direction`: `Direction` has the members `NORTH`, `EAST`,
  `SOUTH` and `WEST`. The module also has these functions:
  - `calculate_direction(from_dot, to_dot)` returns the direction of the
    dominant axis. For equal dots and exact diagonals it returns a random
    direction.
  - `reverse_direction()` raises `ReverseDirectionError` for an invalid
    value.
  - `direction_to_json()` raises `DirectionMarshalError` for an invalid
    value.
  - `valid_direction()`, `direction_label()` and `random_direction()`.
- `snakeserver.rect`: `Rect(x, y, width, height)` has `contains_dot()`,
  `contains_rect()` and `dot()`. `dots()` and `location()` list its dots in
  row-major order, and `to_json()` gives `[x,y,w,h]`.
- `snakeserver.location`: `Location` is an immutable ordered tuple of dots.
  - `add()`, `delete()` and `reverse()` return new locations.
  - `equals()` compares dots regardless of order. `equals_strict()`
    compares them in order.
  - It also has `difference()`, `intersection()`, `hashes()`, and the
    module has `hash_to_location()`.
- `snakeserver.container`: `Container` wraps a game object placed on the
  map. Containers are compared by identity.
- `snakeserver.area`: `Area(width, height)` is the playing field.
  - `new_area()` rejects zero-sized areas with `InvalidAreaSizeError`.
  - `new_useful_area()` rejects areas smaller than 10×10 with
    `ValueError`.
  - `navigate()` moves a dot and wraps around the edges. It raises
    `NavigationError` for a dot outside the area or an invalid direction.
  - The area also offers `dots()`, `contains_dot()`, `contains_rect()`,
    `contains_location()`, `random_dot()`, `random_rect()` and
    `to_json()`.
- `snakeserver.dots_mask`: `DotsMask` is a shape template.
  - `turn_right()`, `turn_left()` and `turn_over()` rotate or flip it.
    `turn_random()` picks one of these, or a plain copy, at random and
    takes an optional `random.Random`.
  - `location(x, y)` places the shape on the grid.
  - `location_to_dots_mask()` and `zero_dots_mask()` build masks.
  - Ready-made shapes include `DOTS_MASK_TANK`, `DOTS_MASK_HOME_1`,
    `DOTS_MASK_CROSS`, `DOTS_MASK_LABYRINTH` and `DOTS_MASK_BIG_HOME`.
- `snakeserver.gamemap`: `Map(area)` is a grid of containers guarded by a
  lock.
  - Single-dot operations: `set`, `get`, `has`, `set_if_vacant`, `remove`,
    `remove_container`.
  - Multi-dot operations: `mset`, `mget`, `mremove`, `mremove_container`,
    `has_any`, `has_all` and `mset_if_vacant`.
  - `mset_if_all_vacant` places a container on all the given dots, or on
    none of them, rolling back if any dot is taken.
  - `render()` returns a text picture of the map.

## Server helpers

- `snakeserver.events`: `EventType` and `Event(type, payload)`.
  `Event.to_json()` gives `{"type":...,"payload":...}`.
- `snakeserver.games_listing`: describes games with `GameEntity`.
  - `parse_games_sorting()` accepts `smart`, `random` or an empty string.
    An empty string means random.
  - `parse_games_limit()` returns `None` for an empty string and raises
    `InvalidLimitError` for anything that is not a non-negative integer.
  - `sort_game_entities()` orders the games.
  - `list_games()` builds the `{"games", "limit", "count"}` payload.
- `snakeserver.rate_limit`: `RetryTimers` works out the `Retry-After`
  seconds for each game (10 seconds by default). The clock can be
  injected.
- `snakeserver.responses`: `Response` holds a status, headers and a body.
  - `json_response()` and `error_response()` build JSON responses.
  - `ping_response()`, `not_found_response()`, `welcome_response()` and
    `info_response()` build fixed responses.
  - `server_info_header()` gives the value of the `Server` header.

## Example

```python
from snakeserver.area import new_area
from snakeserver.container import Container
from snakeserver.direction import Direction
from snakeserver.dot import Dot
from snakeserver.gamemap import Map

area = new_area(100, 100)
print(area.navigate(Dot(0, 0), Direction.WEST, 1))  # [99, 0]

game_map = Map(area)
apple = Container("apple")
assert game_map.set_if_vacant(Dot(3, 4), apple)
assert game_map.get(Dot(3, 4)) is apple
print(game_map.render())
```

## What it does not do

This is a library, not a running server. It has:

- no HTTP or WebSocket server, and no routing;
- no game loop, players or snakes;
- no command-line program.

The response helpers return `Response` objects. Sending them is left to
whatever web framework you use.