import io

from catescape.mapfile import validate_rows
from catescape.pathcheck import check_paths
from catescape.state import Direction, Game, Outcome
from catescape.zombies import (
    DELAY,
    ZSPEED,
    FoodAnimation,
    ZombieHorde,
    format_moves,
)

CORRIDOR = [
    "1111111",
    "1P0C0E1",
    "1Z00001",
    "1111111",
]

NEXT_TO_PLAYER = [
    "1111111",
    "1ZP0CE1",
    "1111111",
]

BOXED = [
    "1111111",
    "1ZCP0E1",
    "1111111",
]


def make_game(rows):
    width, height = len(rows[0]), len(rows)
    info = check_paths(rows, validate_rows(rows, width, height, True), True)
    game = Game.from_map(rows, info)
    game.bonus = True
    game.out = io.StringIO()
    return game


def zombie_cells(game):
    return [
        (x, y)
        for y, row in enumerate(game.grid)
        for x, tile in enumerate(row)
        if tile == "Z"
    ]


def test_food_frame_holds_until_delay():
    anim = FoodAnimation()
    shown = [anim.frame() for _ in range(DELAY)]
    assert set(shown) == {0}
    assert anim.frame() == 1


def test_food_frames_cycle_without_last_frame():
    anim = FoodAnimation(delay=1)
    shown = [anim.frame() for _ in range(20)]
    assert set(shown) == {0, 1, 2, 3}
    assert shown[:5] == [0, 1, 2, 3, 0]


def test_step_moves_right():
    game = make_game(CORRIDOR)
    horde = ZombieHorde()
    horde.step(game, 1, 2)
    assert zombie_cells(game) == [(2, 2)]
    assert game.tile_at(1, 2) == "0"
    assert horde.direction is Direction.RIGHT


def test_step_turns_at_wall():
    game = make_game(CORRIDOR)
    horde = ZombieHorde()
    rightmost = game.width - 2
    for _ in range(10):
        (x, y), = zombie_cells(game)
        if x == rightmost:
            break
        horde.step(game, x, y)
    (x, y), = zombie_cells(game)
    assert x == rightmost
    horde.step(game, x, y)
    assert zombie_cells(game) == [(rightmost - 1, y)]
    assert horde.direction is Direction.LEFT


def test_step_blocked_both_sides_stays():
    game = make_game(BOXED)
    horde = ZombieHorde()
    horde.step(game, 1, 1)
    assert zombie_cells(game) == [(1, 1)]
    assert game.tile_at(2, 1) == "C"
    assert horde.direction is Direction.RIGHT


def test_step_onto_player_loses():
    game = make_game(NEXT_TO_PLAYER)
    horde = ZombieHorde()
    horde.step(game, 1, 1)
    assert game.outcome is Outcome.LOST
    assert game.out.getvalue() == "You Lost!\n"
    assert zombie_cells(game) == [(1, 1)]


def test_tick_waits_for_speed():
    game = make_game(CORRIDOR)
    horde = ZombieHorde()
    for _ in range(ZSPEED - 1):
        horde.tick(game, 1, 2)
    assert zombie_cells(game) == [(1, 2)]
    horde.tick(game, 1, 2)
    assert zombie_cells(game) == [(2, 2)]
    assert horde.counter == 0


def test_refresh_drives_horde():
    game = make_game(CORRIDOR)
    horde = ZombieHorde()
    game.on_zombie = horde.tick
    for _ in range(ZSPEED):
        game.refresh()
    assert zombie_cells(game) == [(2, 2)]
    assert game.outcome is None


def test_format_moves():
    assert format_moves(0) == "[+] ==> Moves : 0"
    assert format_moves(-2147483648) == "[+] ==> Moves : -2147483648"