"""Drawing the game with pygame and running its window."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import pygame

from .errors import ErrorKind, MapError
from .state import Direction, Game, Outcome
from .zombies import FRAME_COUNT, MOVES_LABEL, FoodAnimation, ZombieHorde

PIXELS = 96
TITLE = "ESCAPE MINECRAFT"
FPS = 240
FONT_SIZE = 24
TEXT_COLOR = (255, 255, 255)

FRAME_NAMES = tuple(f"food_anim_{index}" for index in range(FRAME_COUNT))

_BASE_FILES = {
    "grass": "simple.xpm",
    "cobble": "cobble_block.xpm",
    "cobble_t": "cobble_block_top.xpm",
    "catr": "cat_right.xpm",
    "catl": "cat_left.xpm",
    "catu": "cat_up.xpm",
    "catd": "cat_down.xpm",
    "food": "food.xpm",
    "exit_c": "exit_closed.xpm",
    "exit_o": "exit_open.xpm",
}
_ZOMBIE_FILES = {
    "zleft": "zombie_left.xpm",
    "zright": "zombie_right.xpm",
}
_GROUND = frozenset({"grass", "cobble", "cobble_t"})

_KEYS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def texture_paths(bonus: bool = False) -> dict[str, str]:
    """Return the texture file for every sprite name, relative to the working directory."""
    root = "bonus/textures_bonus" if bonus else "textures"
    paths = {name: f"{root}/{file}" for name, file in _BASE_FILES.items()}
    if bonus:
        paths.update({name: f"{root}/{file}" for name, file in _ZOMBIE_FILES.items()})
        paths.update(
            {
                name: f"{root}/anim_food/fod{index + 1}.xpm"
                for index, name in enumerate(FRAME_NAMES)
            }
        )
    return paths


@dataclass(frozen=True)
class Textures:
    """The images used to draw the map, by sprite name."""

    images: Mapping[str, pygame.Surface]

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]

    @property
    def food_frames(self) -> list[pygame.Surface]:
        """The animation frames for food, in order."""
        return [self.images[name] for name in FRAME_NAMES if name in self.images]

    @classmethod
    def load(cls, bonus: bool = False) -> Textures:
        """Load every texture the game needs.

        Raises MapError(IMAGE) when any of them is missing or unreadable.
        """
        display_ready = pygame.display.get_init() and pygame.display.get_surface() is not None
        images: dict[str, pygame.Surface] = {}
        for name, path in texture_paths(bonus).items():
            try:
                image = pygame.image.load(path)
            except (pygame.error, OSError) as exc:
                raise MapError(ErrorKind.IMAGE) from exc
            images[name] = image.convert_alpha() if display_ready else image
        return cls(images)


@dataclass
class Renderer:
    """Draws a game onto a surface, one tile per texture."""

    screen: pygame.Surface
    textures: Textures
    bonus: bool = False
    food: FoodAnimation = field(default_factory=FoodAnimation)
    horde: ZombieHorde | None = None
    _font: pygame.font.Font | None = field(default=None, init=False, repr=False)

    def _sprite(self, game: Game, x: int, y: int) -> pygame.Surface:
        name = game.sprite_at(x, y)
        if self.bonus and name == "food":
            frames = self.textures.food_frames
            if frames:
                return frames[self.food.frame() % len(frames)]
        if name == "zright" and self.horde is not None:
            if self.horde.direction is Direction.LEFT:
                name = "zleft"
        return self.textures[name]

    def _draw_moves(self, moves: int) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        baseline = int(0.56 * PIXELS)
        top = baseline - self._font.get_ascent()
        label = self._font.render(MOVES_LABEL, True, TEXT_COLOR)
        count = self._font.render(str(moves), True, TEXT_COLOR)
        self.screen.blit(label, (int(1.2 * PIXELS), top))
        self.screen.blit(count, (int(3.1 * PIXELS), top))

    def draw(self, game: Game) -> pygame.Surface:
        """Draw every tile of *game* and, in bonus mode, the move counter."""
        for y in range(game.height):
            for x in range(game.width):
                at = (x * PIXELS, y * PIXELS)
                sprite = self._sprite(game, x, y)
                if game.sprite_at(x, y) not in _GROUND:
                    self.screen.blit(self.textures["grass"], at)
                self.screen.blit(sprite, at)
        if self.bonus:
            self._draw_moves(game.moves)
        return self.screen


def _handle_events(game: Game) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            game.finish(Outcome.QUIT)
        elif event.type == pygame.KEYUP:
            if event.key == pygame.K_ESCAPE:
                game.finish(Outcome.QUIT)
            elif event.key in _KEYS:
                game.move(_KEYS[event.key])
        if game.over:
            return


def run(game: Game, bonus: bool = False) -> Outcome:
    """Open the game window and play until the game ends; return its outcome.

    Raises MapError(IMAGE) when the textures cannot be loaded.
    """
    game.bonus = bonus
    horde: ZombieHorde | None = None
    if bonus:
        horde = ZombieHorde()
        if game.on_zombie is None:
            game.on_zombie = horde.tick
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * PIXELS, game.height * PIXELS))
        pygame.display.set_caption(TITLE)
        textures = Textures.load(bonus)
        renderer = Renderer(screen, textures, bonus=bonus, horde=horde)
        clock = pygame.time.Clock()
        renderer.draw(game)
        pygame.display.flip()
        while not game.over:
            _handle_events(game)
            if game.over:
                break
            game.refresh()
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    assert game.outcome is not None
    return game.outcome