"""The pygame front end: welcome screen and game window."""

from __future__ import annotations

import argparse
import os
import sys
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .config import TILE_SIZE, GameConfig, load_config  # noqa: E402
from .game import DIGIT_HEIGHT, DIGIT_WIDTH, Button, Face, Game  # noqa: E402
from .name_entry import BACKSPACE, NameEntry  # noqa: E402

FONT_ERROR = 10101
FRAME_RATE = 60

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)

_BUTTON_IMAGES = {
    Button.DEBUG: "debug",
    Button.PAUSE: "pause",
    Button.LEADERBOARD: "leaderboard",
}
_IMAGE_NAMES = (
    ["tile_hidden", "tile_revealed", "flag", "mine", "digits"]
    + list(_BUTTON_IMAGES.values())
    + [face.value for face in Face]
    + [f"number_{n}" for n in range(1, 9)]
)


class AssetError(RuntimeError):
    """An image needed by the game could not be loaded."""


def center_text(surface: pygame.Surface, rect_center: tuple[int, int]) -> pygame.Rect:
    """Rectangle that places *surface* centred on *rect_center*."""
    return surface.get_rect(center=rect_center)


def _font(path: str | PathLike[str], size: int, bold: bool = False, underline: bool = False) -> pygame.font.Font:
    font = pygame.font.Font(str(path), size)
    font.set_bold(bold)
    font.set_underline(underline)
    return font


def _load_images(directory: Path) -> dict[str, pygame.Surface]:
    images = {}
    for name in _IMAGE_NAMES:
        path = directory / f"{name}.png"
        try:
            images[name] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"Failed to load {path}: {exc}") from exc
    return images


def welcome_screen(config: GameConfig, font: str | PathLike[str]) -> str | None:
    """Ask for the player's name; returns it, or None if the window is closed."""
    width, height = config.window_size()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Welcome Window")
    pygame.key.start_text_input()

    title_font = _font(font, 24, bold=True, underline=True)
    prompt_font = _font(font, 20, bold=True)
    name_font = _font(font, 18, bold=True)

    title = title_font.render("WELCOME TO MINESWEEPER", True, WHITE)
    prompt = prompt_font.render("Enter your name:", True, WHITE)
    title_rect = center_text(title, (width // 2, height // 2 - 150))
    prompt_rect = center_text(prompt, (width // 2, height // 2 - 75))

    entry = NameEntry()
    ticker = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.MOUSEBUTTONDOWN:
                entry.click()
            elif event.type == pygame.TEXTINPUT:
                for char in event.text:
                    entry.type_char(ord(char))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_BACKSPACE:
                    entry.type_char(BACKSPACE)
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) and entry.can_submit():
                    return entry.name()

        name = name_font.render(entry.display(), True, YELLOW)
        screen.fill(BLUE)
        screen.blit(title, title_rect)
        screen.blit(prompt, prompt_rect)
        screen.blit(name, center_text(name, (width // 2, height // 2 - 45)))
        pygame.display.flip()
        ticker.tick(FRAME_RATE)


def _draw(screen: pygame.Surface, game: Game, images: dict[str, pygame.Surface]) -> None:
    screen.fill(WHITE)
    for tile in game.board:
        position = (tile.x * TILE_SIZE, tile.y * TILE_SIZE)
        screen.blit(images["tile_hidden" if tile.hidden else "tile_revealed"], position)
        if tile.flagged:
            screen.blit(images["flag"], position)
        if not tile.hidden:
            if tile.mine:
                screen.blit(images["mine"], position)
            elif tile.adjacent_mines:
                screen.blit(images[f"number_{tile.adjacent_mines}"], position)
        if game.debug and tile.mine:
            screen.blit(images["mine"], position)

    for button, position in game.layout.buttons.items():
        name = game.face().value if button is Button.FACE else _BUTTON_IMAGES[button]
        screen.blit(images[name], position)

    for digit, position in zip(game.clock_digits(), game.layout.clock_positions()):
        area = pygame.Rect(digit * DIGIT_WIDTH, 0, DIGIT_WIDTH, DIGIT_HEIGHT)
        screen.blit(images["digits"], position, area)


def play_game(config: GameConfig, font: str | PathLike[str]) -> None:
    """Run the game window until it is closed.

    Images are read from the ``images`` directory beside the font file.
    """
    images = _load_images(Path(font).parent / "images")
    game = Game(config)
    screen = pygame.display.set_mode(config.window_size())
    pygame.display.set_caption("Minesweeper")
    ticker = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    game.left_click(*event.pos)
                elif event.button == 3:
                    game.right_click(*event.pos)
        _draw(screen, game, images)
        pygame.display.flip()
        ticker.tick(FRAME_RATE)


def main(argv: list[str] | None = None) -> int:
    """Start the welcome screen, then the game once a name is entered."""
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play minesweeper.")
    parser.add_argument(
        "--files",
        type=Path,
        default=Path("files"),
        help="directory holding config.cfg, font.ttf and images/",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.files / "config.cfg")
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(config.rows)

    pygame.init()
    try:
        font = args.files / "font.ttf"
        try:
            pygame.font.Font(str(font), 24)
        except (OSError, pygame.error):
            print("Failed to load font")
            return FONT_ERROR
        if welcome_screen(config, font) is not None:
            play_game(config, font)
        return 0
    except AssetError as exc:
        print(exc)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())