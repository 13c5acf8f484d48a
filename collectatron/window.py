"""Showing a game in a window and feeding it keyboard input."""

from __future__ import annotations

import sys

import pygame

from collectatron.game import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
    GameOver,
    window_size,
)
from collectatron.image import Image

_FRAME_RATE = 60


def to_surface(image: Image) -> pygame.Surface:
    """Copy an image into an opaque RGB surface; the top byte is ignored."""
    data = image.pixels.tobytes()
    if sys.byteorder == "little":
        red, green, blue = data[2::4], data[1::4], data[0::4]
    else:
        red, green, blue = data[1::4], data[2::4], data[3::4]
    rgb = bytearray(len(red) * 3)
    rgb[0::3] = red
    rgb[1::3] = green
    rgb[2::3] = blue
    surface = pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")
    return surface.copy()


def translate_key(event_key: int) -> int:
    """Turn a pygame key into the key code the game understands."""
    table = {
        pygame.K_ESCAPE: KEY_ESCAPE,
        pygame.K_UP: KEY_UP,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    return table.get(event_key, event_key)


def run(game: Game, title: str | None = None) -> int:
    """Open a window and play until the game ends; return its exit status."""
    width, height = window_size(game.map)
    if title is None:
        fitted = game.map.height < 10 and game.map.width < 19
        title = "window dinamic" if fitted else "window big"
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        background: pygame.Surface | None = None
        drawn_at = -1
        players: dict[str, pygame.Surface] = {}
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.close()
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(translate_key(event.key))
            game.tick()
            if background is None or drawn_at != game.collected:
                background = to_surface(game.scene.background)
                drawn_at = game.collected
            screen.fill((0, 0, 0))
            screen.blit(background, (0, 0))
            name = game.player_sprite()
            if name is not None:
                if name not in players:
                    players[name] = to_surface(game.scene.sprites[name])
                screen.blit(players[name], game.player_position())
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    except GameOver as over:
        sys.stdout.write(over.message)
        sys.stdout.flush()
        return over.status
    finally:
        pygame.quit()