from __future__ import annotations

from typing import Sequence, Tuple

import pygame


Color = Tuple[int, int, int]


def create_fullscreen_window() -> Tuple[pygame.Surface, pygame.Rect]:
    pygame.init()
    screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    pygame.mouse.set_visible(True)
    return screen, screen.get_rect()


def create_window(size: Sequence[int], caption: str = "") -> Tuple[pygame.Surface, pygame.Rect]:
    pygame.init()
    screen = pygame.display.set_mode((int(size[0]), int(size[1])))
    if caption:
        pygame.display.set_caption(caption)
    return screen, screen.get_rect()


def to_color(value: Sequence[int]) -> Color:
    r, g, b = (max(0, min(255, int(part))) for part in value[:3])
    return r, g, b
