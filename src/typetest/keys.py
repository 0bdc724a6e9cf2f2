from __future__ import annotations

import sys
from typing import Optional

import pygame

from typetest.engine import BACKSPACE, SPACE, KeyEvent

# Alt stays out: AltGr layouts report it on ordinary printable characters.
_SHORTCUT_MODS = pygame.KMOD_CTRL | pygame.KMOD_META | pygame.KMOD_GUI


def word_delete_mask(name: str, platform: Optional[str] = None) -> int:
    """Modifier bitmask that turns Backspace into whole-word delete."""
    name = name.lower()
    if name == "auto":
        name = "ctrl" if (platform or sys.platform) == "win32" else "alt"
    if name == "alt":
        return pygame.KMOD_ALT
    if name == "ctrl":
        return pygame.KMOD_CTRL
    raise ValueError(f"unknown word delete modifier: {name!r}")


def key_event_from_pygame(event: pygame.event.Event, *, word_delete_mods: int = pygame.KMOD_ALT) -> Optional[KeyEvent]:
    if event.type != pygame.KEYDOWN:
        return None
    mods = getattr(event, "mod", 0)
    if event.key == pygame.K_SPACE:
        return KeyEvent(SPACE)
    if event.key == pygame.K_BACKSPACE:
        return KeyEvent(BACKSPACE, alt_modifier=bool(mods & word_delete_mods))
    if mods & _SHORTCUT_MODS:
        return None
    char = getattr(event, "unicode", "")
    if len(char) == 1 and char.isprintable():
        return KeyEvent(char)
    return None
