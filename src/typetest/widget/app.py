from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pygame

from typetest.config import load_config
from typetest.engine import TypingEngine
from typetest.keys import key_event_from_pygame, word_delete_mask
from typetest.passage import CORRECT, DEFAULT, INCORRECT, letter_state, normalize_passage
from typetest.ui.common import Color, create_fullscreen_window, create_window, to_color

logger = logging.getLogger(__name__)

# --- Tuning constants ---
TOP_MARGIN = 80
CURSOR_WIDTH = 4
CURSOR_NUDGE = 2


@dataclass
class VisualLine:
    start: int
    end: int
    y: int


def _wrap_words(widths: List[int], gap: int, max_width: int) -> List[Tuple[int, int]]:
    """Group consecutive words into lines no wider than ``max_width``.

    A word wider than the line gets a line to itself rather than being split.
    """
    if not widths:
        return []
    lines: List[Tuple[int, int]] = []
    line_start = 0
    line_width = 0
    for idx, width in enumerate(widths):
        if idx == line_start:
            line_width = width
            continue
        if line_width + gap + width <= max_width:
            line_width += gap + width
            continue
        lines.append((line_start, idx))
        line_start = idx
        line_width = width
    lines.append((line_start, len(widths)))
    return lines


def _cursor_x_offset(letter_widths: List[int], letter_index: int) -> int:
    # Past the last letter the bar sits on that letter's right edge.
    return sum(letter_widths[: max(0, letter_index)])


class ChallengeApp:
    def __init__(
        self,
        *,
        screen: Optional[pygame.Surface] = None,
        screen_rect: Optional[pygame.Rect] = None,
        clock: Optional[pygame.time.Clock] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.config = config or load_config()
        display = self.config["display"]
        if screen is None:
            if display.get("fullscreen"):
                self.screen, self.screen_rect = create_fullscreen_window()
            else:
                self.screen, self.screen_rect = create_window(display["window_size"], "Typing test")
        else:
            self.screen = screen
            self.screen_rect = screen_rect or screen.get_rect()
        self.clock = clock or pygame.time.Clock()

        self.passage = normalize_passage(str(self.config["challenge"]["passage"]))
        self.word_delete_mods = word_delete_mask(str(self.config["keys"]["word_delete_modifier"]))
        self.engine = TypingEngine(self.passage)

        self.font = pygame.font.SysFont("sans", int(display["font_size"]))
        self.word_gap = int(display["word_gap"])
        self.line_gap = int(display["line_gap"])
        column_width = max(1, int(self.screen_rect.width * float(display["width_ratio"])))
        self.text_rect = pygame.Rect(
            self.screen_rect.centerx - column_width // 2,
            self.screen_rect.top + TOP_MARGIN,
            column_width,
            self.screen_rect.height - TOP_MARGIN * 2,
        )

        colors = self.config["colors"]
        self.background: Color = to_color(colors["background"])
        self.cursor_color: Color = to_color(colors["cursor"])
        self.state_colors: Dict[str, Color] = {
            DEFAULT: to_color(colors["default"]),
            CORRECT: to_color(colors["correct"]),
            INCORRECT: to_color(colors["incorrect"]),
        }
        self.glyph_cache: Dict[Tuple[str, str], pygame.Surface] = {}
        pygame.key.set_repeat(400, 30)
        logger.info("challenge loaded: %d words", len(self.engine.words))

    def _restart(self) -> None:
        self.engine = TypingEngine(self.passage)
        logger.info("challenge restarted")

    def _glyph(self, char: str, state: str) -> pygame.Surface:
        key = (char, state)
        surf = self.glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(char, True, self.state_colors[state])
            self.glyph_cache[key] = surf
        return surf

    def _letter_widths(self, word_index: int) -> List[int]:
        return [self.font.size(letter.text)[0] for letter in self.engine.words[word_index].letters]

    def _build_visual_lines(self, word_widths: List[int]) -> List[VisualLine]:
        step = self.font.get_height() + self.line_gap
        ranges = _wrap_words(word_widths, self.word_gap, self.text_rect.width)
        return [
            VisualLine(start=start, end=end, y=self.text_rect.top + idx * step)
            for idx, (start, end) in enumerate(ranges)
        ]

    def _render(self) -> None:
        self.screen.fill(self.background)

        letter_widths = [self._letter_widths(idx) for idx in range(len(self.engine.words))]
        word_widths = [sum(widths) for widths in letter_widths]
        cursor = self.engine.cursor
        cursor_pos: Optional[Tuple[int, int]] = None

        for line in self._build_visual_lines(word_widths):
            x = self.text_rect.left
            for word_index in range(line.start, line.end):
                word = self.engine.words[word_index]
                widths = letter_widths[word_index]
                if word_index == cursor.word_index:
                    cursor_pos = (x + _cursor_x_offset(widths, cursor.letter_index), line.y)
                letter_x = x
                for letter, width in zip(word.letters, widths):
                    self.screen.blit(self._glyph(letter.text, letter_state(letter)), (letter_x, line.y))
                    letter_x += width
                x += word_widths[word_index] + self.word_gap

        if cursor_pos is not None:
            cursor_x, cursor_y = cursor_pos
            pygame.draw.rect(
                self.screen,
                self.cursor_color,
                (cursor_x - CURSOR_NUDGE, cursor_y, CURSOR_WIDTH, self.font.get_height()),
            )

        pygame.display.flip()

    def run(self, *, quit_on_exit: bool = True) -> None:
        running = True
        self._render()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_TAB:
                        self._restart()
                    else:
                        key_event = key_event_from_pygame(event, word_delete_mods=self.word_delete_mods)
                        if key_event is not None:
                            self.engine.handle_key(key_event)

            self._render()
            self.clock.tick(60)

        if quit_on_exit:
            pygame.quit()


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=str(config["logging"]["level"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ChallengeApp(config=config).run(quit_on_exit=True)
    except Exception:
        logger.exception("typing test crashed")
        pygame.quit()


def run_embedded(screen: pygame.Surface, screen_rect: pygame.Rect, clock: pygame.time.Clock) -> None:
    ChallengeApp(screen=screen, screen_rect=screen_rect, clock=clock).run(quit_on_exit=False)


if __name__ == "__main__":
    main()
