from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from typetest.passage import Letter, Passage, Word, build_passage

logger = logging.getLogger(__name__)

SPACE = "Space"
BACKSPACE = "Backspace"


@dataclass(frozen=True)
class KeyEvent:
    character: str
    alt_modifier: bool = False


@dataclass(frozen=True)
class Cursor:
    word_index: int = 0
    letter_index: int = 0


class TypingEngine:
    """Typing progress over a fixed passage.

    Owns the word/letter state and the cursor. ``handle_key`` consumes one
    normalized key event and returns whether it was accepted; rejected input
    leaves the state untouched.
    """

    def __init__(self, passage: Union[str, Passage]) -> None:
        if isinstance(passage, str):
            passage = build_passage(passage)
        if not passage:
            raise ValueError("passage must contain at least one word")
        self.words: Passage = passage
        self.cursor = Cursor()

    @property
    def current_word(self) -> Word:
        return self.words[self.cursor.word_index]

    @property
    def current_letter(self) -> Optional[Letter]:
        letters = self.current_word.letters
        if self.cursor.letter_index < len(letters):
            return letters[self.cursor.letter_index]
        return None

    @property
    def is_at_end_of_word(self) -> bool:
        return self.cursor.letter_index >= len(self.current_word.letters)

    @property
    def is_at_start_of_word(self) -> bool:
        return self.cursor.letter_index == 0

    @property
    def is_on_last_word(self) -> bool:
        return self.cursor.word_index >= len(self.words) - 1

    @property
    def is_finished(self) -> bool:
        return self.is_on_last_word and self.is_at_end_of_word

    def handle_key(self, event: KeyEvent) -> bool:
        key = event.character
        if key == SPACE or key == " ":
            accepted = self._advance_word()
        elif len(key) == 1:
            accepted = self._type_character(key)
        elif key == BACKSPACE:
            if event.alt_modifier:
                accepted = self._delete_word()
            else:
                accepted = self._delete_letter()
        else:
            accepted = False
        if not accepted:
            logger.debug("ignored key %r at %s", key, self.cursor)
        return accepted

    def _move(self, word_index: int, letter_index: int) -> None:
        self.cursor = Cursor(word_index, letter_index)

    def _advance_word(self) -> bool:
        if not self.is_at_end_of_word or self.is_on_last_word:
            return False
        self._move(self.cursor.word_index + 1, 0)
        logger.debug("advanced to word %d", self.cursor.word_index)
        return True

    def _type_character(self, char: str) -> bool:
        word = self.current_word
        letter = self.current_letter
        if letter is None:
            word.letters.append(
                Letter(text=char, populated=True, error=True, errored_text_at_the_end=True)
            )
        else:
            letter.populated = True
            letter.error = letter.text != char
        self._move(self.cursor.word_index, self.cursor.letter_index + 1)
        return True

    def _step_back_to_previous_word(self) -> bool:
        if self.cursor.word_index == 0:
            return False
        previous = self.cursor.word_index - 1
        self._move(previous, len(self.words[previous].letters))
        logger.debug("returned to word %d", previous)
        return True

    def _delete_word(self) -> bool:
        word = self.current_word
        # Overflow letters go regardless of where the cursor sits in the word.
        word.letters[:] = [letter for letter in word.letters if not letter.errored_text_at_the_end]
        for letter in word.letters:
            letter.populated = False
            letter.error = False
        if self.is_at_start_of_word:
            return self._step_back_to_previous_word()
        self._move(self.cursor.word_index, 0)
        return True

    def _delete_letter(self) -> bool:
        if self.is_at_start_of_word:
            return self._step_back_to_previous_word()
        letters: List[Letter] = self.current_word.letters
        prev_index = self.cursor.letter_index - 1
        if prev_index >= len(letters):
            return False
        prev_letter = letters[prev_index]
        if prev_letter.errored_text_at_the_end:
            letters.pop(prev_index)
        else:
            prev_letter.populated = False
            prev_letter.error = False
        self._move(self.cursor.word_index, prev_index)
        return True
