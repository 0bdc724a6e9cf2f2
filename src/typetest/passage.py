from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

DEFAULT = "default"
CORRECT = "correct"
INCORRECT = "incorrect"


@dataclass
class Letter:
    text: str
    populated: bool = False
    error: bool = False
    errored_text_at_the_end: bool = False


@dataclass
class Word:
    text: str
    letters: List[Letter] = field(default_factory=list)
    # Aggregate flags, kept at False.
    error: bool = False
    populated: bool = False


Passage = List[Word]


def normalize_passage(text: str) -> str:
    return " ".join(text.split())


def build_passage(text: str) -> Passage:
    """Split a challenge string on single spaces into fresh, untyped words.

    Empty words (empty input, leading/trailing or doubled spaces) are
    rejected; run free-form text through ``normalize_passage`` first.
    """
    words: Passage = []
    for index, raw in enumerate(text.split(" ")):
        if not raw:
            raise ValueError(f"empty word at position {index} in passage {text!r}")
        words.append(Word(text=raw, letters=[Letter(text=char) for char in raw]))
    return words


def letter_state(letter: Letter) -> str:
    if letter.error or letter.errored_text_at_the_end:
        return INCORRECT
    if letter.populated:
        return CORRECT
    return DEFAULT
