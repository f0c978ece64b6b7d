from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, Union

from .config import MAX_OPTIONS
from .logging_utils import SessionLogger

InputPort = Callable[[str], str]

_LETTER = re.compile(r"^[A-Z]$")

MULTI_INSTRUCTION = "Enter the letters of your choices separated by commas (e.g. A,C), or press Enter for the default:"
SINGLE_INSTRUCTION = "Enter the letter of your choice, or press Enter for the default:"


def option_letter(index: int) -> str:
    return chr(ord("A") + index)


def letter_index(token: str, option_count: int) -> Optional[int]:
    """Map one uppercase letter to an option index, or None when out of range."""
    if not _LETTER.match(token):
        return None
    index = ord(token) - ord("A")
    if index >= option_count:
        return None
    return index


def parse_selection(
    raw: str,
    option_count: int,
    allow_multiple: bool,
) -> Union[List[int], int, None]:
    """Parse operator input into indices.

    Multi-select returns indices in the order given (duplicates kept).
    Exclusive-select returns a single index. Any bad token yields None for
    the whole input.
    """

    if allow_multiple:
        indices: List[int] = []
        for token in raw.split(","):
            index = letter_index(token.strip().upper(), option_count)
            if index is None:
                return None
            indices.append(index)
        return indices

    return letter_index(raw.strip().upper(), option_count)


class SelectionPrompt:
    def __init__(self, logger: SessionLogger, read_line: InputPort = input) -> None:
        self.logger = logger
        self.read_line = read_line

    def select(
        self,
        prompt_text: str,
        options: Sequence[str],
        default_choice: str = "A",
        allow_multiple: bool = False,
    ) -> Union[List[int], int, None]:
        if not 1 <= len(options) <= MAX_OPTIONS:
            raise ValueError(f"Option lists must hold between 1 and {MAX_OPTIONS} entries, got {len(options)}")

        self.logger.log(prompt_text, "PROMPT")
        for i, label in enumerate(options):
            self.logger.log(f"{option_letter(i)}. {label}")
        self.logger.log(MULTI_INSTRUCTION if allow_multiple else SINGLE_INSTRUCTION, "PROMPT")

        raw = self.read_line("")
        if not raw.strip():
            raw = default_choice

        result = parse_selection(raw, len(options), allow_multiple)
        if result is None:
            last = option_letter(len(options) - 1)
            self.logger.log(f"Invalid input: {raw.strip()}. Please enter letters between A and {last}.", "ERROR")
        return result

    def confirm(self, prompt_text: str) -> bool:
        self.logger.log(prompt_text, "PROMPT")
        return self.read_line("").strip().lower() == "y"
