"""
Validated integer input from the terminal
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

# ASCII digits only: no underscores, no full-width or other script digits
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed value or the reason it was rejected"""
    value: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(text: str, minimum: int, maximum: int) -> ParseResult:
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return ParseResult(error="Invalid input. Please enter a valid number")

    value = int(text)
    if value < minimum or value > maximum:
        return ParseResult(error=f"Please enter a number between {minimum} and {maximum}")

    return ParseResult(value=value)


def read_int(
    prompt: str,
    minimum: int,
    maximum: int,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """Ask until the player types a whole number in [minimum, maximum]"""
    while True:
        result = parse_int(input_func(prompt), minimum, maximum)
        if result.ok:
            return result.value
        output(f"❌ {result.error}.")
