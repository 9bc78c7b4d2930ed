from __future__ import annotations

import re

# ASCII only: fullwidth or Arabic-Indic digits are not part of a CPF or phone
_NON_DIGIT = re.compile(r"[^0-9]")


def digits_only(text: object) -> str:
    """Strips every non-digit character. Non-str input yields an empty stream."""
    if not isinstance(text, str):
        return ""
    return _NON_DIGIT.sub("", text)


class DigitStream(str):
    """Value Object for the numeric-only form of a field's text."""

    def __new__(cls, text: object) -> "DigitStream":
        return str.__new__(cls, digits_only(text))

    def is_uniform(self) -> bool:
        return len(self) > 0 and self == self[0] * len(self)
