"""Pure field validators used by the SARA forms.

Every predicate is total: any input, including ``None`` or malformed
punctuation, maps to ``True`` or ``False``. Choosing the message shown to the
user is left to the form layer.
"""
from __future__ import annotations

import re

from sara_forms.domain.value_objects.cpf import CPF_LENGTH, has_valid_check_digits, punctuate
from sara_forms.domain.value_objects.digit_stream import DigitStream

PASSWORD_MIN_LENGTH = 8

# Shape check only, kept loose on purpose: tightening it would reject
# addresses that were accepted before.
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else ""


def is_valid_email(text: object) -> bool:
    # fullmatch keeps "$" from accepting a trailing newline
    return _EMAIL_RE.fullmatch(_as_text(text)) is not None


def is_valid_cpf(text: object) -> bool:
    """Checks length, repeated digits and both mod-11 check digits."""
    stream = DigitStream(text)
    if len(stream) != CPF_LENGTH or stream.is_uniform():
        return False
    return has_valid_check_digits(stream)


def is_valid_password(text: object) -> bool:
    return len(_as_text(text)) >= PASSWORD_MIN_LENGTH


def is_required(text: object) -> bool:
    return len(_as_text(text).strip()) > 0


def format_cpf(text: object) -> str:
    """Formats a CPF as ``DDD.DDD.DDD-DD``.

    With fewer than 11 digits the bare digit stream is returned. Digits past
    the 11th are appended after the check digits unchanged.
    """
    stream = DigitStream(text)
    if len(stream) < CPF_LENGTH:
        return str(stream)
    return punctuate(stream)
