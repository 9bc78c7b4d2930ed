"""Incremental input masks for CPF and phone fields.

Each call recomputes the display value from the full current text. When the
digit stream grows past the field's capacity the previous accepted value is
returned untouched, so extra keystrokes are dropped without an error.
"""
from __future__ import annotations

from sara_forms.domain.value_objects.digit_stream import DigitStream
from sara_forms.domain.value_objects.field_kind import FieldKind

MAX_MASKED_DIGITS = 11


def _apply(stream: str, separators: list[tuple[int, str]]) -> str:
    # (position, punctuation): inserted after `position` digits, only when a
    # digit follows it
    out = []
    start = 0
    for position, punct in separators:
        if len(stream) <= position:
            break
        out.append(stream[start:position])
        out.append(punct)
        start = position
    out.append(stream[start:])
    return "".join(out)


def mask_cpf(current: str, previous: str = "") -> str:
    stream = DigitStream(current)
    if len(stream) > MAX_MASKED_DIGITS:
        return previous
    return _apply(stream, [(3, "."), (6, "."), (9, "-")])


def mask_phone(current: str, previous: str = "") -> str:
    stream = DigitStream(current)
    if len(stream) > MAX_MASKED_DIGITS:
        return previous
    if len(stream) <= 2:
        return str(stream)
    return "(" + _apply(stream, [(2, ") "), (7, "-")])


_MASKS = {
    FieldKind.CPF: mask_cpf,
    FieldKind.PHONE: mask_phone,
}


def is_overflow(kind: FieldKind | str, current: str) -> bool:
    return FieldKind(kind).is_masked and len(DigitStream(current)) > MAX_MASKED_DIGITS


def mask_incremental(kind: FieldKind | str, current: str, previous: str = "") -> str:
    """Returns the display value for ``current`` typed into a ``kind`` field.

    Unmasked kinds (text, email, password) pass ``current`` through. Raises
    ``ValueError`` for an unknown kind.
    """
    mask = _MASKS.get(FieldKind(kind))
    if mask is None:
        return current
    return mask(current, previous)
