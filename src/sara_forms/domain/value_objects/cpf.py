from __future__ import annotations

from sara_forms.domain.value_objects.digit_stream import DigitStream

CPF_LENGTH = 11


def _check_digit(digits: str) -> int:
    # weights run from len+1 down to 2
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


def has_valid_check_digits(stream: str) -> bool:
    if len(stream) != CPF_LENGTH:
        return False
    if _check_digit(stream[:9]) != int(stream[9]):
        return False
    return _check_digit(stream[:10]) == int(stream[10])


def punctuate(stream: str) -> str:
    """``DDD.DDD.DDD-`` followed by every digit from the 10th on."""
    return f"{stream[:3]}.{stream[3:6]}.{stream[6:9]}-{stream[9:]}"


class CPF(str):
    """Value Object para CPF (11 dígitos, dígitos verificadores válidos)."""

    def __new__(cls, value: str) -> "CPF":
        stream = DigitStream(value)
        if stream.is_uniform() or not has_valid_check_digits(stream):
            raise ValueError("CPF inválido")
        return str.__new__(cls, stream)

    @property
    def formatted(self) -> str:
        return punctuate(self)
