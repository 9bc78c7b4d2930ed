from __future__ import annotations

from enum import Enum


class FieldKind(str, Enum):
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    CPF = "cpf"
    PHONE = "phone"

    @property
    def placeholder(self) -> str | None:
        return _PLACEHOLDERS.get(self)

    @property
    def is_masked(self) -> bool:
        return self in (FieldKind.CPF, FieldKind.PHONE)


_PLACEHOLDERS = {
    FieldKind.EMAIL: "seu@email.com",
    FieldKind.CPF: "000.000.000-00",
    FieldKind.PHONE: "(11) 99999-9999",
    FieldKind.PASSWORD: "••••••••",
}
