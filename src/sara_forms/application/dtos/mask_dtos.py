from dataclasses import dataclass

from sara_forms.domain.value_objects.field_kind import FieldKind


@dataclass(frozen=True)
class MaskRequestDTO:
    kind: FieldKind | str
    value: str
    previous: str = ""


@dataclass(frozen=True)
class MaskResultDTO:
    value: str
    frozen: bool = False
