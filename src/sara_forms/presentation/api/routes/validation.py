from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from sara_forms.application.dtos.mask_dtos import MaskRequestDTO
from sara_forms.application.use_cases.mask_field_input import MaskFieldInputUseCase
from sara_forms.domain.validation import (
    format_cpf,
    is_required,
    is_valid_cpf,
    is_valid_email,
    is_valid_password,
)
from sara_forms.presentation.api.dependencies import metrics

router = APIRouter(prefix="/v1", tags=["validation"])

_VALIDATORS: dict[str, Callable[[object], bool]] = {
    "email": is_valid_email,
    "cpf": is_valid_cpf,
    "password": is_valid_password,
    "required": is_required,
}


class ValueBody(BaseModel):
    value: str = ""


class MaskBody(BaseModel):
    kind: str
    value: str = ""
    previous: str = ""


@router.post("/validate/{field}")
def validate_field(field: str, body: ValueBody) -> dict[str, object]:  # type: ignore[misc]
    validator = _VALIDATORS.get(field)
    if validator is None:
        raise HTTPException(status_code=404, detail=f"Unknown validator: {field}")
    return {"field": field, "valid": validator(body.value)}


@router.post("/cpf/format")
def format_cpf_endpoint(body: ValueBody) -> dict[str, str]:  # type: ignore[misc]
    return {"formatted": format_cpf(body.value)}


@router.post("/mask")
def mask_endpoint(body: MaskBody) -> dict[str, object]:  # type: ignore[misc]
    uc = MaskFieldInputUseCase(metrics=metrics)
    try:
        result = uc.execute(MaskRequestDTO(kind=body.kind, value=body.value, previous=body.previous))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {"value": result.value, "frozen": result.frozen}
