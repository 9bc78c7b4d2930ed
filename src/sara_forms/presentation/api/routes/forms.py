from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from sara_forms.application.dtos.form_dtos import (
    FormValidationResult,
    LoginFormDTO,
    ProfileFormDTO,
    RegisterFormDTO,
)
from sara_forms.application.use_cases.validate_login_form import ValidateLoginFormUseCase
from sara_forms.application.use_cases.validate_profile_form import ValidateProfileFormUseCase
from sara_forms.application.use_cases.validate_register_form import ValidateRegisterFormUseCase
from sara_forms.presentation.api.dependencies import metrics

router = APIRouter(prefix="/v1/forms", tags=["forms"])


class RegisterBody(BaseModel):
    name: str = ""
    email: str = ""
    cpf: str = ""
    phone: str = ""
    address: str = ""
    password: str = ""
    confirm_password: str = ""


class LoginBody(BaseModel):
    email: str = ""
    password: str = ""


class ProfileBody(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


def _to_response(result: FormValidationResult) -> dict[str, object]:
    return {"valid": result.is_valid, "errors": result.errors, "cleaned": result.cleaned}


@router.post("/register")
def register(body: RegisterBody) -> dict[str, object]:  # type: ignore[misc]
    uc = ValidateRegisterFormUseCase(metrics=metrics)
    return _to_response(uc.execute(RegisterFormDTO(**body.model_dump())))


@router.post("/login")
def login(body: LoginBody) -> dict[str, object]:  # type: ignore[misc]
    uc = ValidateLoginFormUseCase(metrics=metrics)
    return _to_response(uc.execute(LoginFormDTO(**body.model_dump())))


@router.post("/profile")
def profile(body: ProfileBody) -> dict[str, object]:  # type: ignore[misc]
    uc = ValidateProfileFormUseCase(metrics=metrics)
    return _to_response(uc.execute(ProfileFormDTO(**body.model_dump())))
