from __future__ import annotations

import logging

from sara_forms.application import messages
from sara_forms.application.dtos.form_dtos import FormValidationResult, RegisterFormDTO
from sara_forms.application.ports.metrics_port import MetricsPort
from sara_forms.application.use_cases._form_checks import collect_errors, run_checks
from sara_forms.domain.validation import (
    is_required,
    is_valid_cpf,
    is_valid_email,
    is_valid_password,
)
from sara_forms.domain.value_objects.cpf import CPF
from sara_forms.logging_config import mask_identifier

logger = logging.getLogger(__name__)

_RULES = [
    ("name", is_required, messages.NAME_REQUIRED),
    ("email", is_valid_email, messages.EMAIL_INVALID),
    ("cpf", is_valid_cpf, messages.CPF_INVALID),
    ("phone", is_required, messages.PHONE_REQUIRED),
    ("address", is_required, messages.ADDRESS_REQUIRED),
    ("password", is_valid_password, messages.PASSWORD_TOO_SHORT),
]


class ValidateRegisterFormUseCase:
    """Checks the sign-up form on submit, reporting every invalid field."""

    def __init__(self, metrics: MetricsPort | None = None) -> None:
        self.metrics = metrics

    def execute(self, form: RegisterFormDTO) -> FormValidationResult:
        checks = run_checks(lambda name: getattr(form, name), _RULES)
        checks.append(
            ("confirm_password", form.password == form.confirm_password, messages.PASSWORDS_DO_NOT_MATCH)
        )
        errors = collect_errors(checks)
        cleaned = {} if "cpf" in errors else {"cpf": str(CPF(form.cpf))}
        result = FormValidationResult(errors, cleaned)
        logger.debug(
            "register form validated cpf=%s invalid_fields=%s",
            mask_identifier(cleaned.get("cpf", ""), visible=2),
            sorted(result.errors),
        )
        if self.metrics:
            self.metrics.form_validated("register", result.is_valid)
        return result
