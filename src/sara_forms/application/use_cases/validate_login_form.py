import logging

from sara_forms.application import messages
from sara_forms.application.dtos.form_dtos import FormValidationResult, LoginFormDTO
from sara_forms.application.ports.metrics_port import MetricsPort
from sara_forms.application.use_cases._form_checks import collect_errors, run_checks
from sara_forms.domain.validation import is_valid_email, is_valid_password

logger = logging.getLogger(__name__)

_RULES = [
    ("email", is_valid_email, messages.EMAIL_INVALID),
    ("password", is_valid_password, messages.PASSWORD_TOO_SHORT),
]


class ValidateLoginFormUseCase:
    def __init__(self, metrics: MetricsPort | None = None) -> None:
        self.metrics = metrics

    def execute(self, form: LoginFormDTO) -> FormValidationResult:
        result = FormValidationResult(collect_errors(run_checks(lambda name: getattr(form, name), _RULES)))
        logger.debug("login form validated invalid_fields=%s", sorted(result.errors))
        if self.metrics:
            self.metrics.form_validated("login", result.is_valid)
        return result
