import logging

from sara_forms.application import messages
from sara_forms.application.dtos.form_dtos import FormValidationResult, ProfileFormDTO
from sara_forms.application.ports.metrics_port import MetricsPort
from sara_forms.application.use_cases._form_checks import collect_errors, run_checks
from sara_forms.domain.validation import is_required, is_valid_email

logger = logging.getLogger(__name__)

# CPF is read-only on the profile screen, so it is not re-validated here.
_RULES = [
    ("name", is_required, messages.NAME_REQUIRED),
    ("email", is_valid_email, messages.EMAIL_INVALID),
    ("phone", is_required, messages.PHONE_REQUIRED),
    ("address", is_required, messages.ADDRESS_REQUIRED),
]


class ValidateProfileFormUseCase:
    def __init__(self, metrics: MetricsPort | None = None) -> None:
        self.metrics = metrics

    def execute(self, form: ProfileFormDTO) -> FormValidationResult:
        result = FormValidationResult(collect_errors(run_checks(lambda name: getattr(form, name), _RULES)))
        logger.debug("profile form validated invalid_fields=%s", sorted(result.errors))
        if self.metrics:
            self.metrics.form_validated("profile", result.is_valid)
        return result
