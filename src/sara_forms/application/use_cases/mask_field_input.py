from __future__ import annotations

import logging

from sara_forms.application.dtos.mask_dtos import MaskRequestDTO, MaskResultDTO
from sara_forms.application.ports.metrics_port import MetricsPort
from sara_forms.domain.masking import is_overflow, mask_incremental
from sara_forms.domain.value_objects.field_kind import FieldKind

logger = logging.getLogger(__name__)


class MaskFieldInputUseCase:
    """Per-keystroke masking for a form field.

    Holds no field state: the caller passes the last accepted value and stores
    the returned one.
    """

    def __init__(self, metrics: MetricsPort | None = None) -> None:
        self.metrics = metrics

    def execute(self, req: MaskRequestDTO) -> MaskResultDTO:
        kind = FieldKind(req.kind)
        frozen = is_overflow(kind, req.value)
        value = mask_incremental(kind, req.value, req.previous)
        if frozen:
            logger.debug("%s field overflow, keeping previous value", kind.value)
        if self.metrics:
            self.metrics.field_masked(kind.value, frozen)
        return MaskResultDTO(value=value, frozen=frozen)
