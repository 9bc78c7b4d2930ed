from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter


class PrometheusMetricsAdapter:
    """MetricsPort backed by prometheus_client counters on a private registry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self._validations = Counter(
            "sara_form_validations",
            "Form submissions validated",
            ["form", "valid"],
            registry=self.registry,
        )
        self._masks = Counter(
            "sara_mask_operations",
            "Keystrokes passed through a field mask",
            ["kind", "frozen"],
            registry=self.registry,
        )

    def form_validated(self, form: str, valid: bool) -> None:
        self._validations.labels(form=form, valid=str(valid).lower()).inc()

    def field_masked(self, kind: str, frozen: bool) -> None:
        self._masks.labels(kind=kind, frozen=str(frozen).lower()).inc()
