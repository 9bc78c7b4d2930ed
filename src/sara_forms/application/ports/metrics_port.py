from typing import Protocol


class MetricsPort(Protocol):
    """Records use case outcomes. Implementations must not raise."""

    def form_validated(self, form: str, valid: bool) -> None: ...
    def field_masked(self, kind: str, frozen: bool) -> None: ...
