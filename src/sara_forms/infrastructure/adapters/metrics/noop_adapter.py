class NoopMetricsAdapter:
    def form_validated(self, form: str, valid: bool) -> None:
        pass

    def field_masked(self, kind: str, frozen: bool) -> None:
        pass
