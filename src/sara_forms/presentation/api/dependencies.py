from __future__ import annotations

from sara_forms.application.ports.metrics_port import MetricsPort
from sara_forms.config import settings
from sara_forms.infrastructure.adapters.metrics.noop_adapter import NoopMetricsAdapter
from sara_forms.infrastructure.adapters.metrics.prometheus_adapter import PrometheusMetricsAdapter

# Shared by every route module
prometheus = PrometheusMetricsAdapter()
metrics: MetricsPort = prometheus if settings.metrics_enabled else NoopMetricsAdapter()
