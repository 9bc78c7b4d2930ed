from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from sara_forms.config import settings
from sara_forms.logging_config import configure_logging
from sara_forms.presentation.api.dependencies import prometheus
from sara_forms.presentation.api.routes.fields import router as fields_router
from sara_forms.presentation.api.routes.forms import router as forms_router
from sara_forms.presentation.api.routes.health import router as health_router
from sara_forms.presentation.api.routes.validation import router as validation_router

configure_logging(settings.log_level)

app = FastAPI(title=settings.api_title, version="0.1.0")
app.include_router(health_router)
app.include_router(validation_router)
app.include_router(forms_router)
app.include_router(fields_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(prometheus.registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
