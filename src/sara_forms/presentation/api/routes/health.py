from fastapi import APIRouter

from sara_forms.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:  # type: ignore[misc]
    return {"status": "ok", "service": settings.api_title}
