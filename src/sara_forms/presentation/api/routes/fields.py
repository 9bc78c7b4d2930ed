from fastapi import APIRouter

from sara_forms.domain.value_objects.field_kind import FieldKind

router = APIRouter(prefix="/v1", tags=["fields"])


@router.get("/fields")
def list_fields() -> dict[str, list[dict[str, object]]]:  # type: ignore[misc]
    """Input metadata a form needs to render each field kind."""
    items = [
        {"kind": kind.value, "placeholder": kind.placeholder, "masked": kind.is_masked}
        for kind in FieldKind
    ]
    return {"items": items}
