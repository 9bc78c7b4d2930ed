from fastapi.testclient import TestClient

from sara_forms.config import settings
from sara_forms.presentation.api import dependencies
from sara_forms.presentation.api.main import app
from sara_forms.presentation.api.routes import forms as forms_routes

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok", "service": settings.api_title}


def test_validate_cpf_endpoint():
    resp = client.post("/v1/validate/cpf", json={"value": "529.982.247-25"})
    assert resp.status_code == 200
    assert resp.json() == {"field": "cpf", "valid": True}


def test_validate_required_endpoint_blank():
    resp = client.post("/v1/validate/required", json={"value": "   "})
    assert resp.json()["valid"] is False


def test_validate_unknown_field_404():
    assert client.post("/v1/validate/cnpj", json={"value": "1"}).status_code == 404


def test_format_cpf_endpoint():
    resp = client.post("/v1/cpf/format", json={"value": "52998224725"})
    assert resp.json() == {"formatted": "529.982.247-25"}


def test_mask_endpoint():
    resp = client.post("/v1/mask", json={"kind": "cpf", "value": "1234", "previous": ""})
    assert resp.json() == {"value": "123.4", "frozen": False}


def test_mask_endpoint_overflow():
    resp = client.post("/v1/mask", json={"kind": "phone", "value": "(11) 98765-43210", "previous": "(11) 98765-4321"})
    assert resp.json() == {"value": "(11) 98765-4321", "frozen": True}


def test_mask_endpoint_unknown_kind_422():
    assert client.post("/v1/mask", json={"kind": "cnpj", "value": "1"}).status_code == 422


def test_register_form_endpoint():
    resp = client.post("/v1/forms/register", json={"name": "Maria", "password": "12345678", "confirm_password": "12345678"})
    body = resp.json()
    assert resp.status_code == 200
    assert body["valid"] is False
    assert set(body["errors"]) == {"email", "cpf", "phone", "address"}


def test_login_form_endpoint_valid():
    resp = client.post("/v1/forms/login", json={"email": "maria@sara.app", "password": "12345678"})
    assert resp.json() == {"valid": True, "errors": {}, "cleaned": {}}


def test_profile_form_endpoint():
    resp = client.post("/v1/forms/profile", json={"name": "", "email": "maria@sara.app", "phone": "1", "address": "x"})
    assert resp.json()["errors"] == {"name": "Nome é obrigatório"}


def test_metrics_endpoint_counts_forms(monkeypatch):
    # routes may hold the no-op adapter when SARA_METRICS_ENABLED is off
    monkeypatch.setattr(forms_routes, "metrics", dependencies.prometheus)
    client.post("/v1/forms/login", json={"email": "x", "password": "y"})
    text = client.get("/metrics").text
    assert "sara_form_validations_total" in text
    assert 'form="login"' in text


def test_register_form_endpoint_returns_clean_cpf():
    resp = client.post(
        "/v1/forms/register",
        json={
            "name": "Maria",
            "email": "maria@sara.app",
            "cpf": "529.982.247-25",
            "phone": "(11) 98765-4321",
            "address": "Rua 1",
            "password": "12345678",
            "confirm_password": "12345678",
        },
    )
    assert resp.json() == {"valid": True, "errors": {}, "cleaned": {"cpf": "52998224725"}}


def test_fields_endpoint_lists_placeholders():
    items = {item["kind"]: item for item in client.get("/v1/fields").json()["items"]}
    assert set(items) == {"text", "email", "password", "cpf", "phone"}
    assert items["cpf"] == {"kind": "cpf", "placeholder": "000.000.000-00", "masked": True}
    assert items["text"]["placeholder"] is None
    assert items["email"]["masked"] is False
