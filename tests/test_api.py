"""
Tests for the HTTP API and the service facade behind it.
"""

import logging

import pytest

from deckframe.core.errors import EngineError
from deckframe.services.structure_service import StructureService


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_compute_structure(client, payload):
    response = client.post("/api/structure", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["joists"]["size"] == "2x12"
    assert body["joists"]["spacing_in"] == 24
    assert body["beams"]["outer"]["position"] == "outer"
    assert body["beams"]["inner"]["style"] == "drop"
    assert len(body["posts"]) == 7
    assert body["metrics"]["total_cost"] == pytest.approx(2876.5)
    assert body["compliance"]["passes"] is False
    assert body["input"]["species_grade"] == "SPF #2"


def test_ledger_response_carries_ledger_support(client, payload):
    payload["attachment"] = "ledger"
    body = client.post("/api/structure", json=payload).json()
    assert body["beams"]["inner"]["style"] == "ledger"
    assert body["beams"]["inner"]["dimension"] == "2x12"


def test_engine_error_body(client, payload):
    payload["species_grade"] = "Cedar #2"
    response = client.post("/api/structure", json=payload)
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "SPECIES_UNKNOWN"
    assert "Cedar #2" in body["message"]


def test_span_exceeded_body(client, payload):
    payload["width_ft"] = 30
    response = client.post("/api/structure", json=payload)
    assert response.status_code == 422
    assert response.json()["code"] == "SPAN_EXCEEDED"


def test_invalid_spacing_rejected(client, payload):
    payload["forced_joist_spacing_in"] = 18
    response = client.post("/api/structure", json=payload)
    assert response.status_code == 422
    assert "detail" in response.json()


def test_list_species(client):
    species = client.get("/api/species").json()
    assert [s["name"] for s in species] == ["DF #1", "HF #2", "SP #2", "SPF #2"]
    assert {s["name"]: s["cost_multiplier"] for s in species}["SPF #2"] == 1.0


def test_list_decking(client):
    decking = {d["name"]: d["max_perpendicular_spacing_in"] for d in client.get("/api/decking").json()}
    assert decking == {"composite_1in": 16, "wood_5/4": 16, "wood_2x": 24}


def test_list_rules(client):
    rules = client.get("/api/rules").json()
    assert len(rules) == 8
    assert rules[0] == {"id": "site.surface_footing", "name": "Surface Footing Height"}


def test_service_logs_rejections(reference, payload, caplog):
    service = StructureService(reference)
    payload["width_ft"] = 30
    with caplog.at_level(logging.WARNING, logger="deckframe.services.structure_service"):
        with pytest.raises(EngineError):
            service.compute(payload)
    assert "SPAN_EXCEEDED" in caplog.text


def test_service_logs_success(reference, payload, caplog):
    service = StructureService(reference)
    with caplog.at_level(logging.INFO, logger="deckframe.services.structure_service"):
        result = service.compute(payload)
    assert result.joists.size == "2x12"
    assert "joists 2x12 @ 24 in" in caplog.text


def test_settings_feed_compliance_limits(monkeypatch, reference, payload):
    from deckframe.config import Settings

    monkeypatch.setenv("DECKFRAME_SPAN_MARGIN_RATIO", "0")
    limits = Settings().compliance_limits()
    assert limits.span_margin_ratio == 0
    assert StructureService(reference, limits).compute(payload).compliance.passes
