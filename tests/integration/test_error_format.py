"""Integration tests for the HTTP presentation of error kinds."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import IntegrityError, OperationalError

pytestmark = pytest.mark.integration

REPO = "modules.products.repositories.django_repository.ProductDjangoRepository"


class TestStandardizedErrors:
    def test_not_found_has_kind_and_detail(self, api_client):
        response = api_client.get("/api/v1/products/12345/")
        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "not_found"
        assert "12345" in data["detail"]

    def test_store_outage_returns_503(self, api_client):
        with patch(f"{REPO}.get_available", side_effect=OperationalError("db down")):
            response = api_client.get("/api/v1/products/1/")
        assert response.status_code == 503
        assert response.json()["error"] == "store_failure"

    def test_constraint_violation_returns_409(self, api_client):
        with patch(f"{REPO}.create", side_effect=IntegrityError("constraint failed")):
            response = api_client.post(
                "/api/v1/products/", {"name": "Pen", "price": 1.5}, format="json"
            )
        assert response.status_code == 409
        assert response.json()["error"] == "store_failure"

    def test_unmapped_errors_use_drf_format(self, api_client):
        response = api_client.post(
            "/api/v1/products/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert "detail" in response.json()
        assert "error" not in response.json()
