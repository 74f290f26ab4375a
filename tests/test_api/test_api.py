"""Tests for API endpoints."""

from __future__ import annotations

import io

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image
from pydantic import ValidationError

from nineblock.engine.quilt import render
from nineblock.identicon import etag, identicon_code
from nineblock.main import app
from nineblock.models.responses import HealthResponse


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["patches"] == 16
    assert data["identicon_version"] == "1"


def test_identicon_by_code():
    response = client.get("/api/identicon", params={"code": 12345, "size": 48})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["etag"] == etag(12345, 48)
    assert "max-age=86400" in response.headers["cache-control"]

    img = Image.open(io.BytesIO(response.content))
    assert img.size == (48, 48)
    assert np.array_equal(np.asarray(img), render(12345, 48).pixels)


def test_identicon_negative_code():
    a = client.get("/api/identicon", params={"code": -1, "size": 30})
    b = client.get("/api/identicon", params={"code": 0xFFFFFFFF, "size": 30})
    assert a.status_code == 200
    assert a.content == b.content
    assert a.headers["etag"] == b.headers["etag"]


def test_identicon_default_size():
    response = client.get("/api/identicon", params={"code": 7})
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (64, 64)


def test_identicon_not_modified():
    tag = etag(99, 32)
    response = client.get(
        "/api/identicon",
        params={"code": 99, "size": 32},
        headers={"If-None-Match": tag},
    )
    assert response.status_code == 304
    assert response.content == b""
    assert response.headers["etag"] == tag


def test_identicon_stale_etag_renders():
    response = client.get(
        "/api/identicon",
        params={"code": 99, "size": 32},
        headers={"If-None-Match": etag(98, 32)},
    )
    assert response.status_code == 200


def test_identicon_zero_size():
    response = client.get("/api/identicon", params={"code": 1, "size": 0})
    assert response.status_code == 400
    assert "positive" in response.json()["detail"]


def test_identicon_too_large():
    response = client.get("/api/identicon", params={"code": 1, "size": 100000})
    assert response.status_code == 422


def test_identicon_missing_code():
    response = client.get("/api/identicon")
    assert response.status_code == 422


def test_identicon_by_identity():
    response = client.get("/api/identicon/alice@example.com", params={"size": 30})
    assert response.status_code == 200
    code = identicon_code("alice@example.com")
    assert response.headers["etag"] == etag(code, 30)
    img = Image.open(io.BytesIO(response.content))
    assert np.array_equal(np.asarray(img), render(code, 30).pixels)


def test_decode_endpoint():
    response = client.get("/api/decode", params={"code": 0})
    assert response.status_code == 200
    data = response.json()
    assert data["code"] == 0
    assert data["middle_patch"] == 0
    assert data["fill"] == [0, 0, 0]
    assert data["stroke"] is None
    assert data["etag"] == 'W/"0@64v1"'


def test_decode_endpoint_low_contrast():
    code = 0xF8000000 | (0x1F << 21) | (0x1F << 16)
    response = client.get("/api/decode", params={"code": code, "size": 16})
    data = response.json()
    assert data["fill"] == [248, 248, 248]
    assert data["stroke"] == [7, 7, 7]
    assert data["side_turn"] == 2


@pytest.mark.parametrize("size", [0, -8])
def test_decode_endpoint_rejects_bad_size(size):
    response = client.get("/api/decode", params={"code": 0, "size": size})
    assert response.status_code == 400
    assert "positive" in response.json()["detail"]


def test_health_response_requires_versions():
    with pytest.raises(ValidationError):
        HealthResponse(status="ok", patches=16)
