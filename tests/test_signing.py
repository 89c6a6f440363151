"""Origin resolution, token generation and header signing."""

import hashlib

import pytest

from peakmails import (
    BACKEND_ORIGIN,
    OriginUnavailableError,
    PeakmailsClient,
    PeakmailsLegacyClient,
    generate_token,
    origin_from_url,
    static_origin,
)
from peakmails.client.auth import build_headers


OPTIONS = {"apiKey": "test-key", "domain": "shop.example.com", "projectId": "proj-1"}


def test_secret_key_resolves_backend_origin():
    """The backend sentinel wins over any configured provider."""
    client = PeakmailsClient({**OPTIONS, "secretKey": "s3cret", "originProvider": lambda: "https://a.example"})
    assert client.resolve_origin() == BACKEND_ORIGIN == "backend-implementation"


def test_origin_provider_used_without_secret_key():
    client = PeakmailsClient({**OPTIONS, "originProvider": lambda: "https://shop.example.com"})
    assert client.resolve_origin() == "https://shop.example.com"


def test_origin_unavailable_without_secret_or_provider():
    client = PeakmailsClient(OPTIONS)
    with pytest.raises(OriginUnavailableError):
        client.resolve_origin()


@pytest.mark.parametrize("value", [None, "", 42])
def test_origin_unavailable_when_provider_returns_nothing(value):
    client = PeakmailsClient({**OPTIONS, "originProvider": lambda: value})
    with pytest.raises(OriginUnavailableError):
        client.resolve_origin()


def test_provider_failure_is_chained():
    def broken():
        raise RuntimeError("no window")

    client = PeakmailsClient({**OPTIONS, "originProvider": broken})
    with pytest.raises(OriginUnavailableError) as ei:
        client.resolve_origin()
    assert isinstance(ei.value.__cause__, RuntimeError)


def test_generate_token_is_deterministic():
    first = generate_token("key", "https://a.example")
    assert first == generate_token("key", "https://a.example")
    assert first == hashlib.sha256(b"keyhttps://a.example").hexdigest()
    assert len(first) == 64


def test_generate_token_changes_with_inputs():
    base = generate_token("key", "https://a.example")
    assert generate_token("key2", "https://a.example") != base
    assert generate_token("key", "https://b.example") != base


def test_client_token_binds_api_key():
    client = PeakmailsClient(OPTIONS)
    assert client.generate_token("https://a.example") == generate_token("test-key", "https://a.example")


def test_signed_headers():
    client = PeakmailsClient({**OPTIONS, "secretKey": "s3cret"})
    headers = client.http_client._headers()

    assert headers["Authorization"] == "Bearer test-key"
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Peakmails-Domain"] == "shop.example.com"
    assert headers["X-Peakmails-Project-Id"] == "proj-1"
    assert headers["X-Peakmails-Origin"] == BACKEND_ORIGIN
    assert headers["X-Peakmails-Csrf-Token"] == generate_token("test-key", BACKEND_ORIGIN)


def test_legacy_headers_skip_signing():
    """Legacy profile never resolves an origin and sends only bearer and domain headers."""
    client = PeakmailsLegacyClient({"apiKey": "test-key", "domain": "shop.example.com"})
    headers = client.http_client._headers()

    assert headers == {
        "Authorization": "Bearer test-key",
        "Content-Type": "application/json",
        "X-Peakmails-Domain": "shop.example.com",
    }


def test_build_headers_omits_empty_values():
    headers = build_headers("k", "d", project_id=None, origin="", token=None)
    assert "X-Peakmails-Project-Id" not in headers
    assert "X-Peakmails-Origin" not in headers
    assert "X-Peakmails-Csrf-Token" not in headers


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://shop.example.com/cart?x=1", "https://shop.example.com"),
        ("http://localhost:3000/", "http://localhost:3000"),
        ("https://user:pw@Shop.Example.com:8443/a", "https://shop.example.com:8443"),
        ("https://shop.example.com:443/x", "https://shop.example.com"),
        ("http://shop.example.com:80/", "http://shop.example.com"),
        ("HTTPS://shop.example.com:443", "https://shop.example.com"),
        ("http://shop.example.com:8080/", "http://shop.example.com:8080"),
        ("https://shop.example.com:80/", "https://shop.example.com:80"),
    ],
)
def test_origin_from_url(url, expected):
    assert origin_from_url(url) == expected


def test_origin_from_url_rejects_relative():
    with pytest.raises(ValueError):
        origin_from_url("/cart")


def test_static_origin_provider():
    client = PeakmailsClient({**OPTIONS, "originProvider": static_origin("https://shop.example.com/page")})
    assert client.resolve_origin() == "https://shop.example.com"
