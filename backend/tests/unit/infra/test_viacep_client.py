"""Unit tests for the ViaCEP HTTP client (HTTP mocked with ``responses``)."""

from __future__ import annotations

import pytest
import requests
import responses
from cadastro.infra.viacep.client import ViaCepClient, ViaCepError

BASE_URL = "https://viacep.test/ws"


@pytest.fixture()
def client() -> ViaCepClient:
    return ViaCepClient(f"{BASE_URL}/", timeout=0.5)


def test_url_strips_trailing_slash(client):
    assert client.url_for("01310100") == f"{BASE_URL}/01310100/json/"


def test_lookup_returns_decoded_object(client, viacep):
    viacep.add(responses.GET, f"{BASE_URL}/01310100/json/", json={"cep": "01310-100"}, status=200)

    assert client.lookup("01310100") == {"cep": "01310-100"}
    assert len(viacep.calls) == 1


def test_lookup_wraps_timeouts(client, viacep):
    viacep.add(responses.GET, f"{BASE_URL}/01310100/json/", body=requests.Timeout("slow"))

    with pytest.raises(ViaCepError):
        client.lookup("01310100")


def test_lookup_wraps_http_errors(client, viacep):
    viacep.add(responses.GET, f"{BASE_URL}/0131010/json/", body="Bad Request", status=400)

    with pytest.raises(ViaCepError):
        client.lookup("0131010")


def test_lookup_rejects_non_json_body(client, viacep):
    viacep.add(responses.GET, f"{BASE_URL}/01310100/json/", body="<html></html>", status=200)

    with pytest.raises(ViaCepError):
        client.lookup("01310100")


def test_lookup_rejects_json_array(client, viacep):
    viacep.add(responses.GET, f"{BASE_URL}/01310100/json/", json=[1, 2], status=200)

    with pytest.raises(ViaCepError):
        client.lookup("01310100")


def test_lookup_passes_timeout_to_requests(viacep):
    calls = {}

    class RecordingSession(requests.Session):
        def get(self, url, **kwargs):
            calls.update(kwargs)
            return super().get(url, **kwargs)

    viacep.add(responses.GET, f"{BASE_URL}/01310100/json/", json={}, status=200)
    ViaCepClient(BASE_URL, timeout=2.5, session=RecordingSession()).lookup("01310100")

    assert calls["timeout"] == 2.5
