"""Tests for the requests-based client."""

from unittest import mock

import pytest
import requests

from string_service.app.schemas.strings import CountResponse, UppercaseResponse
from string_service_client import StringServiceClient, StringServiceClientError


def _response(status_code=200, payload=None):
    resp = mock.Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error", response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture()
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture()
def client(session):
    return StringServiceClient(base_url="http://localhost:3090/", session=session, timeout=5)


def test_uppercase(client, session):
    session.post.return_value = _response(payload={"v": "HELLO"})

    assert client.uppercase("hello") == UppercaseResponse(v="HELLO")
    session.post.assert_called_once_with("http://localhost:3090/uppercase", json={"s": "hello"}, timeout=5)


def test_uppercase_business_failure_does_not_raise(client, session):
    session.post.return_value = _response(payload={"v": "", "err": "empty string"})

    assert client.uppercase("").err == "empty string"


def test_count(client, session):
    session.post.return_value = _response(payload={"v": 5})

    assert client.count("hello") == CountResponse(v=5)


def test_http_error_raises(client, session):
    session.post.return_value = _response(status_code=422, payload={"detail": []})

    with pytest.raises(StringServiceClientError) as excinfo:
        client.count("hello")
    assert excinfo.value.status_code == 422


def test_connection_error_raises(client, session):
    session.post.side_effect = requests.ConnectionError("refused")

    with pytest.raises(StringServiceClientError) as excinfo:
        client.uppercase("hello")
    assert excinfo.value.status_code is None


def test_unexpected_body_raises(client, session):
    session.post.return_value = _response(payload={"value": 5})

    with pytest.raises(StringServiceClientError):
        client.count("hello")
