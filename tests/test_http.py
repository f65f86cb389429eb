"""Tests for ApiHttpClient."""

from unittest.mock import MagicMock

import pytest
import requests

from selligent_sdk.api.descriptor import build_request
from selligent_sdk.errors import TransportError
from selligent_sdk.transport.http import ApiHttpClient, HttpResponse


def _session(status=200, headers=None, text="{}"):
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = status
    response.headers = headers if headers is not None else {"Content-Type": "application/json"}
    response.text = text
    session.request.return_value = response
    return session


class TestApiHttpClientInit:
    def test_base_url_trailing_slash_stripped(self):
        client = ApiHttpClient("https://acme.slgnt.eu/", session=_session())
        assert client.base_url == "https://acme.slgnt.eu"

    def test_default_timeout(self):
        client = ApiHttpClient("https://acme.slgnt.eu", session=_session())
        assert client._timeout == 30

    def test_creates_session(self):
        client = ApiHttpClient("https://acme.slgnt.eu")
        assert isinstance(client._session, requests.Session)
        client.close()

    def test_url_for(self):
        client = ApiHttpClient("https://acme.slgnt.eu/", session=_session())
        request = build_request("/restapi/api/async/lists/3/profiles?fields=ID")
        assert client.url_for(request) == (
            "https://acme.slgnt.eu/restapi/api/async/lists/3/profiles?fields=ID"
        )


class TestApiHttpClientSend:
    def test_sends_descriptor(self):
        session = _session()
        client = ApiHttpClient("https://acme.slgnt.eu", timeout=5, session=session)
        request = build_request("/restapi/api/sync/lists/1/profiles", {"A": 1}, "POST").with_header(
            "Authorization", "hmac u:h:1"
        )

        client.send(request)

        session.request.assert_called_once_with(
            "POST",
            "https://acme.slgnt.eu/restapi/api/sync/lists/1/profiles",
            headers={
                "Content-Type": "application/json",
                "Accept": "*/*",
                "Connection": "keep-alive",
                "Authorization": "hmac u:h:1",
            },
            data=b'{"A":1}',
            timeout=5,
        )

    def test_empty_body_sent_as_none(self):
        session = _session()
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)
        client.send(build_request("/restapi/api/async/lists"))
        assert session.request.call_args.kwargs["data"] is None

    def test_response_mapped(self):
        session = _session(status=201, headers={"X-Request-Id": "abc"}, text='{"ok":true}')
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)
        response = client.send(build_request("/x"))
        assert response == HttpResponse(status=201, headers={"x-request-id": "abc"}, data='{"ok":true}')

    def test_error_status_returned_not_raised(self):
        session = _session(status=401, text="unauthorized")
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)
        response = client.send(build_request("/x"))
        assert response.status == 401
        assert response.data == "unauthorized"

    def test_request_exception_wrapped(self):
        session = _session()
        cause = requests.ConnectionError("connection refused")
        session.request.side_effect = cause
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            client.send(build_request("/restapi/api/async/lists/4", None, "DELETE"))

        assert exc_info.value.method == "DELETE"
        assert exc_info.value.path == "/restapi/api/async/lists/4"
        assert exc_info.value.__cause__ is cause

    def test_timeout_wrapped(self):
        session = _session()
        session.request.side_effect = requests.Timeout("read timed out")
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)
        with pytest.raises(TransportError):
            client.send(build_request("/x"))

    def test_no_retry(self):
        session = _session()
        session.request.side_effect = requests.ConnectionError("down")
        client = ApiHttpClient("https://acme.slgnt.eu", session=session)
        with pytest.raises(TransportError):
            client.send(build_request("/x"))
        assert session.request.call_count == 1


class TestApiHttpClientClose:
    def test_close(self):
        session = _session()
        ApiHttpClient("https://acme.slgnt.eu", session=session).close()
        session.close.assert_called_once()

    def test_context_manager(self):
        session = _session()
        with ApiHttpClient("https://acme.slgnt.eu", session=session) as client:
            assert client.base_url == "https://acme.slgnt.eu"
        session.close.assert_called_once()
