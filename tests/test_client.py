"""Tests for SelligentClient."""

import pytest

from selligent_sdk.api.builders import build_fetch_lists_request, build_search_profiles_request
from selligent_sdk.auth.signer import AUTHORIZATION_HEADER, compute_auth_header
from selligent_sdk.client import SelligentClient
from selligent_sdk.config import SelligentSettings
from selligent_sdk.errors import TransportError
from selligent_sdk.testing.mocks import FakeHttpClient
from selligent_sdk.transport.http import ApiHttpClient, HttpResponse
from selligent_sdk.transport.registry import ClientRegistry

BASE_URL = "https://acme.slgnt.eu"


class TestExecute:
    def test_signs_and_sends(self, credentials, fixed_clock, fake_http, fake_registry):
        client = SelligentClient(credentials, BASE_URL, registry=fake_registry, clock=fixed_clock)
        request = build_search_profiles_request(7, {"ID": 0, "op": "<>"})

        response = client.execute(request)

        assert response.status == 200
        assert len(fake_http.sent) == 1
        sent = fake_http.sent[0]
        assert sent.path == request.path
        assert sent.body == request.body
        assert sent.headers[AUTHORIZATION_HEADER] == compute_auth_header(
            "api-user", "s3cret", request.path, "POST", clock=fixed_clock
        )

    def test_returns_canned_response(self, credentials, fixed_clock):
        fake = FakeHttpClient(BASE_URL, responses=[HttpResponse(status=404, headers={}, data="nope")])
        client = SelligentClient(
            credentials, BASE_URL, registry=ClientRegistry(factory=lambda url: fake), clock=fixed_clock
        )
        response = client.execute(build_fetch_lists_request())
        assert response.status == 404
        assert response.data == "nope"

    def test_transport_error_propagates(self, credentials, fixed_clock):
        class FailingHttpClient(FakeHttpClient):
            def send(self, descriptor):
                raise TransportError("down", method=descriptor.method.value, path=descriptor.path)

        client = SelligentClient(
            credentials,
            BASE_URL,
            registry=ClientRegistry(factory=FailingHttpClient),
            clock=fixed_clock,
        )
        with pytest.raises(TransportError) as exc_info:
            client.execute(build_fetch_lists_request())
        assert exc_info.value.path == "/restapi/api/async/lists"

    def test_clients_share_registry_handle(self, credentials):
        registry = ClientRegistry(factory=FakeHttpClient)
        first = SelligentClient(credentials, BASE_URL, registry=registry)
        second = SelligentClient(credentials, BASE_URL, registry=registry)
        assert first.http is second.http
        assert len(registry) == 1

    def test_signer_uses_credentials(self, credentials, fixed_clock, fake_registry):
        client = SelligentClient(credentials, BASE_URL, registry=fake_registry, clock=fixed_clock)
        assert client.signer.credentials == credentials


class TestFromSettings:
    def test_builds_client_with_timeout(self):
        settings = SelligentSettings(
            username="api-user", secret="s3cret", base_url=BASE_URL, timeout=7.0
        )
        client = SelligentClient.from_settings(settings)
        http = client.http
        assert isinstance(http, ApiHttpClient)
        assert http.base_url == BASE_URL
        assert http._timeout == 7.0
        http.close()

    def test_uses_given_registry(self, fake_http, fake_registry):
        settings = SelligentSettings(username="api-user", secret="s3cret", base_url=BASE_URL)
        client = SelligentClient.from_settings(settings, registry=fake_registry)
        assert client.http is fake_http


class TestRegistryOwnership:
    def test_empty_registry_is_used(self, credentials):
        registry = ClientRegistry(factory=FakeHttpClient)
        assert len(registry) == 0

        client = SelligentClient(credentials, BASE_URL, registry=registry)

        assert isinstance(client.http, FakeHttpClient)
        assert BASE_URL in registry
        assert len(registry) == 1

    def test_private_registry_when_omitted(self, credentials):
        first = SelligentClient(credentials, BASE_URL)
        second = SelligentClient(credentials, BASE_URL)
        assert first.http is not second.http
        first.http.close()
        second.http.close()
