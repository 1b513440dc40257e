import json

import httpx
import pytest

from dynapork.errors import WebRequestError
from dynapork.transport import HttpTransport, Transport

URL = "https://api-ipv4.porkbun.com/api/json/v3/ping"


def make_transport(handler) -> HttpTransport:
    return HttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_http_transport_satisfies_protocol() -> None:
    assert isinstance(make_transport(lambda request: httpx.Response(200)), Transport)


def test_post_json_sends_json_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "SUCCESS", "yourIp": "1.2.3.4"})

    response = make_transport(handler).post_json(URL, {"apikey": "k", "secretapikey": "s"})

    assert seen[0].method == "POST"
    assert str(seen[0].url) == URL
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content) == {"apikey": "k", "secretapikey": "s"}
    assert response.status == 200
    assert json.loads(response.body) == {"status": "SUCCESS", "yourIp": "1.2.3.4"}
    assert response.headers["content-type"] == "application/json"


def test_error_status_is_returned_not_raised() -> None:
    transport = make_transport(lambda request: httpx.Response(400, text="bad"))
    response = transport.post_json(URL, {})
    assert response.status == 400
    assert response.body == b"bad"


def test_connection_failure_becomes_web_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    with pytest.raises(WebRequestError) as excinfo:
        make_transport(handler).post_json(URL, {})
    assert "Name or service not known" in excinfo.value.diagnostic
    assert URL in excinfo.value.diagnostic


def test_timeout_becomes_web_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("", request=request)

    with pytest.raises(WebRequestError) as excinfo:
        make_transport(handler).post_json(URL, {})
    assert "timed out" in excinfo.value.diagnostic


def test_close_leaves_injected_client_open() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    HttpTransport(client=client).close()
    assert client.is_closed is False


def test_close_closes_owned_client() -> None:
    transport = HttpTransport(read_timeout=5.0)
    transport.close()
    assert transport._client.is_closed is True
