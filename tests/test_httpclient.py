import pytest
import requests
import responses

from scaffoldkit.httpclient import DEFAULT_TIMEOUT, HttpClient

BASE = "https://api.example.com"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_default_timeout_is_five_seconds():
    with HttpClient() as client:
        assert client.timeout == 5.0 == DEFAULT_TIMEOUT


def test_get_returns_response(mocked):
    mocked.add(responses.GET, BASE + "/items", json={"ok": True})
    with HttpClient() as client:
        resp = client.get(BASE + "/items")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_error_status_is_returned_not_raised(mocked):
    mocked.add(responses.GET, BASE + "/missing", status=404)
    with HttpClient() as client:
        resp = client.get(BASE + "/missing")
    assert resp.status_code == 404


@pytest.mark.parametrize("method", ["post", "put", "patch"])
def test_body_methods_send_content_type_and_body(mocked, method):
    mocked.add(method.upper(), BASE + "/items", status=201)
    with HttpClient() as client:
        resp = getattr(client, method)(BASE + "/items", "application/json", b'{"a":1}')
    assert resp.status_code == 201
    sent = mocked.calls[0].request
    assert sent.method == method.upper()
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.body == b'{"a":1}'


def test_delete_sends_delete(mocked):
    mocked.add(responses.DELETE, BASE + "/items/1", status=204)
    with HttpClient() as client:
        resp = client.delete(BASE + "/items/1")
    assert resp.status_code == 204
    assert mocked.calls[0].request.method == "DELETE"


def test_with_cookie_sends_cookie_and_reset_clears_it(mocked):
    mocked.add(responses.GET, BASE + "/me", body="ok")
    with HttpClient() as client:
        assert client.with_cookie(BASE + "/", ("session", "token")) is client
        client.get(BASE + "/me")
        assert client.reset_cookie() is client
        client.get(BASE + "/me")
    assert mocked.calls[0].request.headers["Cookie"] == "session=token"
    assert "Cookie" not in mocked.calls[1].request.headers


def test_with_cookie_requires_host():
    with HttpClient() as client:
        with pytest.raises(ValueError):
            client.with_cookie("not-a-url", ("session", "token"))


def test_unreachable_host_raises(mocked):
    with HttpClient() as client:
        with pytest.raises(requests.ConnectionError):
            client.get(BASE + "/unregistered")