import pytest
import requests

from opskit.httpclient import (
    Client,
    HttpRequest,
    HttpResponse,
    RequestsTransport,
    parse_request_uri,
)


class RecordingTransport:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def round_trip(self, request):
        self.requests.append(request)
        return self.response


class FakeReply:
    def __init__(self, status_code, content, headers):
        self.status_code = status_code
        self.content = content
        self.headers = headers


class FakeSession:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append((method, url, headers, data, timeout))
        if self.error is not None:
            raise self.error
        return self.reply


def test_get_goes_through_transport():
    response = HttpResponse(status_code=200, body=b"{}")
    transport = RecordingTransport(response)
    result = Client(transport).get("http://localhost/words")
    assert result is response
    assert len(transport.requests) == 1
    sent = transport.requests[0]
    assert sent.method == "GET"
    assert sent.url == "http://localhost/words"
    assert sent.body == b""


def test_post_sets_content_type_and_body():
    transport = RecordingTransport(HttpResponse(status_code=200))
    payload = b'{"password":"password"}'
    Client(transport).post("http://localhost/login", "application/json", payload)
    sent = transport.requests[0]
    assert sent.method == "POST"
    assert sent.url == "http://localhost/login"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.body == payload


def test_post_encodes_text_body():
    transport = RecordingTransport(HttpResponse(status_code=200))
    text = '{"password":"password"}'
    Client(transport).post("http://localhost/login", "application/json", text)
    assert transport.requests[0].body == text.encode("utf-8")


def test_requests_transport_maps_reply():
    session = FakeSession(reply=FakeReply(201, b"ok", {"X-Test": "yes"}))
    transport = RequestsTransport(session=session)
    request = HttpRequest("POST", "http://localhost/login", {"Content-Type": "application/json"}, b"{}")
    response = transport.round_trip(request)
    assert response == HttpResponse(status_code=201, body=b"ok", headers={"X-Test": "yes"})
    method, url, headers, data, _timeout = session.calls[0]
    assert (method, url, data) == ("POST", "http://localhost/login", b"{}")
    assert headers == {"Content-Type": "application/json"}


def test_requests_transport_wraps_network_errors():
    original = requests.ConnectionError("refused")
    transport = RequestsTransport(session=FakeSession(error=original))
    with pytest.raises(ConnectionError) as info:
        transport.round_trip(HttpRequest("GET", "http://localhost/"))
    assert info.value.__cause__ is original


@pytest.mark.parametrize(
    "raw, scheme, netloc, path",
    [
        ("http://localhost/words", "http", "localhost", "/words"),
        ("https://example.com:8080/a?b=c", "https", "example.com:8080", "/a"),
        ("/words", "", "", "/words"),
    ],
)
def test_parse_request_uri_accepts(raw, scheme, netloc, path):
    result = parse_request_uri(raw)
    assert result.scheme == scheme
    assert result.netloc == netloc
    assert result.path == path


def test_parse_request_uri_keeps_hash_in_path():
    result = parse_request_uri("http://localhost/a#b")
    assert result.path == "/a#b"
    assert result.fragment == ""


@pytest.mark.parametrize(
    "raw",
    ["", "localhost", "words", "://localhost", "http://localhost:port/", "http://local\nhost/"],
)
def test_parse_request_uri_rejects(raw):
    with pytest.raises(ValueError):
        parse_request_uri(raw)