import pytest

from tinyhttpd.http_request import HTTPRequest, parse_form_urlencoded, parse_request

GET_REQUEST = "GET /index.html HTTP/1.1\nHost: localhost\nUser-Agent: probe\n\n"
FORM_REQUEST = (
    "POST /login HTTP/1.1\n"
    "Host: localhost\n"
    "Content-Type: application/x-www-form-urlencoded\n"
    "\n"
    "name=alice&city= paris"
)


def test_request_line_fields():
    request = parse_request(GET_REQUEST)
    assert request.request_line.search("method") == "GET"
    assert request.request_line.search("uri") == "/index.html"
    assert request.request_line.search("http_version") == "HTTP/1.1"


def test_request_line_properties():
    request = parse_request(GET_REQUEST)
    assert (request.method, request.uri, request.http_version) == (
        "GET",
        "/index.html",
        "HTTP/1.1",
    )


def test_header_fields_strip_one_leading_space():
    request = parse_request(GET_REQUEST)
    assert request.header_fields.search("Host") == "localhost"
    assert request.header_fields.search("User-Agent") == "probe"


def test_no_content_type_gives_empty_body():
    request = parse_request(GET_REQUEST)
    assert list(request.body) == []


def test_form_body_is_split_into_fields():
    request = parse_request(FORM_REQUEST)
    assert request.body.search("name") == "alice"
    assert request.body.search("city") == "paris"


def test_other_content_type_keeps_raw_data():
    text = "POST /api HTTP/1.1\nContent-Type: text/plain\n\nraw payload"
    request = parse_request(text)
    assert request.body.search("data") == "raw payload"


def test_first_header_value_wins():
    text = "GET / HTTP/1.1\nHost: first\nHost: second\n\n"
    assert parse_request(text).header_fields.search("Host") == "first"


def test_header_without_value_is_skipped():
    text = "GET / HTTP/1.1\nX-Empty:\nHost: localhost\n\n"
    request = parse_request(text)
    assert "X-Empty" not in request.header_fields
    assert "Host" in request.header_fields


def test_request_without_headers():
    request = parse_request("GET / HTTP/1.0")
    assert request.http_version == "HTTP/1.0"
    assert list(request.header_fields) == []


def test_repeated_spaces_between_method_and_uri():
    request = parse_request("GET   /path HTTP/1.1\n\n")
    assert request.method == "GET"
    assert request.uri == "/path"


@pytest.mark.parametrize("text", ["", "\n\n", "GET\n\n", "GET /\n\n"])
def test_malformed_request_raises(text):
    with pytest.raises(ValueError):
        parse_request(text)


def test_parse_form_urlencoded_pairs():
    fields = parse_form_urlencoded("a=1&&b= 2&c")
    assert dict(fields.items()) == {"a": "1", "b": "2", "c": ""}


def test_http_request_defaults_are_empty():
    request = HTTPRequest()
    assert request.method is None
    assert list(request.body) == []