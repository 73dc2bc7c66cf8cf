"""Parsing of a raw HTTP request into request line, header and body maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tinyhttpd.dictionary import Dictionary

FORM_URLENCODED = "application/x-www-form-urlencoded"


@dataclass
class HTTPRequest:
    """A parsed request: its request line, header fields and body fields."""

    request_line: Dictionary = field(default_factory=Dictionary)
    header_fields: Dictionary = field(default_factory=Dictionary)
    body: Dictionary = field(default_factory=Dictionary)

    @property
    def method(self) -> Optional[str]:
        return self.request_line.search("method")

    @property
    def uri(self) -> Optional[str]:
        return self.request_line.search("uri")

    @property
    def http_version(self) -> Optional[str]:
        return self.request_line.search("http_version")


def _split_token(text: str, delimiters: str) -> tuple[Optional[str], str]:
    """Return the first token of ``text`` and what follows its delimiter.

    Leading delimiters are skipped; an empty text yields no token.
    """
    start = 0
    while start < len(text) and text[start] in delimiters:
        start += 1
    if start == len(text):
        return None, ""
    end = next(
        (pos for pos in range(start, len(text)) if text[pos] in delimiters),
        None,
    )
    if end is None:
        return text[start:], ""
    return text[start:end], text[end + 1 :]


def _parse_request_line(line: str) -> Dictionary:
    method, rest = _split_token(line, " ")
    uri, rest = _split_token(rest, " ")
    http_version = rest or None
    if method is None or uri is None or http_version is None:
        raise ValueError(f"malformed request line: {line!r}")
    fields = Dictionary()
    fields.insert("method", method)
    fields.insert("uri", uri)
    fields.insert("http_version", http_version)
    return fields


def _parse_header_fields(lines: list[str]) -> Dictionary:
    fields = Dictionary()
    for line in lines:
        key, value = _split_token(line, ":")
        if key is None or not value:
            continue
        if value.startswith(" "):
            value = value[1:]
        fields.insert(key, value)
    return fields


def parse_form_urlencoded(body: str) -> Dictionary:
    """Split an ``a=1&b=2`` body into a map of its fields."""
    fields = Dictionary()
    for pair in body.split("&"):
        if not pair:
            continue
        key, value = _split_token(pair, "=")
        if key is None:
            continue
        if value.startswith(" "):
            value = value[1:]
        fields.insert(key, value)
    return fields


def _parse_body(header_fields: Dictionary, body: str) -> Dictionary:
    content_type = header_fields.search("Content-Type")
    if content_type is None:
        return Dictionary()
    if content_type == FORM_URLENCODED:
        return parse_form_urlencoded(body)
    fields = Dictionary()
    fields.insert("data", body)
    return fields


def parse_request(text: str) -> HTTPRequest:
    """Parse a request whose lines end in ``\\n`` and whose head ends in a blank line."""
    head, _, body = text.partition("\n\n")
    lines = [line for line in head.split("\n") if line]
    if not lines:
        raise ValueError("empty request")
    request_line = _parse_request_line(lines[0])
    header_fields = _parse_header_fields(lines[1:])
    return HTTPRequest(
        request_line=request_line,
        header_fields=header_fields,
        body=_parse_body(header_fields, body),
    )