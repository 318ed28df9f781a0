"""Pure text transforms over a raw HTTP/1.x request.

Each public function takes the full request text and returns the new
text; none of them keep state between calls, so tools compose them by
plain sequencing.  Untouched lines are reproduced verbatim, which keeps
no-op edits byte-identical on CRLF input.

Malformed input raises :class:`~shiftbridge.core.errors.RequestFormatError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from shiftbridge.core.errors import RequestFormatError

CRLF = "\r\n"

_LINE_BREAK = re.compile(r"\r?\n")
_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def normalize_line_endings(text: str) -> str:
    """Rewrite every line terminator as CRLF."""
    return _LINE_BREAK.sub(CRLF, text)


def _check_token(value: str, what: str) -> None:
    if not _TOKEN.match(value):
        msg = f"Invalid {what}: {value!r}"
        raise RequestFormatError(msg)


def _check_no_line_break(value: str, what: str) -> None:
    if "\r" in value or "\n" in value:
        msg = f"{what} must not contain line breaks"
        raise RequestFormatError(msg)


@dataclass(frozen=True, slots=True)
class HeaderLine:
    name: str
    value: str
    raw: str


@dataclass(frozen=True, slots=True)
class RequestText:
    """Parsed view of a raw request; every mutator returns a new instance."""

    method: str
    path: str
    query: str | None
    version: str
    request_line: str | None
    headers: tuple[HeaderLine, ...]
    body: str
    has_separator: bool
    trailing_newline: bool

    # ── Parsing / rendering ──────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> RequestText:
        normalized = normalize_line_endings(text)

        separator = normalized.find(CRLF + CRLF)
        if separator >= 0:
            head = normalized[:separator]
            body = normalized[separator + 4 :]
            has_separator = True
            trailing = False
        else:
            head = normalized
            body = ""
            has_separator = False
            trailing = head.endswith(CRLF)
            if trailing:
                head = head[: -len(CRLF)]

        lines = head.split(CRLF)
        request_line = lines[0]
        parts = request_line.split(" ", 2)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            msg = f"Invalid request line: {request_line!r}"
            raise RequestFormatError(msg)

        method, target = parts[0], parts[1]
        version = parts[2] if len(parts) == 3 else ""
        path, sep, query = target.partition("?")

        headers: list[HeaderLine] = []
        for line in lines[1:]:
            name, colon, value = line.partition(":")
            if not colon or not name.strip():
                msg = f"Invalid header line: {line!r}"
                raise RequestFormatError(msg)
            headers.append(HeaderLine(name=name.strip(), value=value.strip(), raw=line))

        return cls(
            method=method,
            path=path,
            query=query if sep else None,
            version=version,
            request_line=request_line,
            headers=tuple(headers),
            body=body,
            has_separator=has_separator,
            trailing_newline=trailing,
        )

    def build(self) -> str:
        request_line = self.request_line
        if request_line is None:
            target = self.path if self.query is None else f"{self.path}?{self.query}"
            request_line = " ".join(p for p in (self.method, target, self.version) if p)

        head = CRLF.join([request_line, *(h.raw for h in self.headers)])
        if self.has_separator:
            return f"{head}{CRLF}{CRLF}{self.body}"
        if self.trailing_newline:
            return head + CRLF
        return head

    # ── Request line ─────────────────────────────────────────────

    def with_method(self, method: str) -> RequestText:
        _check_token(method, "HTTP method")
        return replace(self, method=method, request_line=None)

    def with_path(self, path: str) -> RequestText:
        if not path or any(c.isspace() for c in path):
            msg = f"Invalid path: {path!r}"
            raise RequestFormatError(msg)
        if "?" in path:
            msg = "Path must not contain a query string"
            raise RequestFormatError(msg)
        return replace(self, path=path, request_line=None)

    # ── Query parameters ─────────────────────────────────────────

    def _query_pairs(self) -> list[tuple[str, str]]:
        if not self.query:
            return []
        pairs = []
        for part in self.query.split("&"):
            name, _, _ = part.partition("=")
            pairs.append((name, part))
        return pairs

    def _with_query_pairs(self, pairs: list[tuple[str, str]]) -> RequestText:
        query = "&".join(raw for _, raw in pairs) if pairs else None
        return replace(self, query=query, request_line=None)

    def add_query_param(self, name: str, value: str) -> RequestText:
        _check_no_line_break(name + value, "Query parameter")
        return self._with_query_pairs([*self._query_pairs(), (name, f"{name}={value}")])

    def upsert_query_param(self, name: str, value: str) -> RequestText:
        _check_no_line_break(name + value, "Query parameter")
        pairs: list[tuple[str, str]] = []
        replaced = False
        for existing, raw in self._query_pairs():
            if existing.lower() != name.lower():
                pairs.append((existing, raw))
            elif not replaced:
                pairs.append((name, f"{name}={value}"))
                replaced = True
        if not replaced:
            pairs.append((name, f"{name}={value}"))
        return self._with_query_pairs(pairs)

    def remove_query_param(self, name: str) -> RequestText:
        pairs = self._query_pairs()
        kept = [(n, raw) for n, raw in pairs if n.lower() != name.lower()]
        if len(kept) == len(pairs):
            return self
        return self._with_query_pairs(kept)

    # ── Headers ──────────────────────────────────────────────────

    def get_header(self, name: str) -> str | None:
        for header in self.headers:
            if header.name.lower() == name.lower():
                return header.value
        return None

    def add_header(self, name: str, value: str) -> RequestText:
        _check_token(name, "header name")
        _check_no_line_break(value, "Header value")
        line = HeaderLine(name=name, value=value, raw=f"{name}: {value}")
        return replace(self, headers=(*self.headers, line))

    def set_header(self, name: str, value: str) -> RequestText:
        _check_token(name, "header name")
        _check_no_line_break(value, "Header value")
        line = HeaderLine(name=name, value=value, raw=f"{name}: {value}")
        headers: list[HeaderLine] = []
        replaced = False
        for header in self.headers:
            if header.name.lower() != name.lower():
                headers.append(header)
            elif not replaced:
                headers.append(line)
                replaced = True
        if not replaced:
            headers.append(line)
        return replace(self, headers=tuple(headers))

    def remove_header(self, name: str) -> RequestText:
        kept = tuple(h for h in self.headers if h.name.lower() != name.lower())
        if len(kept) == len(self.headers):
            return self
        return replace(self, headers=kept)

    # ── Body ─────────────────────────────────────────────────────

    def with_body(self, body: str) -> RequestText:
        updated = replace(self, body=body, has_separator=True, trailing_newline=False)
        if self.get_header("Content-Length") is not None:
            length = len(body.encode("utf-8"))
            updated = updated.set_header(self._header_name("Content-Length"), str(length))
        return updated

    def _header_name(self, name: str) -> str:
        for header in self.headers:
            if header.name.lower() == name.lower():
                return header.name
        return name

    # ── Cookies ──────────────────────────────────────────────────

    def _cookie_pairs(self) -> list[tuple[str, str]]:
        header = self.get_header("Cookie")
        if not header:
            return []
        pairs = []
        for part in header.split(";"):
            part = part.strip()
            if part:
                pairs.append((part.partition("=")[0].strip(), part))
        return pairs

    def _with_cookie_pairs(self, pairs: list[tuple[str, str]]) -> RequestText:
        if not pairs:
            return self.remove_header("Cookie")
        return self.set_header(self._header_name("Cookie"), "; ".join(raw for _, raw in pairs))

    def add_cookie(self, name: str, value: str) -> RequestText:
        _check_no_line_break(name + value, "Cookie")
        return self._with_cookie_pairs([*self._cookie_pairs(), (name, f"{name}={value}")])

    def set_cookie(self, name: str, value: str) -> RequestText:
        _check_no_line_break(name + value, "Cookie")
        pairs: list[tuple[str, str]] = []
        replaced = False
        for existing, raw in self._cookie_pairs():
            if existing != name:
                pairs.append((existing, raw))
            elif not replaced:
                pairs.append((name, f"{name}={value}"))
                replaced = True
        if not replaced:
            pairs.append((name, f"{name}={value}"))
        return self._with_cookie_pairs(pairs)

    def remove_cookie(self, name: str) -> RequestText:
        pairs = self._cookie_pairs()
        kept = [(n, raw) for n, raw in pairs if n != name]
        if len(kept) == len(pairs):
            return self
        return self._with_cookie_pairs(kept)


# ── Text -> text primitives ──────────────────────────────────────


def set_method(text: str, method: str) -> str:
    return RequestText.parse(text).with_method(method).build()


def set_path(text: str, path: str) -> str:
    return RequestText.parse(text).with_path(path).build()


def add_query_param(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).add_query_param(name, value).build()


def set_query_param(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).upsert_query_param(name, value).build()


def remove_query_param(text: str, name: str) -> str:
    return RequestText.parse(text).remove_query_param(name).build()


def add_header(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).add_header(name, value).build()


def set_header(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).set_header(name, value).build()


def remove_header(text: str, name: str) -> str:
    return RequestText.parse(text).remove_header(name).build()


def get_header(text: str, name: str) -> str | None:
    return RequestText.parse(text).get_header(name)


def set_body(text: str, body: str) -> str:
    return RequestText.parse(text).with_body(body).build()


def add_cookie(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).add_cookie(name, value).build()


def set_cookie(text: str, name: str, value: str) -> str:
    return RequestText.parse(text).set_cookie(name, value).build()


def remove_cookie(text: str, name: str) -> str:
    return RequestText.parse(text).remove_cookie(name).build()


def replace_literal(text: str, match: str, replacement: str) -> str:
    """Replace every literal occurrence of *match*, after CRLF normalisation."""
    normalized = CRLF.join(_LINE_BREAK.split(text))
    if not match:
        return normalized
    return normalized.replace(match, replacement)
