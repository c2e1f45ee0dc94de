"""Key/value metadata attached to fields and type sheets."""

from __future__ import annotations

import re

from .textutil import string_to_primitive

_BUILTIN_TAGS = frozenset(
    {
        "MakeIndex",
        "Alias",
        "Default",
        "ListSpliter",
        "RepeatCheck",
        "TableName",
        "Package",
        "OutputTag",
    }
)

_KEY_RE = re.compile(r"[^\W\d]\w*")
_WS_RE = re.compile(r"\s*")
_BARE_RE = re.compile(r"\S*")
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}


def is_system_tag(tag: str) -> bool:
    """Return True for tags the exporter itself interprets."""
    return tag in _BUILTIN_TAGS


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


class MetaInfo:
    """An ordered multi-map of ``Key: value`` pairs."""

    def __init__(self, text: str = ""):
        self._values: dict[str, list[str]] = {}
        if text:
            self.parse(text)

    def parse(self, text: str) -> None:
        """Add the pairs found in ``text``; raises ValueError on bad syntax."""
        pos = 0
        length = len(text)
        while True:
            pos = _WS_RE.match(text, pos).end()
            if pos >= length:
                return
            match = _KEY_RE.match(text, pos)
            if match is None:
                raise ValueError(f"expect key at {pos}: {text!r}")
            key = match.group()
            pos = _WS_RE.match(text, match.end()).end()
            if pos >= length or text[pos] != ":":
                raise ValueError(f"expect ':' after {key!r}: {text!r}")
            pos = _WS_RE.match(text, pos + 1).end()
            if pos < length and text[pos] == '"':
                value, pos = self._read_quoted(text, pos + 1)
            else:
                bare = _BARE_RE.match(text, pos)
                value, pos = bare.group(), bare.end()
            self._values.setdefault(key, []).append(value)

    @staticmethod
    def _read_quoted(text: str, pos: int) -> tuple[str, int]:
        out = []
        while pos < len(text):
            ch = text[pos]
            if ch == '"':
                return "".join(out), pos + 1
            if ch == "\\" and pos + 1 < len(text):
                nxt = text[pos + 1]
                out.append(_ESCAPES.get(nxt, nxt))
                pos += 2
                continue
            out.append(ch)
            pos += 1
        raise ValueError(f"unterminated string: {text!r}")

    def get_string(self, key: str) -> str:
        values = self._values.get(key)
        return values[0] if values else ""

    def get_bool(self, key: str) -> bool:
        value = self.get_string(key)
        if not value:
            return False
        try:
            return string_to_primitive(value, "bool")
        except ValueError:
            return False

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = [value]

    def contains_key(self, key: str) -> bool:
        return key in self._values

    def contains_value(self, key: str, value: str) -> bool:
        return value in self._values.get(key, ())

    def raw(self) -> dict:
        """Return a plain dict: a single value per key, or a list of values."""
        return {k: v[0] if len(v) == 1 else list(v) for k, v in self._values.items()}

    def user_meta(self):
        """Yield (key, value) for non-system keys in sorted key order."""
        raw = self.raw()
        for key in sorted(k for k in raw if not is_system_tag(k)):
            yield key, raw[key]

    def __str__(self) -> str:
        return " ".join(
            f"{key}: {_quote(value)}"
            for key in sorted(self._values)
            for value in self._values[key]
        )

    def __repr__(self) -> str:
        return f"MetaInfo({str(self)!r})"