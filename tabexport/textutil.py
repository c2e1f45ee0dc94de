"""Small string helpers: escaping, wrapping, file extensions, primitive parsing."""

import os
import re
import struct

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_INT_RANGES = {
    "int32": (-(2**31), 2**31 - 1),
    "int64": (-(2**63), 2**63 - 1),
    "uint32": (0, 2**32 - 1),
    "uint64": (0, 2**64 - 1),
}


def string_escape(s: str) -> str:
    """Escape quotes, newlines and backslashes for text output.

    A backslash already followed by ``n`` or ``r`` is kept as an escape.
    """
    out = []
    for index, ch in enumerate(s):
        if ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\\":
            next_char = s[index + 1] if index + 1 < len(s) else ""
            out.append("\\" if next_char in ("n", "r") else "\\\\")
        else:
            out.append(ch)
    return "".join(out)


def string_wrap(s: str) -> str:
    """Surround a string with double quotes."""
    return f'"{s}"'


def change_extension(filename: str, new_ext: str) -> str:
    """Return the base name of ``filename`` with its extension replaced."""
    base = os.path.basename(filename)
    dot = base.rfind(".")
    if dot >= 0:
        base = base[:dot]
    return base + new_ext


def _parse_bool(text: str) -> bool:
    if text == "是":
        return True
    if text in ("否", ""):
        return False
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid bool: {text!r}")


def _parse_float(text: str, single: bool) -> float:
    if text != text.strip() or "_" in text or not text:
        raise ValueError(f"invalid float: {text!r}")
    value = float(text)
    if single:
        try:
            value = struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError as exc:
            raise ValueError(f"float out of range: {text!r}") from exc
    return value


def string_to_primitive(text: str, kind: str):
    """Parse ``text`` as the primitive ``kind``.

    Kinds: int32, int64, uint32, uint64, string, bool, float32, float64.
    Raises ValueError on malformed input and TypeError on an unknown kind.
    """
    if kind in _INT_RANGES:
        pattern = _UINT_RE if kind.startswith("u") else _INT_RE
        if not pattern.fullmatch(text):
            raise ValueError(f"invalid {kind}: {text!r}")
        value = int(text)
        low, high = _INT_RANGES[kind]
        if not low <= value <= high:
            raise ValueError(f"{kind} out of range: {text!r}")
        return value
    if kind == "string":
        return text
    if kind == "bool":
        return _parse_bool(text)
    if kind == "float32":
        return _parse_float(text, True)
    if kind == "float64":
        return _parse_float(text, False)
    raise TypeError(f"unsupported kind: {kind}")