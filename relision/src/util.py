"""General helpers that do not depend on any other module."""

from __future__ import annotations


# Two-character escapes, checked after the border and before the printable range
FIXED_ESCAPES: dict[str, str] = {
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


class BorderError(Exception):
    """Border is not a single character."""

    def __init__(self, msg: str, border: str):
        self.msg: str = msg
        self.border: str = border
        super().__init__(msg + ": " + repr(border))


def _check_border(border: str) -> None:
    if not isinstance(border, str) or len(border) != 1:
        raise BorderError("border must be a single character", str(border))


def _hex_escape(ch: str) -> str:
    return "\\u{" + hex(ord(ch))[2:] + "}"


def escape(text: str, border: str) -> tuple[str, bool]:
    """Escape text for use inside a literal delimited by border.

    The border character is escaped as a backslash followed by the border
    itself, ahead of every other rule. Tab, carriage return, backslash and
    both quotes get fixed two-character escapes. Printable ASCII (0x20-0x7e)
    passes through. Everything else becomes \\u{h...} with lowercase hex.

    Returns (escaped, changed) where changed tells whether anything was
    actually escaped.
    """
    _check_border(border)
    out: list[str] = []
    changed = False
    for ch in text:
        if ch == border:
            out.append("\\" + ch)
            changed = True
        elif ch in FIXED_ESCAPES:
            out.append(FIXED_ESCAPES[ch])
            changed = True
        elif 0x20 <= ord(ch) <= 0x7E:
            out.append(ch)
        else:
            out.append(_hex_escape(ch))
            changed = True
    return "".join(out), changed


def quote(text: str, border: str) -> str:
    """Escape text and wrap it in border characters."""
    escaped, _ = escape(text, border)
    return border + escaped + border
