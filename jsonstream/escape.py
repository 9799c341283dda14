"""Quoting and escaping of strings as JSON string literals."""

import re

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_PLAIN_PATTERN = re.compile(r'[\x00-\x1f"\\]')
_HTML_PATTERN = re.compile('[\x00-\x1f"\\\\<>&\u2028\u2029\ud800-\udfff]')


def _replace(match: "re.Match[str]") -> str:
    char = match.group()
    simple = _SIMPLE_ESCAPES.get(char)
    if simple is not None:
        return simple
    code = ord(char)
    if 0xD800 <= code <= 0xDFFF:
        # A lone surrogate cannot be encoded; it stands for invalid input.
        return "\\ufffd"
    return f"\\u{code:04x}"


def escape_string(s: str) -> str:
    """Return ``s`` as a quoted JSON string, escaping only what JSON requires.

    Control characters, the double quote and the backslash are escaped;
    every other character is written as is.
    """
    return '"' + _PLAIN_PATTERN.sub(_replace, s) + '"'


def escape_string_html(s: str) -> str:
    """Return ``s`` as a quoted JSON string that is safe to embed in HTML.

    In addition to what :func:`escape_string` escapes, ``<``, ``>`` and ``&``
    are escaped, U+2028 and U+2029 are written as escapes, and lone
    surrogates are replaced by ``\\ufffd``.
    """
    return '"' + _HTML_PATTERN.sub(_replace, s) + '"'