"""Escape codec for .properties keys and values.

Both directions are a single left-to-right scan that advances past every
consumed escape sequence and never re-scans its own output. Chained
str.replace() passes are order-sensitive here: after "\\\\" becomes "\\",
a following "n" would be misread as an escaped newline.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = [
    "UNICODE_ESCAPE_PATTERN",
    "escape",
    "escape_key",
    "unescape",
]

# \uXXXX with exactly four hex digits, either case.
UNICODE_ESCAPE_PATTERN: re.Pattern[str] = re.compile(r"\\u([0-9a-fA-F]{4})")

_UNESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    " ": " ",
}

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Characters that end a key when unescaped, or open a comment at line start.
_KEY_SPECIALS: frozenset[str] = frozenset({" ", "=", ":", "#", "!"})

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def unescape(raw: str) -> str:
    """Decode property-file escape syntax into a logical string.

    Recognized: \\uXXXX, \\\\, \\n, \\t, \\r and "\\ ". Any other backslash
    is dropped and the character after it kept literally. A surrogate pair
    written as two \\uXXXX escapes is recombined into one code point.
    Never raises; a trailing lone backslash is kept as-is.

    Example:
        >>> unescape("a\\\\u00e9\\\\tb")
        'aé\\tb'
        >>> unescape("\\\\\\\\n")
        '\\\\n'
    """
    out: list[str] = []
    i = 0
    length = len(raw)
    while i < length:
        char = raw[i]
        if char != "\\" or i + 1 == length:
            out.append(char)
            i += 1
            continue

        follower = raw[i + 1]
        if follower == "u":
            match = UNICODE_ESCAPE_PATTERN.match(raw, i)
            if match is None:
                # Malformed \u: superfluous-escape rule keeps the "u"
                out.append(follower)
                i += 2
                continue
            code = int(match.group(1), 16)
            i = match.end()
            if code in _HIGH_SURROGATES:
                low = UNICODE_ESCAPE_PATTERN.match(raw, i)
                if low is not None and int(low.group(1), 16) in _LOW_SURROGATES:
                    code = 0x10000 + ((code - 0xD800) << 10) + (int(low.group(1), 16) - 0xDC00)
                    i = low.end()
            out.append(chr(code))
            continue

        out.append(_UNESCAPES.get(follower, follower))
        i += 2
    return "".join(out)


def _escape_code_point(char: str) -> str:
    """Encode one character as \\uXXXX (lowercase), surrogate pair above U+FFFF."""
    code = ord(char)
    if code > 0xFFFF:
        code -= 0x10000
        return f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}"
    return f"\\u{code:04x}"


def escape(text: str, escape_unicode: bool) -> str:
    """Encode a logical string as property-file value text.

    Backslash, newline, carriage return and tab are always escaped. A
    leading space becomes "\\ " so it is not read back as separator
    whitespace. With escape_unicode, every character >= U+0080 becomes
    \\uXXXX.

    Example:
        >>> escape(" a\\tb", False)
        '\\\\ a\\\\tb'
        >>> escape("é", True)
        '\\\\u00e9'
    """
    out: list[str] = []
    for index, char in enumerate(text):
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char == " " and index == 0:
            out.append("\\ ")
        elif escape_unicode and ord(char) >= 0x80:
            out.append(_escape_code_point(char))
        else:
            out.append(char)
    return "".join(out)


def escape_key(key: str, escape_unicode: bool) -> str:
    """Encode a logical key so the parser reads it back as a single key.

    Like escape(), and additionally prefixes every space, "=", ":", "#"
    and "!" with a backslash, as well as any other leading whitespace
    character that the parser would otherwise read as indentation.

    Note:
        The key scanner only checks the single preceding character, so a
        key whose logical text ends in a backslash still mis-splits when
        read back.
    """
    out: list[str] = []
    for index, char in enumerate(key):
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char in _KEY_SPECIALS:
            out.append("\\" + char)
        elif escape_unicode and ord(char) >= 0x80:
            out.append(_escape_code_point(char))
        elif index == 0 and char.isspace():
            out.append("\\" + char)
        else:
            out.append(char)
    return "".join(out)
