"""URL encoding utilities.

Two distinct rule sets are used:
- the base path is decoded as a whole URI (reserved escapes are kept);
- query keys and values are decoded/encoded as individual components.
"""
import re
from typing import Optional, Tuple
from urllib.parse import quote, unquote


# Characters a whole-URI decode leaves escaped
URI_RESERVED = frozenset(";/?:@&=+$,#")

# Left as-is by component encoding (besides ASCII letters and digits)
COMPONENT_SAFE = "-_.!~*'()"

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")


def _decode_run(match: re.Match) -> str:
    out = []
    pending = []
    for escape in _ESCAPE.findall(match.group(0)):
        if chr(int(escape[1:], 16)) in URI_RESERVED:
            if pending:
                out.append(unquote("".join(pending)))
                pending = []
            out.append(escape)
        else:
            pending.append(escape)
    if pending:
        out.append(unquote("".join(pending)))
    return "".join(out)


def decode_uri(text: str) -> str:
    """
    Decode a full URI.

    Escapes that stand for a reserved character (e.g. %2F, %3F) stay escaped
    so the structure of the URI is unchanged.

    Args:
        text: Encoded URI (without the query string)

    Returns:
        Decoded URI
    """
    if "%" not in text:
        return text
    return _ESCAPE_RUN.sub(_decode_run, text)


def decode_component(text: str) -> str:
    """Decode every percent escape. '+' is not treated as a space."""
    if "%" not in text:
        return text
    return unquote(text)


def encode_component(text: str) -> str:
    """Percent-encode a key or value for use inside a query string."""
    return quote(text, safe=COMPONENT_SAFE)


def split_url(url: str) -> Tuple[str, Optional[str]]:
    """
    Split a URL into base and query string at the first '?'.

    A '#' gets no special treatment: before the '?' it stays in the base,
    after it it becomes part of the last query pair.

    Returns:
        (base, query) where query is None when the URL has no '?'
    """
    base, sep, query = url.partition("?")
    if not sep:
        return base, None
    return base, query


def split_pair(pair: str) -> Tuple[str, str, bool]:
    """
    Split "key=value" at the first '='.

    Returns:
        (key, value, has_separator). Without '=' the whole pair is the key
        and the value is empty.
    """
    eq = pair.find("=")
    if eq < 0:
        return pair, "", False
    return pair[:eq], pair[eq + 1:], True
