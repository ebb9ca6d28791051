# scholarurl/encoding.py
# scholarurl/encoding.py
"""Percent-encoding helpers matching the browser behaviour both services expect.

The boolean fragment is encoded as a URI component first and then serialized
again as a form value, so it reaches the server double-encoded.
"""

from urllib.parse import quote, quote_plus, urlencode

# Characters left alone by encodeURIComponent besides the always-safe "_.-~"
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Encode ``value`` the way ``encodeURIComponent`` does."""
    return quote(value, safe=_COMPONENT_SAFE)


def _form_quote(
    value: str, safe: str = "", encoding: str | None = None, errors: str | None = None
) -> str:
    # application/x-www-form-urlencoded keeps only alnum and "*-._"
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def build_query_string(params: dict[str, str]) -> str:
    """Serialize ``params`` in insertion order as a form-encoded query string."""
    return urlencode(params, quote_via=_form_quote)
