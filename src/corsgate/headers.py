"""
HTTP header name helpers.
"""

# RFC 7230 token characters
_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~"
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def is_token(value: str) -> bool:
    """True if *value* is a non-empty HTTP token."""
    return bool(value) and all(c in _TOKEN_CHARS for c in value)


def canonical_header_key(name: str) -> str:
    """
    Canonical MIME form of a header name: ``x-HEADER-1`` -> ``X-Header-1``.

    Names that are not valid tokens are returned unchanged.
    """
    if not is_token(name):
        return name
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def parse_header_list(header_list: str) -> list[str]:
    """
    Split a comma separated header list, trimming whitespace and dropping
    empty entries. Names are canonicalized; request order is kept.
    """
    headers: list[str] = []
    for item in header_list.split(","):
        item = item.strip(" \t")
        if item:
            headers.append(canonical_header_key(item))
    return headers

