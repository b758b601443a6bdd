"""Source identifier codec.

Source identifiers (canonical URLs, or ``dc:``-prefixed Dublin Core ids)
travel in API paths as standard base64 with ``+/=`` swapped for ``._-``.
"""

import base64
import binascii

_ENCODE_TABLE = str.maketrans("+/=", "._-")
_DECODE_TABLE = str.maketrans("._-", "+/=")


def encode_source_id(raw: bytes | str) -> str:
    """Encode a raw source identifier into a URL-safe token.

    Args:
        raw: Source identifier bytes (str is encoded as UTF-8)

    Returns:
        Token using the ``._-`` substituted base64 alphabet
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return base64.b64encode(raw).decode("ascii").translate(_ENCODE_TABLE)


def decode_source_id(token: str) -> bytes | None:
    """Decode a URL-safe token back into raw source identifier bytes.

    Args:
        token: Token produced by :func:`encode_source_id`

    Returns:
        Raw bytes, or None when the token is not valid encoded data
    """
    try:
        return base64.b64decode(token.translate(_DECODE_TABLE), validate=True)
    except (binascii.Error, ValueError):
        return None


def decode_source_text(token: str) -> str | None:
    """Decode a token into a source identifier string.

    Args:
        token: Encoded source identifier

    Returns:
        Decoded identifier, or None when the token or its UTF-8 payload is invalid
    """
    raw = decode_source_id(token)
    if raw is None:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
