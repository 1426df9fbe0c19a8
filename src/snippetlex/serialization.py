"""Token serialization — JSON round-trip for token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Conformance fixtures (expected token streams stored as JSON)
- Shipping token streams to another process
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from snippetlex import lex
    from snippetlex.serialization import to_json, from_json

    tokens = lex("<b>Hi</b>")
    restored = from_json(to_json(tokens))
    assert tokens == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from snippetlex.errors import SerializationError
from snippetlex.tokens import BeginTag, CommentTag, DocumentTag, EndTag, Text, Token

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type[Token]] = {
    "BeginTag": BeginTag,
    "EndTag": EndTag,
    "CommentTag": CommentTag,
    "DocumentTag": DocumentTag,
    "Text": Text,
}

# Variant fields per class, in constructor order
_VALUE_FIELDS: dict[type[Token], tuple[str, ...]] = {
    BeginTag: ("name", "attributes", "is_self_closing"),
    EndTag: ("name",),
    CommentTag: ("text",),
    DocumentTag: ("name", "text"),
    Text: ("content",),
}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization and a
    ``location`` entry with the raw extent.

    Args:
        token: Any snippetlex token.

    Returns:
        Dict with ``_type``, the variant fields, ``synthetic`` and ``location``.

    Raises:
        SerializationError: If token is not one of the known variants.

    """
    value_fields = _VALUE_FIELDS.get(type(token))
    if value_fields is None:
        raise SerializationError(f"Cannot serialize {type(token).__name__!r}")

    result: dict[str, Any] = {"_type": type(token).__name__}
    for name in value_fields:
        value = getattr(token, name)
        result[name] = dict(value) if isinstance(value, dict) else value
    result["synthetic"] = token.synthetic

    loc = token.location
    result["location"] = {
        "lineno": loc.lineno,
        "col_offset": loc.col_offset,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
        "end_lineno": loc.end_lineno,
        "end_col_offset": loc.end_col_offset,
        "source_file": loc.source_file,
    }
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict with ``_type`` and token fields (as produced by to_dict).
            ``location`` is optional.

    Returns:
        Token (frozen dataclass).

    Raises:
        SerializationError: If data is not a dict, ``_type`` is missing or
            unknown, a variant field is missing, or ``location`` is malformed.

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Serialized token must be an object, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized token")

    token_cls = _TOKEN_TYPES.get(type_name) if isinstance(type_name, str) else None
    if token_cls is None:
        raise SerializationError(f"Unknown token type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for name in _VALUE_FIELDS[token_cls]:
        if name not in data:
            raise SerializationError(f"{type_name} is missing field {name!r}")
        value = data[name]
        kwargs[name] = dict(value) if isinstance(value, dict) else value
    kwargs["synthetic"] = bool(data.get("synthetic", False))

    loc = data.get("location")
    if loc is not None:
        if not isinstance(loc, dict):
            raise SerializationError(f"{type_name} location must be an object")
        for name in ("lineno", "col_offset"):
            if name not in loc:
                raise SerializationError(f"{type_name} location is missing field {name!r}")
        kwargs.update(
            _lineno=loc["lineno"],
            _col=loc["col_offset"],
            _start_offset=loc.get("offset", 0),
            _end_offset=loc.get("end_offset", 0),
            _end_lineno=loc.get("end_lineno"),
            _end_col=loc.get("end_col_offset"),
            _source_file=loc.get("source_file"),
        )
    return token_cls(**kwargs)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Args:
        tokens: Tokens in stream order.
        indent: JSON indentation (None for compact output).

    Returns:
        Deterministic JSON string (sorted keys).

    """
    return json.dumps(
        [to_dict(token) for token in tokens],
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array produced by to_json.

    Raises:
        SerializationError: If the JSON is invalid or not an array of tokens.

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid token JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("Token JSON must be an array")
    return [from_dict(item) for item in data]
