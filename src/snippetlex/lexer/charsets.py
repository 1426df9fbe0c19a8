"""Character classes used by the construct matchers.

"Word" characters follow Python's Unicode ``\\w``: alphanumerics plus
underscore. "Whitespace" is anything ``str.isspace()`` accepts.
"""

# Opening quotes accepted around attribute values
ATTRIBUTE_QUOTES: frozenset[str] = frozenset("\"'")

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"


def is_word_char(char: str) -> bool:
    """Check if char may appear in a tag or declaration name."""
    return char == "_" or char.isalnum()
