"""Extract plain text from a token stream.

Example:
    >>> from snippetlex import lex, extract_text
    >>> extract_text(lex("<b>Fish</b> &amp; chips"), unescape=True)
    'Fish & chips'
"""

import html as html_module
from collections.abc import Iterable

from snippetlex.tokens import Text, Token


def extract_text(tokens: Iterable[Token], *, unescape: bool = False) -> str:
    """Concatenate the content of every Text token.

    Args:
        tokens: Tokens in stream order
        unescape: Decode HTML character references (``&amp;`` -> ``&``)

    Returns:
        The text with all constructs removed.
    """
    content = "".join(token.content for token in tokens if isinstance(token, Text))
    if unescape:
        return html_module.unescape(content)
    return content
