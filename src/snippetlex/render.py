"""Serialize a token stream back to markup.

The output is normalized rather than byte-identical to the scanned
source: attribute values are always double-quoted and escaped, declaration
text is separated from its name by a single space, and self-closing tags
are written as ``<name/>``.

Example:
    >>> from snippetlex import lex, render
    >>> render(lex("<a href='/x' >go</a><br />"))
    '<a href="/x">go</a><br/>'

Thread Safety:
    Pure function, safe to call from any thread.
"""

import html as html_module
from collections.abc import Iterable

from snippetlex.tokens import BeginTag, CommentTag, DocumentTag, EndTag, Text, Token


def render(tokens: Iterable[Token]) -> str:
    """Render tokens to markup.

    Synthetic end tags (those following a self-closing BeginTag) are
    skipped: the ``/>`` of the begin tag already closes the element.

    Args:
        tokens: Tokens in stream order

    Returns:
        Markup string.
    """
    parts: list[str] = []
    for token in tokens:
        if token.synthetic:
            continue
        match token:
            case Text(content=content):
                parts.append(content)
            case BeginTag(name=name, attributes=attributes, is_self_closing=closed):
                parts.append(f"<{name}")
                for key, value in attributes.items():
                    parts.append(f' {key}="{html_module.escape(value, quote=True)}"')
                parts.append("/>" if closed else ">")
            case EndTag(name=name):
                parts.append(f"</{name}>")
            case CommentTag(text=text):
                parts.append(f"<!--{text}-->")
            case DocumentTag(name=name, text=text):
                parts.append(f"<!{name} {text}>" if text else f"<!{name}>")
    return "".join(parts)
