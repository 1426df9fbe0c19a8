"""Single-pass lexer for simplified HTML snippets.

Architecture:
lexer/
├── __init__.py          # Re-exports HTMLLexer, Scanner
├── core.py              # Scanner (control loop + tokens), HTMLLexer facade
├── charsets.py          # Character classes and delimiters
├── match.py             # ConstructMatch result type
└── matchers/            # Construct matchers (pure, position-free)
    ├── tag.py           # <b>, </b>, <a href="x">, <br/>
    ├── comment.py       # <!-- ... -->
    └── document.py      # <!DOCTYPE html>

Usage:
    >>> from snippetlex.lexer import HTMLLexer
    >>> for token in HTMLLexer().tokenize('<p class="x">Hi</p>'):
    ...     print(token)
BeginTag(name='p', attributes={'class': 'x'}, is_self_closing=False)
Text(content='Hi')
EndTag(name='p')

"""

from snippetlex.lexer.core import HTMLLexer, Scanner

__all__ = ["HTMLLexer", "Scanner"]
