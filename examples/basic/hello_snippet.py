"""Tokenize a snippet in 3 lines, no config."""

from snippetlex import lex

for token in lex('Read our <a href="/privacy">privacy policy</a>.<br/>'):
    print(token)
