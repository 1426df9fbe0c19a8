"""Store a token stream as a JSON fixture and load it back."""

from snippetlex import from_json, lex, to_json
from snippetlex.profiling import profiled_lex

source = "<!DOCTYPE html><!-- banner --><p>Accept <b>all</b>?</p>"

with profiled_lex() as metrics:
    tokens = lex(source, source_file="banner.html")

fixture = to_json(tokens, indent=2)
print(fixture)
assert from_json(fixture) == tokens
print(metrics.summary())
