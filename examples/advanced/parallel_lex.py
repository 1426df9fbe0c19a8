"""Thread safe: one shared lexer, 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from snippetlex import HTMLLexer

lexer = HTMLLexer()
snippets = [f"<p>Snippet <b>{i}</b></p>" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lexer.lex, snippets))

print(f"Lexed {len(results)} snippets in parallel")
print("Tokens in first:", len(results[0]))
