"""Benchmark snippetlex against html.parser and a regex lexer.

Run with:
    python benchmarks/benchmark_vs_stdlib.py
"""

import re
import sys
import time
from html.parser import HTMLParser


def make_corpus(count: int = 2000) -> list[str]:
    """Short formatted snippets like banner and form copy."""
    snippets = []
    for i in range(count):
        snippets.append(
            f'<p class="intro">Item {i}: <b>bold</b>, <i>italic</i> and '
            f'<a href="/terms/{i}">terms</a>.<br/><!-- note {i} --></p>'
        )
    return snippets


def make_hostile(size: int = 20000) -> str:
    """Input that makes backtracking regex lexers slow."""
    return '<a k="<a k=" ' * size


def benchmark_snippetlex(docs: list[str], iterations: int = 10) -> float:
    """Benchmark snippetlex."""
    from snippetlex import HTMLLexer

    lexer = HTMLLexer()

    # Warmup
    for doc in docs[:10]:
        lexer.lex(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            lexer.lex(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


class _CountingParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.events = 0

    def handle_starttag(self, tag, attrs):  # noqa: ANN001
        self.events += 1

    def handle_endtag(self, tag):  # noqa: ANN001
        self.events += 1

    def handle_data(self, data):  # noqa: ANN001
        self.events += 1

    def handle_comment(self, data):  # noqa: ANN001
        self.events += 1


def benchmark_html_parser(docs: list[str], iterations: int = 10) -> float:
    """Benchmark html.parser.HTMLParser (full HTML tokenizer)."""
    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            parser = _CountingParser()
            parser.feed(doc)
            parser.close()
    elapsed = time.perf_counter() - start

    return elapsed / iterations


_TAG = re.compile(r"""<(/)?(\w+)((?:\s+[^\s=]+=(?:"[^"]*?"|'[^']*?'))+)?\s*(/)?>""", re.S)


def benchmark_regex(docs: list[str], iterations: int = 10) -> float:
    """Benchmark an anchored-regex tag scan (tags only)."""
    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            pos = doc.find("<")
            while pos != -1:
                match = _TAG.match(doc, pos)
                pos = doc.find("<", match.end() if match else pos + 1)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def main() -> None:
    """Run benchmarks and print results."""
    docs = make_corpus()
    print(f"Corpus: {len(docs)} snippets, {sum(map(len, docs))} chars")
    print(f"Python {sys.version.split()[0]}\n")

    iterations = 10
    results = {
        "snippetlex": benchmark_snippetlex(docs, iterations),
        "html.parser": benchmark_html_parser(docs, iterations),
        "regex (tags only)": benchmark_regex(docs, iterations),
    }
    fastest = min(results.values())
    for name, seconds in sorted(results.items(), key=lambda item: item[1]):
        print(f"{name:<20} {seconds * 1000:8.2f} ms  ({seconds / fastest:.2f}x)")

    hostile = make_hostile()
    print(f"\nHostile input: {len(hostile)} chars")
    print(f"{'snippetlex':<20} {benchmark_snippetlex([hostile], 1) * 1000:8.2f} ms")


if __name__ == "__main__":
    main()
