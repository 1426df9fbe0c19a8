"""Push-style scanning: style runs for a text view, built from events."""

from snippetlex import BeginTag, EndTag, Text, read

open_styles: list[str] = []
runs: list[tuple[str, tuple[str, ...]]] = []


def on_token(token) -> None:  # noqa: ANN001
    match token:
        case BeginTag(name=name, is_self_closing=False):
            open_styles.append(name)
        case EndTag(name=name) if name in open_styles:
            # Consumers reconcile nesting themselves: close the innermost match
            open_styles.reverse()
            open_styles.remove(name)
            open_styles.reverse()
        case Text(content=content):
            runs.append((content, tuple(open_styles)))


read("We use <b>cookies</b> to <i>improve <b>your</b> experience</i>.", on_token)

for content, styles in runs:
    print(f"{content!r:<16} {styles}")
