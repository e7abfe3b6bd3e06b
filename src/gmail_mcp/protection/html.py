"""HTML to plain text conversion for email bodies and attachments."""

import re
from html.parser import HTMLParser

_SKIPPED_TAGS = frozenset({"script", "style"})


class _HTMLTextExtractor(HTMLParser):
    """Extract plain text from HTML content.

    <br>, <p> and </p> become line breaks, script and style content is dropped,
    and character references are decoded by the parser.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._text_parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag == "br":
            self._text_parts.append("\n")
        elif tag == "p" and self._text_parts and not self._text_parts[-1].endswith("\n"):
            self._text_parts.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag == "p":
            self._text_parts.append("\n")

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._text_parts.append(data)

    def get_text(self) -> str:
        return "".join(self._text_parts)


def strip_html(html: str) -> str:
    """Strip HTML markup and return readable plain text.

    Args:
        html: HTML content to convert.

    Returns:
        Plain text with whitespace collapsed within lines and at most one
        blank line between paragraphs.
    """
    parser = _HTMLTextExtractor()
    parser.feed(html)
    parser.close()

    lines = [re.sub(r"[^\S\n]+", " ", line).strip() for line in parser.get_text().split("\n")]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()
