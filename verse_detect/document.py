"""Documents shown by the reader."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup

_SPACES = re.compile(r"[ \t\r\f\v]+")

_BLOCK_TAGS = (
    "p", "div", "section", "article", "header", "footer", "blockquote",
    "h1", "h2", "h3", "h4", "h5", "h6", "li", "tr", "dd", "dt",
)

SAMPLE_TEXT = """Verse Detect

For God so loved the world (John 3:16). The creation account opens at Genesis 1:1-3, and Romans 8:28 is often quoted alongside Psalms 23.

Español: Porque de tal manera amó Dios al mundo, Juan 3:16. Véase también 1 Juan 2:3-4 y Salmos 23:1.

Français : voir Jean 3:16, puis Psaumes 23.

Deutsch: Am Anfang schuf Gott Himmel und Erde, 1. Mose 1:1. Siehe auch Johannes 3:16.

Português: Porque Deus amou o mundo de tal maneira, João 3:16.

Bahasa Indonesia: Karena begitu besar kasih Allah akan dunia ini, Yohanes 3:16.

Cross-chapter ranges such as Genesis 1:31-2:3 preview from their first chapter.
"""


@dataclass(frozen=True)
class Document:
    """A document loaded into the reader."""

    name: str
    text: str
    html: Optional[str] = None  # Source markup for HTML documents
    languages: Tuple[str, ...] = ()  # Languages known to appear besides the primary

    @property
    def is_html(self) -> bool:
        """Check whether the document came from HTML."""
        return self.html is not None


def sample_document() -> Document:
    """Return the built-in multilingual sample."""
    return Document(name="sample", text=SAMPLE_TEXT, languages=("es", "fr", "de", "pt", "id"))


def html_to_text(html: str, exclude_selectors: str = "") -> str:
    """Flatten HTML into paragraphs of plain text.

    Elements matching exclude_selectors are dropped before flattening so
    references inside them are never detected.
    """
    soup = BeautifulSoup(html, "html.parser")
    for el in soup.find_all(["head", "title", "script", "style"]):
        el.decompose()
    if exclude_selectors.strip():
        for el in soup.select(exclude_selectors):
            el.decompose()

    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.append("\n\n")

    lines: List[str] = []
    for line in soup.get_text().split("\n"):
        line = _SPACES.sub(" ", line).strip()
        if line or (lines and lines[-1]):
            lines.append(line)
    return "\n".join(lines).strip() + "\n"


def read_document(path: Union[str, Path], exclude_selectors: str = "") -> Document:
    """Read a text or HTML file.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8", errors="replace")

    if path.suffix.lower() in (".html", ".htm", ".xhtml"):
        soup = BeautifulSoup(raw, "html.parser")
        title = soup.title.get_text(strip=True) if soup.title else ""
        return Document(name=title or path.name, text=html_to_text(raw, exclude_selectors), html=raw)

    return Document(name=path.name, text=raw)
