"""Front matter and section splitting for content markdown files."""

import logging
import re

from src.models.parsed import ROOT_SECTION, ParsedDocument, Section

logger = logging.getLogger(__name__)

EOL = "\n"

# Length of a front matter delimiter line ("+++").
HEADER_LENGTH = 3

FRONT_MATTER_OPEN = "+++" + EOL
FRONT_MATTER_CLOSE = EOL + "+++"

ATX_PREFIX = "## "
# A setext underline is a line of three or more dashes and nothing else.
SETEXT_UNDERLINE = re.compile(r"^-{3,}\s*$")

FRONT_MATTER_ROW = re.compile(r"^(\S+)\s*=\s*(.*)$")


class ParseError(ValueError):
    """Raised when a document cannot be split into front matter and body."""


def normalize_line_endings(text: str) -> str:
    """Convert CRLF line endings to LF."""
    return text.replace("\r\n", EOL)


def split_markdown(text: str) -> tuple[str, str]:
    """Split a document into its front matter and body.

    The document must open with a ``+++`` line and contain a later line
    starting with ``+++``, which may directly follow the opening line
    when the front matter is empty.

    Args:
        text: Document text with normalized line endings.

    Returns:
        Tuple of (front matter text, body text).

    Raises:
        ParseError: If the front matter is not opened or not closed.
    """
    if text.startswith(FRONT_MATTER_OPEN):
        # Keep the newline that ends the opening line so that an
        # immediately following delimiter is found.
        rest = text[len(FRONT_MATTER_OPEN) - len(EOL):]
        idx = rest.find(FRONT_MATTER_CLOSE)
        if idx != -1:
            header = rest[len(EOL):idx]
            body = rest[idx + len(FRONT_MATTER_CLOSE):].strip("\n+")
            return header, body

    raise ParseError("front matter not closed")


def _parse_scalar(raw: str) -> str:
    """Strip whitespace and surrounding quotes from a scalar value."""
    return raw.strip().strip("'\"")


def _parse_array(raw: str) -> list[str]:
    """Split a ``[a, "b"]`` value into its non-empty elements."""
    inner = raw.strip().strip("[]")
    items = [part.strip(" '\"") for part in inner.split(",")]
    return [item for item in items if item]


def parse_front_matter(header: str) -> dict[str, str | list[str]]:
    """Parse ``key = value`` rows of a front matter block.

    Quoted scalars lose their quotes; ``[a, "b"]`` values become lists.
    The first occurrence of a key wins; rows that do not look like an
    assignment are ignored.

    Args:
        header: Front matter text between the delimiters.

    Returns:
        Mapping of keys to scalar or list values, in encounter order.
    """
    values: dict[str, str | list[str]] = {}

    for row in header.split(EOL):
        match = FRONT_MATTER_ROW.match(row)
        if not match:
            continue

        key, raw = match.group(1), match.group(2)
        if key in values:
            continue

        if raw.strip().startswith("["):
            values[key] = _parse_array(raw)
        else:
            values[key] = _parse_scalar(raw)

    return values


def _close(rows: list[str], start: int, end: int) -> str:
    """Join ``rows[start:end]`` into trimmed section content."""
    return EOL.join(rows[start:end]).strip(" \t\n")


def extract_sections(body: str) -> list[Section]:
    """Slice a document body into titled sections.

    Recognizes ``## Title`` headers and ``Title`` lines underlined with
    dashes. A dash line that opens a section or follows an empty line is
    a horizontal rule. Text before the first header forms the ``root``
    section, which is dropped when empty.

    Args:
        body: Document body with normalized line endings.

    Returns:
        Sections in encounter order, duplicates kept.
    """
    sections: list[Section] = []

    current = ROOT_SECTION
    start = 0

    rows = body.split(EOL)
    for i, row in enumerate(rows):
        if row.startswith(ATX_PREFIX):
            sections.append(Section(title=current, content=_close(rows, start, i)))
            start = i + 1
            current = row[len(ATX_PREFIX):].strip(" \t").lower()
            continue

        if i > start and SETEXT_UNDERLINE.match(row):
            if len(rows[i - 1]) == 0:
                continue

            sections.append(Section(title=current, content=_close(rows, start, i - 1)))
            start = i + 1
            current = rows[i - 1].strip(" \t").lower()

    if current != ROOT_SECTION:
        sections.append(Section(title=current, content=_close(rows, start, len(rows))))

    if sections and sections[0].content == "":
        sections = sections[1:]

    return sections


def split_document(raw_text: str) -> ParsedDocument:
    """Normalize, split and parse a document into a ParsedDocument.

    Args:
        raw_text: Full document text.

    Returns:
        Parsed front matter and sections.

    Raises:
        ParseError: If the front matter is not closed.
    """
    text = normalize_line_endings(raw_text)
    header, body = split_markdown(text)

    return ParsedDocument(
        front_matter=parse_front_matter(header),
        sections=extract_sections(body),
    )
