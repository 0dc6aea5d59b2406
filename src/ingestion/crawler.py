"""Discovery and loading of content files into a course tree."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePath

import chardet
from pydantic import BaseModel, Field

from src.config import CheckerConfig
from src.ingestion.parser import MarkdownParser
from src.ingestion.splitter import ParseError
from src.models.tree import Courses

logger = logging.getLogger(__name__)

# Path parts of a page below the content directory: course, chapter, file.
PAGE_DEPTH = 3


class CrawlResult(BaseModel):
    """Course tree built from a crawl and the number of files processed."""

    courses: Courses = Field(default_factory=Courses)
    count: int = 0


def split_path(file_path: str | Path) -> tuple[str, str, str] | None:
    """Decompose a file path into course, chapter and page names.

    Args:
        file_path: Path of a content file.

    Returns:
        Tuple of the last three path parts, or None for shorter paths.
    """
    parts = PurePath(file_path).parts
    if len(parts) < PAGE_DEPTH:
        return None
    return parts[-3], parts[-2], parts[-1]


def decode_bytes(raw_bytes: bytes, file_path: str | Path = "") -> str:
    """Decode raw file content with encoding detection.

    Tries UTF-8 first, then uses chardet for fallback detection.

    Args:
        raw_bytes: The file content.
        file_path: Source path, used for log messages only.

    Returns:
        The decoded text.
    """
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence") or 0

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            file_path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.error("Failed to decode file: %s", file_path)
        return raw_bytes.decode("utf-8", errors="replace")


class ContentCrawler:
    """Builds a course tree from content files.

    Files are expected under ``<course>/<chapter>/<page>.md``. Crawling
    stops once ``max_errors`` pages with issues have been seen.

    Args:
        config: CheckerConfig with content_dir, pattern, max_errors and
                skip_unparsable settings.
        parser: Optional MarkdownParser instance.
    """

    def __init__(self, config: CheckerConfig, parser: MarkdownParser | None = None) -> None:
        self._config = config
        self._parser = parser or MarkdownParser()

    def find_files(self, root: str | Path) -> list[Path]:
        """List page files below ``<root>/<content_dir>`` in sorted order.

        Only files exactly at ``<course>/<chapter>/<page>`` depth are
        kept, so course-level and site-level pages never form courses.

        Args:
            root: Site root containing the content directory.

        Returns:
            Sorted paths of the matching page files.
        """
        content_root = Path(root) / self._config.content_dir
        if not content_root.is_dir():
            logger.warning("Content directory not found: %s", content_root)
            return []

        files: list[Path] = []
        for path in sorted(content_root.glob(self._config.pattern)):
            if len(path.relative_to(content_root).parts) != PAGE_DEPTH:
                logger.debug("Skipping file outside a chapter: %s", path)
                continue
            files.append(path)
        return files

    def crawl(self, files: Iterable[str | Path]) -> CrawlResult:
        """Read, parse and aggregate content files.

        Args:
            files: Paths of the files to process.

        Returns:
            CrawlResult with the course tree and the processed file count.
        """
        return self.crawl_documents(self._read(files))

    def crawl_documents(self, documents: Iterable[tuple[str, bytes]]) -> CrawlResult:
        """Parse and aggregate already loaded documents.

        Args:
            documents: Pairs of (file path, raw bytes).

        Returns:
            CrawlResult with the course tree and the processed file count.

        Raises:
            ParseError: If a document cannot be parsed and
                ``skip_unparsable`` is disabled.
        """
        result = CrawlResult()
        max_errors = self._config.max_errors
        error_count = 0

        for file_path, raw_bytes in documents:
            if 0 <= max_errors <= error_count:
                logger.info("Stopping after %d pages with issues", error_count)
                break

            names = split_path(file_path)
            if names is None:
                logger.warning("Skipping: %s", file_path)
                continue

            try:
                content = self._parser.parse(decode_bytes(raw_bytes, file_path))
            except ParseError as exc:
                if not self._config.skip_unparsable:
                    raise ParseError(f"{file_path}: {exc}") from exc
                logger.error("Failed to parse %s: %s", file_path, exc)
                continue

            course, chapter, page = names
            result.courses.add(file_path, course, chapter, page, content)

            if content.get_issues(file_path):
                error_count += 1

            result.count += 1

        return result

    def _read(self, files: Iterable[str | Path]) -> Iterator[tuple[str, bytes]]:
        for file_path in files:
            yield str(file_path), Path(file_path).read_bytes()
