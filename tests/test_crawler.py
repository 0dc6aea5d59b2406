"""Tests for content discovery and crawling."""

import logging
from pathlib import Path

import pytest

from src.config import CheckerConfig
from src.ingestion.crawler import ContentCrawler, decode_bytes, split_path
from src.ingestion.splitter import ParseError
from src.models.enums import State

VALID_PAGE = """+++
title = 'Hello World'
weight = 10
state = 'complete'
slug = 'hello-world'
tags = ["go"]
audience = 'all'
audienceImportance = 'important'
+++

## Main Video

{{< time 5 >}}

{{< youtube sbdFwFDTDqU >}}

## Summary

- bar

## Topics

- bar

## Exercises

- bar
"""

STUB_PAGE = """+++
title = 'Later'
state = 'stub'
+++
"""


def _write(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestSplitPath:
    def test_last_three_parts(self) -> None:
        assert split_path("site/content/go/basics/10-a.md") == ("go", "basics", "10-a.md")

    def test_exactly_three_parts(self) -> None:
        assert split_path("go/basics/10-a.md") == ("go", "basics", "10-a.md")

    def test_short_path(self) -> None:
        assert split_path("basics/10-a.md") is None


class TestDecodeBytes:
    def test_utf8(self) -> None:
        assert decode_bytes("title = 'Ünïcode'".encode("utf-8")) == "title = 'Ünïcode'"

    def test_utf16_is_detected(self) -> None:
        assert decode_bytes(VALID_PAGE.encode("utf-16")) == VALID_PAGE


class TestFindFiles:
    def test_finds_markdown_sorted(self, tmp_path: Path) -> None:
        _write(tmp_path, "content/go/basics/20-b.md", VALID_PAGE)
        _write(tmp_path, "content/go/basics/10-a.md", VALID_PAGE)
        _write(tmp_path, "content/go/basics/notes.txt", "x")

        crawler = ContentCrawler(CheckerConfig())
        files = crawler.find_files(tmp_path)

        assert [f.name for f in files] == ["10-a.md", "20-b.md"]

    def test_course_level_pages_are_excluded(self, tmp_path: Path) -> None:
        _write(tmp_path, "content/_index.md", STUB_PAGE)
        _write(tmp_path, "content/go/_index.md", STUB_PAGE)
        _write(tmp_path, "content/go/basics/_index.md", STUB_PAGE)

        crawler = ContentCrawler(CheckerConfig(max_errors=-1))
        files = crawler.find_files(tmp_path)
        result = crawler.crawl(files)

        assert [f.relative_to(tmp_path).as_posix() for f in files] == [
            "content/go/basics/_index.md"
        ]
        assert [c.title for c in result.courses.courses] == ["go"]
        assert [c.title for c in result.courses.courses[0].chapters] == ["basics"]

    def test_recursive_pattern_keeps_page_depth(self, tmp_path: Path) -> None:
        _write(tmp_path, "content/go/_index.md", STUB_PAGE)
        _write(tmp_path, "content/go/basics/10-a.md", VALID_PAGE)
        _write(tmp_path, "content/go/basics/extra/10-b.md", VALID_PAGE)

        crawler = ContentCrawler(CheckerConfig(pattern="**/*.md"))
        files = crawler.find_files(tmp_path)

        assert [f.name for f in files] == ["10-a.md"]

    def test_missing_content_dir(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        crawler = ContentCrawler(CheckerConfig())
        with caplog.at_level(logging.WARNING):
            assert crawler.find_files(tmp_path) == []
        assert "Content directory not found" in caplog.text


class TestCrawl:
    def test_builds_tree(self, tmp_path: Path) -> None:
        files = [
            _write(tmp_path, "content/go/basics/10-hello-world.md", VALID_PAGE),
            _write(tmp_path, "content/go/more/10-hello-world.md", VALID_PAGE),
            _write(tmp_path, "content/vim/intro/10-hello-world.md", VALID_PAGE),
        ]

        result = ContentCrawler(CheckerConfig()).crawl(files)

        assert result.count == 3
        assert [c.title for c in result.courses.courses] == ["go", "vim"]
        assert [c.title for c in result.courses.courses[0].chapters] == ["basics", "more"]
        page = result.courses.courses[0].chapters[0].pages[0]
        assert page.title == "10-hello-world.md"
        assert page.state == State.COMPLETE
        assert page.get_issues() == []

    def test_stops_after_max_errors(self) -> None:
        documents = [(f"content/go/basics/{i}-later.md", STUB_PAGE.encode()) for i in range(5)]

        result = ContentCrawler(CheckerConfig(max_errors=2)).crawl_documents(documents)

        assert result.count == 2
        assert len(result.courses.get_errors()) > 0

    def test_negative_max_errors_is_unlimited(self) -> None:
        documents = [(f"content/go/basics/{i}-later.md", STUB_PAGE.encode()) for i in range(5)]

        result = ContentCrawler(CheckerConfig(max_errors=-1)).crawl_documents(documents)

        assert result.count == 5

    def test_zero_max_errors_processes_nothing(self) -> None:
        documents = [("content/go/basics/10-hello-world.md", VALID_PAGE.encode())]

        result = ContentCrawler(CheckerConfig(max_errors=0)).crawl_documents(documents)

        assert result.count == 0

    def test_short_paths_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        documents = [("basics/10-hello-world.md", VALID_PAGE.encode())]

        with caplog.at_level(logging.WARNING):
            result = ContentCrawler(CheckerConfig()).crawl_documents(documents)

        assert result.count == 0
        assert result.courses.courses == []
        assert "Skipping" in caplog.text

    def test_unparsable_document_raises(self) -> None:
        documents = [("content/go/basics/10-broken.md", b"+++\ntitle = 'x'\n")]

        with pytest.raises(ParseError, match="content/go/basics/10-broken.md"):
            ContentCrawler(CheckerConfig()).crawl_documents(documents)

    def test_unparsable_document_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        documents = [
            ("content/go/basics/10-broken.md", b"+++\ntitle = 'x'\n"),
            ("content/go/basics/10-hello-world.md", VALID_PAGE.encode()),
        ]

        with caplog.at_level(logging.ERROR):
            result = ContentCrawler(CheckerConfig(skip_unparsable=True)).crawl_documents(documents)

        assert result.count == 1
        assert "Failed to parse" in caplog.text
