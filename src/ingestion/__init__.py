"""Content ingestion: splitting, shortcode extraction, parsing and crawling."""

from src.ingestion.crawler import ContentCrawler, CrawlResult, split_path
from src.ingestion.parser import MarkdownParser
from src.ingestion.splitter import ParseError

__all__ = ["ContentCrawler", "CrawlResult", "MarkdownParser", "ParseError", "split_path"]
