"""Entry point for the content checker."""

import argparse
import logging
import sys

from src.config import load_config
from src.ingestion.crawler import ContentCrawler
from src.ingestion.splitter import ParseError
from src.logging_setup import setup_logging
from src.reporting import render_courses, render_errors, render_stats

logger = logging.getLogger(__name__)

COMMANDS = ("print", "errors", "stats")


def main() -> None:
    """Check the content tree and print the requested report."""
    parser = argparse.ArgumentParser(description="Validate course content markdown files.")
    parser.add_argument("root", nargs="?", default=".", help="Site root containing the content directory")
    parser.add_argument("command", nargs="?", default="print", choices=COMMANDS)
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration file")
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.logging)

    crawler = ContentCrawler(config.checker)
    files = crawler.find_files(args.root)

    try:
        result = crawler.crawl(files)
    except ParseError as exc:
        logger.error("Cannot parse content: %s", exc)
        sys.exit(2)

    result.courses.prepare()

    if args.command == "print":
        print(render_courses(result.courses, result.count), end="")
    elif args.command == "errors":
        print(render_errors(result.courses, result.count), end="")
        if result.courses.get_errors():
            sys.exit(1)
    else:
        print(render_stats(result.courses), end="")


if __name__ == "__main__":
    main()
