"""Markdown parser producing Content records from raw document text."""

import logging

from src.ingestion.builder import build_body
from src.ingestion.splitter import (
    HEADER_LENGTH,
    ParseError,
    split_document,
)
from src.models.content import Content
from src.models.enums import State

logger = logging.getLogger(__name__)

# Front matter keys read by the parser; any other key is ignored.
KEY_TITLE = "title"
KEY_STATE = "state"
KEY_SLUG = "slug"
KEY_WEIGHT = "weight"
KEY_AUDIENCE = "audience"
KEY_IMPORTANCE = "audienceImportance"
KEY_OUTSIDE_IMPORTANCE = "outsideImportance"
KEY_TAGS = "tags"


class MarkdownParser:
    """Parses content markdown documents into Content records.

    A document is a ``+++`` delimited front matter block followed by
    titled sections containing shortcodes.
    """

    def parse(self, raw_text: str) -> Content:
        """Parse a document into a Content record.

        Documents shorter than a front matter block are returned as empty
        content with an unknown state.

        Args:
            raw_text: Full document text.

        Returns:
            The parsed Content.

        Raises:
            ParseError: If the front matter is not closed.
        """
        if len(raw_text) < HEADER_LENGTH * 2:
            return Content()

        try:
            document = split_document(raw_text)
        except ParseError as exc:
            raise ParseError(f"markdown header could not be extracted: {exc}") from exc

        tags = document.values(KEY_TAGS)
        declared_state = document.value(KEY_STATE)

        return Content(
            title=document.value(KEY_TITLE),
            state=self._parse_state(declared_state),
            declared_state=declared_state,
            body=build_body(document, tags),
            slug=document.value(KEY_SLUG),
            weight=document.value(KEY_WEIGHT),
            audience=document.value(KEY_AUDIENCE),
            importance=document.value(KEY_IMPORTANCE),
            outside_importance=document.value(KEY_OUTSIDE_IMPORTANCE),
            tags=tags,
        )

    def _parse_state(self, value: str) -> State:
        """Map a declared state to State, falling back to unknown.

        Args:
            value: Raw ``state`` value from the front matter.

        Returns:
            The matching State, or State.UNKNOWN.
        """
        if not value:
            return State.UNKNOWN

        try:
            return State(value)
        except ValueError:
            logger.warning("Unknown state value: '%s'", value)
            return State.UNKNOWN
