"""Tests for data models."""

import pytest

from src.models import (
    Badge,
    Content,
    DefaultBody,
    Importance,
    IndexBody,
    MainVideo,
    ParsedDocument,
    PracticeBody,
    RelatedVideo,
    Section,
    State,
)
from src.models.enums import VALID_AUDIENCES, importance_level


class TestEnums:
    def test_state_string_values(self) -> None:
        assert str(State.INCOMPLETE) == "incomplete"
        assert State("complete") is State.COMPLETE

    def test_main_video_really_missing(self) -> None:
        assert MainVideo.REALLY_MISSING.value == "really missing"

    def test_badge_values(self) -> None:
        assert Badge("must-see") is Badge.MUST_SEE
        assert Badge("no-embed") is Badge.NO_EMBED

    def test_audiences(self) -> None:
        assert "all" in VALID_AUDIENCES
        assert "Linux users" in VALID_AUDIENCES
        assert "linux users" not in VALID_AUDIENCES
        assert len(VALID_AUDIENCES) == 11

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("critical", 5),
            ("essential", 4),
            ("important", 3),
            ("relevant", 2),
            ("optional", 1),
            ("irrelevant", 0),
            ("", -1),
            ("Important", -1),
        ],
    )
    def test_importance_level(self, value: str, expected: int) -> None:
        assert importance_level(value) == expected

    def test_importance_ordering(self) -> None:
        assert Importance.CRITICAL.level() > Importance.IRRELEVANT.level()


class TestParsedDocument:
    def _document(self) -> ParsedDocument:
        return ParsedDocument(
            front_matter={"title": "Hello", "tags": ["go", "basics"]},
            sections=[
                Section(title="summary", content=""),
                Section(title="topics", content="- a"),
                Section(title="summary", content="second"),
            ],
        )

    def test_has_non_empty_uses_first_match(self) -> None:
        document = self._document()
        assert document.has_non_empty("summary") is False
        assert document.has_non_empty("topics") is True
        assert document.has_non_empty("exercises") is False

    def test_get(self) -> None:
        document = self._document()
        assert document.get("topics") == "- a"
        assert document.get("notes") == ""

    def test_titles_keep_duplicates(self) -> None:
        assert self._document().titles() == ["summary", "topics", "summary"]

    def test_front_matter_values(self) -> None:
        document = self._document()
        assert document.value("title") == "Hello"
        assert document.value("missing", "x") == "x"
        assert document.values("tags") == ["go", "basics"]
        assert document.values("title") == ["Hello"]
        assert document.values("missing") == []


class TestContent:
    def test_defaults(self) -> None:
        content = Content()
        assert content.state == State.UNKNOWN
        assert content.body is None
        assert content.tags == []
        assert content.calculated_state() == State.STUB

    def test_calculated_state_uses_body(self) -> None:
        content = Content(body=PracticeBody(has_description=True))
        assert content.calculated_state() == State.INCOMPLETE

    @pytest.mark.parametrize(
        ("kind", "expected_type"),
        [("default", DefaultBody), ("index", IndexBody), ("practice", PracticeBody)],
    )
    def test_body_discriminator(self, kind: str, expected_type: type) -> None:
        content = Content.model_validate({"title": "x", "body": {"kind": kind}})
        assert isinstance(content.body, expected_type)

    def test_serialization(self) -> None:
        content = Content(
            title="Hello",
            state=State.COMPLETE,
            body=DefaultBody(
                main_video=MainVideo.PRESENT,
                related_videos=[RelatedVideo(badge=Badge.FUN, minutes=4, valid=True)],
            ),
            tags=["go"],
        )
        data = content.model_dump()
        assert data["body"]["kind"] == "default"
        assert data["body"]["related_videos"][0]["badge"] == Badge.FUN

        restored = Content.model_validate(data)
        assert restored == content


class TestBodyStates:
    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            (DefaultBody(), State.STUB),
            (DefaultBody(main_video=MainVideo.PRESENT), State.INCOMPLETE),
            (
                DefaultBody(main_video=MainVideo.PRESENT, has_summary=True, has_exercises=True),
                State.COMPLETE,
            ),
            (DefaultBody(useful_without_video=True), State.INCOMPLETE),
            (
                DefaultBody(
                    main_video=MainVideo.MISSING,
                    related_videos=[RelatedVideo(badge=Badge.ALTERNATIVE)],
                ),
                State.INCOMPLETE,
            ),
            (IndexBody(), State.STUB),
            (IndexBody(has_episodes=True), State.INCOMPLETE),
            (IndexBody(has_episodes=True, complete_state=State.COMPLETE), State.COMPLETE),
            (PracticeBody(), State.STUB),
            (PracticeBody(has_description=True, has_recommended_challenges=True), State.INCOMPLETE),
            (
                PracticeBody(
                    has_description=True,
                    has_recommended_challenges=True,
                    has_additional_challenges=True,
                ),
                State.COMPLETE,
            ),
        ],
    )
    def test_calculate_state(self, body: DefaultBody | IndexBody | PracticeBody, expected: State) -> None:
        assert body.calculate_state() == expected

    def test_mark_complete(self) -> None:
        body = IndexBody(has_episodes=True)
        body.mark_complete()
        assert body.calculate_state() == State.COMPLETE
