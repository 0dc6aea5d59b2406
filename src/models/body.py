"""Body variants of a parsed page and their state calculation."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.models.enums import Badge, MainVideo, State


class RelatedVideo(BaseModel):
    """One entry of the related videos section."""

    badge: Badge | None = None
    minutes: int = 0
    issues: list[str] = Field(default_factory=list)
    valid: bool = False


def has_badge(related_videos: list[RelatedVideo], badge: Badge) -> bool:
    """Return True if any related video carries ``badge``."""
    return any(video.badge == badge for video in related_videos)


class DefaultBody(BaseModel):
    """A regular lesson page built around a main video."""

    kind: Literal["default"] = "default"
    main_video: MainVideo = MainVideo.PROBLEM
    has_summary: bool = False
    has_topics: bool = False
    has_exercises: bool = False
    has_related_links: bool = False
    related_videos: list[RelatedVideo] = Field(default_factory=list)
    useful_without_video: bool = False
    slug_forced: bool = False
    is_project: bool = False
    section_titles: list[str] = Field(default_factory=list)

    def calculate_state(self) -> State:
        """Derive the state from the main video, summary and exercises.

        Returns:
            Complete with a present main video, a summary and exercises;
            incomplete when a main video, an alternative related video or
            the useful-without-video tag stands in; stub otherwise.
        """
        if self.main_video == MainVideo.PRESENT and self.has_summary and self.has_exercises:
            return State.COMPLETE

        if (
            self.main_video == MainVideo.PRESENT
            or has_badge(self.related_videos, Badge.ALTERNATIVE)
            or self.useful_without_video
        ):
            return State.INCOMPLETE

        return State.STUB

    def is_slug_forced(self) -> bool:
        return self.slug_forced


class IndexBody(BaseModel):
    """A chapter index page (``_index.md``).

    Its completion is derived from the sibling pages of the chapter:
    ``complete_state`` starts as incomplete and is upgraded once by
    ``Chapter.prepare``.
    """

    kind: Literal["index"] = "index"
    has_episodes: bool = False
    complete_state: State = State.INCOMPLETE

    def calculate_state(self) -> State:
        """Return the derived completion state, or stub without episodes."""
        if self.has_episodes:
            return self.complete_state
        return State.STUB

    def mark_complete(self) -> None:
        self.complete_state = State.COMPLETE

    def is_slug_forced(self) -> bool:
        return False


class PracticeBody(BaseModel):
    """A practice page with a description and challenge lists."""

    kind: Literal["practice"] = "practice"
    has_description: bool = False
    has_recommended_challenges: bool = False
    has_additional_challenges: bool = False

    def calculate_state(self) -> State:
        """Stub without a description, complete with both challenge lists."""
        if not self.has_description:
            return State.STUB

        if self.has_recommended_challenges and self.has_additional_challenges:
            return State.COMPLETE

        return State.INCOMPLETE

    def is_slug_forced(self) -> bool:
        return False


Body = Annotated[
    Union[DefaultBody, IndexBody, PracticeBody],
    Field(discriminator="kind"),
]
