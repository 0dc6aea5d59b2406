"""Builders turning a parsed document into one of the body variants."""

from src.ingestion.shortcodes import extract_main_video, extract_related_videos
from src.models.body import Body, DefaultBody, IndexBody, PracticeBody
from src.models.parsed import (
    ADDITIONAL_CHALLENGES,
    DESCRIPTION,
    EPISODES,
    EXERCISES,
    MAIN_VIDEO,
    RECOMMENDED_CHALLENGES,
    RELATED_LINKS,
    RELATED_VIDEOS,
    SUMMARY,
    TOPICS,
    ParsedDocument,
)

# Front matter tags that change how a page is built or validated
TAG_USEFUL_WITHOUT_VIDEO = "useful-without-video"
TAG_SLUG_FORCED = "slug-forced"
TAG_NO_EXERCISE = "no-exercise"
TAG_PROJECTS = "projects"


def build_default_body(document: ParsedDocument, tags: list[str]) -> DefaultBody:
    """Build the body of a regular lesson page.

    Args:
        document: The split document.
        tags: Tags declared in the front matter.

    Returns:
        A DefaultBody describing the sections and shortcodes found.
    """
    tag_set = set(tags)
    has_exercises = document.has_non_empty(EXERCISES) or TAG_NO_EXERCISE in tag_set

    return DefaultBody(
        main_video=extract_main_video(document.get(MAIN_VIDEO)),
        has_summary=document.has_non_empty(SUMMARY),
        has_topics=document.has_non_empty(TOPICS),
        has_exercises=has_exercises,
        has_related_links=document.has_non_empty(RELATED_LINKS),
        related_videos=extract_related_videos(document.get(RELATED_VIDEOS)),
        useful_without_video=TAG_USEFUL_WITHOUT_VIDEO in tag_set,
        slug_forced=TAG_SLUG_FORCED in tag_set,
        is_project=TAG_PROJECTS in tag_set,
        section_titles=document.titles(),
    )


def build_index_body(document: ParsedDocument) -> IndexBody:
    """Build a chapter index body from its episodes section."""
    return IndexBody(has_episodes=document.has_non_empty(EPISODES))


def build_practice_body(document: ParsedDocument) -> PracticeBody:
    """Build a practice body from its description and challenge sections."""
    return PracticeBody(
        has_description=document.has_non_empty(DESCRIPTION),
        has_recommended_challenges=document.has_non_empty(RECOMMENDED_CHALLENGES),
        has_additional_challenges=document.has_non_empty(ADDITIONAL_CHALLENGES),
    )


def build_body(document: ParsedDocument, tags: list[str]) -> Body:
    """Select and build the body variant of a document.

    Episodes take precedence over a description; anything else is a
    regular lesson page.
    """
    if document.has_non_empty(EPISODES):
        return build_index_body(document)
    if document.has_non_empty(DESCRIPTION):
        return build_practice_body(document)
    return build_default_body(document, tags)
