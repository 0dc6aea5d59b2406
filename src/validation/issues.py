"""Validation of parsed content against structural facts and conventions."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from src.models.body import Body, DefaultBody, IndexBody, PracticeBody, has_badge
from src.models.enums import VALID_AUDIENCES, Audience, Badge, MainVideo, State, importance_level
from src.models.parsed import (
    CODE,
    EXERCISES,
    MAIN_VIDEO,
    NOTES,
    RELATED_ARTICLES,
    RELATED_LESSONS,
    RELATED_LINKS,
    RELATED_VIDEOS,
    ROOT_SECTION,
    SUMMARY,
    TOPICS,
)
from src.validation.slug import slugify

if TYPE_CHECKING:
    from src.models.content import Content

# Canonical order of the sections of a regular lesson page.
DEFAULT_SECTION_ORDER: dict[str, int] = {
    ROOT_SECTION: 0,
    MAIN_VIDEO: 1,
    SUMMARY: 2,
    TOPICS: 3,
    CODE: 4,
    RELATED_LESSONS: 5,
    RELATED_VIDEOS: 6,
    RELATED_ARTICLES: 7,
    RELATED_LINKS: 8,
    EXERCISES: 9,
    NOTES: 10,
}

RESERVED_TAG = "unsorted"


def first_out_of_order(order: dict[str, int], titles: list[str]) -> str | None:
    """Find the first section title breaking the canonical order.

    Args:
        order: Mapping of known titles to their rank.
        titles: Section titles in encounter order.

    Returns:
        The first duplicate, misplaced or unknown title, or None if the
        titles are correctly ordered.
    """
    seen: set[str] = set()
    last_rank = -1

    for title in titles:
        if title in seen:
            return title
        seen.add(title)

        rank = order.get(title)
        if rank is None:
            return title
        if rank < last_rank:
            return title
        last_rank = rank

    return None


def get_default_body_issues(
    body: DefaultBody, state: State, declared_state: str = ""
) -> list[str]:
    """Collect the issues of a regular lesson page body.

    Args:
        body: The page body.
        state: The state declared in the front matter.
        declared_state: The raw ``state`` value, reported on a mismatch
            instead of ``state`` when set.

    Returns:
        Ordered list of issues.
    """
    issues: list[str] = []
    for video in body.related_videos:
        issues.extend(video.issues)

    if body.main_video == MainVideo.REALLY_MISSING:
        if body.useful_without_video:
            issues.append(
                "main video is NOT REALLY missing (Remove the useful-without-video tag?)"
            )
    elif body.main_video == MainVideo.MISSING:
        if not has_badge(body.related_videos, Badge.ALTERNATIVE) and not body.useful_without_video:
            issues.append(
                "main video is REALLY missing (Add a useful-without-video tag?)"
            )

    calculated = body.calculate_state()
    if state != calculated:
        got = declared_state or state.value
        issues.append(f"state mismatch. got: {got}, want: {calculated.value}")

    title = first_out_of_order(DEFAULT_SECTION_ORDER, body.section_titles)
    if title is not None:
        issues.append(f"sections are not in the correct order, first out of order: {title}")

    if not body.is_project:
        if not body.has_summary:
            issues.append("summary section is missing")
        if not body.has_topics:
            issues.append("topics section is missing")

    return issues


def get_body_issues(body: Body | None, state: State, declared_state: str = "") -> list[str]:
    """Collect body issues; only regular lesson pages have any."""
    match body:
        case DefaultBody():
            return get_default_body_issues(body, state, declared_state)
        case IndexBody() | PracticeBody() | None:
            return []


def get_filename_issues(content: Content, file_path: str) -> list[str]:
    """Check the file name against the weight, slug and title."""
    issues: list[str] = []

    filename = PurePosixPath(file_path.replace("\\", "/")).name
    if not filename.startswith(content.weight):
        issues.append("file name is not prefixed with the weight of the page")

    if f"{content.weight}-{content.slug}.md" != filename:
        issues.append("file name does not match the dash joined weight and slug")

    slug_forced = content.body is not None and content.body.is_slug_forced()
    if not slug_forced:
        expected = slugify(content.title)
        if content.slug != expected:
            issues.append(
                "slug does not match the lowercase title with dashes "
                f"(`{content.slug}`, `{expected}`)"
            )

    return issues


def get_audience_issues(content: Content) -> list[str]:
    """Check the audience and the importance ordering."""
    issues: list[str] = []

    if content.audience not in VALID_AUDIENCES:
        issues.append(f"invalid audience: {content.audience}")

    if importance_level(content.importance) < importance_level(content.outside_importance):
        issues.append("importance is lower than outside importance")

    if content.outside_importance == "" and content.audience != Audience.ALL.value:
        issues.append("outside importance is invalid")

    if content.audience == Audience.ALL.value and content.outside_importance != "":
        issues.append("audience is 'all', outside importance must be empty")

    return issues


def get_tag_issues(tags: list[str]) -> list[str]:
    """Check every tag for the reserved name, case and spaces."""
    issues: list[str] = []

    for tag in tags:
        if tag == RESERVED_TAG:
            issues.append(f"tag is '{RESERVED_TAG}'")
        if tag.lower() != tag:
            issues.append(f"tag is not lowercase: {tag}")
        if " " in tag:
            issues.append(f"tag contains spaces: {tag}")

    return issues


def get_content_issues(content: Content, file_path: str) -> list[str]:
    """Run every check on a parsed document.

    Checks never stop at the first failure: the result lists everything
    wrong with the document at once.

    Args:
        content: The parsed document.
        file_path: Path of the source file.

    Returns:
        Ordered list of human-readable issues.
    """
    issues = get_body_issues(content.body, content.state, content.declared_state)

    if not isinstance(content.body, IndexBody):
        issues.extend(get_filename_issues(content, file_path))

    issues.extend(get_audience_issues(content))
    issues.extend(get_tag_issues(content.tags))

    return issues
