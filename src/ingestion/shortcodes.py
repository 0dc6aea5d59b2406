"""Recognizers for the inline shortcodes used in content sections."""

import logging
import re

from src.models.body import RelatedVideo
from src.models.enums import Badge, MainVideo

logger = logging.getLogger(__name__)

# Shortcode patterns, compiled once and shared read-only.
SHORTCODE_PATTERNS: dict[str, re.Pattern[str]] = {
    "missing": re.compile(r"{{<\s*main-missing\s*>}}"),
    "really_missing": re.compile(r"{{<\s*main-really-missing\s*>}}"),
    "youtube": re.compile(r"{{<\s*youtube(?:-button)?\s+([^>]*)\s*>}}"),
    "time": re.compile(r"{{<\s*time\s+(\d+)\s*>}}"),
    "badge": re.compile(r"{{<\s*badge-(\S*?)\s*>}}"),
}

# Related video entries are separated by level 3 to 5 headers.
SUB_HEADER = re.compile(r"\n####?#? .*\n")

MAIN_VIDEO_FAMILIES: dict[str, MainVideo] = {
    "missing": MainVideo.MISSING,
    "really_missing": MainVideo.REALLY_MISSING,
    "youtube": MainVideo.PRESENT,
}


def extract_main_video(content: str) -> MainVideo:
    """Classify the main video section.

    Exactly one marker across the missing, really-missing and embed
    families decides the result. No marker or several markers are
    reported as a problem.

    Args:
        content: Text of the main video section.

    Returns:
        The MainVideo classification.
    """
    total = 0
    found = MainVideo.PROBLEM

    for family, classification in MAIN_VIDEO_FAMILIES.items():
        count = len(SHORTCODE_PATTERNS[family].findall(content))
        if count:
            total += count
            found = classification

    if total != 1:
        return MainVideo.PROBLEM

    return found


def extract_time(content: str) -> tuple[int, list[str]]:
    """Return the duration in minutes and any duration issues."""
    issues: list[str] = []
    minutes = 0

    matches = SHORTCODE_PATTERNS["time"].findall(content)
    if not matches:
        issues.append("missing time shortcode")
    else:
        minutes = int(matches[0])

    if len(matches) > 1:
        issues.append("multiple time shortcodes found")

    return minutes, issues


def extract_badges(content: str) -> tuple[Badge | None, bool, list[str]]:
    """Return the first badge, the no-embed flag and any badge issues.

    The no-embed badge only sets the flag and never counts as the
    entry's badge.
    """
    badges: list[Badge] = []
    issues: list[str] = []
    no_embed = False

    for name in SHORTCODE_PATTERNS["badge"].findall(content):
        try:
            badge = Badge(name)
        except ValueError:
            issues.append(f"Unknown badge: '{name}'")
            continue

        if badge == Badge.NO_EMBED:
            no_embed = True
        else:
            badges.append(badge)

    if not badges:
        issues.append("missing badge shortcode")
        return None, no_embed, issues

    for badge in badges[1:]:
        issues.append(f"unexpected badge shortcode found: {badge.value}")

    return badges[0], no_embed, issues


def extract_youtube(content: str, no_embed: bool) -> tuple[int, list[str]]:
    """Return the number of embeds and any embed issues."""
    issues: list[str] = []

    count = len(SHORTCODE_PATTERNS["youtube"].findall(content))
    if count == 0:
        if not no_embed:
            issues.append("missing youtube shortcode")
    elif count == 1:
        if no_embed:
            issues.append("unexpected youtube shortcode together with no-embed badge")
    else:
        issues.append("multiple youtube shortcodes found")

    return count, issues


def extract_related_video(content: str) -> RelatedVideo:
    """Parse one related video entry.

    An entry without any duration, badge or embed evidence is returned
    with ``valid=False`` so that stray sub-headers are not reported.

    Args:
        content: Text of a single related video entry.

    Returns:
        The parsed RelatedVideo.
    """
    issues: list[str] = []

    minutes, time_issues = extract_time(content)
    issues.extend(time_issues)

    badge, no_embed, badge_issues = extract_badges(content)
    issues.extend(badge_issues)

    embed_count, embed_issues = extract_youtube(content, no_embed)
    issues.extend(embed_issues)

    time_match = SHORTCODE_PATTERNS["time"].search(content)
    if embed_count == 0 and not no_embed and badge is None and time_match is None:
        return RelatedVideo()

    if time_match is not None and badge is not None:
        badge_match = SHORTCODE_PATTERNS["badge"].search(content)
        if badge_match and badge_match.start() < time_match.start():
            issues.append("badge should be placed after time")

    return RelatedVideo(badge=badge, minutes=minutes, issues=issues, valid=True)


def extract_related_videos(content: str) -> list[RelatedVideo]:
    """Parse every entry of the related videos section.

    Args:
        content: Text of the related videos section.

    Returns:
        Valid entries in document order.
    """
    if not content.strip():
        return []

    related_videos: list[RelatedVideo] = []
    for chunk in SUB_HEADER.split("\n" + content):
        if not chunk.strip():
            continue

        related_video = extract_related_video(chunk)
        if related_video.valid:
            related_videos.append(related_video)
        else:
            logger.debug("Skipping related video entry without evidence")

    return related_videos

