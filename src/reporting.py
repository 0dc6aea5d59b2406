"""Plain-text reports of a checked course tree."""

from collections.abc import Collection

from src.models.enums import State
from src.models.tree import Chapter, Course, Courses, CourseStats, Page

# Width of each column of the stats table.
STATS_COLUMNS: list[tuple[str, int]] = [
    ("Course", 15),
    ("All", 5),
    ("Stub", 4),
    ("Incomplete", 10),
    ("Complete", 8),
    ("Errors", 6),
    ("Percent", 7),
]


def render_page(page: Page) -> str:
    """Render a page line with its declared state, then one line per issue."""
    lines = [f"    {page.file_path} - {page.state.value}"]
    lines.extend(f"        - {issue}" for issue in page.get_issues())
    return "\n".join(lines) + "\n"


def render_chapter(
    chapter: Chapter,
    states: Collection[State] | None = None,
    print_index: bool = True,
    print_non_index: bool = True,
) -> str:
    """Render a chapter and the pages passing the filters.

    Prepares the chapter first so that index pages show their derived
    state.

    Args:
        chapter: The chapter to render.
        states: Declared states to keep, or None for all.
        print_index: Whether to include ``_index.md`` pages.
        print_non_index: Whether to include the other pages.

    Returns:
        The rendered text.
    """
    chapter.prepare()

    result = f"  {chapter.title}\n"
    for page in chapter.pages:
        if page.is_index and not print_index:
            continue
        if not page.is_index and not print_non_index:
            continue
        if states is not None and page.state not in states:
            continue

        result += render_page(page)

    return result


def render_course(
    course: Course,
    states: Collection[State] | None = None,
    print_index: bool = True,
    print_non_index: bool = True,
) -> str:
    """Render a course title followed by each of its chapters."""
    result = f"{course.title}\n"
    for chapter in course.chapters:
        result += render_chapter(chapter, states, print_index, print_non_index)
    return result


def render_courses(
    courses: Courses,
    count: int,
    states: Collection[State] | None = None,
    print_index: bool = True,
    print_non_index: bool = True,
) -> str:
    """Render the processed file count and the whole course tree.

    Args:
        courses: The course tree.
        count: Number of markdown files processed.
        states: Declared states to keep, or None for all.
        print_index: Whether to include ``_index.md`` pages.
        print_non_index: Whether to include the other pages.

    Returns:
        The rendered text.
    """
    result = f"Processed {count} markdown files\n"
    for course in courses.courses:
        result += render_course(course, states, print_index, print_non_index)
    return result


def render_errors(courses: Courses, count: int) -> str:
    """Render the processed file count followed by every prefixed error."""
    lines = [f"Processed {count} markdown files"]
    lines.extend(courses.get_errors())
    return "\n".join(lines) + "\n"


def _column(value: object, width: int) -> str:
    text = str(value)
    if len(text) > width:
        return text[:width]
    return text.ljust(width)


def _stats_row(stats: CourseStats, total: int) -> str:
    values = [
        stats.title,
        stats.total,
        stats.stub,
        stats.incomplete,
        stats.complete,
        stats.errors,
        stats.percent_of(total),
    ]
    return " | ".join(_column(v, w) for v, (_, w) in zip(values, STATS_COLUMNS))


def _stats_line() -> str:
    parts = []
    for i, (_, width) in enumerate(STATS_COLUMNS):
        if i == 0:
            parts.append("-" * (width + 1))
        else:
            parts.append("+" + "-" * (width + 2))
    return "".join(parts)


def render_stats(courses: Courses) -> str:
    """Render a fixed-width table of page counts per course.

    Args:
        courses: The course tree, prepared or not.

    Returns:
        The table, one course per row followed by the total.
    """
    courses.prepare()
    per_course, total = courses.stats()

    lines = [
        " | ".join(_column(name, width) for name, width in STATS_COLUMNS),
        _stats_line(),
    ]
    lines.extend(_stats_row(stats, total.total) for stats in per_course)
    lines.append(_stats_line())
    lines.append(_stats_row(total, total.total))
    return "\n".join(lines) + "\n"
