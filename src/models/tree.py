"""Course tree: pages grouped into chapters grouped into courses."""

import logging
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from src.models.body import IndexBody
from src.models.content import Content
from src.models.enums import State

logger = logging.getLogger(__name__)

INDEX_FILENAME = "_index.md"


class Page(BaseModel):
    """A single markdown file within a chapter."""

    file_path: str
    title: str
    content: Content

    @property
    def state(self) -> State:
        return self.content.state

    @property
    def is_index(self) -> bool:
        return self.title == INDEX_FILENAME or isinstance(self.content.body, IndexBody)

    def get_issues(self) -> list[str]:
        return self.content.get_issues(self.file_path)

    def get_errors(self) -> list[str]:
        """Return the issues of this page prefixed with its file path."""
        return [f"{self.file_path} - {issue}" for issue in self.get_issues()]


class CourseStats(BaseModel):
    """Page counts by declared state, plus the number of pages with issues."""

    title: str
    total: int = 0
    stub: int = 0
    incomplete: int = 0
    complete: int = 0
    errors: int = 0

    def add(self, other: "CourseStats") -> None:
        """Accumulate the counts of ``other`` into this row."""
        self.total += other.total
        self.stub += other.stub
        self.incomplete += other.incomplete
        self.complete += other.complete
        self.errors += other.errors

    def percent_of(self, total: int) -> int:
        """Return this row's page count as a whole percentage of ``total``."""
        if total <= 0:
            return 0
        return self.total * 100 // total


class Chapter(BaseModel):
    """An ordered list of pages sharing a directory.

    ``_prepared`` is a compute-once guard owned by each chapter: the
    index upgrade in ``prepare`` runs at most once per instance.
    """

    title: str
    pages: list[Page] = Field(default_factory=list)

    _prepared: bool = PrivateAttr(default=False)

    @property
    def prepared(self) -> bool:
        return self._prepared

    def add(self, file_path: str, page_title: str, content: Content) -> Page:
        """Append a page to the chapter and return it."""
        page = Page(file_path=file_path, title=page_title, content=content)
        self.pages.append(page)
        return page

    def prepare(self) -> None:
        """Mark the chapter index complete when every other page is complete.

        Requires an index page and at least one non-index page. Pages
        count by their declared state.
        """
        if self._prepared:
            return

        self._prepared = True

        index_body: IndexBody | None = None
        pages_exist = False
        incomplete = False

        for page in self.pages:
            match page.content.body:
                case IndexBody() as body:
                    index_body = body
                case _:
                    pages_exist = True
                    if page.state != State.COMPLETE:
                        incomplete = True

        if index_body is None or not pages_exist or incomplete:
            return

        index_body.mark_complete()
        logger.debug("Chapter %s: index marked complete", self.title)

    def get_errors(self) -> list[str]:
        errors: list[str] = []
        for page in self.pages:
            errors.extend(page.get_errors())
        return errors


class Course(BaseModel):
    """A top-level course holding chapters in insertion order."""

    title: str
    chapters: list[Chapter] = Field(default_factory=list)

    _chapter_index: dict[str, int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._chapter_index = {c.title: i for i, c in enumerate(self.chapters)}

    def chapter(self, title: str) -> Chapter:
        """Find a chapter by title, creating it if missing."""
        position = self._chapter_index.get(title)
        if position is not None:
            return self.chapters[position]

        chapter = Chapter(title=title)
        self._chapter_index[title] = len(self.chapters)
        self.chapters.append(chapter)
        return chapter

    def prepare(self) -> None:
        for chapter in self.chapters:
            chapter.prepare()

    def get_errors(self) -> list[str]:
        errors: list[str] = []
        for chapter in self.chapters:
            errors.extend(chapter.get_errors())
        return errors

    def stats(self) -> CourseStats:
        """Count the pages of every chapter by declared state and issues."""
        stats = CourseStats(title=self.title)

        for chapter in self.chapters:
            for page in chapter.pages:
                if page.state == State.STUB:
                    stats.stub += 1
                elif page.state == State.INCOMPLETE:
                    stats.incomplete += 1
                elif page.state == State.COMPLETE:
                    stats.complete += 1

                if page.get_issues():
                    stats.errors += 1

            stats.total += len(chapter.pages)

        return stats


class Courses(BaseModel):
    """Insertion-ordered collection of courses keyed by title."""

    courses: list[Course] = Field(default_factory=list)

    _course_index: dict[str, int] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._course_index = {c.title: i for i, c in enumerate(self.courses)}

    def course(self, title: str) -> Course:
        """Find a course by title, creating it if missing."""
        position = self._course_index.get(title)
        if position is not None:
            return self.courses[position]

        course = Course(title=title)
        self._course_index[title] = len(self.courses)
        self.courses.append(course)
        return course

    def add(
        self,
        file_path: str,
        course_title: str,
        chapter_title: str,
        page_title: str,
        content: Content,
    ) -> Page:
        """Append a page, creating its course and chapter on first use.

        Args:
            file_path: Path of the source file.
            course_title: Course directory name.
            chapter_title: Chapter directory name.
            page_title: File name of the page.
            content: Parsed content of the page.

        Returns:
            The newly created Page.
        """
        chapter = self.course(course_title).chapter(chapter_title)
        return chapter.add(file_path, page_title, content)

    def prepare(self) -> None:
        for course in self.courses:
            course.prepare()

    def get_errors(self) -> list[str]:
        errors: list[str] = []
        for course in self.courses:
            errors.extend(course.get_errors())
        return errors

    def stats(self) -> tuple[list[CourseStats], CourseStats]:
        """Compute per-course stats and their total.

        Returns:
            Tuple of (stats per course in insertion order, total stats).
        """
        total = CourseStats(title="Total")
        per_course: list[CourseStats] = []

        for course in self.courses:
            stats = course.stats()
            per_course.append(stats)
            total.add(stats)

        return per_course, total
