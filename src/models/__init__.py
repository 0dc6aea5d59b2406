"""Data models for the content checker."""

from src.models.body import (
    Body,
    DefaultBody,
    IndexBody,
    PracticeBody,
    RelatedVideo,
)
from src.models.content import Content
from src.models.enums import Audience, Badge, Importance, MainVideo, State
from src.models.parsed import ParsedDocument, Section
from src.models.tree import Chapter, Course, Courses, CourseStats, Page

__all__ = [
    "Audience",
    "Badge",
    "Body",
    "Chapter",
    "Content",
    "Course",
    "CourseStats",
    "Courses",
    "DefaultBody",
    "Importance",
    "IndexBody",
    "MainVideo",
    "Page",
    "ParsedDocument",
    "PracticeBody",
    "RelatedVideo",
    "Section",
    "State",
]
