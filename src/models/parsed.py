"""Parsed document models produced by the section splitter."""

from pydantic import BaseModel, Field

# Section vocabulary, compared against lower-cased header titles.
ROOT_SECTION = "root"
MAIN_VIDEO = "main video"
SUMMARY = "summary"
TOPICS = "topics"
CODE = "code"
RELATED_LESSONS = "related lessons"
RELATED_VIDEOS = "related videos"
RELATED_ARTICLES = "related articles"
RELATED_LINKS = "related links"
EXERCISES = "exercises"
NOTES = "notes"

# chapter index pages
EPISODES = "episodes"

# practice pages
DESCRIPTION = "description"
RECOMMENDED_CHALLENGES = "recommended challenges"
ADDITIONAL_CHALLENGES = "additional challenges"


class Section(BaseModel):
    """A titled block of a document body.

    Titles are lower-cased header texts. ``root`` holds the text found
    before the first header.
    """

    title: str
    content: str = ""


class ParsedDocument(BaseModel):
    """Front matter values and ordered sections of a single document.

    Sections keep their encounter order and duplicates are not merged,
    so the order check can report them.
    """

    front_matter: dict[str, str | list[str]] = Field(default_factory=dict)
    sections: list[Section] = Field(default_factory=list)

    def has_non_empty(self, title: str) -> bool:
        for section in self.sections:
            if section.title == title:
                return len(section.content) > 0
        return False

    def get(self, title: str) -> str:
        for section in self.sections:
            if section.title == title:
                return section.content
        return ""

    def titles(self) -> list[str]:
        return [section.title for section in self.sections]

    def value(self, key: str, default: str = "") -> str:
        """Return a scalar front matter value, joining arrays if needed."""
        raw = self.front_matter.get(key, default)
        if isinstance(raw, list):
            return ", ".join(raw)
        return raw

    def values(self, key: str) -> list[str]:
        """Return an array front matter value as a list of strings."""
        raw = self.front_matter.get(key)
        if raw is None:
            return []
        if isinstance(raw, list):
            return list(raw)
        return [raw] if raw else []
