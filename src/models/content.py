"""Content data model."""

from typing import Optional

from pydantic import BaseModel, Field

from src.models.body import Body
from src.models.enums import State


class Content(BaseModel):
    """The parsed record of one markdown document.

    Audience, importance and the raw ``state`` string are kept as declared
    so that invalid values can be reported verbatim. ``body`` is None only
    for documents too short to carry a front matter block.
    """

    title: str = ""
    state: State = State.UNKNOWN
    declared_state: str = ""
    body: Optional[Body] = None
    slug: str = ""
    weight: str = ""
    audience: str = ""
    importance: str = ""
    outside_importance: str = ""
    tags: list[str] = Field(default_factory=list)

    def calculated_state(self) -> State:
        if self.body is None:
            return State.STUB
        return self.body.calculate_state()

    def get_issues(self, file_path: str) -> list[str]:
        """Validate this content against its file path.

        Args:
            file_path: Path of the source file, used for filename checks.

        Returns:
            Ordered list of human-readable issues, empty if valid.
        """
        from src.validation.issues import get_content_issues

        return get_content_issues(self, file_path)
