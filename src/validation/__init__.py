"""Content validation: issue collection and slug derivation."""

from src.validation.issues import get_body_issues, get_content_issues
from src.validation.slug import slugify

__all__ = ["get_body_issues", "get_content_issues", "slugify"]
