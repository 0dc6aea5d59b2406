"""Enumerations shared by the content models."""

from enum import Enum


class State(str, Enum):
    """Completion state of a page, declared or calculated."""

    UNKNOWN = "unknown"
    STUB = "stub"
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    def __str__(self) -> str:
        return self.value


class MainVideo(str, Enum):
    """Classification of the evidence found in the main video section."""

    PRESENT = "present"
    MISSING = "missing"
    REALLY_MISSING = "really missing"
    PROBLEM = "problem"

    def __str__(self) -> str:
        return self.value


class Badge(str, Enum):
    """Categorical tag on a related video entry."""

    ALTERNATIVE = "alternative"
    EXTRA = "extra"
    FUN = "fun"
    HINT = "hint"
    MUST_SEE = "must-see"
    SUMMARY = "summary"
    UNCHECKED = "unchecked"
    NO_EMBED = "no-embed"  # marks an entry that needs no embedded video

    def __str__(self) -> str:
        return self.value


class Audience(str, Enum):
    """Primary audience a page is written for."""

    ALL = "all"
    ALL_PROFESSIONALS = "all professionals"
    LINUX_USERS = "Linux users"
    WINDOWS_USERS = "Windows users"
    MAC_USERS = "Mac users"
    ALL_DEVELOPERS = "all developers"
    WEB_DEVELOPERS = "web developers"
    MOBILE_DEVELOPERS = "mobile developers"
    DESKTOP_DEVELOPERS = "desktop developers"
    GAME_DEVELOPERS = "game developers"
    SYSADMINS = "sysadmins"


VALID_AUDIENCES: frozenset[str] = frozenset(a.value for a in Audience)


class Importance(str, Enum):
    """How critical a page is for a given audience."""

    CRITICAL = "critical"
    ESSENTIAL = "essential"
    IMPORTANT = "important"
    RELEVANT = "relevant"
    OPTIONAL = "optional"
    IRRELEVANT = "irrelevant"

    def level(self) -> int:
        return IMPORTANCE_LEVELS[self]


IMPORTANCE_LEVELS: dict[Importance, int] = {
    Importance.CRITICAL: 5,
    Importance.ESSENTIAL: 4,
    Importance.IMPORTANT: 3,
    Importance.RELEVANT: 2,
    Importance.OPTIONAL: 1,
    Importance.IRRELEVANT: 0,
}


def importance_level(value: str) -> int:
    """Return the ordinal level of a declared importance string.

    Empty or unrecognized values rank below every known importance.

    Args:
        value: Raw importance value from the front matter.

    Returns:
        Level between 0 and 5, or -1 for unknown values.
    """
    try:
        return Importance(value).level()
    except ValueError:
        return -1
