import re
from typing import Callable, List

# Names like "Skipping/Jump Rope" split on the slash as well as spaces
_TOKEN_SPLIT = re.compile(r"[\s/]+")
MIN_TOKEN_LENGTH = 3

NameMatcher = Callable[[str, str], bool]


def _tokens(name: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split(name) if len(t) >= MIN_TOKEN_LENGTH]


def names_match(logged_name: str, planned_name: str) -> bool:
    """
    Loose, case-insensitive match between a logged exercise and a plan item.

    "morning walk" matches "Brisk Walking" because the token "walk" appears
    inside "brisk walking". Works in either direction.
    """
    logged = (logged_name or "").strip().lower()
    planned = (planned_name or "").strip().lower()
    if not logged or not planned:
        return False

    if logged in planned or planned in logged:
        return True

    return (
        any(token in logged for token in _tokens(planned))
        or any(token in planned for token in _tokens(logged))
    )
