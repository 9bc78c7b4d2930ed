from __future__ import annotations

from collections.abc import Callable, Iterable

Check = tuple[str, bool, str]


def collect_errors(checks: Iterable[Check]) -> dict[str, str]:
    """Keeps the message of every failing (field, passed, message) check, in order."""
    return {field: message for field, passed, message in checks if not passed}


def run_checks(value_of: Callable[[str], str], rules: Iterable[tuple[str, Callable[[str], bool], str]]) -> list[Check]:
    return [(field, predicate(value_of(field)), message) for field, predicate, message in rules]
