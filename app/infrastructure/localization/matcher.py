"""Matching of candidate culture names against supported cultures."""

from typing import Callable, Iterable, Optional, Sequence

from infrastructure.localization.cultures import parent_culture_name

# Upper bound on the number of parent hops tried for one candidate
MAX_CULTURE_FALLBACK_DEPTH = 5

ParentResolver = Callable[[str], Optional[str]]


def match_culture(
    name: Optional[str], supported_cultures: Optional[Sequence[str]]
) -> Optional[str]:
    """Find ``name`` in ``supported_cultures`` ignoring case.

    The first supported entry that matches wins, and it is returned as
    spelled in the supported list. The invariant culture ("") never matches.

    Args:
        name: Candidate culture name.
        supported_cultures: Supported names in priority order.

    Returns:
        The supported spelling of the match, or None.
    """
    if not name or not supported_cultures:
        return None
    folded = name.casefold()
    for supported in supported_cultures:
        if supported.casefold() == folded:
            return supported
    return None


def match_culture_with_fallback(
    name: Optional[str],
    supported_cultures: Optional[Sequence[str]],
    fallback_to_parent: bool,
    depth: int = 0,
    parent_resolver: ParentResolver = parent_culture_name,
) -> Optional[str]:
    """Match ``name``, walking up its parent cultures when allowed.

    Args:
        name: Candidate culture name.
        supported_cultures: Supported names in priority order.
        fallback_to_parent: Whether parents (en-US -> en) may be tried.
        depth: Number of parent hops already taken.
        parent_resolver: Returns the parent name, or None when there is none
            or the name cannot be parsed.

    Returns:
        The supported spelling of the match, or None.
    """
    if not name:
        return None

    culture = match_culture(name, supported_cultures)

    if (
        culture is None
        and fallback_to_parent
        and depth < MAX_CULTURE_FALLBACK_DEPTH
    ):
        parent = parent_resolver(name)
        if parent is not None:
            culture = match_culture_with_fallback(
                parent,
                supported_cultures,
                fallback_to_parent,
                depth=depth + 1,
                parent_resolver=parent_resolver,
            )

    return culture


def match_any_culture(
    names: Iterable[Optional[str]],
    supported_cultures: Optional[Sequence[str]],
    fallback_to_parent: bool,
    parent_resolver: ParentResolver = parent_culture_name,
) -> Optional[str]:
    """Return the match for the first candidate that has one.

    Candidates are tried in the order given; empty names are skipped.
    """
    if not supported_cultures:
        return None
    for name in names:
        if not name:
            continue
        culture = match_culture_with_fallback(
            name,
            supported_cultures,
            fallback_to_parent,
            parent_resolver=parent_resolver,
        )
        if culture is not None:
            return culture
    return None
