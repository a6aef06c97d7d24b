"""Media name classifier.

This module runs every detector against a name, collects the candidate types
that matched, resolves known ambiguous combinations and turns the result into a
single MediaType verdict.
- A name that no detector matches is UNKNOWN.
- A name that still matches more than one type after resolution is AMBIGUOUS.

Both entry points are pure functions of the name; nothing is cached between
calls.
"""

import logging
from typing import Mapping, Optional

from mediaparser.core.detectors import DETECTORS, detector_for_type
from mediaparser.models.core import MediaDetails, MediaType
from mediaparser.utils.debug import debug

# Logger for this module
logger = logging.getLogger(__name__)

# Explicit candidate set -> resolved set mapping. Sets not listed here are left
# unchanged.
AMBIGUITY_RESOLUTIONS: Mapping[frozenset[MediaType], frozenset[MediaType]] = {
    # A TV name with a year in its title (Archer.2009.S06E03) also matches the
    # movie pattern; the season marker wins.
    frozenset({MediaType.TV, MediaType.MOVIE}): frozenset({MediaType.TV}),
}


def _require_name(name: object) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Media name must be a str, not {type(name).__name__}")
    return name


def candidate_types_for_name(name: str) -> frozenset[MediaType]:
    """Return the concrete types whose detector matches *name*.

    Args:
        name: Raw media name.

    Returns:
        The candidate set, before any disambiguation.

    Raises:
        TypeError: If name is not a string.
    """
    name = _require_name(name)
    return frozenset(
        media_type for media_type, detect in DETECTORS if detect(name) is not None
    )


def resolve_ambiguity(candidates: frozenset[MediaType]) -> frozenset[MediaType]:
    """Collapse a known ambiguous candidate set to its resolved form."""
    return AMBIGUITY_RESOLUTIONS.get(candidates, candidates)


def media_type_for_name(name: str) -> MediaType:
    """Classify a media name.

    Args:
        name: Raw media name, e.g. ``"Archer.2009.S06E03.720p.HDTV.x264-SCENE.mkv"``.

    Returns:
        The single resolved concrete type, MediaType.UNKNOWN when nothing
        matched, or MediaType.AMBIGUOUS when several types remain.

    Raises:
        TypeError: If name is not a string.
    """
    candidates = candidate_types_for_name(name)
    logger.debug(
        "Candidates for %r: %s", name, sorted(t.value for t in candidates)
    )
    resolved = resolve_ambiguity(candidates)
    if resolved != candidates:
        logger.debug(
            "Resolved %s to %s for %r",
            sorted(t.value for t in candidates),
            sorted(t.value for t in resolved),
            name,
        )

    if not resolved:
        media_type = MediaType.UNKNOWN
    elif len(resolved) == 1:
        (media_type,) = resolved
    else:
        media_type = MediaType.AMBIGUOUS

    debug(f"Classified {name!r} as {media_type.value}")
    return media_type


def media_details_for_name(name: str) -> Optional[MediaDetails]:
    """Extract the details for the type a media name is classified as.

    The resolved type's detector is run again rather than reusing the result
    from classification.

    Args:
        name: Raw media name.

    Returns:
        The details model for the resolved type, or None when the name is
        UNKNOWN, AMBIGUOUS, or a type with no details (audio book, ebook).

    Raises:
        TypeError: If name is not a string.
    """
    detect = detector_for_type(media_type_for_name(name))
    if detect is None:
        return None
    return detect(name)
