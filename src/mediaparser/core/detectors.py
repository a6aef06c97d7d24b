"""Per-type detectors for media names.

Each detector takes a raw name and either returns the details model for its
media type or None when the name does not look like that type. Detectors are
independent of each other; the classifier decides what to do when several of
them match the same name.

All title-like groups are greedy, so when a name contains more than one
season-like or year-like token the rightmost one bounds the captured title.
"""

import re
from typing import Callable, Optional

from mediaparser.models.core import (
    MediaDetails,
    MediaType,
    MovieDetails,
    MusicDetails,
    TVDetails,
)

Detector = Callable[[str], Optional[MediaDetails]]

# Characters accepted between a title and its season/year token.
SEPARATOR = r"[._ \-]"

# re.ASCII keeps \d and \s from matching non-ASCII digits and spaces.
# Matches: this.is.a.title.s##e##.whatever
TV_EPISODE_PATTERN = re.compile(
    rf"(?P<title>.+){SEPARATOR}[Ss](?P<season>\d+)[EeXx](?P<episode>\d{{2}}){SEPARATOR}",
    re.ASCII,
)

# Matches: this.is.a.title.s##.whatever
TV_SEASON_PATTERN = re.compile(
    rf"(?P<title>.+){SEPARATOR}[Ss](?P<season>\d+){SEPARATOR}",
    re.ASCII,
)

# Matches: this.is.a.title.1999.whatever
MOVIE_PATTERN = re.compile(
    rf"(?P<title>.+){SEPARATOR}(?P<year>(?:19|20)\d{{2}}){SEPARATOR}",
    re.ASCII,
)

# Matches: artist - album (year) - V0
MUSIC_PATTERN = re.compile(
    r"(?P<artist>.*)\s-\s(?P<album>.*)\s\((?P<year>(?:19|20)\d{2})\)\s-\s.*V\d",
    re.ASCII,
)


def detect_tv(name: str) -> Optional[TVDetails]:
    """Detect a TV episode or season name.

    The episode pattern is tried first; if it fails a season-only pattern is
    used and the episode is left unset.

    Args:
        name: Raw media name.

    Returns:
        TVDetails on a match, otherwise None.
    """
    match = TV_EPISODE_PATTERN.search(name)
    if match:
        return TVDetails(
            title=match["title"],
            season=int(match["season"]),
            episode=int(match["episode"]),
        )

    match = TV_SEASON_PATTERN.search(name)
    if match:
        return TVDetails(title=match["title"], season=int(match["season"]))

    return None


def detect_movie(name: str) -> Optional[MovieDetails]:
    """Detect a movie name of the form ``title<sep>year<sep>``."""
    match = MOVIE_PATTERN.search(name)
    if match:
        return MovieDetails(title=match["title"], year=int(match["year"]))
    return None


def detect_music(name: str) -> Optional[MusicDetails]:
    """Detect a music release of the form ``artist - album (year) - ...V#``."""
    match = MUSIC_PATTERN.search(name)
    if match:
        return MusicDetails(
            artist=match["artist"],
            album=match["album"],
            year=int(match["year"]),
        )
    return None


def detect_audio_book(name: str) -> None:
    """Audio book names are not recognised yet."""
    return None


def detect_ebook(name: str) -> None:
    """Ebook names are not recognised yet."""
    return None


DETECTORS: tuple[tuple[MediaType, Detector], ...] = (
    (MediaType.TV, detect_tv),
    (MediaType.MOVIE, detect_movie),
    (MediaType.MUSIC, detect_music),
    (MediaType.AUDIO_BOOK, detect_audio_book),
    (MediaType.EBOOK, detect_ebook),
)

_DETECTORS_BY_TYPE: dict[MediaType, Detector] = dict(DETECTORS)


def detector_for_type(media_type: MediaType) -> Optional[Detector]:
    """Return the detector for a concrete media type.

    Args:
        media_type: The media type to look up.

    Returns:
        The detector function, or None for the UNKNOWN/AMBIGUOUS sentinels.
    """
    return _DETECTORS_BY_TYPE.get(media_type)
