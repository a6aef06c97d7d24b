"""Core domain models for mediaparser.

This module defines the foundational data structures for media name
classification.
- MediaType is the closed set of classification outcomes, including the
  UNKNOWN and AMBIGUOUS sentinels that only the classifier produces.
- The details models carry the fields extracted from a name for each concrete
  type. They form a tagged union discriminated on the ``type`` field, whose
  value is the MediaType value of the variant (MediaType is a str enum, so
  ``details.type == MediaType.TV`` holds).

Design:
- Extracted strings (title, artist, album) are stored exactly as captured from
  the name; no trimming or normalization happens here.
- Audio books and ebooks have no details model yet, so the union only covers
  TV, movie and music.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class MediaType(str, Enum):
    """Type of media a name was classified as.

    The first five members are concrete types with a detector each. UNKNOWN and
    AMBIGUOUS are sentinels returned when no detector, or more than one, matched.
    """

    TV = "tv"
    MOVIE = "movie"
    MUSIC = "music"
    AUDIO_BOOK = "audio_book"
    EBOOK = "ebook"
    UNKNOWN = "unknown"
    AMBIGUOUS = "ambiguous"


# Order in which detectors are consulted and candidate types are reported.
CONCRETE_MEDIA_TYPES: tuple[MediaType, ...] = (
    MediaType.TV,
    MediaType.MOVIE,
    MediaType.MUSIC,
    MediaType.AUDIO_BOOK,
    MediaType.EBOOK,
)

_MEDIA_TYPE_LABELS: dict[MediaType, str] = {
    MediaType.TV: "tv show",
    MediaType.MOVIE: "movie",
    MediaType.MUSIC: "music",
    MediaType.AUDIO_BOOK: "audio book",
    MediaType.EBOOK: "ebook",
    MediaType.AMBIGUOUS: "ambiguous",
}


def media_type_to_label(media_type: object) -> str:
    """Return the human-readable label for a media type.

    Args:
        media_type: A MediaType member. Any other value is treated as unknown.

    Returns:
        The fixed label, e.g. ``"tv show"`` for MediaType.TV, or ``"unknown"``.
    """
    if isinstance(media_type, MediaType):
        return _MEDIA_TYPE_LABELS.get(media_type, "unknown")
    return "unknown"


class TVDetails(BaseModel):
    """Details extracted from a TV episode or season name."""

    type: Literal["tv"] = "tv"

    title: str
    """Show title as captured, separators included (e.g. ``"Archer.2009"``)."""

    season: int = Field(ge=0)
    """Season number parsed from the ``S##`` marker."""

    episode: Optional[int] = Field(default=None, ge=0)
    """Episode number, or None for season-only names such as specials."""


class MovieDetails(BaseModel):
    """Details extracted from a movie name."""

    type: Literal["movie"] = "movie"

    title: str
    """Movie title as captured up to the release year."""

    year: int = Field(ge=0)
    """Release year (19xx or 20xx)."""


class MusicDetails(BaseModel):
    """Details extracted from a music release name."""

    type: Literal["music"] = "music"
    artist: str
    album: str
    year: int = Field(ge=0)


MediaDetails = Annotated[
    Union[TVDetails, MovieDetails, MusicDetails],
    Field(discriminator="type"),
]

# Validates plain dicts (e.g. decoded JSON) into the matching details model.
MediaDetailsAdapter: TypeAdapter[MediaDetails] = TypeAdapter(MediaDetails)
