"""Domain models for the mediaparser application."""

from mediaparser.models.core import (
    CONCRETE_MEDIA_TYPES,
    MediaDetails,
    MediaDetailsAdapter,
    MediaType,
    MovieDetails,
    MusicDetails,
    TVDetails,
    media_type_to_label,
)

__all__ = [
    "CONCRETE_MEDIA_TYPES",
    "MediaDetails",
    "MediaDetailsAdapter",
    "MediaType",
    "MovieDetails",
    "MusicDetails",
    "TVDetails",
    "media_type_to_label",
]
