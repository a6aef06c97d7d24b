# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""mediaparser - Classify media file names and extract their details."""

from mediaparser.__about__ import __version__
from mediaparser.core.classifier import (
    media_details_for_name,
    media_type_for_name,
)
from mediaparser.models.core import (
    MediaDetails,
    MediaType,
    MovieDetails,
    MusicDetails,
    TVDetails,
    media_type_to_label,
)

__all__ = [
    "__version__",
    "MediaDetails",
    "MediaType",
    "MovieDetails",
    "MusicDetails",
    "TVDetails",
    "media_details_for_name",
    "media_type_for_name",
    "media_type_to_label",
]
