"""Core functionality for mediaparser.

This package exposes the name classification API for use by the CLI and other
modules.
- media_type_for_name: Runs every detector against a name and resolves the
  result to a single MediaType (or the UNKNOWN/AMBIGUOUS sentinels).
- media_details_for_name: Returns the structured details extracted for the
  resolved type, if any.

See detectors.py for the per-type patterns and classifier.py for the
disambiguation policy.
"""

from mediaparser.core.classifier import media_details_for_name, media_type_for_name

__all__ = ["media_details_for_name", "media_type_for_name"]
