"""Exception types raised by the pipeline."""

from __future__ import annotations


class GhibliAssetsError(Exception):
    """Base class for pipeline errors."""


class EncoderNotFoundError(GhibliAssetsError):
    """The external WebP encoder is not on the search path."""


class FilmListError(GhibliAssetsError):
    """The film list could not be fetched or had an unexpected shape."""


class DownloadError(GhibliAssetsError):
    """A single image could not be downloaded."""


class ConversionError(GhibliAssetsError):
    """The encoder failed to transcode a downloaded image."""
