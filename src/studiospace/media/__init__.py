"""Downloading of listing media."""

from .images import ImageDownloader, image_extension, image_filename

__all__ = ["ImageDownloader", "image_extension", "image_filename"]
