from .errors import ImageTooLarge, InvalidTint, MarkerError, UnsupportedImageFormat
from .image import MarkerImage, TintSpec, inspect_marker, normalize_marker_url

__all__ = [
    "ImageTooLarge",
    "InvalidTint",
    "MarkerError",
    "MarkerImage",
    "TintSpec",
    "UnsupportedImageFormat",
    "inspect_marker",
    "normalize_marker_url",
]
