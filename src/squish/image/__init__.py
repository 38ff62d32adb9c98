"""Image module - format tags, validated images, and transforms."""

from .formats import SupportedFormat
from .transform import resize_image, target_dimensions
from .validated_image import ValidatedImage

__all__ = [
    "SupportedFormat",
    "ValidatedImage",
    "resize_image",
    "target_dimensions",
]
