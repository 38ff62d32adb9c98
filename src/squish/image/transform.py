"""Pure resize/blur computation on validated images."""

import math

from PIL import Image, ImageFilter

from ..utils.profiling import timed
from .validated_image import ValidatedImage


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def target_dimensions(width: int, height: int, target_width: int) -> tuple[int, int]:
    """Aspect-preserving output size for a width-driven resize.

    The image is fitted inside a box of ``target_width`` by
    ``ceil(height * target_width / width)``. Because the box height is rounded
    up, width is always the binding side: the result is ``target_width`` wide
    and the height is the exact scaled height rounded to the nearest pixel.

    Args:
        width: Current width
        height: Current height
        target_width: Requested width

    Returns:
        (new_width, new_height), each at least 1
    """
    bound_height = math.ceil(height * target_width / width)

    ratio = min(target_width / width, bound_height / height)
    new_width = max(_round_half_away(width * ratio), 1)
    new_height = max(_round_half_away(height * ratio), 1)
    return new_width, new_height


@timed
def resize_image(
    image: ValidatedImage,
    target_width: int,
    blur_strength: int = 0,
) -> ValidatedImage:
    """
    Resize an image by width, then optionally blur it.

    Lanczos resampling is used throughout; the input image is left untouched.

    Args:
        image: Image to resize
        target_width: Requested width in pixels
        blur_strength: Gaussian blur radius; 0 skips the blur pass entirely

    Returns:
        New ValidatedImage carrying the same format tag
    """
    size = target_dimensions(image.width, image.height, target_width)
    resized = image.pixels.resize(size, Image.Resampling.LANCZOS)

    if blur_strength > 0:
        resized = resized.filter(ImageFilter.GaussianBlur(radius=blur_strength))

    return ValidatedImage(pixels=resized, format=image.format)
