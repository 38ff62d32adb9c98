"""squish - resize images via the command line."""

from .common.config import DEFAULT_CONFIG, SquishConfig
from .common.errors import SquishError
from .common.schemas import ResizeOutcome, ResizeRequest
from .image.formats import SupportedFormat
from .image.transform import resize_image
from .image.validated_image import ValidatedImage
from .pipeline.runner import run_pipeline

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "SquishConfig",
    "SquishError",
    "ResizeOutcome",
    "ResizeRequest",
    "SupportedFormat",
    "ValidatedImage",
    "resize_image",
    "run_pipeline",
    "__version__",
]
