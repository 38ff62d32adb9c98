"""Business rules gating the resize pipeline."""

from ..common.config import SquishConfig
from ..common.errors import (
    ClipboardFormatUnsupported,
    NoDestination,
    NoOpResize,
    RatioExceeded,
    WidthTooSmall,
)
from ..common.schemas import ResizeRequest
from ..image.formats import SupportedFormat
from ..image.validated_image import ValidatedImage


class RequestValidator:
    """Checks a ResizeRequest, first on its own and then against an image.

    ``validate_request`` needs no image and is meant to run before any I/O,
    so requests that can never succeed are rejected without reading anything.
    """

    def __init__(self, config: SquishConfig):
        self.config: SquishConfig = config

    def validate_request(self, request: ResizeRequest) -> None:
        """Descriptor-level checks: destination presence and the width floor.

        Raises:
            NoDestination: If neither an output file nor the clipboard was requested
            WidthTooSmall: If the width is below the configured floor
        """
        if not request.has_destination:
            raise NoDestination(
                "at least one destination (a local output file or the system clipboard) needs to be provided"
            )

        threshold = self.config.resize_width_lower_threshold
        if request.width < threshold:
            raise WidthTooSmall(f"width must be greater than or equal to {threshold}")

    def validate_for_image(self, image: ValidatedImage, request: ResizeRequest) -> None:
        """Checks that depend on the decoded image.

        Raises:
            NoOpResize: If the width equals the image's width
            RatioExceeded: If the width is too many times the image's width
            ClipboardFormatUnsupported: If the clipboard is requested for a non-PNG image
        """
        if request.width == image.width:
            raise NoOpResize("resize width is the same as the input image's width")

        ceiling = self.config.resize_ratio_upper_threshold
        ratio = request.width / image.width
        if ratio > ceiling:
            raise RatioExceeded(
                f"resize width cannot be more than {ceiling:g} times the width of the input image "
                + f"(which is {image.width})"
            )

        if request.copy_to_clipboard and image.format is not SupportedFormat.PNG:
            raise ClipboardFormatUnsupported("copy to clipboard is only supported for PNG files")
