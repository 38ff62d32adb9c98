"""Single-shot pipeline: acquire, validate, resize, deliver."""

from loguru import logger

from ..common.config import SquishConfig
from ..common.schemas import ResizeOutcome, ResizeRequest
from ..image.transform import resize_image
from ..image.validated_image import ValidatedImage
from ..utils.clipboard import Clipboard
from .dispatch import OutputDispatcher
from .source import SourceAcquirer
from .validator import RequestValidator


def run_pipeline(
    descriptor: str,
    request: ResizeRequest,
    *,
    config: SquishConfig,
    clipboard: Clipboard,
) -> ResizeOutcome:
    """Run one resize from input descriptor to delivered output.

    Progress is logged at INFO. The first failure aborts the run by raising
    a SquishError; nothing is retried.

    Args:
        descriptor: Input path, or the clipboard sentinel
        request: Validated-on-entry resize request
        config: Limits and defaults
        clipboard: Clipboard used for both reading and writing

    Returns:
        ResizeOutcome describing input, output and deliveries
    """
    validator = RequestValidator(config)

    # Cheap checks first, before anything is read or decoded
    validator.validate_request(request)

    source = SourceAcquirer(config, clipboard).acquire(descriptor)
    image = ValidatedImage.from_raw_source(source)

    validator.validate_for_image(image, request)

    logger.info(
        f"input image is {image.width} px wide and {image.height} px tall, "
        + f"and is of the format {image.format.display_name}"
    )

    resized = resize_image(image, request.width, request.blur_strength)

    outcome = ResizeOutcome(
        format=image.format.display_name,
        input_width=image.width,
        input_height=image.height,
        input_size=image.size,
        output_width=resized.width,
        output_height=resized.height,
        output_size=resized.size,
    )
    logger.info(
        f"resized image is {resized.width} px wide and {resized.height} px tall; "
        + describe_size_change(outcome)
    )

    dispatcher = OutputDispatcher(clipboard)

    if request.output_file is not None:
        outcome.written_to = dispatcher.write_file(resized, request.output_file)
        logger.info(f'written to "{outcome.written_to}"')

    if request.copy_to_clipboard:
        dispatcher.copy_to_clipboard(resized)
        outcome.copied_to_clipboard = True
        logger.info("resized image written to clipboard")

    return outcome


def describe_size_change(outcome: ResizeOutcome) -> str:
    change = outcome.size_change_percent
    if outcome.output_width < outcome.input_width:
        return f"size reduced by {-change:.2f}%"
    return f"size increased by {change:.2f}%"
