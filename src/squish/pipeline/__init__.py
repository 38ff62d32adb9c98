"""Pipeline module - acquisition, validation, dispatch, and the runner."""

from .dispatch import OutputDispatcher
from .runner import run_pipeline
from .source import SourceAcquirer
from .validator import RequestValidator

__all__ = [
    "OutputDispatcher",
    "RequestValidator",
    "SourceAcquirer",
    "run_pipeline",
]
