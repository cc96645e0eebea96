"""Data-access hooks the pages compose against."""

from .fetch import FetchHook, deps_changed
from .submit import HttpMethod, SubmitHook, SubmitOptions

__all__ = [
    "FetchHook",
    "HttpMethod",
    "SubmitHook",
    "SubmitOptions",
    "deps_changed",
]
