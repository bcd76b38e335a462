"""Package-specific exception types."""

from __future__ import annotations


class RenderError(ValueError):
    """Base class for rendering-related errors.

    Markdown content never raises; these errors describe invalid arguments or
    internal failures that the engine recovers from.
    """


class InvalidWidthError(RenderError):
    """Raised when the target width is not a positive integer.

    Args:
        width: The rejected width value.
    """

    def __init__(self, width: object):
        self.width = width
        super().__init__(f"Width must be a positive integer, got {width!r}")


class InlineMatchError(RenderError):
    """Raised when a single inline candidate cannot be turned into a span.

    The tokenizer catches this error and keeps the candidate as literal text.

    Args:
        candidate: The matched source text.
        reason: Short description of the failure.
    """

    def __init__(self, candidate: str, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"Cannot build inline span from {candidate!r}: {reason}")
