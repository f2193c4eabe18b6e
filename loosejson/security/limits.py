"""
Limit validation for loosejson.

The prefix search used to locate the first document re-tokenizes the input
once per character, so the input size bound also bounds its running time.
"""

from ..utils.config import ConversionLimits
from .exceptions import InputTooLarge


class LimitValidator:
    """Validates conversion inputs against the configured limits."""

    def __init__(self, limits: ConversionLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise InputTooLarge(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    @property
    def max_tokens(self) -> int:
        return self.limits.max_tokens
