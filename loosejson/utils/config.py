"""
Configuration and limits for loosejson conversion.

Every limit is a hard bound: exceeding one is reported as an error, never
silently truncated.
"""

from dataclasses import dataclass
from typing import Any, Optional

# 16 * 100 KiB, the largest document the engine is meant to handle.
DEFAULT_MAX_DOCUMENT_SIZE = 16 * 100 * 1024
DEFAULT_MAX_TOKENS = 100000
DEFAULT_MAX_STACK_SIZE = 10000
DEFAULT_INDENT_WIDTH = 2


@dataclass
class SizeLimits:
    """Input and output size limits, in characters."""
    max_input_size: int = DEFAULT_MAX_DOCUMENT_SIZE
    max_output_size: int = DEFAULT_MAX_DOCUMENT_SIZE


@dataclass
class StructureLimits:
    """Tokenizer and nesting limits."""
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_stack_size: int = DEFAULT_MAX_STACK_SIZE


@dataclass
class ConversionLimits:
    """Resource limits for a single conversion call."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **limit_args: Any,
    ):
        unknown = set(limit_args) - {
            "max_input_size", "max_output_size", "max_tokens", "max_stack_size"
        }
        if unknown:
            raise TypeError(f"Unknown limit arguments: {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                max_input_size=limit_args.get("max_input_size", DEFAULT_MAX_DOCUMENT_SIZE),
                max_output_size=limit_args.get("max_output_size", DEFAULT_MAX_DOCUMENT_SIZE),
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                max_tokens=limit_args.get("max_tokens", DEFAULT_MAX_TOKENS),
                max_stack_size=limit_args.get("max_stack_size", DEFAULT_MAX_STACK_SIZE),
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.size_limits.max_output_size <= 0:
            raise ValueError("max_output_size must be positive")
        if self.structure_limits.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if self.structure_limits.max_stack_size <= 0:
            raise ValueError("max_stack_size must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input length in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_output_size(self) -> int:
        """Output buffer capacity, including the reserved terminator slot."""
        assert self.size_limits is not None
        return self.size_limits.max_output_size

    @property
    def max_tokens(self) -> int:
        """Maximum number of tokens the tokenizer may produce."""
        assert self.structure_limits is not None
        return self.structure_limits.max_tokens

    @property
    def max_stack_size(self) -> int:
        """Capacity of the closing-symbol stack."""
        assert self.structure_limits is not None
        return self.structure_limits.max_stack_size


@dataclass
class FormatConfig:
    """Human-readable rendering settings."""
    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError("indent_width must not be negative")


@dataclass
class ConvertConfig:
    """Configuration options for a conversion call."""

    limits: Optional[ConversionLimits] = None
    formatting: Optional[FormatConfig] = None

    def __init__(
        self,
        *,
        limits: Optional[ConversionLimits] = None,
        formatting: Optional[FormatConfig] = None,
        **config_options: Any,
    ):
        indent_width = config_options.pop("indent_width", None)

        if limits is not None:
            if config_options:
                raise TypeError("Pass either limits or individual limit arguments")
            self.limits = limits
        else:
            self.limits = ConversionLimits(**config_options)

        if formatting is not None:
            self.formatting = formatting
        elif indent_width is not None:
            self.formatting = FormatConfig(indent_width=indent_width)
        else:
            self.formatting = FormatConfig()

    @property
    def indent_width(self) -> int:
        """Spaces per nesting level in human-readable output."""
        assert self.formatting is not None
        return self.formatting.indent_width

    @classmethod
    def with_output_capacity(cls, max_output_size: int) -> "ConvertConfig":
        """Create a configuration with a specific output capacity."""
        return cls(max_output_size=max_output_size)
