"""
loosejson configuration.
"""

from .config import ConversionLimits, ConvertConfig, FormatConfig, SizeLimits, StructureLimits

__all__ = [
    'ConversionLimits', 'ConvertConfig', 'FormatConfig', 'SizeLimits',
    'StructureLimits',
]
