"""Validação e formatação de placas brasileiras."""

from .base import PlateErrorKind, PlateFormat, PlateValidationResult
from .plate_validator import apply_mask, detect_format, format_plate_input, normalize, validate
from .loader import load_grammar_config, validation_config_dir
from .postprocessor import PlatePostProcessor

__all__ = [
    "PlateErrorKind",
    "PlateFormat",
    "PlatePostProcessor",
    "PlateValidationResult",
    "apply_mask",
    "detect_format",
    "format_plate_input",
    "load_grammar_config",
    "normalize",
    "validate",
    "validation_config_dir",
]

