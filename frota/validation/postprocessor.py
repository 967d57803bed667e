"""Pós-processamento de placas digitadas: locale e desligamento por configuração."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from . import plate_validator
from .base import PlateFormat, PlateValidationResult
from .loader import load_grammar_config, validation_config_dir

if TYPE_CHECKING:
    from settings_manager import SettingsManager


class PlatePostProcessor:
    """Envolve a gramática de placas e sabe se desligar pela configuração."""

    def __init__(
        self,
        enabled: bool = True,
        config_dir: Optional[Path] = None,
        locale: Optional[str] = None,
        code: str = "BR",
    ) -> None:
        self.enabled = enabled
        self.config = load_grammar_config(Path(config_dir or validation_config_dir()), code=code)
        self.locale = locale or self.config.default_locale
        self.messages = self.config.catalogue(self.locale)
        self.examples = {fmt: self.config.example_for(fmt) for fmt in PlateFormat}

    def normalize(self, plate: str) -> str:
        if not self.enabled:
            return (plate or "").strip().upper()
        return plate_validator.normalize(plate)

    def format_input(self, current_value: str, new_input: str) -> str:
        if not self.enabled:
            return new_input
        return plate_validator.format_plate_input(current_value, new_input)

    def validate(self, plate: str) -> PlateValidationResult:
        if not self.enabled:
            return PlateValidationResult(
                is_valid=bool(plate_validator.normalize(plate)),
                format=None,
                formatted=plate,
            )
        return plate_validator.validate(plate, messages=self.messages, examples=self.examples)

    def placeholder(self) -> str:
        return " ou ".join(self.examples[fmt] for fmt in PlateFormat)

    def format_hint(self) -> str:
        """Uma linha por formato, para a dica do campo de placa."""
        lines = []
        for fmt in PlateFormat:
            info = self.config.formats.get(fmt)
            description = info.description if info and info.description else fmt.value
            lines.append(f"{description}: {self.examples[fmt]}")
        if self.config.name:
            lines.insert(0, self.config.name)
        return "\n".join(lines)

    @classmethod
    def from_settings(cls, settings: "SettingsManager") -> "PlatePostProcessor":
        return cls(
            enabled=settings.is_plate_formatting_enabled(),
            config_dir=settings.get_grammar_config_dir(),
            locale=settings.get_locale(),
        )
