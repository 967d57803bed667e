"""Modelos de dados da validação de placas brasileiras."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class PlateFormat(str, Enum):
    """Gramáticas de placa suportadas."""

    OLD = "OLD"  # AAA-1234
    NEW = "NEW"  # BRA2E19 (Mercosul)


class PlateErrorKind(str, Enum):
    """Motivos de rejeição de uma placa."""

    EMPTY = "EMPTY"
    INCOMPLETE = "INCOMPLETE"
    TOO_LONG = "TOO_LONG"
    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"
    GRAMMAR_MISMATCH = "GRAMMAR_MISMATCH"


DEFAULT_MESSAGES: Dict[PlateErrorKind, str] = {
    PlateErrorKind.EMPTY: "Placa é obrigatória",
    PlateErrorKind.INCOMPLETE: "Placa incompleta",
    PlateErrorKind.TOO_LONG: "Placa muito longa",
    PlateErrorKind.UNRECOGNIZED_FORMAT: "Formato de placa inválido",
    PlateErrorKind.GRAMMAR_MISMATCH: "Formato inválido. Use: {example}",
}

DEFAULT_EXAMPLES: Dict[PlateFormat, str] = {
    PlateFormat.OLD: "AAA-1234",
    PlateFormat.NEW: "BRA2E19",
}


@dataclass(frozen=True)
class PlateValidationResult:
    """Resultado da validação de uma placa."""

    is_valid: bool
    format: Optional[PlateFormat]
    formatted: str
    error_message: Optional[str] = None
    error_kind: Optional[PlateErrorKind] = None

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "format": self.format.value if self.format else None,
            "formatted": self.formatted,
            "error_message": self.error_message,
            "error_kind": self.error_kind.value if self.error_kind else None,
        }


@dataclass
class PlateFormatInfo:
    """Descrição de um formato, usada nas dicas de preenchimento."""

    name: str
    example: str
    description: str = ""


@dataclass
class GrammarConfig:
    """Configuração da gramática carregada do YAML."""

    name: str
    code: str
    formats: Dict[PlateFormat, PlateFormatInfo]
    messages: Dict[str, Dict[PlateErrorKind, str]] = field(default_factory=dict)
    default_locale: str = "pt_BR"

    def catalogue(self, locale: Optional[str] = None) -> Dict[PlateErrorKind, str]:
        """Mensagens do locale pedido; faltantes vêm do locale padrão."""

        merged = dict(DEFAULT_MESSAGES)
        merged.update(self.messages.get(self.default_locale, {}))
        if locale and locale != self.default_locale:
            merged.update(self.messages.get(locale, {}))
        return merged

    def example_for(self, plate_format: PlateFormat) -> str:
        info = self.formats.get(plate_format)
        return info.example if info else DEFAULT_EXAMPLES[plate_format]
