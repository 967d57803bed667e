# /frota/validation/plate_validator.py
"""Gramática das placas brasileiras: detecção, máscara e validação.

Dois formatos convivem:

- antigo: ``AAA-1234`` (3 letras + 4 dígitos, hífen só na exibição);
- Mercosul: ``BRA2E19`` (3 letras, dígito, letra, 2 dígitos, sem separador).

Todas as funções são puras e aceitam texto bruto digitado pelo usuário.
"""
from __future__ import annotations

import re
from typing import Mapping, Optional

from logging_manager import get_logger

from .base import (
    DEFAULT_EXAMPLES,
    DEFAULT_MESSAGES,
    PlateErrorKind,
    PlateFormat,
    PlateValidationResult,
)

logger = get_logger(__name__)

PLATE_LENGTH = 7

OLD_PLATE_REGEX = re.compile(r"^[A-Z]{3}-?\d{4}$")
NEW_PLATE_REGEX = re.compile(r"^[A-Z]{3}\d[A-Z]\d{2}$")

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")

# Prefixos parciais: (regex, formato) por comprimento, na ordem de teste.
_PARTIAL_PATTERNS = {
    5: (
        (re.compile(r"^[A-Z]{3}\d[A-Z]$"), PlateFormat.NEW),
        (re.compile(r"^[A-Z]{3}\d{2}$"), PlateFormat.OLD),
    ),
    6: (
        (re.compile(r"^[A-Z]{3}\d[A-Z]\d$"), PlateFormat.NEW),
        (re.compile(r"^[A-Z]{3}\d{3}$"), PlateFormat.OLD),
    ),
}


def normalize(text: str) -> str:
    """Remove tudo que não for letra/dígito ASCII e passa para maiúsculas."""

    return _NON_ALNUM.sub("", text or "").upper()


def _with_hyphen(plate: str) -> str:
    return f"{plate[:3]}-{plate[3:7]}"


def detect_format(text: str) -> Optional[PlateFormat]:
    """Detecta o formato, inclusive de placas digitadas pela metade.

    Até o 4º caractere (``AAA1``) os dois formatos são indistinguíveis e o
    resultado é ``None``; a partir do 5º a posição da letra decide.
    """

    plate = normalize(text)
    length = len(plate)

    if length == PLATE_LENGTH:
        if OLD_PLATE_REGEX.match(_with_hyphen(plate)):
            return PlateFormat.OLD
        if NEW_PLATE_REGEX.match(plate):
            return PlateFormat.NEW
        return None

    for pattern, plate_format in _PARTIAL_PATTERNS.get(length, ()):
        if pattern.match(plate):
            return plate_format
    return None


def apply_mask(text: str, plate_format: Optional[PlateFormat] = None) -> str:
    plate = normalize(text)
    if not plate:
        return ""

    plate_format = PlateFormat(plate_format) if plate_format else detect_format(plate)
    if plate_format == PlateFormat.OLD and len(plate) > 3:
        return _with_hyphen(plate)
    return plate


def _matches_grammar(plate: str, masked: str, plate_format: PlateFormat) -> bool:
    if plate_format == PlateFormat.OLD:
        return bool(OLD_PLATE_REGEX.match(masked))
    return bool(NEW_PLATE_REGEX.match(plate))


def validate(
    text: str,
    messages: Optional[Mapping[PlateErrorKind, str]] = None,
    examples: Optional[Mapping[PlateFormat, str]] = None,
) -> PlateValidationResult:
    """Valida a placa completa.

    ``messages`` substitui o catálogo de mensagens (pt-BR por padrão);
    ``examples`` as dicas de uso exibidas quando a gramática não confere.
    """

    messages = messages or DEFAULT_MESSAGES
    examples = examples or DEFAULT_EXAMPLES

    def _reject(
        kind: PlateErrorKind,
        formatted: str,
        plate_format: Optional[PlateFormat] = None,
    ) -> PlateValidationResult:
        message = messages.get(kind) or DEFAULT_MESSAGES[kind]
        if plate_format is not None:
            message = message.format(example=examples.get(plate_format, DEFAULT_EXAMPLES[plate_format]))
        return PlateValidationResult(
            is_valid=False,
            format=plate_format,
            formatted=formatted,
            error_message=message,
            error_kind=kind,
        )

    plate = normalize(text)

    if not plate:
        return _reject(PlateErrorKind.EMPTY, "")

    if len(plate) < PLATE_LENGTH:
        return _reject(PlateErrorKind.INCOMPLETE, apply_mask(plate))

    # Acima do limite devolve o texto original, sem máscara nem corte.
    if len(plate) > PLATE_LENGTH:
        return _reject(PlateErrorKind.TOO_LONG, text)

    plate_format = detect_format(plate)
    if plate_format is None:
        return _reject(PlateErrorKind.UNRECOGNIZED_FORMAT, text)

    formatted = apply_mask(plate, plate_format)
    if not _matches_grammar(plate, formatted, plate_format):
        logger.warning(
            "Formato %s detectado para %r não confere com a gramática",
            plate_format.value,
            plate,
        )
        return _reject(PlateErrorKind.GRAMMAR_MISMATCH, formatted, plate_format)

    return PlateValidationResult(is_valid=True, format=plate_format, formatted=formatted)


def format_plate_input(current_value: str, new_input: str) -> str:
    """Próximo valor do campo de placa a cada tecla.

    Se a entrada passar de 7 caracteres úteis, a tecla é descartada e o valor
    anterior volta para o campo.
    """

    plate = normalize(new_input)
    if len(plate) > PLATE_LENGTH:
        return current_value
    return apply_mask(plate)
