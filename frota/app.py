"""Inicialização da aplicação a partir de ``settings.yaml``."""

from __future__ import annotations

from typing import Optional

from logging_manager import configure_logging, get_logger
from settings_manager import SettingsManager

from .vehicles import CarFormValidator

logger = get_logger(__name__)


def bootstrap(settings: Optional[SettingsManager] = None) -> CarFormValidator:
    """Configura o logging e monta o validador do formulário de veículos."""

    settings = settings or SettingsManager()
    configure_logging(settings.get_log_level(), settings.get_log_dir())
    validator = CarFormValidator.from_settings(settings)
    logger.info(
        "Configurações carregadas de %s: locale=%s, formatação de placa=%s, ano mínimo=%d",
        settings.path,
        validator.processor.locale,
        "ligada" if validator.processor.enabled else "desligada",
        validator.min_year,
    )
    return validator
