# /settings_manager.py
"""Configurações da aplicação guardadas em YAML."""

from __future__ import annotations

import copy
import os
from typing import Any, Dict, Optional

import yaml

from logging_manager import get_logger

logger = get_logger(__name__)

SETTINGS_ENV_VAR = "FROTA_SETTINGS"
DEFAULT_SETTINGS_FILE = "settings.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "locale": "pt_BR",
    "plate_formatting": {
        "enabled": True,
        "config_dir": None,
    },
    "logging": {
        "level": "INFO",
        "dir": None,
    },
    "vehicles": {
        "min_year": 1900,
    },
}


def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SettingsManager:
    """Leitura e gravação de ``settings.yaml`` com valores padrão."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_FILE
        self.settings = self._load()

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            logger.debug("Arquivo de configurações %s ausente, usando padrões", self.path)
            return copy.deepcopy(DEFAULT_SETTINGS)
        with open(self.path, "r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError:
                logger.error("Arquivo de configurações inválido: %s", self.path)
                raise
        return _merge(DEFAULT_SETTINGS, data)

    def save(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            yaml.safe_dump(self.settings, fh, allow_unicode=True, sort_keys=False)

    def get_locale(self) -> str:
        return str(self.settings.get("locale") or DEFAULT_SETTINGS["locale"])

    def save_locale(self, locale: str) -> None:
        self.settings["locale"] = locale
        self.save()

    def is_plate_formatting_enabled(self) -> bool:
        return bool(self.settings.get("plate_formatting", {}).get("enabled", True))

    def save_plate_formatting_enabled(self, enabled: bool) -> None:
        self.settings.setdefault("plate_formatting", {})["enabled"] = bool(enabled)
        self.save()

    def get_grammar_config_dir(self) -> Optional[str]:
        return self.settings.get("plate_formatting", {}).get("config_dir")

    def get_log_level(self) -> str:
        return str(self.settings.get("logging", {}).get("level", "INFO")).upper()

    def get_log_dir(self) -> Optional[str]:
        return self.settings.get("logging", {}).get("dir")

    def get_min_year(self) -> int:
        return int(self.settings.get("vehicles", {}).get("min_year", 1900))
