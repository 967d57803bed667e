"""Carga da configuração da gramática a partir de YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

import yaml

from logging_manager import get_logger

from .base import GrammarConfig, PlateErrorKind, PlateFormat, PlateFormatInfo

logger = get_logger(__name__)


def validation_config_dir() -> Path:
    """Caminho do diretório com as configurações YAML das gramáticas."""

    return Path(__file__).resolve().parent / "configs"


def _parse_formats(raw: Iterable[dict] | None) -> Dict[PlateFormat, PlateFormatInfo]:
    formats: Dict[PlateFormat, PlateFormatInfo] = {}
    for item in raw or []:
        name = str(item.get("name", "")).upper()
        try:
            plate_format = PlateFormat(name)
        except ValueError:
            logger.warning("Formato de placa desconhecido ignorado: %r", name)
            continue
        formats[plate_format] = PlateFormatInfo(
            name=name,
            example=str(item.get("example", "")),
            description=str(item.get("description", "")),
        )
    return formats


def _parse_messages(raw: dict | None) -> Dict[str, Dict[PlateErrorKind, str]]:
    catalogues: Dict[str, Dict[PlateErrorKind, str]] = {}
    for locale, entries in (raw or {}).items():
        catalogue: Dict[PlateErrorKind, str] = {}
        for kind, text in (entries or {}).items():
            try:
                catalogue[PlateErrorKind(str(kind).upper())] = str(text)
            except ValueError:
                logger.warning("Mensagem para tipo de erro desconhecido ignorada: %s/%s", locale, kind)
        catalogues[str(locale)] = catalogue
    return catalogues


def load_grammar_config(config_dir: Path, code: str = "BR") -> GrammarConfig:
    """Lê os YAML do diretório e devolve a configuração do país ``code``."""

    wanted = code.upper()
    for path in sorted(Path(config_dir).glob("*.yaml")):
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}

        if str(data.get("code", "")).upper() != wanted:
            continue

        cfg = GrammarConfig(
            name=str(data.get("name", "")),
            code=wanted,
            formats=_parse_formats(data.get("license_plate_formats")),
            messages=_parse_messages(data.get("messages")),
            default_locale=str(data.get("default_locale", "pt_BR")),
        )
        logger.debug(
            "Configuração %s (%s) carregada de %s: formatos=%s, locales=%s",
            wanted,
            cfg.name,
            path,
            [fmt.value for fmt in cfg.formats],
            sorted(cfg.messages),
        )
        return cfg

    raise LookupError(f"Nenhuma configuração de placa para o país {wanted!r} em {config_dir}")
