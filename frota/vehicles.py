"""Veículos do cadastro: modelos, validação do formulário e filtro da lista."""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from .validation import PlatePostProcessor, normalize
from .validation import validate as validate_plate

if TYPE_CHECKING:
    from settings_manager import SettingsManager

MIN_YEAR = 1900
PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x300?text=Sem+Imagem"

# Campo Python -> chave do JSON da API.
_API_KEYS = {
    "id": "id",
    "plate": "placa",
    "brand": "marca",
    "model": "modelo",
    "year": "ano",
    "color": "cor",
    "image": "imagem",
}

# campo -> (rótulo, tamanho mínimo, mensagem de obrigatório)
_TEXT_FIELD_RULES = {
    "brand": ("Marca", 2, "Marca é obrigatória"),
    "model": ("Modelo", 2, "Modelo é obrigatório"),
    "color": ("Cor", 3, "Cor é obrigatória"),
}
YEAR_REQUIRED_MESSAGE = "Ano é obrigatório"

POPULAR_BRANDS = [
    "Toyota", "Honda", "Ford", "Chevrolet", "Volkswagen", "Fiat",
    "Hyundai", "Nissan", "Renault", "Peugeot", "BMW", "Mercedes-Benz",
]

POPULAR_COLORS = [
    "Branco", "Preto", "Prata", "Cinza", "Azul", "Vermelho",
    "Bege", "Dourado", "Verde", "Marrom",
]


@dataclass
class CarFormData:
    """Dados digitados no formulário de cadastro/edição."""

    plate: str
    brand: str
    model: str
    year: Optional[int]
    color: str
    image: str = ""

    def normalized(self) -> "CarFormData":
        return CarFormData(
            plate=self.plate.upper(),
            brand=self.brand,
            model=self.model,
            year=self.year,
            color=self.color,
            image=self.image or PLACEHOLDER_IMAGE,
        )


@dataclass
class Car:
    """Veículo cadastrado."""

    id: str
    plate: str
    brand: str
    model: str
    year: int
    color: str
    image: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Car":
        return cls(
            id=str(data.get("id", "")),
            plate=str(data.get("placa", "")),
            brand=str(data.get("marca", "")),
            model=str(data.get("modelo", "")),
            year=int(data.get("ano") or 0),
            color=str(data.get("cor", "")),
            image=str(data.get("imagem", "")),
        )

    def to_dict(self) -> dict:
        return {_API_KEYS[key]: value for key, value in asdict(self).items()}


@dataclass
class CarFilters:
    brand: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.brand and self.year is None and not self.color


def validate_car_form(
    data: CarFormData,
    processor: Optional[PlatePostProcessor] = None,
    current_year: Optional[int] = None,
    min_year: int = MIN_YEAR,
) -> Dict[str, str]:
    """Erros do formulário por campo; dicionário vazio quando está tudo certo."""

    errors: Dict[str, str] = {}

    result = processor.validate(data.plate) if processor else validate_plate(data.plate)
    if not result.is_valid:
        errors["plate"] = result.error_message or "Formato de placa inválido"

    max_year = (current_year or datetime.date.today().year) + 1
    if data.year is None or str(data.year).strip() == "":
        errors["year"] = YEAR_REQUIRED_MESSAGE
    else:
        try:
            year = int(data.year)
        except (TypeError, ValueError):
            year = None
        if year is None or not min_year <= year <= max_year:
            errors["year"] = f"Ano deve estar entre {min_year} e {max_year}"

    for field_name, (label, min_length, required_message) in _TEXT_FIELD_RULES.items():
        value = (getattr(data, field_name) or "").strip()
        if not value:
            errors[field_name] = required_message
        elif len(value) < min_length:
            errors[field_name] = f"{label} deve ter pelo menos {min_length} caracteres"

    return errors


class CarFormValidator:
    """Validação do formulário com placa e ano mínimo vindos das configurações."""

    def __init__(
        self,
        processor: Optional[PlatePostProcessor] = None,
        min_year: int = MIN_YEAR,
    ) -> None:
        self.processor = processor or PlatePostProcessor()
        self.min_year = min_year

    def validate(self, data: CarFormData, current_year: Optional[int] = None) -> Dict[str, str]:
        return validate_car_form(
            data,
            processor=self.processor,
            current_year=current_year,
            min_year=self.min_year,
        )

    @classmethod
    def from_settings(cls, settings: "SettingsManager") -> "CarFormValidator":
        return cls(
            processor=PlatePostProcessor.from_settings(settings),
            min_year=settings.get_min_year(),
        )


def suggest(query: str, options: Iterable[str], limit: int = 5) -> List[str]:
    """Sugestões de autocompletar: trecho sem distinguir maiúsculas, no máximo ``limit``."""

    if not query:
        return []
    needle = query.lower()
    return [option for option in options if needle in option.lower()][:limit]


def _matches_query(car: Car, query: str) -> bool:
    fields = (car.brand, car.model, car.plate, car.color)
    if any(query in value.lower() for value in fields):
        return True
    # "abc1234" também encontra "ABC-1234".
    plate_query = normalize(query)
    return bool(plate_query) and plate_query in normalize(car.plate)


def filter_cars(
    cars: Iterable[Car],
    query: str = "",
    filters: Optional[CarFilters] = None,
) -> List[Car]:
    """Busca textual e filtros da lista de veículos, sem distinguir maiúsculas."""

    filtered = list(cars)

    query = (query or "").strip().lower()
    if query:
        filtered = [car for car in filtered if _matches_query(car, query)]

    if filters is None:
        return filtered

    if filters.brand:
        brand = filters.brand.lower()
        filtered = [car for car in filtered if brand in car.brand.lower()]
    if filters.year is not None:
        filtered = [car for car in filtered if car.year == filters.year]
    if filters.color:
        color = filters.color.lower()
        filtered = [car for car in filtered if color in car.color.lower()]

    return filtered
