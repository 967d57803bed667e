import pytest

from frota.validation import PlatePostProcessor
from settings_manager import SettingsManager
from frota.vehicles import (
    PLACEHOLDER_IMAGE,
    POPULAR_BRANDS,
    POPULAR_COLORS,
    Car,
    CarFilters,
    CarFormData,
    CarFormValidator,
    filter_cars,
    suggest,
    validate_car_form,
)


@pytest.fixture
def cars():
    return [
        Car(id="1", plate="ABC-1234", brand="Fiat", model="Uno", year=2010, color="Branco"),
        Car(id="2", plate="BRA2E19", brand="Volkswagen", model="Gol", year=2020, color="Prata"),
        Car(id="3", plate="XYZ-9876", brand="Fiat", model="Toro", year=2020, color="Preto"),
    ]


def _form(**overrides):
    data = dict(plate="BRA2E19", brand="Fiat", model="Uno", year=2015, color="Azul")
    data.update(overrides)
    return CarFormData(**data)


def test_car_round_trips_api_keys():
    payload = {
        "id": "42",
        "placa": "ABC-1234",
        "marca": "Fiat",
        "modelo": "Uno",
        "ano": 2010,
        "cor": "Branco",
        "imagem": "file:///uno.jpg",
    }

    car = Car.from_dict(payload)

    assert car.plate == "ABC-1234"
    assert car.year == 2010
    assert car.to_dict() == payload


def test_form_data_normalized():
    data = _form(plate="bra2e19", image="").normalized()

    assert data.plate == "BRA2E19"
    assert data.image == PLACEHOLDER_IMAGE
    assert _form(image="file:///x.jpg").normalized().image == "file:///x.jpg"


def test_valid_form_has_no_errors():
    assert validate_car_form(_form(), current_year=2024) == {}


def test_form_errors_per_field():
    errors = validate_car_form(
        _form(plate="ABC12", brand=" F ", model="", year=1899, color="A"),
        current_year=2024,
    )

    assert errors == {
        "plate": "Placa incompleta",
        "year": "Ano deve estar entre 1900 e 2025",
        "brand": "Marca deve ter pelo menos 2 caracteres",
        "model": "Modelo é obrigatório",
        "color": "Cor deve ter pelo menos 3 caracteres",
    }


def test_year_accepts_next_model_year():
    assert "year" not in validate_car_form(_form(year=2025), current_year=2024)
    assert "year" in validate_car_form(_form(year=2026), current_year=2024)


def test_year_rejects_non_numeric():
    assert "year" in validate_car_form(_form(year="abc"), current_year=2024)


def test_form_uses_processor_locale():
    errors = validate_car_form(_form(plate=""), processor=PlatePostProcessor(locale="en"), current_year=2024)

    assert errors["plate"] == "plate is required"


def test_filter_without_criteria_returns_all(cars):
    assert filter_cars(cars) == cars
    assert filter_cars(cars, "", CarFilters()) == cars
    assert CarFilters().is_empty()


def test_filter_query_matches_any_field(cars):
    assert [c.id for c in filter_cars(cars, "fiat")] == ["1", "3"]
    assert [c.id for c in filter_cars(cars, "GOL")] == ["2"]
    assert [c.id for c in filter_cars(cars, "pret")] == ["3"]


def test_filter_query_matches_plate_without_mask(cars):
    assert [c.id for c in filter_cars(cars, "abc1234")] == ["1"]
    assert [c.id for c in filter_cars(cars, "xyz-98")] == ["3"]


def test_filter_by_brand_year_color(cars):
    assert [c.id for c in filter_cars(cars, filters=CarFilters(brand="fi"))] == ["1", "3"]
    assert [c.id for c in filter_cars(cars, filters=CarFilters(year=2020))] == ["2", "3"]
    assert [c.id for c in filter_cars(cars, filters=CarFilters(brand="fiat", year=2020))] == ["3"]
    assert [c.id for c in filter_cars(cars, filters=CarFilters(color="PRATA"))] == ["2"]
    assert not CarFilters(year=2020).is_empty()


def test_filter_query_and_filters_combine(cars):
    assert [c.id for c in filter_cars(cars, "fiat", CarFilters(color="branco"))] == ["1"]


def test_color_needs_three_characters():
    assert validate_car_form(_form(color="Az"), current_year=2024)["color"] == (
        "Cor deve ter pelo menos 3 caracteres"
    )
    assert "color" not in validate_car_form(_form(color="Azu"), current_year=2024)
    assert "brand" not in validate_car_form(_form(brand="VW"), current_year=2024)


def test_empty_fields_get_required_messages():
    errors = validate_car_form(
        _form(plate="", brand="", model="  ", year=None, color=""),
        current_year=2024,
    )

    assert errors == {
        "plate": "Placa é obrigatória",
        "year": "Ano é obrigatório",
        "brand": "Marca é obrigatória",
        "model": "Modelo é obrigatório",
        "color": "Cor é obrigatória",
    }
    assert validate_car_form(_form(year=""), current_year=2024)["year"] == "Ano é obrigatório"


def test_car_from_dict_with_null_year():
    car = Car.from_dict({"id": "7", "placa": "BRA2E19", "ano": None})

    assert car.year == 0
    assert car.brand == ""


def test_form_validator_from_settings(settings_path):
    with open(settings_path, "w", encoding="utf-8") as fh:
        fh.write("locale: en\nvehicles:\n  min_year: 1950\n")

    validator = CarFormValidator.from_settings(SettingsManager(settings_path))
    errors = validator.validate(_form(plate="", year=1949), current_year=2024)

    assert validator.min_year == 1950
    assert errors["plate"] == "plate is required"
    assert errors["year"] == "Ano deve estar entre 1950 e 2025"
    assert validator.validate(_form(year=1950), current_year=2024) == {}


class TestSuggest:
    def test_case_insensitive_substring(self):
        assert suggest("ot", POPULAR_BRANDS) == ["Toyota", "Peugeot"]
        assert suggest("PRE", POPULAR_COLORS) == ["Preto"]

    def test_empty_query_gives_nothing(self):
        assert suggest("", POPULAR_BRANDS) == []

    def test_limited_to_five(self):
        assert suggest("e", POPULAR_BRANDS) == ["Chevrolet", "Volkswagen", "Renault", "Peugeot", "Mercedes-Benz"]
        assert len(suggest("r", POPULAR_COLORS, limit=2)) == 2

    def test_no_match(self):
        assert suggest("xyz", POPULAR_COLORS) == []
