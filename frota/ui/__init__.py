"""Widgets PyQt5 do cadastro de veículos."""

from .plate_field import PlateLineEdit

__all__ = ["PlateLineEdit"]
