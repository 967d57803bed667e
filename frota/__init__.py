"""Cadastro de veículos com validação de placas brasileiras."""

__version__ = "0.4.0"
