"""Normalizers: limpeza dos campos do formulário antes da entrega."""

from .form import sanitize_message, sanitize_name

__all__ = [
    "sanitize_message",
    "sanitize_name",
]
