"""Normalização de formulários de contato."""

from api.normalizers.form.sanitizer import sanitize_message, sanitize_name

__all__ = ["sanitize_message", "sanitize_name"]
