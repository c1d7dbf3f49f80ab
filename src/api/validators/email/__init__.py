"""Validators para endereços de email.

Responsabilidades:
- Validar formato sintático do endereço informado no formulário

Sem verificação de DNS ou existência de caixa postal.
"""

from api.validators.email.address import EMAIL_PATTERN, is_valid_email

__all__ = ["EMAIL_PATTERN", "is_valid_email"]
