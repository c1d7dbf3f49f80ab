"""Validators: validação dos campos do formulário.

Estrutura:
- email/: formato do endereço de email
"""

__all__: list[str] = []
