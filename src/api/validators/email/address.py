"""Validação sintática de endereço de email."""

from __future__ import annotations

import re

# local-part aceita o conjunto amplo de RFC 5322 (sem aspas);
# domínio aceita letras, dígitos e "-_.~"; TLD apenas letras.
EMAIL_PATTERN = re.compile(
    r"[-0-9A-Za-z!#$%&'*+/=?^_`{|}.~]+@[-0-9A-Za-z_.~]+\.[A-Za-z]+"
)


def is_valid_email(address: str) -> bool:
    """Retorna True se o endereço casa com a gramática aceita.

    Args:
        address: Endereço informado no campo "mail"

    Returns:
        True se válido, False caso contrário
    """
    return EMAIL_PATTERN.fullmatch(address) is not None
