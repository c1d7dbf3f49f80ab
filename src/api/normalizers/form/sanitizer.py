"""Sanitização de texto livre enviado por formulários.

Responsabilidades:
- Remover caracteres não imprimíveis (controle, formatação, separadores)
- Manter quebras de linha apenas no corpo da mensagem

Funções puras e totais: nunca falham e são idempotentes.
"""

from __future__ import annotations

_NEWLINE = "\n"


def sanitize_name(name: str) -> str:
    """Remove caracteres não imprimíveis do nome (linha única).

    Args:
        name: Nome informado no formulário

    Returns:
        Nome apenas com caracteres imprimíveis
    """
    return "".join(char for char in name if char.isprintable())


def sanitize_message(message: str) -> str:
    """Remove caracteres não imprimíveis da mensagem, preservando "\\n".

    "\\r" é descartado, então quebras CRLF viram LF.

    Args:
        message: Corpo da mensagem informado no formulário

    Returns:
        Mensagem apenas com caracteres imprimíveis e quebras de linha
    """
    return "".join(char for char in message if char == _NEWLINE or char.isprintable())
