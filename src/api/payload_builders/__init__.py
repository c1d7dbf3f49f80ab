"""Payload builders: conteúdo entregue por canal.

Estrutura:
- email/: mensagem HTML
- telegram/: texto HTML para sendMessage
"""

__all__: list[str] = []
