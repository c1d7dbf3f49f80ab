"""Connectors: adapters de borda para serviços externos.

Estrutura:
- http_base.py: cliente HTTP JSON compartilhado (httpx, timeout fixo)
- recaptcha/: verificação do token reCAPTCHA
- telegram/: Telegram Bot API (sendMessage)
- email/: envio SMTP autenticado
"""

__all__: list[str] = []
