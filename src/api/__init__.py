"""API: camada de borda.

Subpastas:
- connectors/: clientes externos (reCAPTCHA, Telegram Bot API, SMTP)
- normalizers/: sanitização dos campos do formulário
- payload_builders/: corpo do email e texto do Telegram
- validators/: validação de endereço de email
- routes/: endpoints HTTP (formulários, health)

NÃO PODE conter: regras de drain, registro de sites, orquestração de use cases.
"""
