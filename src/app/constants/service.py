"""Identidade do serviço (nome e versão)."""

from __future__ import annotations

SERVICE_NAME = "web-msg-handler"
__version__ = "1.0.0"
