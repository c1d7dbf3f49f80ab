"""Exceções de domínio do web-msg-handler.

Taxonomia:
- ChallengeVerificationError: reCAPTCHA recusado ou chamada de verificação falhou
- InfrastructureError: falhas de transporte (leitura de body, envio)
- ConfigError: configuração inválida (fatal no startup)
"""

from __future__ import annotations


class ChallengeVerificationError(Exception):
    """Verificação anti-automação falhou.

    Attributes:
        error_codes: Códigos de erro devolvidos pelo provedor (podem estar vazios).
    """

    def __init__(self, message: str, error_codes: list[str] | None = None) -> None:
        super().__init__(message)
        self.error_codes = list(error_codes or [])

    def __str__(self) -> str:
        base = super().__str__()
        if not self.error_codes:
            return base
        codes = " ".join(f'"{code}"' for code in self.error_codes)
        return f"{base}: {codes}"


class InfrastructureError(RuntimeError):
    """Base para falhas de transporte/infraestrutura."""


class DeliveryError(InfrastructureError):
    """Falha ao entregar a mensagem pelo canal configurado."""


class ConfigError(ValueError):
    """Configuração inválida ou ausente; impede o boot do serviço."""
