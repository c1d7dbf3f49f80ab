"""Modelos do formulário de contato e da resposta HTTP.

SubmittedForm existe apenas durante uma requisição; nunca é persistido.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubmittedForm(BaseModel):
    """Corpo JSON aceito em POST /{site_id}.

    Campos ausentes viram string vazia; campos extras são ignorados.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    email: str = Field(default="", alias="mail")
    message: str = Field(default="", alias="msg")
    challenge_response: str = Field(default="", alias="g-recaptcha-response")


class RequestOutcome(BaseModel):
    """Payload de resposta: {"success": bool, "error"?: str}."""

    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> RequestOutcome:
        return cls(success=True)

    @classmethod
    def failure(cls, error: str) -> RequestOutcome:
        return cls(success=False, error=error)

    def to_payload(self) -> dict[str, Any]:
        """Serializa omitindo "error" em respostas de sucesso."""
        return self.model_dump(exclude_none=True)
