"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChallengeVerificationError,
    ConfigError,
    DeliveryError,
    InfrastructureError,
)

__all__ = [
    "ChallengeVerificationError",
    "ConfigError",
    "DeliveryError",
    "InfrastructureError",
]
