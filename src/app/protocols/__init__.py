"""Protocolos e contratos do core da aplicação."""

from .delivery_channel import ChallengeVerifierProtocol, DeliveryChannelProtocol
from .transports import BotApiClientProtocol, MailTransportProtocol

__all__ = [
    "BotApiClientProtocol",
    "ChallengeVerifierProtocol",
    "DeliveryChannelProtocol",
    "MailTransportProtocol",
]
