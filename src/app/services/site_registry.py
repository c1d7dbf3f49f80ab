"""Registro imutável site_id → canal de entrega.

Construído uma vez no bootstrap; leituras concorrentes não precisam de lock
porque nada é alterado após a construção.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from utils.errors import ConfigError

if TYPE_CHECKING:
    from app.protocols import DeliveryChannelProtocol

MAX_SITE_ID = 2**64 - 1


class SiteRegistry(Mapping[int, "DeliveryChannelProtocol"]):
    """Mapping somente leitura de sites registrados."""

    def __init__(self, channels: Mapping[int, DeliveryChannelProtocol]) -> None:
        for site_id in channels:
            _check_site_id(site_id)
        self._channels: Mapping[int, DeliveryChannelProtocol] = MappingProxyType(dict(channels))

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[int, DeliveryChannelProtocol]],
    ) -> SiteRegistry:
        """Constrói o registro rejeitando site_ids duplicados.

        Raises:
            ConfigError: Se um site_id aparecer mais de uma vez
        """
        channels: dict[int, DeliveryChannelProtocol] = {}
        for site_id, channel in entries:
            if site_id in channels:
                raise ConfigError(f"duplicated site id: {site_id}")
            channels[site_id] = channel
        return cls(channels)

    def lookup(self, site_id: int) -> DeliveryChannelProtocol | None:
        return self._channels.get(site_id)

    def __getitem__(self, site_id: int) -> DeliveryChannelProtocol:
        return self._channels[site_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._channels)

    def __len__(self) -> int:
        return len(self._channels)

    def __repr__(self) -> str:
        return f"SiteRegistry(site_ids={sorted(self._channels)})"


def _check_site_id(site_id: int) -> None:
    if isinstance(site_id, bool) or not isinstance(site_id, int):
        raise ConfigError(f"site id must be an integer: {site_id!r}")
    if not 0 <= site_id <= MAX_SITE_ID:
        raise ConfigError(f"site id out of range (uint64): {site_id}")
