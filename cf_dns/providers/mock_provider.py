"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores zones and records in
memory for safe testing and demonstration purposes.
"""

import logging
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from .base_provider import AUTOMATIC_TTL, DNSProvider, DNSRecord
from ..core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider.

        ``config["zones"]`` optionally restricts the zones that exist; when it
        is absent every zone name resolves.
        """
        config = config or {}
        self.known_zones = config.get("zones")
        self.zones: Dict[str, str] = {}
        self.records: Dict[str, List[DNSRecord]] = {}
        logger.info("Mock DNS provider initialized")

    def zone_id_by_name(self, zone_name: str) -> str:
        if self.known_zones is not None and zone_name not in self.known_zones:
            raise ProviderError("Zone could not be found")
        if zone_name not in self.zones:
            self.zones[zone_name] = uuid.uuid4().hex
            self.records[self.zones[zone_name]] = []
        return self.zones[zone_name]

    def _zone_records(self, zone_id: str) -> List[DNSRecord]:
        if zone_id not in self.records:
            raise ProviderError(f"Unknown zone id {zone_id}")
        return self.records[zone_id]

    def list_records(
        self, zone_id: str, record_type: str = "", name: str = ""
    ) -> List[DNSRecord]:
        records = []
        for r in self._zone_records(zone_id):
            if record_type and r.type != record_type:
                continue
            if name and r.name != name:
                continue
            records.append(replace(r))
        logger.info(f"Mock: Retrieved {len(records)} records")
        return records

    def create_record(
        self,
        zone_id: str,
        record_type: str,
        name: str,
        content: str,
        ttl: int = AUTOMATIC_TTL,
        proxied: bool = False,
    ) -> DNSRecord:
        record = DNSRecord(
            id=uuid.uuid4().hex,
            type=record_type,
            name=name,
            content=content,
            ttl=ttl,
            proxied=proxied,
        )
        self._zone_records(zone_id).append(record)
        logger.info(f"Mock: Created record {name} -> {content}")
        return replace(record)

    def update_record(
        self,
        zone_id: str,
        record_id: str,
        record_type: str,
        name: str,
        content: str,
        ttl: int = AUTOMATIC_TTL,
        proxied: Optional[bool] = None,
    ) -> DNSRecord:
        records = self._zone_records(zone_id)
        for i, existing in enumerate(records):
            if existing.id == record_id:
                records[i] = replace(
                    existing,
                    type=record_type,
                    name=name,
                    content=content,
                    ttl=ttl,
                    proxied=existing.proxied if proxied is None else proxied,
                )
                logger.info(f"Mock: Updated record {name} -> {content}")
                return replace(records[i])

        raise ProviderError(f"Record {record_id} not found for update")

    def delete_record(self, zone_id: str, record_id: str) -> None:
        records = self._zone_records(zone_id)
        for i, existing in enumerate(records):
            if existing.id == record_id:
                del records[i]
                logger.info(f"Mock: Deleted record {existing.name}")
                return

        raise ProviderError(f"Record {record_id} not found for deletion")
