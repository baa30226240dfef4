"""Indexed zone collections and bulk metadata enrichment."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError

from ...errors import AlreadyEnrichedError, DuplicateNameError, EmptySetError, PhantomZoneError, TransportError
from ...models.domain import Coords, Zone
from ...schemas.zones import ZoneRecord
from .models import Diagnostic, EnrichmentReport, ZoneMetadataFetcher, ZoneSetKind

logger = logging.getLogger(__name__)

DiagnosticCallback = Callable[[Diagnostic], None]


class ZoneSet:
    """A set of zones indexed by lower-cased name.

    Membership is fixed at construction; build a new set (for example with
    :meth:`union`) to change it. Iteration follows insertion order.
    """

    def __init__(self, zones: Iterable[Zone]):
        self._zones: List[Zone] = []
        self._index: Dict[str, Zone] = {}
        self._kind = ZoneSetKind.SYNTHETIC

        collisions: set[str] = set()
        for zone in zones:
            existing = self._index.get(zone.key)
            if existing is not None:
                collisions.update((existing.name, zone.name))
                continue
            self._index[zone.key] = zone
            self._zones.append(zone)
        if collisions:
            raise DuplicateNameError(collisions)

    @property
    def kind(self) -> ZoneSetKind:
        return self._kind

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Zone):
            return self._index.get(item.key) == item
        if isinstance(item, str):
            return item.lower() in self._index
        return False

    def __or__(self, other: "ZoneSet") -> "ZoneSet":
        return ZoneSet.union(self, other)

    def __repr__(self) -> str:
        return f"ZoneSet(size={len(self)}, kind={self._kind.value})"

    def names(self) -> List[str]:
        return [zone.name for zone in self._zones]

    def find_by_name(self, name: str) -> Optional[Zone]:
        return self._index.get(name.lower())

    def closest_zone_to(self, coords: Coords) -> Zone:
        """Return the member nearest to ``coords``; ties go to the earliest member."""
        if not self._zones:
            raise EmptySetError(f"Cannot find the closest zone to {coords}: zone set is empty")

        closest_zone = self._zones[0]
        closest_distance = coords.distance_to(closest_zone.coords)
        for zone in self._zones[1:]:
            distance = coords.distance_to(zone.coords)
            if distance < closest_distance:
                closest_zone = zone
                closest_distance = distance
        return closest_zone

    @staticmethod
    def union(a: "ZoneSet", b: "ZoneSet") -> "ZoneSet":
        """Merge two sets into a new synthetic set.

        Zones with the same name are merged into a single entry (``a`` wins);
        names differing only by case raise :class:`DuplicateNameError`.
        """
        merged: List[Zone] = list(a)
        seen = set(merged)
        merged.extend(zone for zone in b if zone not in seen)
        return ZoneSet(merged)

    def enrich_with_metadata(
        self,
        fetcher: ZoneMetadataFetcher,
        *,
        on_diagnostic: Optional[DiagnosticCallback] = None,
    ) -> EnrichmentReport:
        """Fetch points for every member in one bulk request and apply them.

        The upstream API silently drops names it does not know, so every
        member must be matched by a returned record before any zone is
        touched. Raises :class:`PhantomZoneError` listing the unmatched zones;
        in that case no zone is scored and the set keeps its kind.
        """
        names = self.names()
        logger.info("Requesting points metadata for %d zones", len(names))
        records = [_coerce_record(raw) for raw in fetcher.fetch_zones(names)]

        report = EnrichmentReport(requested=len(names), returned=len(records))

        def emit(level: str, code: str, message: str, zone: Optional[str] = None) -> Diagnostic:
            diagnostic = Diagnostic(level=level, code=code, message=message, zone=zone)
            report.diagnostics.append(diagnostic)
            logger.log(logging.ERROR if level == "error" else logging.WARNING, message)
            if on_diagnostic is not None:
                on_diagnostic(diagnostic)
            return diagnostic

        matched: Dict[str, ZoneRecord] = {}
        for record in records:
            zone = self.find_by_name(record.name)
            if zone is None:
                emit("warning", "unknown_record", f"API returned zone '{record.name}' which was not requested", record.name)
                continue
            if zone.key in matched:
                emit("warning", "duplicate_record", f"API returned zone '{zone.name}' more than once", zone.name)
                continue
            matched[zone.key] = record

        phantoms = [zone for zone in self._zones if zone.key not in matched]
        if phantoms:
            errors = [
                emit("error", "phantom_zone", f"Zone {zone.name} does not exist in the API", zone.name)
                for zone in phantoms
            ]
            raise PhantomZoneError([zone.name for zone in phantoms], diagnostics=errors)

        if len(records) != len(names):
            emit(
                "warning",
                "count_mismatch",
                f"API response contains {len(records)} zones but {len(names)} were requested",
            )

        already_scored = [zone for zone in self._zones if zone.is_enriched]
        if already_scored:
            raise AlreadyEnrichedError(already_scored[0].name)

        for zone in self._zones:
            record = matched[zone.key]
            zone.set_points(record.takeover_points, record.points_per_hour)
            logger.debug("Zone %s: %d takeover points, %d points/hour", zone.name, record.takeover_points, record.points_per_hour)
        report.applied = len(self._zones)

        self._kind = ZoneSetKind.ENRICHED
        logger.info("Applied points metadata to %d zones", report.applied)
        return report


def _coerce_record(raw: Union[ZoneRecord, Mapping]) -> ZoneRecord:
    if isinstance(raw, ZoneRecord):
        return raw
    try:
        return ZoneRecord.model_validate(raw)
    except ValidationError as exc:
        raise TransportError(f"Malformed zone record from API: {raw!r}") from exc
