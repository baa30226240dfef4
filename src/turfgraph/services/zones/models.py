"""Zone set state and enrichment result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Protocol, Sequence, Union

from ...schemas.zones import ZoneRecord


class ZoneSetKind(str, Enum):
    SYNTHETIC = "synthetic"
    ENRICHED = "enriched"


class ZoneMetadataFetcher(Protocol):
    """Anything that can look up many zones in one request."""

    def fetch_zones(self, names: Sequence[str]) -> Sequence[Union[ZoneRecord, Mapping]]:
        ...


@dataclass(slots=True)
class Diagnostic:
    level: str
    code: str
    message: str
    zone: Optional[str] = None


@dataclass(slots=True)
class EnrichmentReport:
    requested: int
    returned: int
    applied: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.level == "warning"]

    @property
    def count_mismatch(self) -> bool:
        return self.returned != self.requested
