"""
Variants component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from entrypoint_lister.core.entities import VariantRecord


class ProbeStatus(str, Enum):
    """Outcome of looking for a variant file."""

    ABSENT = "absent"
    PRESENT = "present"


@dataclass(frozen=True)
class VariantProbe:
    """Result of probing one variant of one file."""

    name: str
    status: ProbeStatus
    record: VariantRecord | None = None

    @classmethod
    def absent(cls, name: str) -> VariantProbe:
        return cls(name=name, status=ProbeStatus.ABSENT)

    @classmethod
    def present(cls, name: str, record: VariantRecord) -> VariantProbe:
        return cls(name=name, status=ProbeStatus.PRESENT, record=record)

    @property
    def is_present(self) -> bool:
        return self.status is ProbeStatus.PRESENT
