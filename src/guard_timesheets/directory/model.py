from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.numbers import to_decimal


@dataclass(frozen=True)
class Guard:
    guard_id: str
    first_name: str
    last_name: str
    hourly_rate: Optional[Decimal] = None  # pay rate; billing uses the shift rate

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Guard":
        return cls(
            guard_id=str(doc.get("$id") or doc.get("id") or ""),
            first_name=str(doc.get("firstName") or ""),
            last_name=str(doc.get("lastName") or ""),
            hourly_rate=to_decimal(doc.get("hourlyRate")),
        )


@dataclass(frozen=True)
class Site:
    site_id: str
    site_name: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Site":
        return cls(site_id=str(doc.get("$id") or doc.get("id") or ""), site_name=str(doc.get("siteName") or ""))


@dataclass(frozen=True)
class Client:
    client_id: str
    company_name: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Client":
        return cls(
            client_id=str(doc.get("$id") or doc.get("id") or ""),
            company_name=str(doc.get("companyName") or ""),
        )
