from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..core.constants import UNKNOWN_NAME
from .model import Client, Guard, Site


@dataclass(frozen=True)
class NameDirectory:
    """Id -> display name lookups for guards, sites and clients.

    Unknown or missing ids resolve to "Unknown".
    """

    guards: Mapping[str, str] = field(default_factory=dict)
    sites: Mapping[str, str] = field(default_factory=dict)
    clients: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        guards: Iterable[Guard] = (),
        sites: Iterable[Site] = (),
        clients: Iterable[Client] = (),
    ) -> "NameDirectory":
        return cls(
            guards={g.guard_id: g.full_name for g in guards},
            sites={s.site_id: s.site_name for s in sites},
            clients={c.client_id: c.company_name for c in clients},
        )

    def guard_name(self, guard_id: Optional[str]) -> str:
        return self.guards.get(guard_id or "") or UNKNOWN_NAME

    def site_name(self, site_id: Optional[str]) -> str:
        return self.sites.get(site_id or "") or UNKNOWN_NAME

    def client_name(self, client_id: Optional[str]) -> str:
        return self.clients.get(client_id or "") or UNKNOWN_NAME
