from __future__ import annotations

from typing import Protocol, Sequence

from .model import Client, Guard, Site


class DirectoryRepository(Protocol):
    def list_guards(self) -> Sequence[Guard]:
        raise NotImplementedError

    def list_sites(self) -> Sequence[Site]:
        raise NotImplementedError

    def list_clients(self) -> Sequence[Client]:
        raise NotImplementedError
