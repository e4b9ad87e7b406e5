from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeRosterEntry


class RosterRepository(Protocol):
    """Read-only roster port.

    Note (DIP): the import service depends on this interface, never on a concrete store.
    Implementations raise RosterUnavailableError when the store cannot be reached.
    """

    def list_active(self) -> Sequence[EmployeeRosterEntry]:
        raise NotImplementedError
