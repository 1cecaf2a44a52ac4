from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Staff


class StaffRepository(Protocol):
    """Repository interface for the staff master.

    Note: the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Staff]:
        raise NotImplementedError

    def save(self, staff: Staff) -> None:
        raise NotImplementedError

    def delete_by_id(self, staff_id: str) -> bool:
        raise NotImplementedError
