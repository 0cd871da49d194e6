"""Storage interface for the hike collection.

A store works purely in the storage representation: a dict keyed by the
Hike model's attribute names, with dates as ISO-8601 text, photos and
coordinates as JSON text and the completion flag as 0/1. Encoding and
decoding live in the repository, not here.

Implementations raise sqlalchemy.exc.SQLAlchemyError (or a subclass) on
storage failures and never raise for a missing id.
"""

from abc import ABC, abstractmethod
from typing import Any

StoredHike = dict[str, Any]


class HikeStore(ABC):
    """Abstract base class for hike record stores."""

    @abstractmethod
    def create(self, values: StoredHike) -> int:
        """Insert one record and return its newly assigned id."""

    @abstractmethod
    def read_all(self) -> list[StoredHike]:
        """Return every record, newest hike date first, then newest created."""

    @abstractmethod
    def read_one(self, hike_id: int) -> StoredHike | None:
        """Return the record for hike_id, or None if absent."""

    @abstractmethod
    def update(self, hike_id: int, values: StoredHike) -> bool:
        """Overwrite only the given columns. False when hike_id is absent."""

    @abstractmethod
    def delete(self, hike_id: int) -> bool:
        """Remove one record. False when hike_id is absent."""

    @abstractmethod
    def clear(self) -> int:
        """Remove every record and return how many were removed."""
