"""Repository facade over the hike store.

This is the only layer the API talks to. It validates input with the
pydantic schemas, encodes nested fields for storage, decodes rows back
into HikeRead objects and reports every expected failure as a result
value instead of raising.
"""
import logging
from collections.abc import Mapping

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.constants import COMPLETED, HIKE_NOT_FOUND, NOT_COMPLETED
from app.core.date_utils import parse_date, to_iso_date
from app.core.json_fields import decode_coords, decode_photos, encode_coords, encode_photos
from app.schemas.hike import (
    COMPLETED_DATE_REQUIRED,
    Difficulty,
    HikeBase,
    HikeCreate,
    HikeIdResult,
    HikeListResult,
    HikeRead,
    HikeResult,
    HikeStats,
    HikeStatsResult,
    HikeUpdate,
    Result,
)
from app.stores.base import HikeStore, StoredHike

logger = logging.getLogger(__name__)

# Text fields matched by search_hikes, in the order the list screen checks them
SEARCH_FIELDS = ("name", "location", "difficulty", "description", "weather", "notes")

COMPLETION_FIELDS = frozenset({"is_completed", "completed_date"})


def _as_dict(data) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"Hike data must be a mapping or a schema, got {type(data).__name__}")


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def _coerce_id(hike_id) -> int | None:
    """Stored ids are positive ints; anything else cannot match a row."""
    if isinstance(hike_id, bool):
        return None
    if isinstance(hike_id, int):
        return hike_id if hike_id > 0 else None
    if isinstance(hike_id, str) and hike_id.strip().isdigit():
        value = int(hike_id.strip())
        return value if value > 0 else None
    return None


def encode_hike(hike: HikeBase) -> StoredHike:
    """In-memory hike -> storage representation."""
    return {
        "name": hike.name,
        "location": hike.location,
        "date": to_iso_date(hike.date),
        "parking": hike.parking.value,
        "length": float(hike.length),
        "route_type": hike.route_type.value,
        "difficulty": hike.difficulty.value,
        "description": hike.description,
        "notes": hike.notes,
        "weather": hike.weather,
        "photos": encode_photos(hike.photos),
        "location_coords": encode_coords(hike.location_coords),
        "is_completed": COMPLETED if hike.is_completed else NOT_COMPLETED,
        "completed_date": to_iso_date(hike.completed_date),
    }


def decode_hike(row: StoredHike) -> HikeRead:
    """Storage representation -> HikeRead.

    photos / locationCoords degrade to their defaults when unreadable;
    a bad required column raises ValueError.
    """
    return HikeRead.model_validate(
        {
            "id": row["id"],
            "name": row["name"],
            "location": row["location"],
            "date": parse_date(row["date"]),
            "parking": row["parking"],
            "length": row["length"],
            "route_type": row.get("route_type") or "",
            "difficulty": row["difficulty"],
            "description": row.get("description") or "",
            "notes": row.get("notes") or "",
            "weather": row.get("weather") or "",
            "photos": decode_photos(row.get("photos")),
            "location_coords": decode_coords(row.get("location_coords")),
            "is_completed": bool(row.get("is_completed") or 0),
            "completed_date": parse_date(row.get("completed_date")),
            "created_at": row["created_at"],
        }
    )


class HikeRepository:
    def __init__(self, store: HikeStore):
        self._store = store

    def create_hike(self, data) -> HikeIdResult:
        try:
            hike = HikeCreate.model_validate(_as_dict(data))
        except ValidationError as e:
            return HikeIdResult(success=False, error=_validation_message(e))

        try:
            hike_id = self._store.create(encode_hike(hike))
        except SQLAlchemyError as e:
            logger.exception("Error saving hike")
            return HikeIdResult(success=False, error=f"Failed to save hike: {e}")

        logger.info("Hike created", extra={"hike_id": hike_id})
        return HikeIdResult(success=True, id=hike_id)

    def get_all_hikes(self) -> HikeListResult:
        """Every hike in collection order.

        success=False with an empty list means the load failed, as opposed
        to success=True with an empty list for an empty log.
        """
        try:
            rows = self._store.read_all()
        # ValueError: a stored cell SQLAlchemy itself cannot convert (e.g. created_at)
        except (SQLAlchemyError, ValueError) as e:
            logger.exception("Error loading hikes")
            return HikeListResult(success=False, error=f"Failed to load hikes: {e}", hikes=[])

        hikes = []
        for row in rows:
            try:
                hikes.append(decode_hike(row))
            except ValueError:
                logger.warning("Skipping unreadable hike record", extra={"hike_id": row.get("id")})
        return HikeListResult(success=True, hikes=hikes)

    def get_hike_by_id(self, hike_id) -> HikeResult:
        key = _coerce_id(hike_id)
        if key is None:
            return HikeResult(success=False, error=HIKE_NOT_FOUND)

        try:
            row = self._store.read_one(key)
        except (SQLAlchemyError, ValueError) as e:
            logger.exception("Error loading hike", extra={"hike_id": key})
            return HikeResult(success=False, error=f"Failed to load hike: {e}")

        if row is None:
            return HikeResult(success=False, error=HIKE_NOT_FOUND)
        try:
            return HikeResult(success=True, hike=decode_hike(row))
        except ValueError:
            logger.warning("Unreadable hike record", extra={"hike_id": key})
            return HikeResult(success=False, error="Hike record is unreadable")

    def update_hike(self, hike_id, data) -> Result:
        """Merge `data` over the stored hike; omitted fields keep their value.

        id and created_at are never written through this path.
        """
        key = _coerce_id(hike_id)
        if key is None:
            return Result(success=False, error=HIKE_NOT_FOUND)

        try:
            changes = HikeUpdate.model_validate(_as_dict(data)).model_dump(exclude_unset=True)
        except ValidationError as e:
            return Result(success=False, error=_validation_message(e))

        current = self.get_hike_by_id(key)
        if not current.success:
            return Result(success=False, error=current.error)

        merged = current.hike.model_dump(exclude={"id", "created_at"})
        merged.update(changes)
        try:
            hike = HikeBase.model_validate(merged)
        except ValidationError as e:
            return Result(success=False, error=_validation_message(e))

        # The completion pair is only checked when this edit touches it
        if COMPLETION_FIELDS & changes.keys() and hike.is_completed and hike.completed_date is None:
            return Result(success=False, error=COMPLETED_DATE_REQUIRED)

        encoded = encode_hike(hike)
        values = {k: encoded[k] for k in changes}
        try:
            updated = self._store.update(key, values)
        except SQLAlchemyError as e:
            logger.exception("Error updating hike", extra={"hike_id": key})
            return Result(success=False, error=f"Failed to update hike: {e}")

        if not updated:
            # Deleted between the read and the write
            return Result(success=False, error=HIKE_NOT_FOUND)
        logger.info("Hike updated", extra={"hike_id": key, "fields": sorted(values)})
        return Result(success=True)

    def delete_hike(self, hike_id) -> Result:
        key = _coerce_id(hike_id)
        if key is None:
            return Result(success=False, error=HIKE_NOT_FOUND)

        try:
            removed = self._store.delete(key)
        except SQLAlchemyError as e:
            logger.exception("Error deleting hike", extra={"hike_id": key})
            return Result(success=False, error=f"Failed to delete hike: {e}")

        if not removed:
            return Result(success=False, error=HIKE_NOT_FOUND)
        logger.info("Hike deleted", extra={"hike_id": key})
        return Result(success=True)

    def clear_all_hikes(self) -> Result:
        try:
            removed = self._store.clear()
        except SQLAlchemyError as e:
            logger.exception("Error clearing hikes")
            return Result(success=False, error=f"Failed to clear hikes: {e}")

        logger.warning("All hikes cleared", extra={"removed": removed})
        return Result(success=True)

    def search_hikes(self, query: str | None) -> HikeListResult:
        """Case-insensitive substring search; a blank query returns everything."""
        result = self.get_all_hikes()
        if not result.success or not query or not query.strip():
            return result

        needle = query.strip().lower()
        matches = []
        for hike in result.hikes:
            for field in SEARCH_FIELDS:
                value = getattr(hike, field)
                text = value.value if isinstance(value, Difficulty) else value
                if text and needle in text.lower():
                    matches.append(hike)
                    break
        return HikeListResult(success=True, hikes=matches)

    def get_mapped_hikes(self) -> HikeListResult:
        """Hikes that carry coordinates, for the map view."""
        result = self.get_all_hikes()
        if not result.success:
            return result
        return HikeListResult(
            success=True,
            hikes=[h for h in result.hikes if h.location_coords is not None],
        )

    def get_hike_stats(self) -> HikeStatsResult:
        result = self.get_all_hikes()
        if not result.success:
            return HikeStatsResult(success=False, error=result.error)

        by_difficulty = {d.value: 0 for d in Difficulty}
        for hike in result.hikes:
            by_difficulty[hike.difficulty.value] += 1

        stats = HikeStats(
            total_hikes=len(result.hikes),
            completed_hikes=sum(1 for h in result.hikes if h.is_completed),
            total_length_km=round(sum(h.length for h in result.hikes), 2),
            by_difficulty=by_difficulty,
        )
        return HikeStatsResult(success=True, stats=stats)
