from sqlalchemy import inspect
from sqlalchemy.orm import sessionmaker

from app.models.hike import Hike
from app.stores.base import HikeStore, StoredHike

# Columns callers may write; id and created_at are assigned on insert only
_IMMUTABLE = frozenset({"id", "created_at"})


def _row_to_dict(hike: Hike) -> StoredHike:
    return {attr.key: getattr(hike, attr.key) for attr in inspect(Hike).column_attrs}


def _writable(values: StoredHike) -> StoredHike:
    return {k: v for k, v in values.items() if k not in _IMMUTABLE}


class SqlHikeStore(HikeStore):
    """One row per hike in the `hikes` table.

    Each call opens its own short-lived session, and every write is a
    single statement scoped to one row (or the whole table for clear).
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create(self, values: StoredHike) -> int:
        with self._session_factory() as db:
            hike = Hike(**_writable(values))
            db.add(hike)
            db.commit()
            db.refresh(hike)
            return hike.id

    def read_all(self) -> list[StoredHike]:
        with self._session_factory() as db:
            rows = (
                db.query(Hike)
                .order_by(Hike.date.desc(), Hike.created_at.desc(), Hike.id.desc())
                .all()
            )
            return [_row_to_dict(row) for row in rows]

    def read_one(self, hike_id: int) -> StoredHike | None:
        with self._session_factory() as db:
            row = db.query(Hike).filter(Hike.id == hike_id).first()
            return _row_to_dict(row) if row else None

    def update(self, hike_id: int, values: StoredHike) -> bool:
        values = _writable(values)
        with self._session_factory() as db:
            if not values:
                return db.query(Hike.id).filter(Hike.id == hike_id).first() is not None
            changed = (
                db.query(Hike)
                .filter(Hike.id == hike_id)
                .update(values, synchronize_session=False)
            )
            db.commit()
            return changed > 0

    def delete(self, hike_id: int) -> bool:
        with self._session_factory() as db:
            removed = (
                db.query(Hike)
                .filter(Hike.id == hike_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return removed > 0

    def clear(self) -> int:
        with self._session_factory() as db:
            removed = db.query(Hike).delete(synchronize_session=False)
            db.commit()
            return removed
