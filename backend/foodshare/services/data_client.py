"""
Remote Data Client — the single handle every view uses to reach the hosted database.

Reads are select/filter/order against a named table; writes are insert or
update-by-equality. Each write commits on its own. Backend failures are rolled
back, logged and handed back as a QueryResult carrying the error text, so call
sites decide between showing an empty state and surfacing the message.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import Depends
from sqlalchemy import select as sa_select, update as sa_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.models import Profile, FoodListing, DonationRequest, Donation, WasteAnalytic

logger = logging.getLogger(__name__)

TABLES = {
    model.__tablename__: model
    for model in (Profile, FoodListing, DonationRequest, Donation, WasteAnalytic)
}


@dataclass
class QueryResult:
    data: list[dict[str, Any]] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def first(self) -> dict[str, Any] | None:
        return self.data[0] if self.data else None


def _as_dict(record) -> dict[str, Any]:
    return {c.key: getattr(record, c.key) for c in record.__table__.columns}


class RemoteDataClient:
    def __init__(self, db: Session):
        self.db = db

    def _model(self, table: str):
        try:
            return TABLES[table]
        except KeyError:
            raise ValueError(f"Unknown table: {table}") from None

    def _column(self, model, name: str):
        if name not in model.__table__.columns:
            raise ValueError(f"Unknown column {name!r} on {model.__tablename__}")
        return getattr(model, name)

    def _where(self, stmt, model, filters: dict[str, Any] | None):
        for name, value in (filters or {}).items():
            stmt = stmt.where(self._column(model, name) == value)
        return stmt

    def _fail(self, action: str, table: str, exc: SQLAlchemyError) -> QueryResult:
        self.db.rollback()
        logger.error(f"{action} on {table} failed: {exc}")
        return QueryResult(error=str(exc.orig) if getattr(exc, "orig", None) else str(exc))

    def select(
        self,
        table: str,
        columns: list[str] | None = None,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> QueryResult:
        """Fetch rows as dicts; `columns` narrows the projection."""
        model = self._model(table)
        names = columns or [c.key for c in model.__table__.columns]
        stmt = sa_select(*[self._column(model, n) for n in names])
        stmt = self._where(stmt, model, filters)
        if order_by:
            col = self._column(model, order_by)
            stmt = stmt.order_by(col.asc() if ascending else col.desc())
        try:
            rows = self.db.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            return self._fail("Select", table, e)
        return QueryResult(data=[dict(r) for r in rows])

    def insert(self, table: str, values: dict[str, Any]) -> QueryResult:
        """Insert one row; id and timestamps come from the column defaults."""
        model = self._model(table)
        for name in values:
            self._column(model, name)
        record = model(**values)
        self.db.add(record)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            return self._fail("Insert", table, e)
        self.db.refresh(record)
        return QueryResult(data=[_as_dict(record)])

    def update(self, table: str, values: dict[str, Any], match: dict[str, Any]) -> QueryResult:
        """Set `values` on every row equal to `match`; returns the updated rows."""
        model = self._model(table)
        if not match:
            raise ValueError("update requires at least one equality filter")
        for name in values:
            self._column(model, name)
        stmt = self._where(sa_update(model), model, match).values(**values)
        stmt = stmt.returning(*model.__table__.columns)
        try:
            rows = self.db.execute(stmt, execution_options={"synchronize_session": False}).mappings().all()
            self.db.commit()
        except SQLAlchemyError as e:
            return self._fail("Update", table, e)
        return QueryResult(data=[dict(r) for r in rows])


def get_client(db: Session = Depends(get_db)) -> RemoteDataClient:
    return RemoteDataClient(db)
