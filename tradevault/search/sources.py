"""
Data sources the search engine reads records from.

A source answers three fetches (assets, users, investments) with a
FetchResult instead of raising, so the engine can tell a failed store from
an empty one and switch to its fallback.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Iterable, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradevault.core.models import Asset, Investment, User
from tradevault.search.parsing import format_timestamp
from tradevault.search.records import AssetRecord, InvestmentRecord, UserRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one fetch from a data source."""
    success: bool
    items: List[T] = field(default_factory=list)
    error: Optional[str] = None


class SearchDataSource(ABC):
    """Read-only access to the three searchable record kinds."""

    name: str = "source"

    @abstractmethod
    def fetch_assets(self) -> FetchResult[AssetRecord]:
        pass

    @abstractmethod
    def fetch_users(self) -> FetchResult[UserRecord]:
        pass

    @abstractmethod
    def fetch_investments(self) -> FetchResult[InvestmentRecord]:
        pass


class InMemoryDataSource(SearchDataSource):
    """Serves records held in memory. Used as the fallback path."""

    name = "fallback"

    def __init__(
        self,
        assets: Iterable[AssetRecord] = (),
        users: Iterable[UserRecord] = (),
        investments: Iterable[InvestmentRecord] = (),
    ):
        self._assets = tuple(assets)
        self._users = tuple(users)
        self._investments = tuple(investments)

    @classmethod
    def default(cls) -> "InMemoryDataSource":
        """Source over the built-in demo catalogue."""
        from tradevault.search.fallback_data import (
            FALLBACK_ASSETS,
            FALLBACK_INVESTMENTS,
            FALLBACK_USERS,
        )
        return cls(FALLBACK_ASSETS, FALLBACK_USERS, FALLBACK_INVESTMENTS)

    def fetch_assets(self) -> FetchResult[AssetRecord]:
        return FetchResult(success=True, items=list(self._assets))

    def fetch_users(self) -> FetchResult[UserRecord]:
        return FetchResult(success=True, items=list(self._users))

    def fetch_investments(self) -> FetchResult[InvestmentRecord]:
        return FetchResult(success=True, items=list(self._investments))


class DatabaseDataSource(SearchDataSource):
    """
    Reads records through a SQLAlchemy session.

    Rows come back in insertion order (surrogate key) and are converted to
    the same record shapes the fallback catalogue uses. Database errors are
    reported as ``success=False``.
    """

    name = "database"

    def __init__(self, db: Session):
        self.db = db

    def fetch_assets(self) -> FetchResult[AssetRecord]:
        try:
            rows = self.db.query(Asset).order_by(Asset.id).all()
        except SQLAlchemyError as e:
            logger.warning(f"Asset fetch failed: {e}")
            self.db.rollback()
            return FetchResult(success=False, error=str(e))

        return FetchResult(success=True, items=[
            AssetRecord(
                id=row.external_id,
                name=row.name,
                type=row.type,
                value=row.value,
                apr=row.apr,
                risk=row.risk,
                status=row.status,
                created_at=format_timestamp(row.created_at),
                description=row.description,
                route=row.route,
                cargo=row.cargo,
                issuer_id=row.issuer_id,
            )
            for row in rows
        ])

    def fetch_users(self) -> FetchResult[UserRecord]:
        try:
            rows = self.db.query(User).order_by(User.id).all()
        except SQLAlchemyError as e:
            logger.warning(f"User fetch failed: {e}")
            self.db.rollback()
            return FetchResult(success=False, error=str(e))

        return FetchResult(success=True, items=[
            UserRecord(
                id=row.external_id,
                email=row.email,
                first_name=row.first_name,
                last_name=row.last_name,
                role=row.role,
                status=row.status,
                country=row.country,
                created_at=format_timestamp(row.created_at),
                phone=row.phone,
                kyc_status=row.kyc_status,
            )
            for row in rows
        ])

    def fetch_investments(self) -> FetchResult[InvestmentRecord]:
        try:
            rows = self.db.query(Investment).order_by(Investment.id).all()
        except SQLAlchemyError as e:
            logger.warning(f"Investment fetch failed: {e}")
            self.db.rollback()
            return FetchResult(success=False, error=str(e))

        return FetchResult(success=True, items=[
            InvestmentRecord(
                id=row.external_id,
                user_id=row.user_id,
                asset_id=row.asset_id,
                amount=float(row.amount),
                status=row.status,
                investment_type=row.investment_type,
                created_at=format_timestamp(row.created_at),
                expected_return=float(row.expected_return) if row.expected_return is not None else None,
            )
            for row in rows
        ])
