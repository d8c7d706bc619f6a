"""
Load search records into the database.

Used to bootstrap a fresh database with the demo catalogue, and by tests to
put identical data behind the database and in-memory search paths.
"""

import logging
from typing import Dict, Iterable

from sqlalchemy.orm import Session

from tradevault.core.models import Asset, Investment, User
from tradevault.search.parsing import to_utc_naive
from tradevault.search.records import AssetRecord, InvestmentRecord, UserRecord

logger = logging.getLogger(__name__)


def seed_search_tables(
    db: Session,
    assets: Iterable[AssetRecord] = (),
    users: Iterable[UserRecord] = (),
    investments: Iterable[InvestmentRecord] = (),
) -> Dict[str, int]:
    """
    Insert records in the given order and commit.

    Returns:
        Dict with counts per entity type inserted
    """
    counts = {"asset": 0, "user": 0, "investment": 0}

    for record in assets:
        created = to_utc_naive(record.created_at)
        db.add(Asset(
            external_id=record.id,
            name=record.name,
            type=record.type,
            description=record.description,
            value=record.value,
            apr=record.apr,
            risk=record.risk,
            route=record.route,
            cargo=record.cargo,
            status=record.status,
            issuer_id=record.issuer_id,
            created_at=created,
            updated_at=created,
        ))
        counts["asset"] += 1

    for record in users:
        created = to_utc_naive(record.created_at)
        db.add(User(
            external_id=record.id,
            email=record.email,
            first_name=record.first_name,
            last_name=record.last_name,
            phone=record.phone,
            country=record.country,
            role=record.role,
            status=record.status,
            kyc_status=record.kyc_status,
            created_at=created,
            updated_at=created,
        ))
        counts["user"] += 1

    for record in investments:
        created = to_utc_naive(record.created_at)
        db.add(Investment(
            external_id=record.id,
            user_id=record.user_id,
            asset_id=record.asset_id,
            amount=record.amount,
            status=record.status,
            investment_type=record.investment_type,
            expected_return=record.expected_return,
            created_at=created,
            updated_at=created,
        ))
        counts["investment"] += 1

    db.commit()
    logger.info(f"Seeded search tables: {counts}")
    return counts


def seed_demo_catalogue(db: Session) -> Dict[str, int]:
    """Seed the built-in demo catalogue if the asset table is empty."""
    from tradevault.search.fallback_data import (
        FALLBACK_ASSETS,
        FALLBACK_INVESTMENTS,
        FALLBACK_USERS,
    )

    if db.query(Asset).first() is not None:
        logger.info("Search tables already populated, skipping demo seed")
        return {"asset": 0, "user": 0, "investment": 0}

    return seed_search_tables(db, FALLBACK_ASSETS, FALLBACK_USERS, FALLBACK_INVESTMENTS)
