"""
Entity adapters: filter source records against a query and project the
matches into search results.

Each adapter is a pure function over its inputs. A record is included when
the text match and every structured filter that is set all pass.
"""

from typing import Iterable, List, Optional

from tradevault.search.parsing import format_amount, parse_money, parse_timestamp
from tradevault.search.records import AssetRecord, InvestmentRecord, UserRecord
from tradevault.search.scoring import relevance_score
from tradevault.search.types import (
    AssetMetadata,
    AssetSearchResult,
    InvestmentMetadata,
    InvestmentSearchResult,
    SearchFilters,
    UserMetadata,
    UserSearchResult,
)


def _matches_text(query_lower: str, *fields: Optional[str]) -> bool:
    if not query_lower:
        return True
    return any(f is not None and query_lower in f.lower() for f in fields)


def _matches_exact(expected: Optional[str], actual: Optional[str]) -> bool:
    return expected is None or expected == actual


def _matches_value(filters: SearchFilters, value: float) -> bool:
    if filters.min_value is not None and value < filters.min_value:
        return False
    if filters.max_value is not None and value > filters.max_value:
        return False
    return True


def _matches_date(filters: SearchFilters, created_at: str) -> bool:
    if filters.date_range is None:
        return True

    created = parse_timestamp(created_at)
    start = parse_timestamp(filters.date_range.start)
    end = parse_timestamp(filters.date_range.end)
    if created is None or start is None or end is None:
        return False
    return start <= created <= end


def search_assets_in_data(
    assets: Iterable[AssetRecord],
    query: str,
    filters: SearchFilters,
) -> List[AssetSearchResult]:
    """Match assets on name, description, route, cargo and type."""
    query_lower = query.lower()
    results = []

    for asset in assets:
        if not (
            _matches_text(query_lower, asset.name, asset.description, asset.route, asset.cargo, asset.type)
            and _matches_exact(filters.category, asset.type)
            and _matches_exact(filters.status, asset.status)
            and _matches_value(filters, parse_money(asset.value))
            and _matches_date(filters, asset.created_at)
        ):
            continue

        results.append(AssetSearchResult(
            id=asset.id,
            title=asset.name,
            description=asset.description or f"{asset.type} asset on {asset.route}",
            metadata=AssetMetadata(
                value=asset.value,
                apr=asset.apr,
                risk=asset.risk,
                route=asset.route,
                cargo=asset.cargo,
                issuer_id=asset.issuer_id,
            ),
            relevance_score=relevance_score(asset.name, query),
            category=asset.type,
            status=asset.status,
            created_at=asset.created_at,
        ))

    return results


def search_users_in_data(
    users: Iterable[UserRecord],
    query: str,
    filters: SearchFilters,
) -> List[UserSearchResult]:
    """
    Match users on first name, last name, email, phone, role and country.

    Value bounds do not apply to users.
    """
    query_lower = query.lower()
    results = []

    for user in users:
        if not (
            _matches_text(
                query_lower,
                user.first_name, user.last_name, user.email, user.phone, user.role, user.country,
            )
            and _matches_exact(filters.category, user.role)
            and _matches_exact(filters.status, user.status)
            and _matches_date(filters, user.created_at)
        ):
            continue

        results.append(UserSearchResult(
            id=user.id,
            title=user.full_name,
            description=f"{user.role} from {user.country}",
            metadata=UserMetadata(
                email=user.email,
                phone=user.phone,
                role=user.role,
                country=user.country,
                kyc_status=user.kyc_status,
            ),
            relevance_score=relevance_score(user.full_name, query),
            category=user.role,
            status=user.status,
            created_at=user.created_at,
        ))

    return results


def search_investments_in_data(
    investments: Iterable[InvestmentRecord],
    query: str,
    filters: SearchFilters,
) -> List[InvestmentSearchResult]:
    """Match investments on asset id, user id, status and investment type."""
    query_lower = query.lower()
    results = []

    for investment in investments:
        if not (
            _matches_text(
                query_lower,
                investment.asset_id, investment.user_id, investment.status, investment.investment_type,
            )
            and _matches_exact(filters.category, investment.investment_type)
            and _matches_exact(filters.status, investment.status)
            and _matches_value(filters, investment.amount)
            and _matches_date(filters, investment.created_at)
        ):
            continue

        results.append(InvestmentSearchResult(
            id=investment.id,
            title=f"Investment in {investment.asset_id}",
            description=(
                f"{investment.investment_type} investment of "
                f"${format_amount(investment.amount)}"
            ),
            metadata=InvestmentMetadata(
                amount=investment.amount,
                type=investment.investment_type,
                asset_id=investment.asset_id,
                user_id=investment.user_id,
                expected_return=investment.expected_return,
            ),
            relevance_score=relevance_score(investment.asset_id or "", query),
            category=investment.investment_type,
            status=investment.status,
            created_at=investment.created_at,
        ))

    return results
