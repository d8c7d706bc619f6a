"""
Unit tests for the entity adapters.

Each adapter is a pure function, so these tests feed records directly
without any data source.
"""
import pytest

from tradevault.search.adapters import (
    search_assets_in_data,
    search_investments_in_data,
    search_users_in_data,
)
from tradevault.search.types import (
    AssetMetadata,
    DateRange,
    EntityType,
    InvestmentMetadata,
    SearchFilters,
    UserMetadata,
)


def _ids(results):
    return [r.id for r in results]


class TestAssetAdapter:

    @pytest.mark.unit
    def test_substring_match_and_projection(self, sample_assets):
        results = search_assets_in_data(sample_assets, "dubai", SearchFilters())

        assert _ids(results) == ["asset-1", "asset-2"]
        container = results[0]
        assert container.type == EntityType.ASSET
        assert container.title == "Jebel Ali-Dubai Container"
        assert container.relevance_score == 70
        assert container.category == "container"
        assert container.status == "active"
        assert isinstance(container.metadata, AssetMetadata)
        assert container.metadata.value == "$45,000"
        assert results[1].relevance_score == 90

    @pytest.mark.unit
    def test_matches_cargo_and_type(self, sample_assets):
        assert _ids(search_assets_in_data(sample_assets, "diamonds", SearchFilters())) == ["asset-3"]
        assert _ids(search_assets_in_data(sample_assets, "PROPERTY", SearchFilters())) == ["asset-2"]

    @pytest.mark.unit
    def test_score_uses_name_even_when_match_is_elsewhere(self, sample_assets):
        results = search_assets_in_data(sample_assets, "electronics", SearchFilters())
        assert _ids(results) == ["asset-1"]
        assert results[0].relevance_score == 0

    @pytest.mark.unit
    def test_empty_query_includes_everything(self, sample_assets):
        assert len(search_assets_in_data(sample_assets, "", SearchFilters())) == 3

    @pytest.mark.unit
    def test_description_falls_back_to_type_and_route(self, make_asset):
        plain = make_asset("a-1", "Plain", type="vault", route="DIFC")
        described = make_asset("a-2", "Described", description="Climate controlled storage")

        results = search_assets_in_data([plain, described], "", SearchFilters())
        assert results[0].description == "vault asset on DIFC"
        assert results[1].description == "Climate controlled storage"

    @pytest.mark.unit
    def test_category_and_status_filters(self, sample_assets):
        by_category = search_assets_in_data(sample_assets, "", SearchFilters(category="vault"))
        by_status = search_assets_in_data(sample_assets, "", SearchFilters(status="active"))

        assert _ids(by_category) == ["asset-3"]
        assert _ids(by_status) == ["asset-1", "asset-2"]

    @pytest.mark.unit
    def test_value_bounds_are_inclusive(self, sample_assets):
        results = search_assets_in_data(
            sample_assets, "", SearchFilters(min_value=15000, max_value=45000)
        )
        assert _ids(results) == ["asset-1", "asset-3"]

    @pytest.mark.unit
    def test_zero_bound_is_a_real_bound(self, sample_assets):
        assert search_assets_in_data(sample_assets, "", SearchFilters(max_value=0)) == []

    @pytest.mark.unit
    def test_malformed_value_counts_as_zero(self, make_asset):
        odd = make_asset("a-1", "Unpriced", value="TBD")
        assert _ids(search_assets_in_data([odd], "", SearchFilters(max_value=0))) == ["a-1"]
        assert search_assets_in_data([odd], "", SearchFilters(min_value=1)) == []

    @pytest.mark.unit
    def test_date_range_is_inclusive(self, sample_assets):
        window = DateRange(start="2024-01-09T12:15:00Z", end="2024-01-15T10:00:00Z")
        results = search_assets_in_data(sample_assets, "", SearchFilters(date_range=window))
        assert _ids(results) == ["asset-1", "asset-3"]

    @pytest.mark.unit
    def test_unparsable_dates_fail_the_date_filter(self, make_asset):
        undated = make_asset("a-1", "Undated", created_at="someday")
        window = DateRange(start="2000-01-01T00:00:00Z", end="2100-01-01T00:00:00Z")

        assert search_assets_in_data([undated], "", SearchFilters(date_range=window)) == []
        assert _ids(search_assets_in_data([undated], "", SearchFilters())) == ["a-1"]


class TestUserAdapter:

    @pytest.mark.unit
    def test_projection(self, sample_users):
        results = search_users_in_data(sample_users, "johnson", SearchFilters())

        assert _ids(results) == ["u-1"]
        user = results[0]
        assert user.type == EntityType.USER
        assert user.title == "Alice Johnson"
        assert user.description == "investor from UAE"
        assert user.category == "investor"
        assert isinstance(user.metadata, UserMetadata)
        assert user.metadata.email == "u-1@example.com"

    @pytest.mark.unit
    def test_both_prefix_matches_score_ninety(self, sample_users):
        results = search_users_in_data(sample_users, "alic", SearchFilters())
        assert [r.relevance_score for r in results] == [90, 90]

    @pytest.mark.unit
    def test_matches_email_phone_and_country(self, make_user):
        user = make_user("u-9", "Omar", "Haddad", email="omar@tradevault.ae",
                         phone="+971500000000", country="UAE")

        for query in ("tradevault.ae", "+9715", "uae"):
            assert _ids(search_users_in_data([user], query, SearchFilters())) == ["u-9"]

    @pytest.mark.unit
    def test_category_filters_on_role(self, sample_users):
        results = search_users_in_data(sample_users, "", SearchFilters(category="issuer"))
        assert _ids(results) == ["u-2"]

    @pytest.mark.unit
    def test_value_bounds_do_not_apply(self, sample_users):
        results = search_users_in_data(sample_users, "", SearchFilters(min_value=1e9))
        assert len(results) == 2


class TestInvestmentAdapter:

    @pytest.mark.unit
    def test_value_bounds_on_amount(self, make_investment):
        investment = make_investment("i-1", 50000)

        included = search_investments_in_data(
            [investment], "", SearchFilters(type="investment", min_value=10000, max_value=60000)
        )
        excluded = search_investments_in_data(
            [investment], "", SearchFilters(type="investment", min_value=60000)
        )

        assert _ids(included) == ["i-1"]
        assert excluded == []

    @pytest.mark.unit
    def test_projection(self, sample_investments):
        results = search_investments_in_data(sample_investments, "", SearchFilters())

        first = results[0]
        assert first.type == EntityType.INVESTMENT
        assert first.title == "Investment in asset-1"
        assert first.description == "primary investment of $50,000"
        assert isinstance(first.metadata, InvestmentMetadata)
        assert first.metadata.amount == 50000.0
        assert first.metadata.asset_id == "asset-1"
        assert results[1].description == "secondary investment of $75,000"

    @pytest.mark.unit
    def test_matches_status_and_ids(self, sample_investments):
        assert _ids(search_investments_in_data(sample_investments, "pending", SearchFilters())) == ["i-2"]
        assert _ids(search_investments_in_data(sample_investments, "asset-1", SearchFilters())) == ["i-1"]
        assert len(search_investments_in_data(sample_investments, "u-1", SearchFilters())) == 2

    @pytest.mark.unit
    def test_scored_against_asset_id(self, sample_investments):
        results = search_investments_in_data(sample_investments, "asset-2", SearchFilters())
        assert results[0].relevance_score == 100

    @pytest.mark.unit
    def test_category_filters_on_investment_type(self, sample_investments):
        results = search_investments_in_data(sample_investments, "", SearchFilters(category="secondary"))
        assert _ids(results) == ["i-2"]
