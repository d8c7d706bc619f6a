"""
Request and response types for cross-entity search.

Results are a tagged variant: one ``SearchResult`` base with a concrete
subclass per entity kind, each carrying its own typed metadata payload.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from tradevault.search.parsing import parse_money

ALL_TYPES = "all"


class EntityType(str, Enum):
    """Searchable record kinds, in merge order."""
    ASSET = "asset"
    USER = "user"
    INVESTMENT = "investment"


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    DATE = "date"
    VALUE = "value"
    NAME = "name"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Filters and options
# =============================================================================


@dataclass(frozen=True)
class DateRange:
    """Inclusive ISO-8601 bounds on a record's creation time."""
    start: str
    end: str


@dataclass
class SearchFilters:
    """
    Query-time constraints. Every field is optional; an unset field places
    no constraint on that dimension.
    """
    type: Optional[Union[EntityType, str]] = None
    category: Optional[str] = None
    status: Optional[str] = None
    date_range: Optional[DateRange] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def __post_init__(self):
        if isinstance(self.type, str) and self.type != ALL_TYPES:
            self.type = EntityType(self.type)
        if isinstance(self.date_range, dict):
            self.date_range = DateRange(**self.date_range)

    def includes(self, entity_type: EntityType) -> bool:
        """Whether this filter set scopes the search to ``entity_type``."""
        return self.type in (None, ALL_TYPES) or self.type == entity_type

    def scoped_to(self, entity_type: EntityType) -> "SearchFilters":
        """Copy of these filters pinned to one entity kind."""
        return SearchFilters(
            type=entity_type,
            category=self.category,
            status=self.status,
            date_range=self.date_range,
            min_value=self.min_value,
            max_value=self.max_value,
        )


@dataclass
class SearchOptions:
    """Presentation-time options: paging and ordering."""
    limit: int = 20
    offset: int = 0
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC

    def __post_init__(self):
        self.sort_by = SortBy(self.sort_by)
        self.sort_order = SortOrder(self.sort_order)


# =============================================================================
# Result metadata payloads
# =============================================================================


@dataclass
class ResultMetadata:
    """Base for the per-kind metadata payloads."""

    @property
    def sort_value(self) -> float:
        """Monetary value used by ``sort_by=value``; 0 when the kind has none."""
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AssetMetadata(ResultMetadata):
    value: str
    apr: str
    risk: str
    route: Optional[str] = None
    cargo: Optional[str] = None
    issuer_id: Optional[str] = None

    @property
    def sort_value(self) -> float:
        return parse_money(self.value)


@dataclass
class UserMetadata(ResultMetadata):
    email: str
    role: str
    country: str
    phone: Optional[str] = None
    kyc_status: Optional[str] = None


@dataclass
class InvestmentMetadata(ResultMetadata):
    amount: float
    type: str
    asset_id: str
    user_id: str
    expected_return: Optional[float] = None


# =============================================================================
# Results
# =============================================================================


@dataclass
class SearchResult:
    """A single search hit, uniform across entity kinds."""
    id: str
    title: str
    description: str
    metadata: ResultMetadata
    relevance_score: float
    created_at: str
    category: Optional[str] = None
    status: Optional[str] = None

    type: ClassVar[EntityType]

    @property
    def key(self):
        """Identity of the hit within one response."""
        return (self.type, self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "metadata": self.metadata.to_dict(),
            "relevance_score": self.relevance_score,
            "category": self.category,
            "status": self.status,
            "created_at": self.created_at,
        }


@dataclass
class AssetSearchResult(SearchResult):
    type: ClassVar[EntityType] = EntityType.ASSET


@dataclass
class UserSearchResult(SearchResult):
    type: ClassVar[EntityType] = EntityType.USER


@dataclass
class InvestmentSearchResult(SearchResult):
    type: ClassVar[EntityType] = EntityType.INVESTMENT


# =============================================================================
# Responses
# =============================================================================


@dataclass
class SearchResponse:
    """Outcome of a search call. ``total`` counts matches before paging."""
    success: bool
    results: List[SearchResult] = field(default_factory=list)
    total: int = 0
    error: Optional[str] = None
    source: Optional[str] = None  # "database" or "fallback"
    query: str = ""
    search_time_ms: float = 0.0


@dataclass
class SuggestionsResponse:
    success: bool
    suggestions: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class PopularSearchesResponse:
    success: bool
    searches: List[str] = field(default_factory=list)
    error: Optional[str] = None
