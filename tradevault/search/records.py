"""
Read-only source records consumed by the search engine.

The asset catalog, user directory and investment ledger own these records;
search only reads and projects them. They are frozen so an adapter cannot
change a record by accident.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AssetRecord:
    """A tokenized asset listed on the platform."""
    id: str
    name: str
    type: str  # container, property, inventory, vault
    value: str  # display money string, e.g. "$45,000"
    apr: str
    risk: str
    status: str
    created_at: str
    description: Optional[str] = None
    route: Optional[str] = None
    cargo: Optional[str] = None
    issuer_id: Optional[str] = None


@dataclass(frozen=True)
class UserRecord:
    """A platform account."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: str  # admin, issuer, investor, moderator
    status: str
    country: str
    created_at: str
    phone: Optional[str] = None
    kyc_status: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class InvestmentRecord:
    """A position a user holds (or has requested) in an asset."""
    id: str
    user_id: str
    asset_id: str
    amount: float
    status: str
    investment_type: str  # primary, secondary
    created_at: str
    expected_return: Optional[float] = None
