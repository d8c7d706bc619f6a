"""
SQLAlchemy models for the searchable tables.

The asset catalog, user directory and investment ledger own these rows; the
search engine reads them through DatabaseDataSource. Each table has an
integer surrogate key that fixes iteration order, and an ``external_id``
that is exposed as the record id.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, Numeric, Index
from sqlalchemy.ext.declarative import declarative_base

Base = declarative_base()


class Asset(Base):
    """A tokenized asset (container route, property, inventory lot, vault)."""
    __tablename__ = "assets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(32), nullable=False, index=True)
    description = Column(Text, nullable=True)
    value = Column(String(64), nullable=False)  # display string, e.g. "$45,000"
    apr = Column(String(16), nullable=False)
    risk = Column(String(16), nullable=False)
    route = Column(String(255), nullable=True)
    cargo = Column(String(255), nullable=True)
    status = Column(String(32), nullable=False, index=True)
    issuer_id = Column(String(64), nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Asset(external_id={self.external_id}, name={self.name}, type={self.type})>"


class User(Base):
    """A platform account (investor, issuer, admin, moderator)."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(64), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(32), nullable=True)
    country = Column(String(100), nullable=False)
    role = Column(String(32), nullable=False, index=True)
    status = Column(String(32), nullable=False, index=True)
    kyc_status = Column(String(32), nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<User(external_id={self.external_id}, email={self.email}, role={self.role})>"


class Investment(Base):
    """A user's position in an asset."""
    __tablename__ = "investments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)  # users.external_id
    asset_id = Column(String(64), nullable=False, index=True)  # assets.external_id
    amount = Column(Numeric(18, 2), nullable=False)
    status = Column(String(32), nullable=False, index=True)
    investment_type = Column(String(32), nullable=False, default="primary")
    expected_return = Column(Numeric(8, 2), nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_investments_user_asset", "user_id", "asset_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Investment(external_id={self.external_id}, asset_id={self.asset_id}, "
            f"amount={self.amount}, status={self.status})>"
        )
