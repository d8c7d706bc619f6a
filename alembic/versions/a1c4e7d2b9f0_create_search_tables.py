"""create search tables

Revision ID: a1c4e7d2b9f0
Revises:
Create Date: 2026-10-17 09:12:44.318205

Creates the assets, users and investments tables read by the search
engine. New databases may also use create_all() (see tradevault/main.py
lifespan) and then be stamped with:

    alembic stamp head
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'a1c4e7d2b9f0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('external_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('value', sa.String(length=64), nullable=False),
        sa.Column('apr', sa.String(length=16), nullable=False),
        sa.Column('risk', sa.String(length=16), nullable=False),
        sa.Column('route', sa.String(length=255), nullable=True),
        sa.Column('cargo', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('issuer_id', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_assets_external_id', 'assets', ['external_id'], unique=True)
    op.create_index('ix_assets_type', 'assets', ['type'])
    op.create_index('ix_assets_status', 'assets', ['status'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('external_id', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('kyc_status', sa.String(length=32), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_external_id', 'users', ['external_id'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])
    op.create_index('ix_users_status', 'users', ['status'])

    op.create_table(
        'investments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('external_id', sa.String(length=64), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('asset_id', sa.String(length=64), nullable=False),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('investment_type', sa.String(length=32), nullable=False),
        sa.Column('expected_return', sa.Numeric(precision=8, scale=2), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_investments_external_id', 'investments', ['external_id'], unique=True)
    op.create_index('ix_investments_user_id', 'investments', ['user_id'])
    op.create_index('ix_investments_asset_id', 'investments', ['asset_id'])
    op.create_index('ix_investments_status', 'investments', ['status'])
    op.create_index('idx_investments_user_asset', 'investments', ['user_id', 'asset_id'])


def downgrade() -> None:
    op.drop_table('investments')
    op.drop_table('users')
    op.drop_table('assets')
