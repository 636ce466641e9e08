"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = '0001_initial'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


JSON_DOCUMENT = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('industry', sa.String(length=50), nullable=True),
        sa.Column('founded_year', sa.String(length=10), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('company_size', sa.String(length=20), nullable=True),
        sa.Column('primary_color', sa.String(length=20), nullable=True),
        sa.Column('secondary_color', sa.String(length=20), nullable=True),
        sa.Column('logo', sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'company_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('companies.id', ondelete='CASCADE'), nullable=False),
        sa.Column('document', JSON_DOCUMENT, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_company_settings_company_id', 'company_settings', ['company_id'], unique=True)

    op.create_table(
        'operations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('companies.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=False),
        sa.Column('config', JSON_DOCUMENT, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('company_id', 'type', name='uq_operations_company_type'),
    )
    op.create_index('ix_operations_company_id', 'operations', ['company_id'])

    op.create_table(
        'actions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('operation_id', sa.Integer(), sa.ForeignKey('operations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=False),
        sa.Column('config', JSON_DOCUMENT, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('operation_id', 'type', name='uq_actions_operation_type'),
    )
    op.create_index('ix_actions_operation_id', 'actions', ['operation_id'])

    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('preferences', JSON_DOCUMENT, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_user_settings_user_id', 'user_settings', ['user_id'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_user_settings_user_id', table_name='user_settings')
    op.drop_table('user_settings')
    op.drop_index('ix_actions_operation_id', table_name='actions')
    op.drop_table('actions')
    op.drop_index('ix_operations_company_id', table_name='operations')
    op.drop_table('operations')
    op.drop_index('ix_company_settings_company_id', table_name='company_settings')
    op.drop_table('company_settings')
    op.drop_table('companies')
