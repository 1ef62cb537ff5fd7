"""initial portfolio schema

Revision ID: 5e0c1f2a9b7d
Revises:
Create Date: 2026-10-19 10:12:44.201593

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e0c1f2a9b7d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

investment_type = sa.Enum('stock', 'bond', 'mutual_fund', 'etf', 'crypto', 'other', name='investmenttype')
transaction_type = sa.Enum('buy', 'sell', name='transactiontype')

def upgrade() -> None:
    """Upgrade schema: users, portfolios, investments, transactions, watchlist."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'portfolio',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_portfolio_user_id', 'portfolio', ['user_id'])

    op.create_table(
        'investment',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('portfolio_id', sa.Uuid(), sa.ForeignKey('portfolio.id'), nullable=False),
        sa.Column('symbol', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', investment_type, nullable=False),
        sa.Column('purchase_price', sa.Float(), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('current_price', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('purchase_price >= 0', name='ck_investment_purchase_price_non_negative'),
        sa.CheckConstraint('quantity >= 0', name='ck_investment_quantity_non_negative'),
        sa.CheckConstraint('current_price >= 0', name='ck_investment_current_price_non_negative'),
    )
    op.create_index('ix_investment_portfolio_id', 'investment', ['portfolio_id'])
    op.create_index('ix_investment_symbol', 'investment', ['symbol'])

    # investment_id is deliberately not a foreign key: history outlives holdings
    op.create_table(
        'transaction',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('portfolio_id', sa.Uuid(), sa.ForeignKey('portfolio.id'), nullable=False),
        sa.Column('investment_id', sa.Uuid(), nullable=True),
        sa.Column('symbol', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', transaction_type, nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('total_amount', sa.Float(), nullable=False),
        sa.Column('transaction_date', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_transaction_portfolio_id', 'transaction', ['portfolio_id'])
    op.create_index('ix_transaction_investment_id', 'transaction', ['investment_id'])
    op.create_index('ix_transaction_transaction_date', 'transaction', ['transaction_date'])

    op.create_table(
        'watchlist',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('portfolio_id', sa.Uuid(), sa.ForeignKey('portfolio.id'), nullable=False),
        sa.Column('symbol', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('sector', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_watchlist_user_id', 'watchlist', ['user_id'])
    op.create_index('ix_watchlist_portfolio_id', 'watchlist', ['portfolio_id'])
    op.create_index('ix_watchlist_added_at', 'watchlist', ['added_at'])

def downgrade() -> None:
    """Downgrade schema: drop every table."""
    op.drop_table('watchlist')
    op.drop_table('transaction')
    op.drop_table('investment')
    op.drop_table('portfolio')
    op.drop_table('user')
    investment_type.drop(op.get_bind(), checkfirst=True)
    transaction_type.drop(op.get_bind(), checkfirst=True)
