"""create users, transactions and budgets tables

Revision ID: 0001_create_core_tables
Revises:
Create Date: 2025-03-01

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_core_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(150), nullable=False),
        sa.Column('password', sa.String, nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column(
            'type',
            sa.Enum('income', 'expense', name='transactiontype', native_enum=False, length=10),
            nullable=False,
        ),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('description', sa.String(255), nullable=True),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_transactions_date', 'transactions', ['date'])

    op.create_table(
        'budgets',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('month', sa.Integer, nullable=False),
        sa.Column('year', sa.Integer, nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.UniqueConstraint('month', 'year', name='uq_budgets_month_year'),
    )

def downgrade():
    op.drop_table('budgets')
    op.drop_index('ix_transactions_date', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
