"""create accounts, coin ledger and inventory tables

Revision ID: 0001
Revises:
Create Date: 2025-02-10 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("coins", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("coins >= 0", name="ck_accounts_coins_non_negative"),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)

    op.create_table(
        "coin_transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("from_user_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("to_user_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("amount > 0", name="ck_coin_transactions_amount_positive"),
    )
    op.create_index("ix_coin_transactions_from_user_id", "coin_transactions", ["from_user_id"])
    op.create_index("ix_coin_transactions_to_user_id", "coin_transactions", ["to_user_id"])

    op.create_table(
        "merch_purchases",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("item_name", sa.String(length=100), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("price > 0", name="ck_merch_purchases_price_positive"),
    )
    op.create_index("ix_merch_purchases_account_id", "merch_purchases", ["account_id"])

    op.create_table(
        "user_inventory",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("item_name", sa.String(length=100), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "item_name", name="uq_user_inventory_user_item"),
        sa.CheckConstraint("quantity >= 1", name="ck_user_inventory_quantity_positive"),
    )
    op.create_index("ix_user_inventory_user_id", "user_inventory", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_user_inventory_user_id", table_name="user_inventory")
    op.drop_table("user_inventory")
    op.drop_index("ix_merch_purchases_account_id", table_name="merch_purchases")
    op.drop_table("merch_purchases")
    op.drop_index("ix_coin_transactions_to_user_id", table_name="coin_transactions")
    op.drop_index("ix_coin_transactions_from_user_id", table_name="coin_transactions")
    op.drop_table("coin_transactions")
    op.drop_index("ix_accounts_username", table_name="accounts")
    op.drop_table("accounts")
