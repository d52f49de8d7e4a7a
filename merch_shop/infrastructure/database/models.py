"""SQLAlchemy ORM models."""
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from .base import Base


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (CheckConstraint("coins >= 0", name="ck_accounts_coins_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    coins = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class CoinTransaction(Base):
    __tablename__ = "coin_transactions"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_coin_transactions_amount_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_user_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class MerchPurchase(Base):
    __tablename__ = "merch_purchases"
    __table_args__ = (CheckConstraint("price > 0", name="ck_merch_purchases_price_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    item_name = Column(String(100), nullable=False)
    price = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class InventoryLine(Base):
    __tablename__ = "user_inventory"
    __table_args__ = (
        UniqueConstraint("user_id", "item_name", name="uq_user_inventory_user_item"),
        CheckConstraint("quantity >= 1", name="ck_user_inventory_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    item_name = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
