"""SQLAlchemy table definitions for the account store.

The store is owned by the account-linking service; these definitions
mirror its schema for read-only queries.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),  # Opaque internal ID
    Column("name", String(255), nullable=False),
)

# ============================================================================
# ACCOUNTS TABLE (Linked provider accounts)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "user_id", String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("provider", String(50), nullable=False),  # 'google', 'discord'
    Column("provider_account_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("provider", "provider_account_id", name="uq_provider_account"),
)

Index("idx_accounts_user_id", accounts_table.c.user_id)
