"""create_accounts_and_addresses

Revision ID: 3f2a9c1d7e41
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts and account_addresses tables."""
    op.create_table(
        "accounts",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        # Credentials
        sa.Column("name", sa.String(length=255), nullable=False, comment="Display name"),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Account email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        # Profile
        sa.Column(
            "avatar",
            sa.String(length=512),
            nullable=True,
            comment="Avatar reference (URL or storage key)",
        ),
        sa.Column("phone", sa.String(length=32), nullable=True),
        # Password reset
        sa.Column(
            "reset_token",
            sa.String(length=64),
            nullable=True,
            comment="Live password reset token (hex, single use)",
        ),
        sa.Column("reset_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_reset_token", "accounts", ["reset_token"], unique=True)

    op.create_table(
        "account_addresses",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("account_id", sa.Uuid(), nullable=False),
        sa.Column(
            "type",
            sa.String(length=16),
            nullable=False,
            comment="Address kind (home, work, other)",
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("address_line1", sa.String(length=255), nullable=False),
        sa.Column("address_line2", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("state", sa.String(length=100), nullable=False),
        sa.Column("pincode", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_account_addresses_account_id",
        "account_addresses",
        ["account_id"],
    )


def downgrade() -> None:
    """Drop account_addresses and accounts tables."""
    op.drop_index("ix_account_addresses_account_id", table_name="account_addresses")
    op.drop_table("account_addresses")
    op.drop_index("ix_accounts_reset_token", table_name="accounts")
    op.drop_index("ix_accounts_email", table_name="accounts")
    op.drop_table("accounts")
