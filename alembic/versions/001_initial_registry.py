"""Initial registry schema — assets, owner_index, registry_counters.

Revision ID: 001_initial_registry
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial_registry"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "assets",
        sa.Column("identity", sa.LargeBinary(64), primary_key=True),
        sa.Column("owner", sa.String(64), nullable=False),
        sa.Column("record", sa.LargeBinary, nullable=False),
    )
    op.create_index("ix_assets_owner", "assets", ["owner"])

    op.create_table(
        "owner_index",
        sa.Column("account", sa.String(64), primary_key=True),
        sa.Column("identities", sa.JSON, nullable=False),
    )

    op.create_table(
        "registry_counters",
        sa.Column("name", sa.String(32), primary_key=True),
        sa.Column("value", sa.BigInteger, nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("registry_counters")
    op.drop_table("owner_index")
    op.drop_index("ix_assets_owner", table_name="assets")
    op.drop_table("assets")
