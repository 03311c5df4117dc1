"""Create ship table

Revision ID: 5c1e9a7d3b20
Revises:
Create Date: 2026-10-19 09:12:41.307215

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d3b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "ship",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("planet", sa.String(length=50), nullable=False),
        sa.Column(
            "ship_type",
            sa.Enum("TRANSPORT", "MILITARY", "MERCHANT", name="shiptype", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("prod_date", sa.DateTime(timezone=True), nullable=False),
        # 0/1 flag, filtered as an integer
        sa.Column("is_used", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("speed", sa.Float(), nullable=False),
        sa.Column("crew_size", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
    )
    # Sortable columns
    op.create_index("ix_ship_speed", "ship", ["speed"])
    op.create_index("ix_ship_prod_date", "ship", ["prod_date"])
    op.create_index("ix_ship_rating", "ship", ["rating"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_ship_rating", table_name="ship")
    op.drop_index("ix_ship_prod_date", table_name="ship")
    op.drop_index("ix_ship_speed", table_name="ship")
    op.drop_table("ship")
