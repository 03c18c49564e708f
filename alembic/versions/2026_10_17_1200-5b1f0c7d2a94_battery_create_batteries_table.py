"""battery: create batteries table

Revision ID: 5b1f0c7d2a94
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5b1f0c7d2a94"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "batteries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("postcode", sa.Text(), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_batteries")),
    )
    # not unique: bulk create may store repeated postcodes
    op.create_index(op.f("ix_batteries_postcode"), "batteries", ["postcode"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_batteries_postcode"), table_name="batteries")
    op.drop_table("batteries")
