"""pets and medication records

Revision ID: 0001
Revises:
Create Date: 2025-06-01 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("pet_id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("species", sa.String(), nullable=False),
        sa.Column("breed", sa.String(), nullable=True),
        sa.Column("weight_kg", sa.Numeric(5, 2), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("current_medications", sa.JSON(), nullable=False),
        sa.Column("primary_medication_name", sa.String(), nullable=True),
        sa.Column("last_dose_date", sa.Date(), nullable=True),
        sa.Column("next_due_date", sa.Date(), nullable=True),
        sa.Column("dose_interval_days", sa.Integer(), nullable=False, server_default=sa.text("30")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_pets_next_due_date", "pets", ["next_due_date"])

    op.create_table(
        "medication_records",
        sa.Column("record_id", sa.Uuid(), primary_key=True),
        sa.Column(
            "pet_id",
            sa.Uuid(),
            sa.ForeignKey("pets.pet_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("medication_name", sa.String(), nullable=False),
        sa.Column("recorded_date", sa.Date(), nullable=False),
        sa.Column("scheduled_date", sa.Date(), nullable=True),
        sa.Column("is_primary_medication", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("dosage", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("recorded_by", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_medication_records_pet_id", "medication_records", ["pet_id"])
    op.create_index("ix_medication_records_recorded_date", "medication_records", ["recorded_date"])


def downgrade() -> None:
    op.drop_index("ix_medication_records_recorded_date", table_name="medication_records")
    op.drop_index("ix_medication_records_pet_id", table_name="medication_records")
    op.drop_table("medication_records")
    op.drop_index("ix_pets_next_due_date", table_name="pets")
    op.drop_table("pets")
