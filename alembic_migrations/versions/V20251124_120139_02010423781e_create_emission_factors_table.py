"""create_emission_factors_table

Revision ID: 02010423781e
Revises:
Create Date: 2025-11-24 12:01:39.505091

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "02010423781e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "emission_factors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "category_id",
            sa.String(length=100),
            nullable=True,
            comment="Emission category this factor belongs to (e.g., 'Fuels')",
        ),
        sa.Column(
            "scope",
            sa.String(length=10),
            nullable=True,
            comment="GHG Protocol scope (scope1, scope2 or scope3)",
        ),
        sa.Column(
            "level1",
            sa.String(length=200),
            nullable=False,
            comment="Top level of the factor hierarchy (e.g., 'Liquid fuels')",
        ),
        sa.Column(
            "level2",
            sa.String(length=200),
            nullable=True,
            comment="Second level (e.g., 'Diesel (100% mineral diesel)')",
        ),
        sa.Column("level3", sa.String(length=200), nullable=True, comment="Third level"),
        sa.Column("level4", sa.String(length=200), nullable=True, comment="Fourth level"),
        sa.Column(
            "column_text",
            sa.String(length=200),
            nullable=True,
            comment="Column heading from the source workbook",
        ),
        sa.Column(
            "uom",
            sa.String(length=50),
            nullable=False,
            comment="Unit of measurement of the activity (e.g., litres, kWh, km)",
        ),
        sa.Column(
            "ghg_unit",
            sa.String(length=50),
            nullable=True,
            comment="Unit of the result (e.g., kg CO2e)",
        ),
        sa.Column(
            "ghg_conversion_factor",
            sa.Numeric(precision=12, scale=5),
            nullable=False,
            comment="Mass of CO2e per unit of activity",
        ),
        sa.Column(
            "year",
            sa.Integer(),
            nullable=False,
            comment="Publication year of the factor set",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="Emission factor lookup table for CO2e calculations",
    )
    op.create_index(
        op.f("ix_emission_factors_category_id"),
        "emission_factors",
        ["category_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_emission_factors_level1"),
        "emission_factors",
        ["level1"],
        unique=False,
    )
    op.create_index(
        "ix_emission_factors_level1_level2_uom",
        "emission_factors",
        ["level1", "level2", "uom"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_emission_factors_level1_level2_uom", table_name="emission_factors")
    op.drop_index(op.f("ix_emission_factors_level1"), table_name="emission_factors")
    op.drop_index(op.f("ix_emission_factors_category_id"), table_name="emission_factors")
    op.drop_table("emission_factors")
