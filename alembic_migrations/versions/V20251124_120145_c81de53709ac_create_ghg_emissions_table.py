"""create_ghg_emissions_table

Revision ID: c81de53709ac
Revises: 02010423781e
Create Date: 2025-11-24 12:01:45.118362

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c81de53709ac"
down_revision = "02010423781e"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "ghg_emissions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("organization_id", sa.Integer(), nullable=False, comment="Owning organisation"),
        sa.Column("scope", sa.String(length=10), nullable=False, comment="scope1, scope2 or scope3"),
        sa.Column(
            "category",
            sa.String(length=100),
            nullable=False,
            comment="Emission category (e.g., 'Fuels')",
        ),
        sa.Column(
            "source",
            sa.String(length=200),
            nullable=True,
            comment="Fuel sub-type, energy type or fuel type",
        ),
        sa.Column("activity_data", sa.String(length=50), nullable=False, comment="Quantity as entered"),
        sa.Column("unit", sa.String(length=50), nullable=True, comment="Unit of the quantity"),
        sa.Column(
            "emission_factor",
            sa.String(length=50),
            nullable=True,
            comment="Conversion factor used",
        ),
        sa.Column(
            "co2_equivalent",
            sa.String(length=50),
            nullable=True,
            comment="activity_data x emission_factor",
        ),
        sa.Column(
            "reporting_period",
            sa.String(length=20),
            nullable=True,
            comment="Reporting period, YYYY-MM or YYYY",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="Saved GHG emission entries",
    )
    op.create_index(
        op.f("ix_ghg_emissions_organization_id"),
        "ghg_emissions",
        ["organization_id"],
        unique=False,
    )
    op.create_index(
        "ix_ghg_emissions_org_scope",
        "ghg_emissions",
        ["organization_id", "scope"],
        unique=False,
    )
    op.create_index(
        "ix_ghg_emissions_org_period",
        "ghg_emissions",
        ["organization_id", "reporting_period"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_ghg_emissions_org_period", table_name="ghg_emissions")
    op.drop_index("ix_ghg_emissions_org_scope", table_name="ghg_emissions")
    op.drop_index(op.f("ix_ghg_emissions_organization_id"), table_name="ghg_emissions")
    op.drop_table("ghg_emissions")
