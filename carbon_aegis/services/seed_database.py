"""
Database seeding service for loading reference data from CSV files.

Usage:
    from carbon_aegis.services.seed_database import DatabaseSeeder

    async with DatabaseSeeder() as seeder:
        await seeder.seed_all(clear_existing=True)
"""

import csv
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.database.repositories import EmissionFactorRepository, FacilityRepository
from carbon_aegis.database.session_manager.db_session import Database

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_FACTOR_YEAR = 2024


def _optional(row: dict[str, str], column: str) -> str | None:
    value = (row.get(column) or "").strip()
    return value or None


class DatabaseSeeder:
    """Service for seeding the database with emission factors and facilities."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ):
        """
        Initialize the database seeder.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Directory containing CSV files (default: carbon_aegis/data)
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir)

        if not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    async def __aenter__(self):
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def seed_all(self, clear_existing: bool = False) -> dict[str, Any]:
        """
        Seed all data from CSV files.

        Emission factors are skipped when the table already has rows, unless
        ``clear_existing`` empties it first.

        Returns:
            Dictionary with seeding statistics
        """
        logger.info("Starting database seeding")

        stats: dict[str, Any] = {"emission_factors": 0, "facilities": 0, "errors": []}

        try:
            if clear_existing:
                await self._clear_existing_data()

            stats["emission_factors"] = await self.seed_emission_factors(stats["errors"])
            stats["facilities"] = await self.seed_facilities(stats["errors"])

            await self.session.commit()
            logger.info(f"Database seeding completed: {stats}")
            return stats

        except Exception as e:
            logger.error(f"Error during database seeding: {e}", exc_info=True)
            await self.session.rollback()
            raise

    async def _clear_existing_data(self):
        """Clear reference data; saved emission entries are kept."""
        logger.info("Clearing existing data")

        await self.session.execute(text("DELETE FROM facilities"))
        await self.session.execute(text("DELETE FROM emission_factors"))

        await self.session.commit()
        logger.info("Existing data cleared")

    async def seed_emission_factors(self, errors: list[str] | None = None) -> int:
        """
        Load emission factors from emission_factors.csv.

        Returns:
            Number of emission factors created
        """
        csv_file = self.data_dir / "emission_factors.csv"
        if not csv_file.exists():
            logger.warning(f"File not found: {csv_file}")
            return 0

        repo = EmissionFactorRepository(self.session)
        if await repo.count() > 0:
            logger.warning("emission_factors already seeded, skipping")
            return 0

        logger.info(f"Loading emission factors from {csv_file}")
        rows = []
        with open(csv_file, "r", encoding="utf-8") as f:
            for line, row in enumerate(csv.DictReader(f), start=2):
                try:
                    rows.append(
                        {
                            "category_id": _optional(row, "category_id"),
                            "scope": _optional(row, "scope"),
                            "level1": row["level1"].strip(),
                            "level2": _optional(row, "level2"),
                            "level3": _optional(row, "level3"),
                            "level4": _optional(row, "level4"),
                            "column_text": _optional(row, "column_text"),
                            "uom": row["uom"].strip(),
                            "ghg_unit": _optional(row, "ghg_unit"),
                            "ghg_conversion_factor": Decimal(row["ghg_conversion_factor"].strip()),
                            "year": int(_optional(row, "year") or DEFAULT_FACTOR_YEAR),
                        }
                    )
                except (KeyError, AttributeError, InvalidOperation, ValueError) as e:
                    message = f"emission_factors.csv line {line}: {e!r}"
                    logger.warning(f"Skipping emission factor row, {message}")
                    if errors is not None:
                        errors.append(message)

        created = await repo.bulk_create(rows)
        logger.info(f"Created {len(created)} emission factors")
        return len(created)

    async def seed_facilities(self, errors: list[str] | None = None) -> int:
        """
        Load facilities from facilities.csv.

        Returns:
            Number of facilities created
        """
        csv_file = self.data_dir / "facilities.csv"
        if not csv_file.exists():
            logger.warning(f"File not found: {csv_file}")
            return 0

        logger.info(f"Loading facilities from {csv_file}")
        repo = FacilityRepository(self.session)
        count = 0

        with open(csv_file, "r", encoding="utf-8") as f:
            for line, row in enumerate(csv.DictReader(f), start=2):
                try:
                    await repo.create(
                        organization_id=int(row["organization_id"]),
                        name=row["name"].strip(),
                        address=_optional(row, "address"),
                        city=_optional(row, "city"),
                        state=_optional(row, "state"),
                        country=_optional(row, "country"),
                        postal_code=_optional(row, "postal_code"),
                        facility_type=_optional(row, "facility_type"),
                        description=_optional(row, "description"),
                    )
                    count += 1
                except (KeyError, AttributeError, ValueError) as e:
                    message = f"facilities.csv line {line}: {e!r}"
                    logger.warning(f"Skipping facility row, {message}")
                    if errors is not None:
                        errors.append(message)

        logger.info(f"Created {count} facilities")
        return count
