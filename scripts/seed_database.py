#!/usr/bin/env python3
"""
CLI script to seed the database with emission factors and facilities.

Usage:
    # Basic seeding
    python scripts/seed_database.py

    # Clear existing reference data before seeding
    python scripts/seed_database.py --clear

    # Create the database and run migrations first
    python scripts/seed_database.py --migrate

    # Use a different data directory or config file
    python scripts/seed_database.py --data-dir path/to/csv/files --config production.toml
"""

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from carbon_aegis.core.config import get_config
from carbon_aegis.database.base import apply_db_migration, get_db_url, get_engine_kw
from carbon_aegis.database.session_manager.db_session import Database
from carbon_aegis.services.seed_database import DEFAULT_DATA_DIR, DatabaseSeeder
from carbon_aegis.utils.constants import ConfigFile

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_config(args):
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Setting", style="bold yellow")
    config_table.add_column("Value", style="green")

    config_table.add_row("📁 Data Directory", str(args.data_dir))
    config_table.add_row("⚙️  Config", args.config)
    config_table.add_row("🗑️  Clear Existing", "Yes" if args.clear else "No")
    config_table.add_row("🏗️  Run Migrations", "Yes" if args.migrate else "No")

    console.print(config_table)
    console.print()


def print_stats(stats: dict):
    """Print seeding statistics using Rich Table."""
    print_header("SEEDING STATISTICS", "bold green")

    stats_table = Table(show_header=True, box=None, padding=(0, 2))
    stats_table.add_column("Table", style="bold cyan", width=30)
    stats_table.add_column("Rows", justify="right", style="bold green")

    stats_table.add_row("📊 Emission Factors", str(stats["emission_factors"]))
    stats_table.add_row("🏭 Facilities", str(stats["facilities"]))

    console.print(stats_table)

    if stats.get("errors"):
        console.print()
        console.print(
            Panel(
                f"[yellow]⚠️  {len(stats['errors'])} rows were skipped[/yellow]",
                border_style="yellow",
            )
        )
        for i, error in enumerate(stats["errors"][:5], 1):
            console.print(f"  {i}. [dim]{error}[/dim]")
        if len(stats["errors"]) > 5:
            console.print(f"  [dim]... and {len(stats['errors']) - 5} more[/dim]")

    console.print()


async def main():
    """Main entry point for the seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed the database with emission factors and facilities from CSV files"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing emission factors and facilities before seeding",
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Create the database and apply alembic migrations before seeding",
    )
    parser.add_argument(
        "--data-dir",
        default=str(DEFAULT_DATA_DIR),
        help="Directory containing CSV files (default: carbon_aegis/data)",
    )
    parser.add_argument(
        "--config",
        default=ConfigFile.DEVELOPMENT,
        help="Config file under carbon_aegis/config (default: development.toml)",
    )

    args = parser.parse_args()

    print_header("DATABASE SEEDING", "bold cyan")
    print_config(args)

    try:
        config = get_config(args.config)
        if args.migrate:
            with console.status("[bold cyan]Applying migrations...", spinner="dots"):
                await apply_db_migration(config)

        async_db_url = get_db_url(config)
        Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
        logger.info("Database initialized")

        with console.status("[bold cyan]Seeding database...", spinner="dots"):
            async with DatabaseSeeder(data_dir=args.data_dir) as seeder:
                stats = await seeder.seed_all(clear_existing=args.clear)

        print_stats(stats)

        console.print(
            Panel(
                Text("✅ SEEDING COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)

        console.print()
        console.print(
            Panel(
                f"[bold red]❌ SEEDING FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)
    finally:
        await Database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
