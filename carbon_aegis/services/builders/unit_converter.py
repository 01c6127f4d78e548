"""
Number handling for emission quantities and factors.

Values are parsed into Decimal so CO2e figures are exact, and formatted back
into the plain strings stored on emission records.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional


class UnitConverter:
    """
    Stateless helpers for the numbers of an emission record.
    """

    @staticmethod
    def normalize_number(value: str | float | int | Decimal) -> Decimal:
        """
        Normalize a number value to Decimal.

        Handles string inputs with commas, floats, ints and existing Decimals.

        Example:
            >>> UnitConverter.normalize_number("1,234.56")
            Decimal('1234.56')

        Raises:
            InvalidOperation: If the value is not a number
        """

        if isinstance(value, Decimal):
            return value

        if isinstance(value, str):
            value = value.replace(",", "").strip()

        return Decimal(str(value))

    @staticmethod
    def to_finite_decimal(value) -> Optional[Decimal]:
        """
        Parse a value, returning None when it is missing, not a number, NaN or infinite.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            number = UnitConverter.normalize_number(value)
        except (InvalidOperation, ValueError, TypeError):
            return None
        return number if number.is_finite() else None

    @staticmethod
    def format_decimal(value: Decimal) -> str:
        """
        Format a Decimal without trailing zeros or exponent.

        Example:
            >>> UnitConverter.format_decimal(Decimal("2330.000"))
            '2330'
        """
        return format(value.normalize(), "f")
