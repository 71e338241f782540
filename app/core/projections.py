"""Revenue projection helpers for the financial step."""

import math
from datetime import date

PROJECTION_YEARS = 5


def project_revenue(first_year: int, growth_rate_pct: float, years: int = PROJECTION_YEARS) -> list[int]:
    """
    Compound a first-year revenue figure forward.

    Year ``i`` (0-based) is ``first_year * (1 + growth_rate_pct / 100) ** i``,
    rounded half-up to whole currency units.

    Args:
        first_year: Revenue expected in the first year
        growth_rate_pct: Annual growth rate as a percentage (20 means 20%)
        years: Number of years to project

    Returns:
        List of yearly revenue amounts, oldest first
    """
    if first_year < 0:
        raise ValueError("first_year must be non-negative")
    if years < 1:
        raise ValueError("years must be at least 1")

    factor = 1 + growth_rate_pct / 100
    return [math.floor(first_year * factor**i + 0.5) for i in range(years)]


def year_labels(years: int = PROJECTION_YEARS, start_year: int | None = None) -> list[str]:
    """Calendar year labels for a projection, starting with the current year."""
    first = start_year if start_year is not None else date.today().year
    return [str(first + i) for i in range(years)]


def format_currency(amount: float) -> str:
    """Format an amount as whole US dollars, e.g. ``$1,250,000``."""
    rounded = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}${rounded:,}"
