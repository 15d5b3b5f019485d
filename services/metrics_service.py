"""
Adherence metrics over a user's meal history.

Pure functions with no database access, so a cached or incremental
implementation can replace them without touching the meal ledger.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from domain.schemas.meal_schemas import AdherenceMetrics

_TWO_PLACES = Decimal("0.01")


def format_percentage(part: int, total: int) -> str:
    """
    ``part / total`` as a percentage rounded half-up to two decimals.

    An empty history reports "0.00%" instead of dividing by zero.

    >>> format_percentage(3, 7)
    '42.86%'
    """
    if total == 0:
        return "0.00%"
    value = (Decimal(part) * 100 / Decimal(total)).quantize(
        _TWO_PLACES, rounding=ROUND_HALF_UP
    )
    return f"{value}%"


def compute_adherence_metrics(meals: Iterable) -> AdherenceMetrics:
    """
    Fold meals into an adherence snapshot in a single pass.

    Meals are consumed in the order given. The meal ledger passes them in
    registration order, not by ``occurred_at``, and the streaks depend on it.
    Any object exposing a boolean ``is_on_diet`` is accepted.
    """
    total = 0
    on_diet = 0
    current = 0
    best = 0

    for meal in meals:
        total += 1
        if meal.is_on_diet:
            on_diet += 1
            current += 1
        else:
            current = 0
        best = max(best, current)

    return AdherenceMetrics(
        total_meals=total,
        on_diet_count=on_diet,
        off_diet_count=total - on_diet,
        best_streak=best,
        current_streak=current,
        adherence_percentage=format_percentage(on_diet, total),
    )
