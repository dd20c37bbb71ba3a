"""Temperature model: turns the recent vote differential into a zone temperature."""

from decimal import ROUND_HALF_UP, Decimal

from app.config import BASE_TEMPERATURE, TEMPERATURE_STEP

__all__ = ["next_temperature"]

_ONE_DECIMAL = Decimal("0.1")


def next_temperature(
    hot_count: int,
    cold_count: int,
    base: float = BASE_TEMPERATURE,
    step: float = TEMPERATURE_STEP,
) -> float:
    """
    Compute the zone temperature for the current vote window.

    temperature = base + step * (hot_count - cold_count)

    Rounded to one decimal, half away from zero. The arithmetic runs in
    Decimal so that 22.0 + 0.1 * 3 is 22.3 and not 22.300000000000004.
    With no votes in the window the result is exactly ``base``.
    """
    value = Decimal(str(base)) + Decimal(str(step)) * (hot_count - cold_count)
    return float(value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
