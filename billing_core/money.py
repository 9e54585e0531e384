"""Permissive conversion of form and API amounts to Decimal."""

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Convert ``value`` to a finite Decimal.

    ``None``, blanks, non-numeric strings, NaN and infinities all become
    ``Decimal("0")`` so that nothing downstream ever sees NaN.

    Parameters
    ----------
    value : Any
        Number, numeric string or Decimal.

    Returns
    -------
    Decimal
        Finite value, ``0`` when ``value`` is not usable.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return ZERO
    if not result.is_finite():
        return ZERO
    return result
