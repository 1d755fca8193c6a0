# SPDX-License-Identifier: Apache-2.0
"""Number formatting shared by the overlay labels and the recommendation text.

Ties round away from zero on the exact binary value, so ``6.25`` reads
``6.3`` and ``-2.25`` reads ``-2.3`` in every client.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int = 1) -> str:
    return str(Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def percent(value: float) -> int:
    """``value`` in 0..1 as a whole percentage, halves rounded up."""
    return int(Decimal(value * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
