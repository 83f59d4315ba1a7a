# receipt/models.py
"""
Typed shapes for goods‑receipt rows and the values derived from them.

Every class here is frozen: a loaded dataset is a read‑only snapshot and
all summaries are freshly computed values.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Iterable, Tuple

import pandas as pd

# Column order used by the repository frame
RECEIPT_COLUMNS = (
    "gr_id",
    "po_id",
    "received_date",
    "received_quantity",
    "quality_score",
)


@dataclass(frozen=True)
class GoodsReceipt:
    """One inventory receipt against a purchase order."""

    gr_id: str
    po_id: str
    received_date: str
    received_quantity: float
    quality_score: float


@dataclass(frozen=True)
class QualityBucket:
    name: str
    count: int
    members: Tuple[GoodsReceipt, ...]


@dataclass(frozen=True)
class PurchaseOrderSummary:
    po_id: str
    total_quantity: float
    avg_quality: float
    receipt_count: int


@dataclass(frozen=True)
class TrendPoint:
    date: str
    total_quantity: float
    receipt_count: int


@dataclass(frozen=True)
class ReceiptSummary:
    """Default dashboard view for one dataset load."""

    quality_buckets: Tuple[QualityBucket, ...]
    top_purchase_orders: Tuple[PurchaseOrderSummary, ...]
    trend_points: Tuple[TrendPoint, ...]
    record_count: int
    chart_top_n: int = 5

    @property
    def chart_purchase_orders(self) -> Tuple[PurchaseOrderSummary, ...]:
        """Top‑N slice shown in the bar chart (a prefix of the table view)."""
        return self.top_purchase_orders[: self.chart_top_n]


def to_frame(values: Iterable, columns: Iterable[str] | None = None) -> pd.DataFrame:
    """Flatten a sequence of dataclass values into a DataFrame."""
    rows = [asdict(v) for v in values]
    if not rows:
        return pd.DataFrame(columns=list(columns or []))
    return pd.DataFrame(rows, columns=list(columns) if columns else None)
