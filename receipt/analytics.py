from __future__ import annotations

import logging
import operator
from decimal import Decimal, ROUND_HALF_UP
from functools import reduce
from typing import Tuple

import pandas as pd

from .classifier import classify_scores
from .models import PurchaseOrderSummary, QualityBucket, TrendPoint
from .repository import GoodsReceiptRepository, frame_to_records, to_native

logger = logging.getLogger(__name__)

# Grouping key per aggregation
PO_KEY = "po_id"
DATE_KEY = "received_date"


def sum_in_order(values) -> float:
    """Add values strictly left to right, without compensation or pairing."""
    return reduce(operator.add, values)


def round_fixed(value: float, places: int = 2) -> float:
    """
    Round like fixed‑point formatting: the exact binary value of ``value``
    is rounded half away from zero (2.675 -> 2.67, 0.125 -> 0.13).
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class ReceiptAnalytics:
    """Summary metrics computed from a GoodsReceiptRepository."""

    def __init__(self, repo: GoodsReceiptRepository):
        self.df = repo.all()

    # ── Internal helpers ─────────────────────────────────────────────────
    @staticmethod
    def _group(frame: pd.DataFrame, key) -> "pd.core.groupby.DataFrameGroupBy":
        """Group in order of first occurrence, never by sorted key."""
        return frame.groupby(key, sort=False, dropna=False)

    # ── Quality distribution ─────────────────────────────────────────────
    def group_by_quality(
        self, frame: pd.DataFrame | None = None
    ) -> Tuple[QualityBucket, ...]:
        """
        One bucket per quality band that has members, in the order each
        band first appears in the dataset.
        """
        f = frame if frame is not None else self.df
        if f.empty:
            return ()

        labels = classify_scores(f["quality_score"]).rename("quality_band")
        buckets = tuple(
            QualityBucket(name=name, count=len(group), members=frame_to_records(group))
            for name, group in self._group(f, labels)
        )
        logger.debug("Classified %d receipts into %d bands", len(f), len(buckets))
        return buckets

    # ── Purchase‑order roll‑up ───────────────────────────────────────────
    def rollup_by_po(
        self, frame: pd.DataFrame | None = None
    ) -> Tuple[PurchaseOrderSummary, ...]:
        """
        Per‑PO totals sorted by received quantity, largest first.

        Sums run left to right in dataset order, so totals and means match a
        plain running sum. Equal totals keep the order in which their POs
        first appear.
        """
        f = frame if frame is not None else self.df
        if f.empty:
            return ()

        rollup = (
            self._group(f, PO_KEY)
            .agg(
                total_quantity=("received_quantity", sum_in_order),
                quality_sum=("quality_score", sum_in_order),
                receipt_count=("gr_id", "size"),
            )
            .reset_index()
            .sort_values("total_quantity", ascending=False, kind="stable")
        )
        logger.debug("Rolled %d receipts into %d purchase orders", len(f), len(rollup))

        return tuple(
            PurchaseOrderSummary(
                po_id=to_native(row.po_id),
                total_quantity=to_native(row.total_quantity),
                avg_quality=round_fixed(row.quality_sum / row.receipt_count),
                receipt_count=int(row.receipt_count),
            )
            for row in rollup.itertuples(index=False)
        )

    def top_purchase_orders(
        self, n: int = 10, frame: pd.DataFrame | None = None
    ) -> Tuple[PurchaseOrderSummary, ...]:
        """The first ``n`` entries of :meth:`rollup_by_po`."""
        return self.rollup_by_po(frame)[:n]

    # ── Receipt trend ────────────────────────────────────────────────────
    def trend_by_date(
        self, frame: pd.DataFrame | None = None
    ) -> Tuple[TrendPoint, ...]:
        """
        Per‑date totals in ascending order of the raw date string.

        Dates are compared lexically, so they must be ISO‑formatted
        (YYYY‑MM‑DD) for the result to be chronological.
        """
        f = frame if frame is not None else self.df
        if f.empty:
            return ()

        trend = (
            self._group(f, DATE_KEY)
            .agg(
                total_quantity=("received_quantity", sum_in_order),
                receipt_count=("gr_id", "size"),
            )
            .reset_index()
            .sort_values(DATE_KEY, kind="stable")
        )

        return tuple(
            TrendPoint(
                date=to_native(row.received_date),
                total_quantity=to_native(row.total_quantity),
                receipt_count=int(row.receipt_count),
            )
            for row in trend.itertuples(index=False)
        )
