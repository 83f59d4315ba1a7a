# receipt/queries.py
"""
Query layer – on‑demand look‑ups over the receipt snapshot.

These helpers stay free of side‑effects: each call filters the snapshot
and returns new records, the snapshot itself is never reordered.
"""

from __future__ import annotations

from typing import Tuple

from .models import GoodsReceipt
from .repository import GoodsReceiptRepository, frame_to_records

# Scores strictly below this are reported as quality issues
QUALITY_ISSUE_THRESHOLD = 2.0


class ReceiptQueries:
    def __init__(self, repo: GoodsReceiptRepository):
        # One *read‑only* snapshot for all helpers
        self.df = repo.all()

    def records_for_po(self, po_id: str) -> Tuple[GoodsReceipt, ...]:
        """
        All receipts booked against ``po_id`` in dataset order.

        An unknown PO yields an empty tuple, not an error.
        """
        return frame_to_records(self.df[self.df["po_id"] == po_id])

    def quality_issues(
        self, threshold: float = QUALITY_ISSUE_THRESHOLD
    ) -> Tuple[GoodsReceipt, ...]:
        """Receipts scoring below ``threshold``, lowest score first."""
        issues = self.df[self.df["quality_score"] < threshold]
        return frame_to_records(issues.sort_values("quality_score", kind="stable"))
