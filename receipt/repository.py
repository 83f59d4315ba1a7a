# receipt/repository.py
"""
Repository layer – **only** owns and returns raw goods‑receipt data.

The loader decides where rows come from (CSV, warehouse query, a test
fixture).  Down‑stream code only ever sees this read‑only snapshot; a new
load means a new repository.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import pandas as pd

from .models import GoodsReceipt, RECEIPT_COLUMNS


class GoodsReceiptRepository:
    """Immutable data‑access wrapper for one goods‑receipt dataset."""

    REQUIRED_COLUMNS = set(RECEIPT_COLUMNS)

    def __init__(self, receipt_df: pd.DataFrame):
        if receipt_df is None:
            raise ValueError("receipt_df cannot be None")

        missing = self.REQUIRED_COLUMNS - set(receipt_df.columns)
        if missing:
            raise KeyError(
                f"Missing required column(s): {', '.join(sorted(missing))}"
            )

        # Store a cleaned copy; received_date stays a plain string
        self._df = receipt_df[list(RECEIPT_COLUMNS)].reset_index(drop=True).copy()

    @classmethod
    def from_records(cls, records: Iterable[GoodsReceipt]) -> "GoodsReceiptRepository":
        rows = [
            (r.gr_id, r.po_id, r.received_date, r.received_quantity, r.quality_score)
            for r in records
        ]
        return cls(pd.DataFrame(rows, columns=list(RECEIPT_COLUMNS)))

    def __len__(self) -> int:
        return len(self._df)

    # ── Public “read” helpers ────────────────────────────────────────────
    def all(self) -> pd.DataFrame:
        """Return a copy of **all** receipt rows in dataset order."""
        return self._df.copy()

    def records(self) -> Tuple[GoodsReceipt, ...]:
        """Return every row as a :class:`GoodsReceipt`, in dataset order."""
        return frame_to_records(self._df)


def frame_to_records(frame: pd.DataFrame) -> Tuple[GoodsReceipt, ...]:
    """Convert receipt rows to typed records, keeping row order."""
    return tuple(
        GoodsReceipt(
            gr_id=to_native(row.gr_id),
            po_id=to_native(row.po_id),
            received_date=to_native(row.received_date),
            received_quantity=to_native(row.received_quantity),
            quality_score=to_native(row.quality_score),
        )
        for row in frame[list(RECEIPT_COLUMNS)].itertuples(index=False)
    )


def to_native(value):
    """Unwrap numpy scalars so records compare and print like plain values."""
    return value.item() if hasattr(value, "item") else value
