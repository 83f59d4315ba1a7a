# File: receipt/data_loader.py
"""
Loaders for goods‑receipt data.

Both entry points hand back a DataFrame ready for
:class:`receipt.repository.GoodsReceiptRepository`: snake_case columns,
string ids and dates, numeric quantity and score, and no incomplete rows.
"""

import logging

import pandas as pd

from utils.config_utils import (
    get_database_engine,
    load_and_process_data,
    read_sql_file,
)
from receipt.models import RECEIPT_COLUMNS

logger = logging.getLogger(__name__)

# Header names used by the SAP MM export
SOURCE_COLUMNS = {
    "GR_ID": "gr_id",
    "PO_ID": "po_id",
    "Received_Date": "received_date",
    "Received_Quantity": "received_quantity",
    "Quality_Score": "quality_score",
}
DEFAULT_QUERY_FILE = "receipt/goods_receipt.sql"


def normalise_receipt_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Rename source headers and drop rows the repository cannot use."""
    df = df.rename(columns=SOURCE_COLUMNS)
    missing = set(RECEIPT_COLUMNS) - set(df.columns)
    if missing:
        raise KeyError(f"Missing column(s): {', '.join(sorted(missing))}")

    df = df[list(RECEIPT_COLUMNS)].copy()
    for col in ("received_quantity", "quality_score"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    if pd.api.types.is_datetime64_any_dtype(df["received_date"]):
        df["received_date"] = df["received_date"].dt.strftime("%Y-%m-%d")

    complete = df.notna().all(axis=1)
    dropped = int((~complete).sum())
    if dropped:
        logger.warning("Dropped %d incomplete or non-numeric receipt rows", dropped)

    df = df[complete].reset_index(drop=True)
    for col in ("gr_id", "po_id", "received_date"):
        df[col] = df[col].astype(str).str.strip()
    return df


def load_receipts_csv(path) -> pd.DataFrame:
    """Read a goods‑receipt CSV export."""
    df = pd.read_csv(
        path,
        dtype={"GR_ID": str, "PO_ID": str, "Received_Date": str},
        skip_blank_lines=True,
    )
    df = normalise_receipt_frame(df)
    logger.info("Loaded %d goods receipt records from %s", len(df), path)
    return df


def get_goods_receipt_data(engine=None, query=None):
    """Returns a DataFrame of all goods receipts, or None if the query fails."""
    engine = engine if engine is not None else get_database_engine()
    query = query or read_sql_file(DEFAULT_QUERY_FILE)
    df = load_and_process_data(
        query=query,
        engine=engine,
        logger=logger,
        additional_processing=normalise_receipt_frame,
    )
    if df is not None:
        logger.info("Loaded %d goods receipt records", len(df))
    return df
