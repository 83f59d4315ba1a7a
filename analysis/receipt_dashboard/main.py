"""CLI entry-point for the goods receipt dashboard.

This module provides a command-line interface that loads a goods-receipt
dataset, builds the dashboard tables and exports them to Excel.
"""

import argparse
from pathlib import Path

from utils.config_utils import configure_logging, set_pandas_display_options
from receipt.data_loader import get_goods_receipt_data, load_receipts_csv
from receipt.models import to_frame
from receipt.queries import ReceiptQueries
from receipt.repository import GoodsReceiptRepository
from analysis.receipt_dashboard.analysis import analyse_goods_receipts
from analysis.receipt_dashboard.config import load_config
from analysis.receipt_dashboard.export import export_to_excel

def main(argv=None):
    """Execute the goods receipt dashboard as a CLI application."""
    parser = argparse.ArgumentParser(description="Summarise goods receipts by quality, PO and date")
    parser.add_argument("--csv", type=str, default=None,
                        help="Goods receipt CSV export (defaults to the configured dataset file)")
    parser.add_argument("--sql", action="store_true",
                        help="Load receipts from the warehouse ($RECEIPT_DB_URL) instead of a CSV")
    parser.add_argument("--config", type=str, default="config/receipt_dashboard.yml",
                        help="YAML file overriding the default settings")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for output files")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Quality score below which a receipt is a quality issue")
    parser.add_argument("--po", type=str, default=None,
                        help="Print the receipts booked against this purchase order")
    args = parser.parse_args(argv)

    logger = configure_logging()
    set_pandas_display_options()

    cfg = load_config(Path(args.config))
    if args.threshold is not None:
        cfg["quality_issue_threshold"] = args.threshold
    if args.output_dir is not None:
        cfg["output_dir"] = Path(args.output_dir)

    if args.sql:
        receipt_df = get_goods_receipt_data()
    else:
        receipt_df = load_receipts_csv(args.csv or cfg["dataset_file"])

    if receipt_df is None:
        raise SystemExit("No goods receipt data could be loaded – aborting analysis.")

    tables = analyse_goods_receipts(receipt_df, cfg)
    outfile = export_to_excel(tables, cfg["output_dir"])
    logger.info("Dashboard built from %d goods receipt records", len(receipt_df))
    print(f"Exported goods receipt dashboard workbook → {outfile.absolute()}")

    if args.po:
        receipts = ReceiptQueries(GoodsReceiptRepository(receipt_df)).records_for_po(args.po)
        if receipts:
            print(f"\nPurchase Order: {args.po}")
            print(to_frame(receipts).to_string(index=False))
        else:
            print(f"\nNo receipts found for purchase order {args.po}")

if __name__ == "__main__":
    main()
