import os

import pandas as pd
from sqlalchemy import create_engine

# Connection string for the goods-receipt warehouse
ENV_VAR = 'RECEIPT_DB_URL'
DEFAULT_CONNECTION_STRING = 'sqlite:///data/goods_receipt.db'

def get_engine(connection_string=None):
    """Create an engine for ``connection_string`` or $RECEIPT_DB_URL."""
    url = connection_string or os.environ.get(ENV_VAR, DEFAULT_CONNECTION_STRING)
    return create_engine(url)

def load_and_process_table(query, engine, additional_processing=None, **kwargs):
    """
    Runs a SQL query and returns a pandas DataFrame with optional processing.

    Args:
        query (str): SQL query to execute
        engine: SQLAlchemy engine
        additional_processing (function, optional): Function to apply additional processing
        **kwargs: Additional arguments for the processing function

    Returns:
        DataFrame: Processed pandas DataFrame
    """
    df = pd.read_sql_query(query, con=engine)
    if additional_processing:
        df = additional_processing(df, **kwargs)
    return df
