"""
DataFrame helpers for Werks.

Provides functions to add total rows and columns, slice rows off
either end of a table, clean up integer columns and find the tables
held in a registry.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

import pandas as pd

from .validation import validate_row_count

logger = logging.getLogger(__name__)

def _numeric_columns(df: pd.DataFrame) -> List[Any]:
    return df.select_dtypes(include='number').columns.tolist()

def add_col_totals(
    df: pd.DataFrame,
    total_col_name: str = "Total",
    cols_to_sum: Optional[Sequence[Any]] = None
) -> pd.DataFrame:
    """
    Add a column of row totals to a DataFrame.

    Args:
        df: Input DataFrame
        total_col_name: Name for the new column with row totals
        cols_to_sum: Columns to include in summation (default: all numeric columns)

    Returns:
        A new DataFrame with an additional column containing row totals
    """
    # Create a copy to avoid modifying the original
    result_df = df.copy()

    if cols_to_sum is None:
        cols_to_sum = _numeric_columns(df)

    if len(cols_to_sum) == 0:
        logger.warning("No columns to sum; row totals not added")
        return result_df

    result_df[total_col_name] = result_df[list(cols_to_sum)].sum(axis=1)

    return result_df

def add_row_totals(
    df: pd.DataFrame,
    total_row_name: str = "Total",
    cols_to_sum: Optional[Sequence[Any]] = None
) -> pd.DataFrame:
    """
    Add a row of column totals to a DataFrame.

    Args:
        df: Input DataFrame
        total_row_name: Label placed in every column that is not summed
        cols_to_sum: Columns to include in summation (default: all numeric columns)

    Returns:
        A new DataFrame with an additional row containing column totals
    """
    if cols_to_sum is None:
        cols_to_sum = _numeric_columns(df)

    # Sum listed columns, label the rest
    new_row = {}
    for col in df.columns:
        if col in cols_to_sum:
            new_row[col] = df[col].sum(skipna=True)
        else:
            new_row[col] = total_row_name

    totals = pd.DataFrame([new_row], columns=df.columns)

    return pd.concat([df, totals], ignore_index=True)

def add_totals(
    df: pd.DataFrame,
    total_row_name: str = "Total",
    total_col_name: str = "Total",
    cols_to_sum: Optional[Sequence[Any]] = None
) -> pd.DataFrame:
    """
    Add both row and column totals to a DataFrame.

    Args:
        df: Input DataFrame
        total_row_name: Label for the row with column totals
        total_col_name: Name for the column with row totals
        cols_to_sum: Columns to include in summation (default: all numeric columns)

    Returns:
        A new DataFrame with both row and column totals added
    """
    if cols_to_sum is None:
        cols_to_sum = _numeric_columns(df)

    # First add column of row totals
    result_df = add_col_totals(df, total_col_name=total_col_name, cols_to_sum=cols_to_sum)

    has_total_col = len(cols_to_sum) > 0
    row_cols = list(cols_to_sum) + ([total_col_name] if has_total_col else [])

    # Then add row of column totals, including the new total column
    result_df = add_row_totals(result_df, total_row_name=total_row_name, cols_to_sum=row_cols)

    # Grand total (bottom-right cell) sums the row totals above it
    if has_total_col:
        result_df.loc[result_df.index[-1], total_col_name] = result_df[total_col_name].iloc[:-1].sum()

    return result_df

def _empty_like(df: pd.DataFrame) -> pd.DataFrame:
    return df.iloc[0:0].copy()

def drop_first(df: pd.DataFrame, n: int = 1) -> pd.DataFrame:
    """
    Delete the first n rows of a DataFrame.

    Returns an empty DataFrame with the same columns when n covers every row.
    """
    n = min(validate_row_count(n), len(df))
    if n == len(df):
        return _empty_like(df)

    return df.iloc[n:]

def drop_last(df: pd.DataFrame, n: int = 1) -> pd.DataFrame:
    """
    Delete the last n rows of a DataFrame.

    Returns an empty DataFrame with the same columns when n covers every row.
    """
    n = min(validate_row_count(n), len(df))
    if n == len(df):
        return _empty_like(df)

    return df.iloc[:len(df) - n]

def head(df: pd.DataFrame, n: int = 6) -> pd.DataFrame:
    """Return the first n rows of a DataFrame."""
    n = min(validate_row_count(n), len(df))
    return df.iloc[:n]

def tail(df: pd.DataFrame, n: int = 6) -> pd.DataFrame:
    """Return the last n rows of a DataFrame."""
    n = min(validate_row_count(n), len(df))
    return df.iloc[len(df) - n:]

def convert_to_integer(df: pd.DataFrame, column: Any) -> pd.DataFrame:
    """
    Convert a column of comma-grouped numbers like "1,234" to integers.

    The DataFrame is modified in place and also returned.

    Raises:
        KeyError: If the column does not exist
        ValueError: If a value is not an integer once commas are removed
    """
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found")

    cleaned = df[column].astype(str).str.replace(',', '', regex=False).str.strip()
    df[column] = cleaned.astype(int)

    return df

def filter_dataframes(namespace: Mapping[str, Any]) -> List[str]:
    """
    List the names in a registry that refer to DataFrames.

    Args:
        namespace: Mapping of names to objects, e.g. ``{"sales": sales_df}``

    Returns:
        Names whose values are DataFrames, in the mapping's order
    """
    return [name for name, value in namespace.items() if isinstance(value, pd.DataFrame)]
