"""
Data processing module for the swing probability pipeline.

Contains the loader class for the yearly pitch tables and the cleaning
functions that turn raw records into complete, numeric modeling tables.
"""

import pandas as pd
import numpy as np
import os
import logging
from typing import List

from config import (
    RAW_COLUMNS, SCORING_RAW_COLUMNS, NUMERIC_COLUMNS, CATEGORICAL_COLUMNS,
    MODELING_COLUMNS, DATA_DIR, DATA_FILES
)
from .exceptions import ConfigurationError, SchemaMismatchError

logger = logging.getLogger(__name__)


class PitchDataLoader:
    """
    Loads the pitch-tracking seasons and the column documentation table.

    The two training seasons carry an outcome 'description' column; the scoring
    season does not, since that is the field the model is asked to predict.

    Attributes:
        data_dir (str): Path to directory containing input CSV files
        data_files (dict): File names keyed by 'documentation', 'training' and 'scoring'
    """

    def __init__(self, data_dir: str = DATA_DIR, data_files: dict = DATA_FILES):
        self.data_dir = data_dir
        self.data_files = data_files

    def _path(self, filename: str) -> str:
        return os.path.join(self.data_dir, filename)

    def load_documentation(self) -> pd.DataFrame:
        """
        Load the column documentation table.

        The table is for human reference only; nothing downstream reads it, so a
        missing file is reported and an empty table returned.
        """
        path = self._path(self.data_files['documentation'])
        if not os.path.exists(path):
            logger.warning(f"Documentation table not found at {path}")
            return pd.DataFrame()

        documentation = pd.read_csv(path)
        logger.info(f"Loaded documentation for {len(documentation)} columns")
        return documentation

    def load_season(self, filename: str, required_columns: List[str] = RAW_COLUMNS) -> pd.DataFrame:
        """
        Load one season of pitch records and check it against the input schema.

        Args:
            filename (str): CSV file name inside data_dir
            required_columns (List[str]): Columns the table must contain

        Returns:
            pd.DataFrame: Raw pitch records, one row per pitch

        Raises:
            FileNotFoundError: If the CSV file is not found in data directory
            SchemaMismatchError: If any required column is absent
        """
        path = self._path(filename)
        df = pd.read_csv(path, low_memory=False)

        missing = [col for col in required_columns if col not in df.columns]
        if missing:
            raise SchemaMismatchError(
                f"{filename} is missing required columns: {missing}", missing=missing
            )

        logger.info(f"Loaded {len(df)} pitch records from {filename}")
        return df

    def load_training_seasons(self) -> pd.DataFrame:
        """Load and stack the labelled seasons into one table."""
        seasons = [self.load_season(filename) for filename in self.data_files['training']]
        return pd.concat(seasons, ignore_index=True)

    def load_scoring_season(self) -> pd.DataFrame:
        """Load the unlabelled season that gets scored."""
        return self.load_season(self.data_files['scoring'], required_columns=SCORING_RAW_COLUMNS)


def coerce_numeric_columns(df: pd.DataFrame, columns: List[str] = NUMERIC_COLUMNS) -> pd.DataFrame:
    """
    Parse numeric-looking text columns as floats.

    Values are parsed as-is first, so plain and scientific notation ("1e-3")
    work. Values that fail have everything other than digits, the decimal point
    and the minus sign stripped and are parsed again (so "93.4 mph" becomes
    93.4). Values that still fail become missing and are counted in the log.

    Args:
        df (pd.DataFrame): Raw pitch records
        columns (List[str]): Columns to coerce

    Returns:
        pd.DataFrame: Copy of the table with the columns as float64
    """
    df = df.copy()

    for col in columns:
        if col not in df.columns:
            continue
        if pd.api.types.is_numeric_dtype(df[col]):
            df[col] = df[col].astype(float)
            continue

        was_missing = df[col].isna()
        parsed = pd.to_numeric(df[col], errors='coerce')

        # Only values that do not parse as-is (e.g. "93.4 mph") get stripped
        retry = parsed.isna() & ~was_missing
        if retry.any():
            stripped = df.loc[retry, col].astype(str).str.replace(r'[^0-9.\-]', '', regex=True)
            parsed[retry] = pd.to_numeric(stripped, errors='coerce')
        df[col] = parsed.astype(float)

        failed = int((df[col].isna() & ~was_missing).sum())
        if failed:
            logger.warning(f"{failed} values in '{col}' could not be parsed and were set to missing")

    return df


def drop_incomplete_records(df: pd.DataFrame, columns: List[str] = MODELING_COLUMNS + ['description']) -> pd.DataFrame:
    """
    Remove any record with a missing value in a modeling column (training seasons).

    Args:
        df (pd.DataFrame): Coerced pitch records
        columns (List[str]): Columns that must be complete

    Returns:
        pd.DataFrame: Complete records only
    """
    clean_df = df.dropna(subset=[col for col in columns if col in df.columns])

    dropped = len(df) - len(clean_df)
    logger.info(f"Dropped {dropped} incomplete records, {len(clean_df)} remain")
    return clean_df.copy()


def impute_missing_values(df: pd.DataFrame,
                          numeric_columns: List[str] = NUMERIC_COLUMNS,
                          categorical_columns: List[str] = CATEGORICAL_COLUMNS) -> pd.DataFrame:
    """
    Fill missing values in the scoring season without dropping any rows.

    Every scored pitch needs a prediction, so rows are kept and gaps are filled
    from the scoring season itself:
    1. Numeric columns: column mean
    2. Categorical columns: most frequent value (mode)

    Args:
        df (pd.DataFrame): Coerced scoring-season records
        numeric_columns (List[str]): Columns filled with the mean
        categorical_columns (List[str]): Columns filled with the mode

    Returns:
        pd.DataFrame: Copy with no missing values in the given columns

    Raises:
        ConfigurationError: If a column has no observed values, so its mean or
            mode is undefined
    """
    logger.info("Imputing missing values in scoring data...")
    df = df.copy()

    for col in numeric_columns:
        n_missing = int(df[col].isna().sum())
        if not n_missing:
            continue
        mean_val = df[col].mean()
        if np.isnan(mean_val):
            raise ConfigurationError(f"Cannot impute '{col}': column has no observed values")
        df[col] = df[col].fillna(mean_val)
        logger.info(f"Filled {n_missing} missing '{col}' values with mean {mean_val:.3f}")

    for col in categorical_columns:
        n_missing = int(df[col].isna().sum())
        if not n_missing:
            continue
        mode_val = df[col].mode()
        if len(mode_val) == 0:
            raise ConfigurationError(f"Cannot impute '{col}': column has no observed values")
        df[col] = df[col].fillna(mode_val.iloc[0])
        logger.info(f"Filled {n_missing} missing '{col}' values with mode '{mode_val.iloc[0]}'")

    return df


def clean_training_data(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce numeric columns and drop incomplete records from labelled seasons."""
    logger.info("Cleaning training data...")
    return drop_incomplete_records(coerce_numeric_columns(df))


def clean_scoring_data(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce numeric columns and impute gaps in the unlabelled season."""
    logger.info("Cleaning scoring data...")
    return impute_missing_values(coerce_numeric_columns(df))
