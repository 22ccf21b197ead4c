"""
Scoring of unlabelled pitch records with a trained swing model.
"""

import pandas as pd
import numpy as np
import logging
from typing import List

from config import PROBABILITY_COLUMN
from .data_processing import clean_scoring_data
from .exceptions import SchemaMismatchError
from .features import build_features, encode_features
from .models import TrainedModel, predict_swing_probability

logger = logging.getLogger(__name__)


def verify_feature_columns(columns: List[str], expected: List[str]):
    """
    Require an encoded matrix to match the model's training columns exactly.

    Raises:
        SchemaMismatchError: If count, names or order differ
    """
    columns = list(columns)
    expected = list(expected)
    if columns == expected:
        return

    missing = [col for col in expected if col not in columns]
    unexpected = [col for col in columns if col not in expected]
    if not missing and not unexpected:
        message = "Encoded feature columns are in a different order than at training time"
    else:
        message = (f"Encoded feature columns do not match training columns "
                   f"(missing: {missing}, unexpected: {unexpected})")
    raise SchemaMismatchError(message, missing=missing, unexpected=unexpected)


def score_records(model: TrainedModel, feature_df: pd.DataFrame) -> np.ndarray:
    """
    Predict a swing probability for every engineered record.

    Args:
        model (TrainedModel): Fitted model with its encoding
        feature_df (pd.DataFrame): Engineered, unlabelled feature table

    Returns:
        np.ndarray: One probability in [0, 1] per input row, in input order
    """
    X = encode_features(feature_df, model.encoding)
    verify_feature_columns(X.columns, model.feature_columns)
    return predict_swing_probability(model, X)


def score_season(model: TrainedModel, raw_df: pd.DataFrame) -> pd.DataFrame:
    """
    Clean, engineer and score an unlabelled season.

    Cleaning works on a copy, so the returned table holds the original columns
    exactly as loaded plus PROBABILITY_COLUMN, row-aligned with the input.
    """
    logger.info(f"Scoring {len(raw_df)} records with {model.name}...")

    features = build_features(clean_scoring_data(raw_df), phase='scoring')
    probabilities = score_records(model, features)

    scored = raw_df.copy()
    scored[PROBABILITY_COLUMN] = probabilities
    logger.info(f"Mean predicted swing probability: {probabilities.mean():.4f}")
    return scored
