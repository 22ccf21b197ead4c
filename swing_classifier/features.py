"""
Feature engineering for the swing classifier.

Derives the swing label and the model features from cleaned pitch records, and
owns the categorical encoding that training and scoring must share.
"""

import pandas as pd
import numpy as np
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from config import (
    NON_SWING_DESCRIPTIONS, SWING_DESCRIPTIONS, PITCH_TYPE_GROUPS,
    UNKNOWN_PITCH_CATEGORY, PITCH_CATEGORY_ORDER, FEATURE_COLUMNS,
    CATEGORICAL_COLUMNS, LABEL_COLUMN
)

logger = logging.getLogger(__name__)


def derive_swing_label(descriptions: pd.Series,
                       non_swing: List[str] = NON_SWING_DESCRIPTIONS) -> pd.Series:
    """
    Map outcome descriptions to the binary swing label.

    A pitch is a non-swing (0) only when its description is one of the take
    outcomes; every other code, including ones never seen before, is a swing (1).
    Treating unknown codes as swings is a policy decision, so they are reported.

    Args:
        descriptions (pd.Series): Raw outcome description codes
        non_swing (List[str]): Descriptions where the batter did not offer

    Returns:
        pd.Series: 0/1 integer labels aligned with the input
    """
    unknown = descriptions[~descriptions.isin(non_swing) & ~descriptions.isin(SWING_DESCRIPTIONS)]
    for code, count in unknown.value_counts().items():
        logger.warning(f"Unrecognised description '{code}' ({count} pitches) labelled as swing")

    return (~descriptions.isin(non_swing)).astype(int).rename(LABEL_COLUMN)


def categorize_pitch_type(pitch_types: pd.Series, phase: str = 'training') -> pd.Series:
    """
    Collapse raw pitch codes into fastball / breaking / offspeed.

    Unrecognised codes go to UNKNOWN_PITCH_CATEGORY[phase]: 'Other' while
    training, 'fastball' while scoring.

    Args:
        pitch_types (pd.Series): Raw pitch classification codes
        phase (str): 'training' or 'scoring'

    Returns:
        pd.Series: Coarse pitch category per record
    """
    code_to_category = {
        code: category
        for category, codes in PITCH_TYPE_GROUPS[phase].items()
        for code in codes
    }
    categories = pitch_types.map(code_to_category)

    unknown = pitch_types[categories.isna()]
    for code, count in unknown.value_counts().items():
        logger.warning(f"Unrecognised pitch code '{code}' ({count} pitches) "
                       f"assigned to '{UNKNOWN_PITCH_CATEGORY[phase]}'")

    return categories.fillna(UNKNOWN_PITCH_CATEGORY[phase])


def ball_strike_ratio(balls: pd.Series, strikes: pd.Series) -> pd.Series:
    # +1 keeps 0-strike counts finite
    return balls / (strikes + 1)


def pitch_release_interaction(categories: pd.Series, release_speed: pd.Series,
                              category_order: List[str] = PITCH_CATEGORY_ORDER) -> pd.Series:
    """Pitch category ordinal times release speed, using a fixed category order."""
    ordinals = pd.Categorical(categories, categories=category_order).codes
    return pd.Series(ordinals, index=categories.index).astype(float) * release_speed


def build_features(df: pd.DataFrame, phase: str = 'training') -> pd.DataFrame:
    """
    Engineer the model feature table from cleaned pitch records.

    Feature Categories:
    1. Pitch physics: speed, movement, plate location, strike zone bounds
    2. Count situation: balls, strikes and their ratio
    3. Matchup: batter stance and pitcher throwing hand
    4. Pitch classification: coarse category and its speed interaction

    Identifier columns and the outcome description are not carried over.

    Args:
        df (pd.DataFrame): Cleaned pitch records
        phase (str): 'training' adds the swing label; 'scoring' does not

    Returns:
        pd.DataFrame: FEATURE_COLUMNS in order, plus LABEL_COLUMN for training
    """
    logger.info(f"Building {phase} features for {len(df)} records...")

    features = df.copy()
    features['pitch_type'] = categorize_pitch_type(df['pitch_type'], phase=phase)
    features['ball_strike_ratio'] = ball_strike_ratio(df['balls'], df['strikes'])
    features['interaction_pitch_release'] = pitch_release_interaction(
        features['pitch_type'], df['release_speed']
    )

    columns = list(FEATURE_COLUMNS)
    if phase == 'training':
        features[LABEL_COLUMN] = derive_swing_label(df['description'])
        columns.append(LABEL_COLUMN)

    return features[columns]


@dataclass(frozen=True)
class FeatureEncoding:
    """
    Shared encoding scheme for the model input matrix.

    Holds the ordered category levels for each categorical column; the encoded
    column names follow from them, so two tables encoded with the same scheme
    always have identical columns in identical order.
    """
    numeric_columns: Tuple[str, ...]
    categorical_levels: Tuple[Tuple[str, Tuple[str, ...]], ...]

    @property
    def levels(self) -> Dict[str, Tuple[str, ...]]:
        return dict(self.categorical_levels)

    @property
    def feature_columns(self) -> List[str]:
        columns = list(self.numeric_columns)
        for col, levels in self.categorical_levels:
            columns.extend(f"{col}_{level}" for level in levels)
        return columns


def fit_encoding(*frames: pd.DataFrame,
                 categorical_columns: List[str] = CATEGORICAL_COLUMNS) -> FeatureEncoding:
    """
    Build the encoding from the union of the given feature tables.

    Fitting on train and validation together guarantees both encode to the same
    columns. Pitch categories always use the full fixed category order so the
    encoded layout does not depend on which categories happen to be present.
    """
    combined = pd.concat([frame[FEATURE_COLUMNS] for frame in frames], ignore_index=True)
    numeric_columns = tuple(col for col in FEATURE_COLUMNS if col not in categorical_columns)

    categorical_levels = []
    for col in categorical_columns:
        if col == 'pitch_type':
            levels = tuple(PITCH_CATEGORY_ORDER)
        else:
            levels = tuple(sorted(combined[col].dropna().astype(str).unique()))
        categorical_levels.append((col, levels))

    return FeatureEncoding(numeric_columns=numeric_columns,
                           categorical_levels=tuple(categorical_levels))


def encode_features(df: pd.DataFrame, encoding: FeatureEncoding) -> pd.DataFrame:
    """
    One-hot encode a feature table with a fixed encoding.

    Levels missing from the table still get (all-zero) columns; values the
    encoding has never seen get zeros across their column group.

    Returns:
        pd.DataFrame: Numeric matrix with columns == encoding.feature_columns
    """
    encoded = df[list(encoding.numeric_columns)].astype(float)

    dummies = []
    for col, levels in encoding.categorical_levels:
        values = df[col].astype(str)
        unseen = values[~values.isin(levels)]
        if len(unseen):
            logger.warning(f"{len(unseen)} '{col}' values not in encoding "
                           f"{sorted(unseen.unique())}; encoded as all zeros")
        categorical = pd.Categorical(values, categories=list(levels))
        indicators = pd.get_dummies(categorical, prefix=col, dtype=np.int8)
        indicators.index = df.index
        dummies.append(indicators)

    encoded = pd.concat([encoded] + dummies, axis=1)
    return encoded[encoding.feature_columns]
