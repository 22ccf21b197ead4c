"""
Model training functionality for the swing classifier.

Contains the train/validation splitter, the three candidate model families
and the training procedures that fit and time them.
"""

import pandas as pd
import numpy as np
import time
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from sklearn.model_selection import train_test_split
from sklearn.linear_model import LogisticRegression
from sklearn.ensemble import RandomForestClassifier
from xgboost import XGBClassifier

from config import MODEL_CONFIG, SPLIT_CONFIG, LABEL_COLUMN
from .exceptions import ConfigurationError
from .features import FeatureEncoding, fit_encoding, encode_features

logger = logging.getLogger(__name__)

MODEL_FAMILIES = {
    'logistic_regression': LogisticRegression,
    'random_forest': RandomForestClassifier,
    'gradient_boosting': XGBClassifier
}

# Families whose solvers reject training labels with a single class
TWO_CLASS_FAMILIES = {'logistic_regression'}


@dataclass
class TrainedModel:
    """
    A fitted classifier together with everything needed to feed it new data.

    Attributes:
        name (str): Model family name (a MODEL_CONFIG key)
        estimator: Fitted scikit-learn compatible classifier
        encoding (FeatureEncoding): Encoding the estimator was fit with
        feature_columns (List[str]): Encoded column order at fit time
        training_seconds (float): Wall-clock fit duration
    """
    name: str
    estimator: object
    encoding: FeatureEncoding
    feature_columns: List[str]
    training_seconds: float


def sample_records(df: pd.DataFrame,
                   sample_size: int = SPLIT_CONFIG['sample_size'],
                   random_state: int = SPLIT_CONFIG['random_state']) -> pd.DataFrame:
    """Draw a seeded uniform subsample for fast iteration."""
    if len(df) <= sample_size:
        return df.copy()

    logger.info(f"Sampling {sample_size} of {len(df)} records...")
    return df.sample(n=sample_size, random_state=random_state)


def split_train_validation(df: pd.DataFrame,
                           test_size: float = SPLIT_CONFIG['test_size'],
                           random_state: int = SPLIT_CONFIG['random_state']) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Partition engineered records into train and validation sets.

    The split is stratified on the swing label so both sets keep the same swing
    rate. If a class has fewer than two records stratification is impossible
    and a plain seeded split is used instead.

    Args:
        df (pd.DataFrame): Engineered training records with LABEL_COLUMN
        test_size (float): Fraction of records held out for validation
        random_state (int): Seed for reproducible splits

    Returns:
        Tuple[pd.DataFrame, pd.DataFrame]: (train, validation)
    """
    class_counts = df[LABEL_COLUMN].value_counts()
    stratify = df[LABEL_COLUMN]
    if class_counts.min() < 2:
        logger.warning(f"Label counts {class_counts.to_dict()} too small to stratify; "
                       "using an unstratified split")
        stratify = None

    train_df, val_df = train_test_split(
        df, test_size=test_size, random_state=random_state, stratify=stratify
    )
    logger.info(f"Split {len(df)} records into {len(train_df)} train / {len(val_df)} validation")
    return train_df, val_df


def build_estimator(name: str, model_config: Dict = MODEL_CONFIG):
    """Instantiate an unfitted classifier for a configured model family."""
    if name not in MODEL_FAMILIES or name not in model_config:
        raise ConfigurationError(f"Unknown model family '{name}'")
    return MODEL_FAMILIES[name](**model_config[name])


def fit_model(name: str, train_df: pd.DataFrame, encoding: FeatureEncoding,
              model_config: Dict = MODEL_CONFIG) -> TrainedModel:
    """
    Fit one model family on an engineered table and time the fit.

    Args:
        name (str): Model family name
        train_df (pd.DataFrame): Engineered records with LABEL_COLUMN
        encoding (FeatureEncoding): Shared encoding scheme
        model_config (Dict): Hyperparameters per family

    Returns:
        TrainedModel: Fitted estimator with its encoding and timing

    Raises:
        ConfigurationError: If the labels hold a single class and the family
            cannot be fit on one
    """
    X_train = encode_features(train_df, encoding)
    y_train = train_df[LABEL_COLUMN].astype(int)

    if y_train.nunique() < 2:
        classes = y_train.unique().tolist()
        if name in TWO_CLASS_FAMILIES:
            raise ConfigurationError(f"Cannot train {name}: training labels contain only classes {classes}")
        logger.warning(f"Training {name} on label classes {classes} only")

    estimator = build_estimator(name, model_config)

    start = time.perf_counter()
    estimator.fit(X_train, y_train)
    training_seconds = time.perf_counter() - start

    logger.info(f"Trained {name} on {len(X_train)} records in {training_seconds:.2f}s")

    return TrainedModel(
        name=name,
        estimator=estimator,
        encoding=encoding,
        feature_columns=list(X_train.columns),
        training_seconds=training_seconds
    )


def train_candidate_models(train_df: pd.DataFrame, val_df: pd.DataFrame,
                           model_names: List[str] = None,
                           model_config: Dict = MODEL_CONFIG) -> Dict[str, TrainedModel]:
    """
    Fit every candidate family on the same split and the same encoding.

    The encoding is fit on train and validation together, so a category level
    that only appears on one side still gets the same column everywhere.

    Families in TWO_CLASS_FAMILIES are left out when the training labels hold
    a single class.

    Returns:
        Dict[str, TrainedModel]: Fitted models keyed by family name

    Raises:
        ConfigurationError: If no requested family can be trained
    """
    model_names = model_names or list(model_config)
    encoding = fit_encoding(train_df, val_df)
    logger.info(f"Encoded feature matrix has {len(encoding.feature_columns)} columns")

    if train_df[LABEL_COLUMN].nunique() < 2:
        skipped = [name for name in model_names if name in TWO_CLASS_FAMILIES]
        for name in skipped:
            logger.warning(f"Skipping {name}: training labels contain a single class")
        model_names = [name for name in model_names if name not in skipped]
        if not model_names:
            raise ConfigurationError("No candidate model can be trained on single-class labels")

    return {name: fit_model(name, train_df, encoding, model_config) for name in model_names}


def retrain_final_model(name: str, df: pd.DataFrame,
                        model_config: Dict = MODEL_CONFIG) -> TrainedModel:
    """Refit the chosen family on the full engineered training table."""
    logger.info(f"Retraining {name} on all {len(df)} engineered records...")
    return fit_model(name, df, fit_encoding(df), model_config)


def predict_swing_probability(model: TrainedModel, X: pd.DataFrame) -> np.ndarray:
    """
    Probability of the swing class for each row of an encoded matrix.

    A model fit on a single class has no swing column in predict_proba; every
    row then gets the probability implied by that class.
    """
    probabilities = model.estimator.predict_proba(X)
    classes = list(model.estimator.classes_)
    if 1 in classes:
        return probabilities[:, classes.index(1)]
    return np.zeros(len(X))


def feature_importance(model: TrainedModel) -> pd.Series:
    """
    Rank encoded features by importance for a fitted model.

    Tree ensembles report impurity/gain importances; linear models are ranked
    by absolute coefficient.

    Returns:
        pd.Series: Importance per feature, highest first
    """
    estimator = model.estimator
    if hasattr(estimator, 'feature_importances_'):
        values = estimator.feature_importances_
    elif hasattr(estimator, 'coef_'):
        values = np.abs(estimator.coef_).ravel()
    else:
        raise ValueError(f"{model.name} does not expose feature importances")

    return (pd.Series(values, index=model.feature_columns, name='importance')
            .sort_values(ascending=False))
