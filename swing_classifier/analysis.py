"""
Analysis module for model evaluation and comparison.

Contains functions for scoring candidate models on the validation set,
tabulating their metrics and picking the model to retrain on the full data.
"""

import pandas as pd
import numpy as np
import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

from sklearn.metrics import accuracy_score, roc_auc_score, confusion_matrix

from config import DECISION_THRESHOLD, SELECTION_METRIC, LABEL_COLUMN
from .features import encode_features
from .models import TrainedModel, predict_swing_probability

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """
    Validation metrics for one model.

    Metrics that are mathematically undefined for the data (ROC-AUC with a
    single true class, precision with no predicted swings, recall with no
    actual swings) are None rather than NaN or 0.
    """
    model_name: str
    accuracy: float
    roc_auc: Optional[float]
    precision: Optional[float]
    recall: Optional[float]
    f1: Optional[float]
    confusion_matrix: List[List[int]]
    training_seconds: float
    n_samples: int

    def to_dict(self) -> Dict:
        return asdict(self)


def format_metric(value: Optional[float]) -> str:
    return 'undefined' if value is None else f"{value:.4f}"


def evaluate_predictions(y_true, y_prob, training_seconds: float = 0.0,
                         model_name: str = 'model',
                         threshold: float = DECISION_THRESHOLD) -> EvaluationResult:
    """
    Compute classification metrics from true labels and swing probabilities.

    Predicted labels come from thresholding the probabilities. The confusion
    matrix is always 2x2 ([[TN, FP], [FN, TP]]) even if a class is absent.

    Args:
        y_true: True 0/1 labels
        y_prob: Predicted swing probabilities
        training_seconds (float): Fit duration of the model being evaluated
        model_name (str): Label for logs and reports
        threshold (float): Probability at or above which a swing is predicted

    Returns:
        EvaluationResult: Metrics with undefined values as None
    """
    y_true = np.asarray(y_true).astype(int)
    y_prob = np.asarray(y_prob, dtype=float)
    y_pred = (y_prob >= threshold).astype(int)

    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])
    tn, fp, fn, tp = (int(v) for v in cm.ravel())

    precision = tp / (tp + fp) if (tp + fp) > 0 else None
    recall = tp / (tp + fn) if (tp + fn) > 0 else None
    if precision is None or recall is None:
        f1 = None
    else:
        f1 = 2 * tp / (2 * tp + fp + fn) if tp > 0 else 0.0

    roc_auc = None
    if len(np.unique(y_true)) == 2:
        roc_auc = float(roc_auc_score(y_true, y_prob))

    return EvaluationResult(
        model_name=model_name,
        accuracy=float(accuracy_score(y_true, y_pred)),
        roc_auc=roc_auc,
        precision=precision,
        recall=recall,
        f1=f1,
        confusion_matrix=cm.tolist(),
        training_seconds=training_seconds,
        n_samples=len(y_true)
    )


def evaluate_model(model: TrainedModel, val_df: pd.DataFrame) -> EvaluationResult:
    """Score a trained model on engineered validation records and log its metrics."""
    X_val = encode_features(val_df, model.encoding)
    y_prob = predict_swing_probability(model, X_val)

    result = evaluate_predictions(val_df[LABEL_COLUMN], y_prob,
                                  training_seconds=model.training_seconds,
                                  model_name=model.name)
    log_evaluation(result)
    return result


def log_evaluation(result: EvaluationResult):
    logger.info(f"{result.model_name}: "
                f"Accuracy: {format_metric(result.accuracy)}, "
                f"ROC-AUC: {format_metric(result.roc_auc)}, "
                f"Precision: {format_metric(result.precision)}, "
                f"Recall: {format_metric(result.recall)}, "
                f"F1: {format_metric(result.f1)}, "
                f"Training time: {result.training_seconds:.2f}s")
    logger.info(f"{result.model_name} confusion matrix [[TN, FP], [FN, TP]]: {result.confusion_matrix}")


def compare_models(results: Dict[str, EvaluationResult]) -> pd.DataFrame:
    """
    Tabulate validation metrics for all candidate models.

    Returns:
        pd.DataFrame: One row per model, undefined metrics left as missing
    """
    rows = []
    for name, result in results.items():
        rows.append({
            'model': name,
            'accuracy': result.accuracy,
            'roc_auc': result.roc_auc,
            'precision': result.precision,
            'recall': result.recall,
            'f1': result.f1,
            'training_seconds': result.training_seconds
        })
    return pd.DataFrame(rows).set_index('model')


def select_best_model(results: Dict[str, EvaluationResult],
                      metric: str = SELECTION_METRIC) -> str:
    """
    Pick the model to retrain on the full data.

    Models are ranked by the selection metric with accuracy as the tie-breaker;
    a model whose metric is undefined ranks below every model where it is defined.
    """
    if not results:
        raise ValueError("No evaluation results to select from")

    def rank(name):
        value = getattr(results[name], metric)
        return (value is not None, value if value is not None else 0.0, results[name].accuracy)

    best = max(results, key=rank)
    logger.info(f"Selected {best} ({metric}: {format_metric(getattr(results[best], metric))})")
    return best
