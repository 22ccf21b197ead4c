"""
Export functionality for pipeline results.

Writes the scored season to CSV and the model comparison to JSON.
"""

import pandas as pd
import json
import logging
import os
from typing import Dict, Optional

from config import RESULTS_DIR, OUTPUT_FILES
from .analysis import EvaluationResult

logger = logging.getLogger(__name__)


def export_predictions(scored_df: pd.DataFrame,
                       filename: str = os.path.join(RESULTS_DIR, OUTPUT_FILES['predictions'])):
    """Write the scored season, original columns plus swing probability, to CSV."""
    os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
    scored_df.to_csv(filename, index=False)
    logger.info(f"Predictions for {len(scored_df)} pitches saved to '{filename}'")


def export_results(results: Dict[str, EvaluationResult], best_model: str,
                   importances: Optional[pd.Series] = None,
                   filename: str = os.path.join(RESULTS_DIR, OUTPUT_FILES['results'])):
    """Export model comparison results to JSON format.

    Args:
        results (Dict[str, EvaluationResult]): Validation metrics per model
        best_model (str): Name of the model retrained for scoring
        importances (pd.Series): Feature importance ranking of the final model
        filename (str): Output filename for JSON export

    Undefined metrics are written as null.
    """
    export_data = {
        "model_performance": {name: result.to_dict() for name, result in results.items()},
        "selected_model": best_model,
        "feature_importance": (
            {feature: float(value) for feature, value in importances.items()}
            if importances is not None else {}
        )
    }

    os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
    with open(filename, 'w') as f:
        json.dump(export_data, f, indent=2)

    logger.info(f"Results exported to {filename}")
