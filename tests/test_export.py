"""Tests for writing predictions and results."""

import json

import pandas as pd

from swing_classifier.analysis import evaluate_predictions
from swing_classifier.export import export_predictions, export_results


class TestExportPredictions:
    def test_writes_csv_without_index(self, tmp_path) -> None:
        scored = pd.DataFrame({'pitch_id': [1, 2], 'swing_probability': [0.25, 0.75]})
        path = tmp_path / "out" / "predictions.csv"

        export_predictions(scored, filename=str(path))

        written = pd.read_csv(path)
        pd.testing.assert_frame_equal(written, scored)


class TestExportResults:
    def test_undefined_metrics_written_as_null(self, tmp_path) -> None:
        results = {'random_forest': evaluate_predictions([0, 0], [0.1, 0.2], model_name='random_forest')}
        path = tmp_path / "results.json"

        export_results(results, 'random_forest', filename=str(path))

        data = json.loads(path.read_text())
        assert data['selected_model'] == 'random_forest'
        assert data['model_performance']['random_forest']['roc_auc'] is None
        assert data['model_performance']['random_forest']['confusion_matrix'] == [[2, 0], [0, 0]]
        assert data['feature_importance'] == {}

    def test_includes_feature_importance(self, tmp_path) -> None:
        results = {'a': evaluate_predictions([0, 1], [0.2, 0.8], model_name='a')}
        importances = pd.Series({'plate_x': 0.6, 'balls': 0.4})
        path = tmp_path / "results.json"

        export_results(results, 'a', importances, filename=str(path))

        data = json.loads(path.read_text())
        assert data['feature_importance'] == {'plate_x': 0.6, 'balls': 0.4}
