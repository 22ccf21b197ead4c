"""End-to-end test of the pipeline entry point."""

import json

import pandas as pd
import pytest

import main as pipeline
from config import PROBABILITY_COLUMN


SMALL_MODEL_CONFIG = {
    'logistic_regression': {'max_iter': 500},
    'random_forest': {'n_estimators': 10, 'random_state': 0},
    'gradient_boosting': {
        'learning_rate': 0.1,
        'max_depth': 3,
        'n_estimators': 10,
        'objective': 'binary:logistic',
        'eval_metric': 'logloss',
        'random_state': 0,
    },
}


@pytest.fixture
def data_dir(tmp_path, raw_training_df, raw_scoring_df):
    raw_training_df.iloc[:100].to_csv(tmp_path / "year1.csv", index=False)
    raw_training_df.iloc[100:].to_csv(tmp_path / "year2.csv", index=False)
    raw_scoring_df.to_csv(tmp_path / "year3.csv", index=False)
    pd.DataFrame({'column': ['balls'], 'meaning': ['Balls in the count']}).to_csv(
        tmp_path / "documentation.csv", index=False
    )
    return tmp_path


class TestMain:
    def test_runs_end_to_end(self, data_dir, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        split_config = {'test_size': 0.2, 'random_state': 42, 'sample_size': 150, 'use_sample': True}

        final_model, results, scored = pipeline.main(
            data_dir=str(data_dir), split_config=split_config, model_config=SMALL_MODEL_CONFIG
        )

        assert set(results) == set(SMALL_MODEL_CONFIG)
        assert final_model.name in results
        assert len(scored) == 10
        assert scored[PROBABILITY_COLUMN].between(0, 1).all()

        written = pd.read_csv(tmp_path / "results" / "swing_predictions.csv")
        assert len(written) == 10
        assert PROBABILITY_COLUMN in written.columns

        report = json.loads((tmp_path / "results" / "model_results.json").read_text())
        assert report['selected_model'] == final_model.name

    def test_missing_input_aborts(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        with pytest.raises(FileNotFoundError):
            pipeline.main(data_dir=str(tmp_path / "missing"), model_config=SMALL_MODEL_CONFIG)
