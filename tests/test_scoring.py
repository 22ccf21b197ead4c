"""Tests for scoring unlabelled seasons."""

import dataclasses

import numpy as np
import pandas as pd
import pytest

from config import PROBABILITY_COLUMN
from swing_classifier.data_processing import clean_scoring_data, clean_training_data
from swing_classifier.exceptions import SchemaMismatchError
from swing_classifier.features import build_features
from swing_classifier.models import retrain_final_model
from swing_classifier.scoring import score_records, score_season, verify_feature_columns


MODEL_CONFIG = {
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
def trained_model(raw_training_df):
    engineered = build_features(clean_training_data(raw_training_df), phase='training')
    return retrain_final_model('gradient_boosting', engineered, MODEL_CONFIG)


class TestVerifyFeatureColumns:
    def test_identical_columns_pass(self) -> None:
        verify_feature_columns(['a', 'b'], ['a', 'b'])

    def test_missing_column_raises(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            verify_feature_columns(['a'], ['a', 'b'])

        assert exc_info.value.missing == ['b']

    def test_unexpected_column_raises(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            verify_feature_columns(['a', 'b', 'c'], ['a', 'b'])

        assert exc_info.value.unexpected == ['c']

    def test_reordered_columns_raise(self) -> None:
        with pytest.raises(SchemaMismatchError, match="order"):
            verify_feature_columns(['b', 'a'], ['a', 'b'])


class TestScoreRecords:
    def test_one_probability_per_row(self, trained_model, raw_scoring_df) -> None:
        features = build_features(clean_scoring_data(raw_scoring_df), phase='scoring')

        probabilities = score_records(trained_model, features)

        assert len(probabilities) == len(features)
        assert ((probabilities >= 0) & (probabilities <= 1)).all()

    def test_scoring_is_deterministic(self, trained_model, raw_scoring_df) -> None:
        features = build_features(clean_scoring_data(raw_scoring_df), phase='scoring')

        first = score_records(trained_model, features)
        second = score_records(trained_model, features)

        np.testing.assert_array_equal(first, second)

    def test_preserves_row_order(self, trained_model, raw_scoring_df) -> None:
        features = build_features(clean_scoring_data(raw_scoring_df), phase='scoring')

        forward = score_records(trained_model, features)
        backward = score_records(trained_model, features.iloc[::-1])

        np.testing.assert_array_equal(forward, backward[::-1])

    def test_column_mismatch_aborts(self, trained_model, raw_scoring_df) -> None:
        features = build_features(clean_scoring_data(raw_scoring_df), phase='scoring')
        drifted = dataclasses.replace(
            trained_model, feature_columns=list(reversed(trained_model.feature_columns))
        )

        with pytest.raises(SchemaMismatchError):
            score_records(drifted, features)


class TestScoreSeason:
    def test_output_keeps_original_columns_and_rows(self, trained_model, raw_scoring_df) -> None:
        scored = score_season(trained_model, raw_scoring_df)

        assert len(scored) == len(raw_scoring_df)
        assert list(scored.columns) == list(raw_scoring_df.columns) + [PROBABILITY_COLUMN]
        pd.testing.assert_frame_equal(scored[raw_scoring_df.columns], raw_scoring_df)

    def test_missing_values_are_not_written_back(self, trained_model, raw_scoring_df) -> None:
        df = raw_scoring_df.copy()
        df.loc[0, 'release_speed'] = np.nan

        scored = score_season(trained_model, df)

        assert np.isnan(scored.loc[0, 'release_speed'])
        assert not scored[PROBABILITY_COLUMN].isna().any()

    def test_does_not_mutate_input(self, trained_model, raw_scoring_df) -> None:
        before = raw_scoring_df.copy()

        score_season(trained_model, raw_scoring_df)

        pd.testing.assert_frame_equal(raw_scoring_df, before)
