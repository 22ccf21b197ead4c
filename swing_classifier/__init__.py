"""
Swing Probability Classifier

A batch pipeline that learns whether a batter swings at a pitch from
pitch-tracking data, compares candidate classifiers, and scores an
unlabelled season with swing probabilities.

Version: 1.0
"""

from .data_processing import PitchDataLoader, clean_training_data, clean_scoring_data
from .features import FeatureEncoding, build_features, fit_encoding, encode_features
from .models import TrainedModel, split_train_validation, sample_records, train_candidate_models, retrain_final_model
from .analysis import EvaluationResult, evaluate_model, compare_models, select_best_model
from .scoring import score_records, score_season
from .export import export_predictions, export_results
from .exceptions import SwingModelError, ConfigurationError, SchemaMismatchError

__version__ = "1.0"

__all__ = [
    'PitchDataLoader',
    'clean_training_data',
    'clean_scoring_data',
    'FeatureEncoding',
    'build_features',
    'fit_encoding',
    'encode_features',
    'TrainedModel',
    'split_train_validation',
    'sample_records',
    'train_candidate_models',
    'retrain_final_model',
    'EvaluationResult',
    'evaluate_model',
    'compare_models',
    'select_best_model',
    'score_records',
    'score_season',
    'export_predictions',
    'export_results',
    'SwingModelError',
    'ConfigurationError',
    'SchemaMismatchError'
]
