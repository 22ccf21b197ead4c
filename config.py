"""
Configuration file for the swing probability pipeline.

Contains all constants, mappings, and configuration parameters used throughout the project.
"""

# Input schema: every season table carries these columns
# (the scoring season has no 'description' column)
ID_COLUMNS = ['season', 'pitch_id', 'batter', 'pitcher']

RAW_COLUMNS = [
    'season', 'pitch_id', 'release_speed', 'batter', 'pitcher',
    'description', 'stand', 'p_throws', 'pitch_type', 'balls', 'strikes',
    'pfx_x', 'pfx_z', 'plate_x', 'plate_z', 'sz_top', 'sz_bot'
]

SCORING_RAW_COLUMNS = [col for col in RAW_COLUMNS if col != 'description']

# Columns that may arrive as text and must be parsed as floats
NUMERIC_COLUMNS = [
    'release_speed', 'balls', 'strikes',
    'pfx_x', 'pfx_z', 'plate_x', 'plate_z',
    'sz_top', 'sz_bot'
]

CATEGORICAL_COLUMNS = ['stand', 'p_throws', 'pitch_type']

# Raw columns that must be complete before feature engineering
MODELING_COLUMNS = NUMERIC_COLUMNS + CATEGORICAL_COLUMNS

# Outcome descriptions where the batter did not offer at the pitch.
# Everything else (including codes we have never seen) counts as a swing.
NON_SWING_DESCRIPTIONS = [
    'ball',
    'called_strike',
    'blocked_ball',
    'hit_by_pitch',
    'pitchout'
]

# Swing descriptions we expect to see; anything outside both lists is logged
SWING_DESCRIPTIONS = [
    'swinging_strike', 'swinging_strike_blocked',
    'foul', 'foul_tip', 'foul_bunt', 'bunt_foul_tip', 'missed_bunt',
    'hit_into_play', 'hit_into_play_score', 'hit_into_play_no_out'
]

# Pitch type classifications
FASTBALL_TYPES = ['FF', 'SI', 'FC', 'FA']            # Velocity-based pitches
BREAKING_TYPES = ['SL', 'CU', 'KC', 'SC', 'SV', 'ST']  # Sharp break pitches
OFFSPEED_TYPES = ['CH', 'FS', 'CS', 'EP', 'KN', 'PO']  # Change of pace pitches

PITCH_TYPE_GROUPS = {
    'training': {
        'fastball': FASTBALL_TYPES,
        'breaking': BREAKING_TYPES,
        'offspeed': OFFSPEED_TYPES
    },
    'scoring': {
        'fastball': FASTBALL_TYPES + ['FO'],  # Forkballs only show up in the scoring season
        'breaking': BREAKING_TYPES,
        'offspeed': OFFSPEED_TYPES
    }
}

# Where unrecognised pitch codes land in each phase
UNKNOWN_PITCH_CATEGORY = {
    'training': 'Other',
    'scoring': 'fastball'
}

# Fixed ordinal used by interaction_pitch_release in both phases
PITCH_CATEGORY_ORDER = ['Other', 'breaking', 'fastball', 'offspeed']

# Model input columns, in order (label appended for training data)
FEATURE_COLUMNS = [
    'release_speed', 'balls', 'strikes',
    'pfx_x', 'pfx_z', 'plate_x', 'plate_z',
    'sz_top', 'sz_bot',
    'ball_strike_ratio', 'interaction_pitch_release',
    'stand', 'p_throws', 'pitch_type'
]

LABEL_COLUMN = 'swing'
PROBABILITY_COLUMN = 'swing_probability'

# Train/validation split and fast-iteration sampling
SPLIT_CONFIG = {
    'test_size': 0.2,
    'random_state': 42,
    'sample_size': 100_000,
    'use_sample': False
}

# Model hyperparameters
MODEL_CONFIG = {
    'logistic_regression': {
        'max_iter': 1000
    },
    'random_forest': {
        'n_estimators': 100,
        'random_state': 42,
        'n_jobs': -1
    },
    'gradient_boosting': {
        'learning_rate': 0.1,
        'max_depth': 6,
        'n_estimators': 100,
        'objective': 'binary:logistic',
        'eval_metric': 'logloss',
        'random_state': 42,
        'n_jobs': -1
    }
}

# Probability cut-off for predicted labels
DECISION_THRESHOLD = 0.5

# Metric used to pick the model that gets retrained on the full data
SELECTION_METRIC = 'roc_auc'

# File paths
DATA_DIR = "data"
RESULTS_DIR = "results"

DATA_FILES = {
    'documentation': 'documentation.csv',
    'training': ['year1.csv', 'year2.csv'],
    'scoring': 'year3.csv'
}

OUTPUT_FILES = {
    'predictions': 'swing_predictions.csv',
    'results': 'model_results.json'
}
