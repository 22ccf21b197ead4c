"""
Main execution file for the Swing Probability Pipeline.

This file orchestrates the complete pipeline from data loading through
model training, evaluation, and scoring of the held-out season.
"""

import logging
import warnings

# Import our modules
from swing_classifier.data_processing import PitchDataLoader, clean_training_data
from swing_classifier.features import build_features
from swing_classifier.models import (
    sample_records, split_train_validation, train_candidate_models,
    retrain_final_model, feature_importance
)
from swing_classifier.analysis import evaluate_model, compare_models, select_best_model
from swing_classifier.scoring import score_season
from swing_classifier.export import export_predictions, export_results
from config import DATA_DIR, DATA_FILES, SPLIT_CONFIG, MODEL_CONFIG, LABEL_COLUMN

# Configure logging and suppress warnings for cleaner output
warnings.filterwarnings('ignore')
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main(data_dir: str = DATA_DIR, split_config: dict = SPLIT_CONFIG,
         model_config: dict = MODEL_CONFIG):
    """Run the end-to-end pipeline: load, clean, engineer, train, evaluate, score.

    Steps:
        1) Load the labelled seasons, the scoring season and the documentation table.
        2) Coerce numeric columns and drop incomplete labelled records.
        3) Derive the swing label and engineered features.
        4) Optionally subsample, then split into stratified train/validation sets.
        5) Train the candidate models on a shared encoding.
        6) Evaluate each model on the validation set and pick the best one.
        7) Retrain the best model family on all engineered records.
        8) Score the held-out season and export predictions and metrics.

    Returns:
        Tuple: (final_model, results, scored)
            - final_model: TrainedModel retrained on the full data.
            - results: Dict of EvaluationResult per candidate model.
            - scored: Scoring season with the swing probability column.
    """
    logger.info("Starting swing probability pipeline...")

    try:
        loader = PitchDataLoader(data_dir=data_dir, data_files=DATA_FILES)

        # Load data
        logger.info("Step 1: Loading data...")
        loader.load_documentation()
        raw_training = loader.load_training_seasons()
        raw_scoring = loader.load_scoring_season()

        # Clean and engineer labelled seasons
        logger.info("Step 2: Cleaning training data...")
        training = clean_training_data(raw_training)

        logger.info("Step 3: Building features...")
        engineered = build_features(training, phase='training')
        logger.info(f"Swing rate: {engineered[LABEL_COLUMN].mean():.3f} over {len(engineered)} pitches")

        # Split
        logger.info("Step 4: Creating train/validation split...")
        modeling = engineered
        if split_config['use_sample']:
            modeling = sample_records(engineered, split_config['sample_size'], split_config['random_state'])
        train_df, val_df = split_train_validation(
            modeling, split_config['test_size'], split_config['random_state']
        )

        # Train candidates
        logger.info("Step 5: Training candidate models...")
        candidates = train_candidate_models(train_df, val_df, model_config=model_config)

        # Evaluate
        logger.info("Step 6: Evaluating candidate models...")
        results = {name: evaluate_model(model, val_df) for name, model in candidates.items()}
        comparison = compare_models(results)
        logger.info("\nModel Comparison:")
        print(comparison.round(4).to_string())

        best_name = select_best_model(results)

        # Retrain on everything
        logger.info(f"Step 7: Retraining {best_name} on full data...")
        final_model = retrain_final_model(best_name, engineered, model_config)

        importances = feature_importance(final_model)
        logger.info("Top features:")
        for feature, value in importances.head(10).items():
            logger.info(f"  {feature}: {value:.4f}")

        # Score held-out season
        logger.info("Step 8: Scoring held-out season...")
        scored = score_season(final_model, raw_scoring)

        export_predictions(scored)
        export_results(results, best_name, importances)

        logger.info("Swing probability pipeline completed successfully!")

        return final_model, results, scored

    except Exception as e:
        logger.error(f"Error in main execution: {str(e)}")
        raise


if __name__ == "__main__":
    final_model, results, scored = main()

    print("\nPipeline complete! Check the generated files:")
    print("- results/swing_predictions.csv (swing probabilities)")
    print("- results/model_results.json (model comparison)")
