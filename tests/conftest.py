"""Shared pytest fixtures for test modules."""

import numpy as np
import pandas as pd
import pytest

from config import RAW_COLUMNS
from tests.helpers import make_pitch


@pytest.fixture
def raw_training_df() -> pd.DataFrame:
    """Labelled raw records where swings cluster in the middle of the zone."""
    rng = np.random.default_rng(7)
    descriptions = ['ball', 'called_strike', 'swinging_strike', 'foul', 'hit_into_play']
    pitch_types = ['FF', 'SI', 'SL', 'CU', 'CH', 'KN', 'XX']
    rows = []
    for i in range(200):
        plate_x = float(rng.normal(0, 1))
        swing = abs(plate_x) < 0.7
        rows.append(make_pitch(
            pitch_id=i,
            batter=100 + i % 10,
            pitcher=200 + i % 5,
            description=descriptions[2 + i % 3] if swing else descriptions[i % 2],
            stand='L' if i % 3 == 0 else 'R',
            p_throws='L' if i % 4 == 0 else 'R',
            pitch_type=pitch_types[i % len(pitch_types)],
            release_speed=float(rng.normal(90, 4)),
            balls=i % 4,
            strikes=i % 3,
            plate_x=plate_x,
            plate_z=float(rng.normal(2.5, 0.8)),
        ))
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


@pytest.fixture
def raw_scoring_df() -> pd.DataFrame:
    """Unlabelled raw records shaped like the scoring season."""
    rows = [
        make_pitch(season=2024, pitch_id=1000 + i, pitch_type=code, balls=i % 4, strikes=i % 3,
                   plate_x=0.2 * i - 1.0)
        for i, code in enumerate(['FF', 'FO', 'SL', 'CH', 'XX', 'SV', 'SI', 'KN', 'FC', 'CU'])
    ]
    df = pd.DataFrame(rows)
    return df.drop(columns=['description'])
