"""Builders for raw pitch records used across tests."""


def make_pitch(**overrides) -> dict:
    """Build one raw pitch record with sensible defaults."""
    pitch = {
        'season': 2022,
        'pitch_id': 1,
        'release_speed': 94.1,
        'batter': 100,
        'pitcher': 200,
        'description': 'ball',
        'stand': 'R',
        'p_throws': 'R',
        'pitch_type': 'FF',
        'balls': 0,
        'strikes': 0,
        'pfx_x': -0.5,
        'pfx_z': 1.3,
        'plate_x': 0.1,
        'plate_z': 2.4,
        'sz_top': 3.4,
        'sz_bot': 1.6,
    }
    pitch.update(overrides)
    return pitch
