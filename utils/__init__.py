"""
Shared constants for the gesture engine
"""

from .constants import *

__all__ = [
    'DEAD_ZONE',
    'DOMINANCE_MARGIN',
    'TRIGGER_FACTOR',
    'THROTTLE_INTERVAL',
    'FACE_LOST_TIMEOUT',
    'DEFAULT_CHANNEL_MAX',
    'MIN_CALIBRATION_VALUE',
    'CALIBRATION_WINDOW',
    'HOLD_DURATION',
    'SUGGESTION_LIMIT',
    'ALPHABET',
    'QUICK_PHRASES',
    'FALLBACK_WORDS',
]
