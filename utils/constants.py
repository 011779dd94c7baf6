# =========================
# GESTURE TRIGGERS
# =========================
DEAD_ZONE = 0.02            # raw intensity below this reads as 0
DOMINANCE_MARGIN = 0.1      # left/right smile must beat the other by this much
TRIGGER_FACTOR = 0.6        # fraction of the calibrated max that fires a trigger
THROTTLE_INTERVAL = 0.05    # 50ms between accepted tracker updates
FACE_LOST_TIMEOUT = 0.5     # no frame for this long -> face not tracked

# =========================
# CALIBRATION
# =========================
DEFAULT_CHANNEL_MAX = 0.5
MIN_CALIBRATION_VALUE = 0.1
CALIBRATION_WINDOW = 3.0    # seconds of capture per channel

# =========================
# HOLD TIMER
# =========================
HOLD_DURATION = 0.4

# =========================
# VOCABULARY / MENU
# =========================
SUGGESTION_LIMIT = 2
ALPHABET = [chr(c) for c in range(ord("A"), ord("Z") + 1)]
QUICK_PHRASES = ["Yes", "No", "Pain", "Water", "Help", "Thank you"]
FALLBACK_WORDS = [
    "love", "now", "here", "ball", "home", "food", "day", "hello",
    "help", "yes", "no", "water", "please", "thanks",
]
