"""Internal constants shared across the package."""

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5010

RECV_BUFFER_SIZE = 8192
RECV_RETRY_DELAY_S = 0.2

RENDER_INTERVAL_S = 0.1
INPUT_POLL_INTERVAL_S = 0.01

HISTORY_CAPACITY = 300
INPUT_LOG_CAPACITY = 200
INPUT_PANE_LINES = 16

# Axis hint only labels log lines; it never selects an action.
SIDE_HINT_TIMEOUT_S = 0.25
PAD_READ_RETRY_DELAY_S = 0.3
PAD_NAME_HINT = "Wacom"

# ------------------------------------------------------------------
# Display conversions (telemetry arrives in SI units)
# ------------------------------------------------------------------

MS_TO_KT = 1.943844
MS_TO_KMH = 3.6
RAD_TO_DEG = 57.2957795
