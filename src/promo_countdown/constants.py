"""Global constants for the application."""

# Time units
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

# Animation schedules (frame count, frame duration in milliseconds)
PULSE_FRAME_COUNT = 30  # 3 seconds of looping pulse animation
PULSE_FRAME_DURATION = 100  # 10 fps
COUNTDOWN_FRAME_COUNT = 60  # One minute of real countdown
COUNTDOWN_FRAME_DURATION = 1000  # One frame per real second
EXPIRED_FRAME_COUNT = 20
EXPIRED_FRAME_DURATION = 100

# Pulse effect (scale = sin(index / period) * amplitude + 1)
COUNTDOWN_PULSE_PERIOD = 5.0
COUNTDOWN_PULSE_AMPLITUDE = 0.05
EXPIRED_PULSE_PERIOD = 3.0
EXPIRED_PULSE_AMPLITUDE = 0.1

# Defaults for configuration
DEFAULT_TARGET_DATE = "2025-11-28T00:00:00"
DEFAULT_EVENT_NAME = "BLACK FRIDAY"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
