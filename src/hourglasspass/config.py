# Shared application constants

LOGGER_NAME = "hourglasspass"

# --- Logging Configuration ---
# Level is read from the environment the first time a logger is used.
LOG_LEVEL_ENV = "HOURGLASSPASS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# --- Codec Defaults ---
# Letter written for blank (zero-valued) letters when normalizing.
DEFAULT_GARBAGE_CHAR = "Z"
