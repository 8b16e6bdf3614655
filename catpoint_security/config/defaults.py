"""Default configuration values and constants."""

DETECTOR_BACKENDS = ("opencv", "fake")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# File paths
DEFAULT_PATHS = {
    "config_file": "catpoint.json",
    "database_file": "data/catpoint.db",
}

# Haar cascade settings
DETECTOR_SETTINGS = {
    "cascade_file": "haarcascade_frontalcatface_extended.xml",
    "fallback_cascade_file": "haarcascade_frontalcatface.xml",
    "min_size": (30, 30),
    "blur_kernel_size": 3,
}
