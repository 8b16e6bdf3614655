"""Configuration data models."""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import DEFAULT_PATHS


@dataclass
class SecurityConfig:
    """Security system configuration settings."""
    # Image analysis
    confidence_threshold: float = 0.5
    detector_backend: str = "opencv"  # opencv, fake
    cascade_path: Optional[str] = None
    scale_factor: float = 1.1
    min_neighbors: int = 3

    # Persistence
    database_path: str = DEFAULT_PATHS["database_file"]

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None
