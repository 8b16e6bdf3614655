"""Cat detector implementations."""

import logging
import os
import random
import time
from typing import Iterable, List, Optional, Tuple, Union

import cv2
import numpy as np

from ..config.defaults import DETECTOR_SETTINGS
from ..logging_config import get_logger, log_with_context
from .exceptions import DetectorError
from .interfaces import CatDetectorInterface

logger = get_logger("cat_detector")

ImageInput = Union[np.ndarray, str]


class OpenCVCatDetector(CatDetectorInterface):
    """Cat detector using OpenCV's frontal cat face Haar cascades."""

    def __init__(self,
                 cascade_path: Optional[str] = None,
                 scale_factor: float = 1.1,
                 min_neighbors: int = 3,
                 min_size: Tuple[int, int] = DETECTOR_SETTINGS["min_size"]):
        self.cascade_path = cascade_path
        self.scale_factor = scale_factor
        self.min_neighbors = min_neighbors
        self.min_size = min_size
        self.blur_kernel_size = DETECTOR_SETTINGS["blur_kernel_size"]
        self._cascade: Optional[cv2.CascadeClassifier] = None

    def load_model(self) -> None:
        """Load the Haar cascade.

        Uses ``cascade_path`` when set, otherwise the cat face cascades that
        ship with OpenCV.

        Raises:
            DetectorError: if no cascade can be loaded
        """
        if self.cascade_path:
            candidates = [self.cascade_path]
        else:
            candidates = [
                os.path.join(cv2.data.haarcascades, DETECTOR_SETTINGS["cascade_file"]),
                os.path.join(cv2.data.haarcascades, DETECTOR_SETTINGS["fallback_cascade_file"]),
            ]

        for path in candidates:
            if not os.path.exists(path):
                logger.debug(f"Cascade not found: {path}")
                continue
            cascade = cv2.CascadeClassifier(path)
            if not cascade.empty():
                self._cascade = cascade
                logger.info(f"Loaded Haar cascade from {path}")
                return

        raise DetectorError(f"No usable cat cascade among: {', '.join(candidates)}")

    @property
    def model_loaded(self) -> bool:
        return self._cascade is not None

    def image_contains_cat(self, image: ImageInput, confidence_threshold: float) -> bool:
        """Return True if any detection reaches the confidence threshold."""
        frame = self._load_image(image)
        start_time = time.time()

        confidences = self.detect_confidences(frame)
        contains_cat = any(confidence >= confidence_threshold for confidence in confidences)

        log_with_context(logger, logging.DEBUG, "Cat detection completed", {
            "detections": len(confidences),
            "best_confidence": f"{max(confidences):.3f}" if confidences else "n/a",
            "threshold": confidence_threshold,
            "detection_time_ms": f"{(time.time() - start_time) * 1000:.1f}",
        })
        return contains_cat

    def detect_confidences(self, frame: np.ndarray) -> List[float]:
        """Run the cascade and return one confidence (0.0-1.0) per detection."""
        if self._cascade is None:
            self.load_model()

        processed = self._preprocess_frame(frame)
        try:
            rects, _, level_weights = self._cascade.detectMultiScale3(
                processed,
                scaleFactor=self.scale_factor,
                minNeighbors=self.min_neighbors,
                minSize=self.min_size,
                flags=cv2.CASCADE_SCALE_IMAGE,
                outputRejectLevels=True
            )
        except cv2.error as e:
            raise DetectorError(f"Haar cascade detection failed: {e}") from e

        if len(rects) == 0:
            return []

        weights = np.asarray(level_weights, dtype=np.float64).reshape(-1)
        return [float(c) for c in 1.0 / (1.0 + np.exp(-weights))]

    def _load_image(self, image: ImageInput) -> np.ndarray:
        if isinstance(image, str):
            frame = cv2.imread(image)
            if frame is None:
                raise DetectorError(f"Cannot read image: {image}")
            return frame

        if image is None:
            raise DetectorError("No image given")
        frame = np.asarray(image)
        if frame.size == 0 or frame.ndim not in (2, 3):
            raise DetectorError(f"Unsupported image shape: {frame.shape}")
        return frame

    def _preprocess_frame(self, frame: np.ndarray) -> np.ndarray:
        """Convert to equalized grayscale for the cascade."""
        if frame.ndim == 3 and frame.shape[2] == 4:
            gray = cv2.cvtColor(frame, cv2.COLOR_BGRA2GRAY)
        elif frame.ndim == 3:
            gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        else:
            gray = frame

        if gray.dtype != np.uint8:
            gray = cv2.convertScaleAbs(gray)

        blurred = cv2.GaussianBlur(gray, (self.blur_kernel_size, self.blur_kernel_size), 0)
        return cv2.equalizeHist(blurred)


class FakeCatDetector(CatDetectorInterface):
    """Detector that answers at random, or from a scripted sequence of results.

    Useful for demos and tests where no real classifier is available.
    """

    def __init__(self, seed: Optional[int] = None, results: Optional[Iterable[bool]] = None):
        self._random = random.Random(seed)
        self._results: List[bool] = list(results) if results is not None else []
        self.calls: List[float] = []

    def queue_result(self, contains_cat: bool) -> None:
        self._results.append(contains_cat)

    def image_contains_cat(self, image: ImageInput, confidence_threshold: float) -> bool:
        self.calls.append(confidence_threshold)
        if self._results:
            return self._results.pop(0)
        return self._random.random() > 0.5


def create_detector(backend: str, cascade_path: Optional[str] = None,
                    scale_factor: float = 1.1, min_neighbors: int = 3) -> CatDetectorInterface:
    """Build the detector named by a config backend."""
    if backend == "opencv":
        return OpenCVCatDetector(cascade_path=cascade_path,
                                 scale_factor=scale_factor,
                                 min_neighbors=min_neighbors)
    if backend == "fake":
        return FakeCatDetector()
    raise ValueError(f"Unknown detector backend: {backend}")
