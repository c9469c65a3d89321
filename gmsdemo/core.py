"""
GMS Demo Driver
Loads two images, matches ORB features and compares GMS configurations
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from gmsdemo.config import GMS_CONFIGURATIONS, GmsConfig, load_config
from gmsdemo.detection.detector_factory import DetectorKind
from gmsdemo.detection.feature_extractor import detect_and_compute
from gmsdemo.display.surface import DisplaySurface, OpenCVDisplay
from gmsdemo.errors import ErrorKind
from gmsdemo.matching.bf_matcher import compute_matches
from gmsdemo.matching.gms_filter import filter_matches, image_size
from gmsdemo.utils.io_handler import is_valid_image, load_image
from gmsdemo.utils.visualization import draw_matches

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass
class RunSummary:
    """Counts gathered over one run of the demo."""
    keypoints: List[int] = field(default_factory=list)
    candidates: int = 0
    gms_sizes: Dict[str, int] = field(default_factory=dict)
    error: Optional[ErrorKind] = None


class GmsDemo:
    """Main driver comparing GMS configurations over a pair of images"""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 display: Optional[DisplaySurface] = None,
                 base_dir: Union[str, Path] = ".",
                 detector_kind: DetectorKind = DetectorKind.ORB,
                 gms_configurations: Optional[List[GmsConfig]] = None):
        """
        Initialize the demo driver

        Args:
            config: Configuration dictionary (optional, defaults used otherwise)
            display: Display surface (optional, HighGUI windows otherwise)
            base_dir: Directory holding the input images
            detector_kind: Detector family used for both images
            gms_configurations: GMS runs to compare, in display order
        """
        self.config = config if config is not None else load_config()
        self.display = display if display is not None else OpenCVDisplay()
        self.base_dir = Path(base_dir)
        self.detector_kind = detector_kind
        self.gms_configurations = (GMS_CONFIGURATIONS if gms_configurations is None
                                   else gms_configurations)
        self.summary = RunSummary()

    def run(self) -> int:
        """
        Run the full pipeline

        Returns:
            Process exit status
        """
        self.summary = RunSummary()
        inputs = self.config["inputs"]
        source_windows = self.config["display"]["source_windows"]

        # Step 1: Load input images
        image1 = load_image(self.base_dir / inputs["image1"]).value
        image2 = load_image(self.base_dir / inputs["image2"]).value

        # Step 2: Display source images
        self.display.show(source_windows[0], image1)
        self.display.show(source_windows[1], image2)

        # Step 3: Check for valid images
        if not is_valid_image(image1) or not is_valid_image(image2):
            return self._fail(
                ErrorKind.INPUT_MISSING,
                f"Unable to load images. Please check that {inputs['image1']} and "
                f"{inputs['image2']} images exist in {self.base_dir.resolve()}."
            )

        # Step 4: Detect keypoints and compute descriptors
        extracted1 = detect_and_compute(self.detector_kind, image1)
        extracted2 = detect_and_compute(self.detector_kind, image2)
        for extracted in (extracted1, extracted2):
            if not extracted.ok:
                return self._fail(
                    extracted.error,
                    f"Unable to detect and compute keypoints and descriptors with "
                    f"detector type {self.detector_kind.name}."
                )
        features1, features2 = extracted1.value, extracted2.value
        self.summary.keypoints = [len(features1), len(features2)]

        # Step 5: Candidate matches are computed once and shared by every GMS run
        candidates = compute_matches(features1.descriptors, features2.descriptors)
        self.summary.candidates = len(candidates)
        logger.debug(f"{len(candidates)} candidate matches")

        # Step 6: Filter, draw and display each configuration
        size1, size2 = image_size(image1), image_size(image2)
        for gms_config in self.gms_configurations:
            filtered = filter_matches(size1, size2, features1.keypoints, features2.keypoints,
                                      candidates, gms_config)
            if not filtered.ok:
                return self._fail(
                    filtered.error,
                    f"Unable to filter matches with GMS for '{gms_config.window_name}'."
                )

            matches_gms = filtered.value
            self.summary.gms_sizes[gms_config.window_name] = len(matches_gms)
            print(f"MatchGMS Size: {len(matches_gms)}")

            image_matches = draw_matches(image1, features1.keypoints,
                                         image2, features2.keypoints, matches_gms)
            shown = self.display.show(gms_config.window_name, image_matches)
            if not shown.ok:
                logger.warning(f"Skipping display of '{gms_config.window_name}'")
                continue
            self.display.wait_for_user()

        # Step 7: Clean-up
        self.display.close_all()
        return EXIT_SUCCESS

    def _fail(self, error: ErrorKind, message: str) -> int:
        """Report a fatal error on stderr and close any open windows."""
        self.summary.error = error
        print(message, file=sys.stderr)
        self.display.close_all()
        return EXIT_FAILURE
