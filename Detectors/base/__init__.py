"""Base detector module - Abstract base class for grammar-driven detectors"""

from Detectors.base.base_detector import BaseMotifDetector, MotifGrammar

__all__ = ["BaseMotifDetector", "MotifGrammar"]
