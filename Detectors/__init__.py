"""
G-Quadruplex Motif Detectors Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Contains the grammar-driven detector classes:
BaseMotifDetector, GQuadruplexDetector
"""

# Import base detector
from Detectors.base.base_detector import BaseMotifDetector, MotifGrammar

# Import detector classes from submodules
from Detectors.gquad.detector import GQuadruplexDetector, scan

__all__ = [
    "BaseMotifDetector",
    "MotifGrammar",
    "GQuadruplexDetector",
    "scan",
]

__version__ = "2025.1"
__author__ = "Dr. Venkata Rajesh Yella"
