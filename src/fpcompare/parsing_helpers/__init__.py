"""Helper modules for text-to-float parsing."""

from .prefix_scanner import ScanResult, scan_float_prefix

__all__ = ["ScanResult", "scan_float_prefix"]
