"""
Scan engines.

Accessibility (axe-core) и privacy (cookie/consent) сканирование.
"""

from .accessibility import AxeScanResults, AxeAnalyzer, AxeAnalyzerFactory, AxeSourceNotFoundError
from .privacy import (
    PrivacyScanResult,
    PrivacyPageScanner,
    ReloadPageResponse,
    ReloadPageFunc,
    collect_consent_errors,
)

__all__ = [
    "AxeScanResults",
    "AxeAnalyzer",
    "AxeAnalyzerFactory",
    "AxeSourceNotFoundError",
    "PrivacyScanResult",
    "PrivacyPageScanner",
    "ReloadPageResponse",
    "ReloadPageFunc",
    "collect_consent_errors",
]
