"""
Page Scanner - accessibility и privacy сканирование страниц.

Этот модуль предоставляет контроллер страницы браузера на Playwright,
который навигирует на URL и запускает сканеры только после успешной навигации.
"""

import logging

from .config import Config, BrowserStartOptions

# Browser module
from .browser import Page, PageNotReadyError, BrowserError, WebDriver, PageNavigator

# Scan module
from .scan import AxeScanResults, AxeAnalyzerFactory, PrivacyScanResult, ReloadPageResponse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    # Config
    "Config",
    "BrowserStartOptions",
    # Browser
    "Page",
    "PageNotReadyError",
    "BrowserError",
    "WebDriver",
    "PageNavigator",
    # Scan
    "AxeScanResults",
    "AxeAnalyzerFactory",
    "PrivacyScanResult",
    "ReloadPageResponse",
]
