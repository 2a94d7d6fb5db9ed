"""
Browser module.

Модуль управления страницей браузера с использованием Playwright:
запуск браузера, навигация и запуск сканирования.
"""

from .browser_error import BrowserError, BrowserErrorType
from .web_driver import WebDriver, WebDriverError, LaunchError, ConnectError
from .page_configurator import PageConfigurator
from .page_navigator import PageNavigator, ResponseMeta
from .page import Page, PageNotReadyError

__all__ = [
    "BrowserError",
    "BrowserErrorType",
    "WebDriver",
    "WebDriverError",
    "LaunchError",
    "ConnectError",
    "PageConfigurator",
    "PageNavigator",
    "ResponseMeta",
    "Page",
    "PageNotReadyError",
]
