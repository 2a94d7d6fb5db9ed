"""
WebDriver - запуск и подключение к браузеру через Playwright.

Владеет процессом браузера: Page получает от него Browser
и открывает на нём страницу.
"""

import logging
from typing import Optional

from playwright.async_api import (
    async_playwright,
    Playwright,
    Browser,
    Error as PlaywrightError,
)

from ..config import BrowserConfig, get_config


logger = logging.getLogger(__name__)


class WebDriverError(Exception):
    """Базовое исключение для ошибок процесса браузера."""
    pass


class LaunchError(WebDriverError):
    """Не удалось запустить браузер."""
    pass


class ConnectError(WebDriverError):
    """Не удалось подключиться к запущенному браузеру."""
    pass


class WebDriver:
    """
    Управляет процессом браузера.
    
    Example:
        ```python
        driver = WebDriver()
        browser = await driver.launch()
        ...
        await driver.close()
        ```
    """
    
    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or get_config().browser
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
    
    @property
    def browser(self) -> Optional[Browser]:
        return self._browser
    
    async def launch(self, executable_path: Optional[str] = None) -> Browser:
        """
        Запускает новый процесс браузера.
        
        Args:
            executable_path: Путь к исполняемому файлу браузера
            
        Returns:
            Browser: Запущенный браузер
            
        Raises:
            LaunchError: Если не удалось запустить браузер
        """
        try:
            logger.info(f"Запуск браузера: {self.config.browser_type}")
            browser_type = await self._get_browser_type()
            self._browser = await browser_type.launch(
                headless=self.config.headless,
                executable_path=executable_path,
                args=[
                    "--disable-dev-shm-usage",
                    "--no-first-run",
                    "--no-default-browser-check",
                ],
            )
            logger.info(f"Браузер запущен, версия {self._browser.version}")
            return self._browser
        except PlaywrightError as e:
            logger.error(f"Ошибка запуска браузера: {e}")
            await self._stop_playwright()
            raise LaunchError(f"Не удалось запустить браузер: {e}") from e
    
    async def connect(self, ws_endpoint: str) -> Browser:
        """
        Подключается к уже запущенному браузеру по CDP.
        
        Args:
            ws_endpoint: WebSocket endpoint браузера
            
        Returns:
            Browser: Подключённый браузер
            
        Raises:
            ConnectError: Если браузер недоступен
        """
        try:
            logger.info(f"Подключение к браузеру: {ws_endpoint}")
            playwright = await self._start_playwright()
            self._browser = await playwright.chromium.connect_over_cdp(ws_endpoint)
            return self._browser
        except PlaywrightError as e:
            logger.error(f"Ошибка подключения к браузеру: {e}")
            await self._stop_playwright()
            raise ConnectError(f"Не удалось подключиться к браузеру {ws_endpoint}: {e}") from e
    
    async def close(self) -> None:
        """
        Закрывает браузер и останавливает Playwright.
        
        Повторный вызов ничего не делает.
        """
        try:
            if self._browser:
                await self._browser.close()
                logger.info("Браузер закрыт")
        except PlaywrightError as e:
            logger.error(f"Ошибка при закрытии браузера: {e}")
        finally:
            self._browser = None
            await self._stop_playwright()
    
    async def _start_playwright(self) -> Playwright:
        if self._playwright is None:
            self._playwright = await async_playwright().start()
        return self._playwright
    
    async def _get_browser_type(self):
        playwright = await self._start_playwright()
        return getattr(playwright, self.config.browser_type, playwright.chromium)
    
    async def _stop_playwright(self) -> None:
        if self._playwright:
            try:
                await self._playwright.stop()
            except PlaywrightError as e:
                logger.error(f"Ошибка остановки Playwright: {e}")
            self._playwright = None
