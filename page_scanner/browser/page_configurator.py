"""
PageConfigurator - настройка страницы браузера.

User agent задаётся при создании страницы (контекста), чтобы его
видели и сервер, и navigator.userAgent внутри страницы.
"""

import logging
from typing import Optional, Dict, Any

from playwright.async_api import Page

from ..config import BrowserConfig, get_config


logger = logging.getLogger(__name__)


class PageConfigurator:
    """Задаёт viewport и user agent страницы."""
    
    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or get_config().browser
    
    def get_user_agent(self) -> str:
        return self.config.user_agent
    
    def get_browser_resolution(self) -> str:
        return f"{self.config.viewport_width}x{self.config.viewport_height}"
    
    def _viewport(self) -> Dict[str, int]:
        return {
            "width": self.config.viewport_width,
            "height": self.config.viewport_height,
        }
    
    def page_options(self) -> Dict[str, Any]:
        """Параметры для browser.new_page()."""
        return {
            "user_agent": self.config.user_agent,
            "viewport": self._viewport(),
        }
    
    async def configure_page(self, page: Page) -> None:
        """Восстанавливает viewport перед навигацией."""
        await page.set_viewport_size(self._viewport())
        logger.debug(f"Страница настроена: {self.get_browser_resolution()}")
