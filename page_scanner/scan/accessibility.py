"""
Accessibility scan - axe-core поверх страницы Playwright.

Сам набор правил не реализуется: axe-core загружается в страницу
из файла axe.min.js и запускается через page.evaluate().
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Dict, Any, Union

from playwright.async_api import Page

from ..browser.browser_error import BrowserError
from ..config import ScannerConfig, get_config


logger = logging.getLogger(__name__)


class AxeSourceNotFoundError(Exception):
    """Не найден исходный код axe-core."""
    pass


@dataclass
class AxeScanResults:
    """
    Результат accessibility сканирования.
    
    При ошибке заполнены только error, page_response_code и/или scanned_url.
    
    Attributes:
        results: Вывод axe.run()
        page_title: Заголовок страницы
        browser_spec: Версия браузера
        page_response_code: HTTP код навигации
        user_agent: User agent страницы
        browser_resolution: Разрешение viewport
        scanned_url: URL сканирования, если отличается от запрошенного
        error: Ошибка навигации или движка
    """
    results: Optional[Dict[str, Any]] = None
    page_title: Optional[str] = None
    browser_spec: Optional[str] = None
    page_response_code: Optional[int] = None
    user_agent: Optional[str] = None
    browser_resolution: Optional[str] = None
    scanned_url: Optional[str] = None
    error: Optional[Union[str, BrowserError]] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Сериализует результат, пропуская незаполненные поля."""
        data: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            data[item.name] = value.to_dict() if isinstance(value, BrowserError) else value
        return data


class AxeAnalyzer:
    """Запускает axe-core на одной странице."""
    
    RUN_SCRIPT = "async (options) => await window.axe.run(document, options)"
    
    def __init__(
        self,
        page: Page,
        axe_source_path: Optional[str] = None,
        run_options: Optional[Dict[str, Any]] = None,
    ):
        self.page = page
        self.axe_source_path = axe_source_path
        self.run_options = run_options or {"resultTypes": ["violations"]}
    
    def _load_source(self) -> str:
        if not self.axe_source_path:
            raise AxeSourceNotFoundError(
                "Не задан путь к axe-core (AXE_SOURCE_PATH)"
            )
        source_file = Path(self.axe_source_path)
        if not source_file.is_file():
            raise AxeSourceNotFoundError(f"Файл axe-core не найден: {source_file}")
        return source_file.read_text(encoding="utf-8")
    
    async def analyze(self) -> Dict[str, Any]:
        """
        Внедряет axe-core в страницу и запускает анализ.
        
        Returns:
            Dict[str, Any]: Результаты axe.run(), включая поле url
        """
        await self.page.evaluate(self._load_source())
        results = await self.page.evaluate(self.RUN_SCRIPT, self.run_options)
        logger.debug(
            f"axe-core: {len(results.get('violations', []))} нарушений на {results.get('url')}"
        )
        return results


class AxeAnalyzerFactory:
    """Создаёт AxeAnalyzer для страницы."""
    
    def __init__(self, config: Optional[ScannerConfig] = None):
        self.config = config or get_config().scanner
    
    async def create_analyzer(
        self,
        page: Page,
        content_source_path: Optional[str] = None,
    ) -> AxeAnalyzer:
        """
        Args:
            page: Страница Playwright
            content_source_path: Путь к axe.min.js, заменяет путь из конфигурации
        """
        return AxeAnalyzer(page, content_source_path or self.config.axe_source_path)
