"""
Privacy scan - контракт движка cookie/consent и формат результата.

Эвристики обнаружения баннеров согласия реализует внешний движок;
здесь описано только, как Page его вызывает.
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional, Dict, Any, List, Union, Callable, Awaitable, Protocol

from playwright.async_api import Page

from ..browser.browser_error import BrowserError


logger = logging.getLogger(__name__)


@dataclass
class ReloadPageResponse:
    """
    Результат перезагрузки страницы по запросу движка.
    
    Attributes:
        success: Навигация вернула успешный ответ
        error: Ошибка навигации (если была)
    """
    success: bool
    error: Optional[BrowserError] = None


ReloadPageFunc = Callable[[Page], Awaitable[ReloadPageResponse]]


class PrivacyPageScanner(Protocol):
    """
    Движок privacy сканирования.
    
    Возвращает словарь с ключом cookie_collection_consent_results -
    списком результатов по сценариям, каждый может содержать error.
    Может вызывать reload_page_func любое число раз.
    """
    
    async def scan_page_for_privacy(
        self,
        page: Page,
        reload_page_func: ReloadPageFunc,
    ) -> Dict[str, Any]:
        ...


@dataclass
class PrivacyScanResult:
    """
    Результат privacy сканирования.
    
    Attributes:
        results: Вывод движка с http_status_code и seed_uri
        page_response_code: HTTP код исходной навигации
        scanned_url: URL сканирования, если отличается от запрошенного
        error: Ошибка навигации, движка или первого сценария
    """
    results: Optional[Dict[str, Any]] = None
    page_response_code: Optional[int] = None
    scanned_url: Optional[str] = None
    error: Optional[Union[str, BrowserError]] = None
    
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            data[item.name] = value.to_dict() if isinstance(value, BrowserError) else value
        return data


def collect_consent_errors(privacy_results: Dict[str, Any]) -> List[Any]:
    """Возвращает ошибки всех сценариев cookie/consent в исходном порядке."""
    return [
        result["error"]
        for result in privacy_results.get("cookie_collection_consent_results") or []
        if result.get("error") is not None
    ]
