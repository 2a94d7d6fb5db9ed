"""
PageNavigator - навигация страницы на URL.

Ошибки навигации не выбрасываются: они передаются в on_error
как BrowserError, а метод возвращает None.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Callable, Awaitable

from playwright.async_api import (
    Page,
    Response,
    TimeoutError as PlaywrightTimeoutError,
    Error as PlaywrightError,
)

from ..config import BrowserConfig, get_config
from ..constants import PageDefaults
from ..security.url_validator import URLValidator, URLValidationError
from .browser_error import BrowserError, BrowserErrorType
from .page_configurator import PageConfigurator


logger = logging.getLogger(__name__)

OnNavigationError = Callable[[BrowserError], Awaitable[None]]


@dataclass(frozen=True)
class ResponseMeta:
    """
    Ответ на навигацию.
    
    Attributes:
        status_code: HTTP код финального ответа
        final_url: URL финального ответа
        redirect_count: Длина цепочки редиректов
        ok: True для кодов 2xx
    """
    status_code: int
    final_url: str
    redirect_count: int
    ok: bool
    
    @classmethod
    def from_response(cls, response: Response) -> "ResponseMeta":
        redirect_count = 0
        request = response.request.redirected_from
        while request is not None:
            redirect_count += 1
            request = request.redirected_from
        
        return cls(
            status_code=response.status,
            final_url=response.url,
            redirect_count=redirect_count,
            ok=response.ok,
        )


def classify_navigation_error(error: PlaywrightError) -> BrowserErrorType:
    """Определяет категорию ошибки по сообщению Playwright."""
    if isinstance(error, PlaywrightTimeoutError):
        return BrowserErrorType.URL_NAVIGATION_TIMEOUT
    
    message = str(error)
    if "net::ERR_CERT" in message or "SSL" in message:
        return BrowserErrorType.SSL_ERROR
    if "net::ERR_NAME_NOT_RESOLVED" in message or "net::ERR_CONNECTION" in message:
        return BrowserErrorType.RESOURCE_LOAD_FAILURE
    if "net::ERR_ABORTED" in message:
        return BrowserErrorType.EMPTY_PAGE
    return BrowserErrorType.NAVIGATION_ERROR


class PageNavigator:
    """
    Выполняет одну попытку навигации.
    
    Повторные попытки не выполняются - это забота вызывающего кода.
    
    Attributes:
        page_configurator: Настройка viewport и user agent
    """
    
    def __init__(
        self,
        page_configurator: Optional[PageConfigurator] = None,
        config: Optional[BrowserConfig] = None,
        url_validator: Optional[URLValidator] = None,
    ):
        self.config = config or get_config().browser
        self.page_configurator = page_configurator or PageConfigurator(self.config)
        self._url_validator = url_validator or URLValidator()
    
    async def navigate(
        self,
        url: str,
        page: Page,
        on_error: OnNavigationError,
    ) -> Optional[ResponseMeta]:
        """
        Переходит на указанный URL.
        
        Args:
            url: URL для навигации
            page: Страница Playwright
            on_error: Вызывается с BrowserError, если навигация не удалась
            
        Returns:
            ResponseMeta: Ответ сервера, или None если навигация не удалась
        """
        try:
            self._url_validator.validate(url)
        except URLValidationError as e:
            await on_error(BrowserError(
                message=str(e),
                error_type=BrowserErrorType.INVALID_URL,
            ))
            return None
        
        try:
            await self.page_configurator.configure_page(page)
            logger.info(f"Переход на: {url}")
            response = await page.goto(
                url,
                wait_until=PageDefaults.WAIT_UNTIL,
                timeout=self.config.navigation_timeout,
            )
        except PlaywrightError as e:
            await self._report_playwright_error(url, e, on_error)
            return None
        
        if response is None:
            await on_error(BrowserError(
                message=f"Navigation to {url} returned no response",
                error_type=BrowserErrorType.EMPTY_PAGE,
            ))
            return None
        
        response_meta = ResponseMeta.from_response(response)
        if response_meta.status_code >= 400:
            await on_error(BrowserError(
                message=f"Page responded with HTTP {response_meta.status_code}",
                status_code=response_meta.status_code,
                error_type=BrowserErrorType.HTTP_ERROR_CODE,
            ))
            return None
        
        try:
            await page.wait_for_load_state(
                "networkidle",
                timeout=self.config.network_idle_timeout,
            )
        except PlaywrightTimeoutError:
            # Страница может держать постоянные соединения (websocket, polling)
            logger.debug(f"Таймаут network idle для {url}, продолжаем")
        except PlaywrightError as e:
            await self._report_playwright_error(url, e, on_error)
            return None
        
        logger.info(f"Навигация завершена: {response_meta.final_url} ({response_meta.status_code})")
        return response_meta
    
    async def _report_playwright_error(
        self,
        url: str,
        error: PlaywrightError,
        on_error: OnNavigationError,
    ) -> None:
        error_type = classify_navigation_error(error)
        logger.debug(f"Ошибка навигации на {url}: {error_type.value}")
        await on_error(BrowserError(
            message=f"Navigation to {url} failed: {error.message}",
            error_type=error_type,
            stack=str(error),
        ))
