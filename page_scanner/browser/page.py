"""
Page - сессия одной страницы браузера для сканирования.

Жизненный цикл: create() -> navigate_to_url() -> scan_for_a11y_issues()
или scan_for_privacy() -> close(). Сканирование выполняется только
на странице, навигация на которую прошла успешно.
"""

import logging
from typing import Optional, TypeVar, Callable, Awaitable, Union

from playwright.async_api import Browser, Page as PlaywrightPage

from ..config import BrowserStartOptions
from ..scan.accessibility import AxeScanResults, AxeAnalyzerFactory
from ..scan.privacy import (
    PrivacyScanResult,
    PrivacyPageScanner,
    ReloadPageResponse,
    collect_consent_errors,
)
from .browser_error import BrowserError, serialize_error
from .navigation_reconciler import is_scanned_url_diverged, navigation_succeeded
from .page_navigator import PageNavigator, ResponseMeta
from .web_driver import WebDriver


ScanResultT = TypeVar("ScanResultT", AxeScanResults, PrivacyScanResult)

module_logger = logging.getLogger(__name__)


class PageNotReadyError(Exception):
    """Сканирование или навигация до create()/navigate_to_url() или после close()."""
    pass


class Page:
    """
    Контроллер страницы браузера.
    
    Ошибка навигации хранится в last_browser_error и возвращается
    как результат сканирования. Исключения выбрасываются только при
    неправильном использовании (PageNotReadyError) и при сбое процесса
    браузера (LaunchError, ConnectError).
    
    Attributes:
        request_url: Последний запрошенный URL
        page: Страница Playwright
        browser: Браузер Playwright
        last_navigation_response: Ответ последней навигации
        last_browser_error: Ошибка последней навигации
    
    Example:
        ```python
        page = Page(web_driver, axe_factory, navigator, privacy_scanner)
        await page.create()
        await page.navigate_to_url("https://example.com")
        result = await page.scan_for_a11y_issues()
        await page.close()
        ```
    """
    
    def __init__(
        self,
        web_driver: WebDriver,
        axe_analyzer_factory: AxeAnalyzerFactory,
        page_navigator: PageNavigator,
        privacy_page_scanner: Optional[PrivacyPageScanner] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._web_driver = web_driver
        self._axe_analyzer_factory = axe_analyzer_factory
        self._page_navigator = page_navigator
        self._privacy_page_scanner = privacy_page_scanner
        self._logger = logger or module_logger
        
        self.request_url: Optional[str] = None
        self.page: Optional[PlaywrightPage] = None
        self.browser: Optional[Browser] = None
        self.last_navigation_response: Optional[ResponseMeta] = None
        self.last_browser_error: Optional[BrowserError] = None
    
    @property
    def user_agent(self) -> str:
        return self._page_navigator.page_configurator.get_user_agent()
    
    @property
    def browser_resolution(self) -> str:
        return self._page_navigator.page_configurator.get_browser_resolution()
    
    @property
    def current_page(self) -> Optional[PlaywrightPage]:
        return self.page
    
    async def create(self, options: Optional[BrowserStartOptions] = None) -> None:
        """
        Запускает браузер (или подключается к нему) и открывает страницу.
        
        Raises:
            LaunchError: Если не удалось запустить браузер
            ConnectError: Если не удалось подключиться к браузеру
        """
        if options is not None and options.browser_ws_endpoint is not None:
            self.browser = await self._web_driver.connect(options.browser_ws_endpoint)
        else:
            executable_path = options.browser_executable_path if options is not None else None
            self.browser = await self._web_driver.launch(executable_path)
        
        self.page = await self.browser.new_page(
            **self._page_navigator.page_configurator.page_options()
        )
    
    async def navigate_to_url(self, url: str) -> None:
        """
        Переходит на URL.
        
        Ошибка навигации не выбрасывается, а записывается в last_browser_error.
        
        Raises:
            PageNotReadyError: Если страница не создана или уже закрыта
        """
        if self.page is None:
            raise PageNotReadyError("Страница не создана. Вызовите create() перед navigate_to_url().")
        
        self.request_url = url
        self.last_browser_error = None
        
        async def on_navigation_error(browser_error: BrowserError) -> None:
            self._logger.error(
                f"Ошибка навигации страницы: {serialize_error(browser_error)}",
                extra={"url": url},
            )
            self.last_browser_error = browser_error
        
        self.last_navigation_response = await self._page_navigator.navigate(
            url, self.page, on_navigation_error
        )
    
    async def scan_for_a11y_issues(self, content_source_path: Optional[str] = None) -> AxeScanResults:
        return await self._run_if_navigation_succeeded(
            lambda: self._scan_page_for_issues(content_source_path),
            AxeScanResults,
        )
    
    async def scan_for_privacy(self) -> PrivacyScanResult:
        return await self._run_if_navigation_succeeded(
            self._scan_page_for_cookies,
            PrivacyScanResult,
        )
    
    async def close(self) -> None:
        """Закрывает браузер. Повторный вызов безопасен."""
        await self._web_driver.close()
        
        self.page = None
        self.browser = None
        self.last_navigation_response = None
        self.last_browser_error = None
    
    def is_open(self) -> bool:
        return (
            self.page is not None
            and not self.page.is_closed()
            and self.last_browser_error is None
            and self.last_navigation_response is not None
        )
    
    async def _run_if_navigation_succeeded(
        self,
        action: Callable[[], Awaitable[ScanResultT]],
        result_type: type,
    ) -> ScanResultT:
        # Записанная ошибка навигации важнее общей проверки is_open()
        if self.last_browser_error is not None:
            return result_type(
                error=self.last_browser_error,
                page_response_code=self.last_browser_error.status_code,
            )
        
        if not self.is_open():
            raise PageNotReadyError("Страница не готова. Вызовите create() и navigate_to_url() перед сканированием.")
        
        return await action()
    
    def _check_scanned_url(
        self,
        result: Union[AxeScanResults, PrivacyScanResult],
        observed_url: str,
    ) -> None:
        if is_scanned_url_diverged(self.last_navigation_response, self.request_url, observed_url):
            self._logger.warning(
                f"Сканирование выполнено на перенаправленной странице: {observed_url}",
                extra={"redirected_url": observed_url},
            )
            result.scanned_url = observed_url
    
    async def _scan_page_for_issues(self, content_source_path: Optional[str] = None) -> AxeScanResults:
        axe_analyzer = await self._axe_analyzer_factory.create_analyzer(self.page, content_source_path)
        try:
            axe_results = await axe_analyzer.analyze()
        except Exception as e:
            self._logger.error(
                f"Ошибка движка axe-core: {serialize_error(e)}",
                extra={"url": self.page.url},
            )
            return AxeScanResults(
                error=f"Axe core engine error. {serialize_error(e)}",
                scanned_url=self.page.url,
            )
        
        scan_results = AxeScanResults(
            results=axe_results,
            page_title=await self.page.title(),
            browser_spec=self.browser.version,
            page_response_code=self.last_navigation_response.status_code,
            user_agent=self.user_agent,
            browser_resolution=self.browser_resolution,
        )
        
        self._check_scanned_url(scan_results, axe_results.get("url"))
        return scan_results
    
    async def _reload_page(self, page: PlaywrightPage) -> ReloadPageResponse:
        await self.navigate_to_url(page.url)
        return ReloadPageResponse(
            success=navigation_succeeded(self.last_navigation_response),
            error=self.last_browser_error,
        )
    
    async def _scan_page_for_cookies(self) -> PrivacyScanResult:
        if self._privacy_page_scanner is None:
            raise PageNotReadyError("Privacy сканер не настроен.")
        
        # Движок может перезагрузить страницу и перезаписать ответ навигации
        navigation_status_code = self.last_navigation_response.status_code
        
        try:
            privacy_results = await self._privacy_page_scanner.scan_page_for_privacy(
                self.page, self._reload_page
            )
        except Exception as e:
            self._logger.error(
                f"Ошибка движка privacy сканирования: {serialize_error(e)}",
                extra={"url": self.page.url},
            )
            return PrivacyScanResult(
                error=f"Privacy scan engine error. {serialize_error(e)}",
                scanned_url=self.page.url,
            )
        
        scan_result = PrivacyScanResult(
            results={
                **privacy_results,
                "http_status_code": navigation_status_code,
                "seed_uri": self.request_url,
            },
            page_response_code=navigation_status_code,
        )
        
        self._check_scanned_url(scan_result, self.page.url)
        
        errors = collect_consent_errors(privacy_results)
        if errors:
            self._logger.error(
                f"Не удалось собрать cookies для тестовых сценариев. Ошибки: {serialize_error(errors)}",
                extra={"url": self.page.url},
            )
            # Клиенту возвращается только первая ошибка
            scan_result.error = errors[0]
        
        return scan_result
