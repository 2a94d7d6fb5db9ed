"""
CLI - командный интерфейс для Page Scanner.

Использует rich для вывода результатов сканирования.
"""

import json
import logging
from collections import Counter
from typing import Optional, Dict, Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from ..browser import Page, PageNavigator, PageConfigurator, WebDriver
from ..browser.web_driver import WebDriverError
from ..config import Config, get_config
from ..scan import AxeAnalyzerFactory, AxeScanResults

logger = logging.getLogger(__name__)


IMPACT_STYLES = {
    "critical": "bold red",
    "serious": "red",
    "moderate": "yellow",
    "minor": "dim",
}


def build_page(config: Config) -> Page:
    """Собирает Page со стандартными Playwright-зависимостями."""
    page_configurator = PageConfigurator(config.browser)
    return Page(
        web_driver=WebDriver(config.browser),
        axe_analyzer_factory=AxeAnalyzerFactory(config.scanner),
        page_navigator=PageNavigator(page_configurator, config.browser),
    )


class CLI:
    """
    Запускает accessibility сканирование одного URL.
    
    Example:
        ```python
        cli = CLI()
        exit_code = await cli.scan("https://example.com")
        ```
    """
    
    def __init__(self, config: Optional[Config] = None, console: Optional[Console] = None):
        self.config = config or get_config()
        self.console = console or Console()
    
    async def scan(
        self,
        url: str,
        content_source_path: Optional[str] = None,
        as_json: bool = False,
    ) -> int:
        """
        Сканирует страницу и выводит результат.
        
        Returns:
            int: Код выхода (0 - успех, 1 - ошибка сканирования, 2 - сбой браузера)
        """
        page = build_page(self.config)
        try:
            with self.console.status(f"[cyan]Сканирование {url}...[/cyan]", spinner="dots"):
                await page.create(self.config.browser.start_options())
                await page.navigate_to_url(url)
                result = await page.scan_for_a11y_issues(content_source_path)
        except WebDriverError as e:
            logger.error(f"Сбой браузера: {e}")
            self.console.print(f"[bold red]Сбой браузера:[/bold red] {e}")
            return 2
        finally:
            await page.close()
        
        if as_json:
            self.console.print_json(json.dumps(result.to_dict(), default=str))
        else:
            self._print_result(url, result)
        
        return 1 if result.error is not None else 0
    
    def _print_result(self, url: str, result: AxeScanResults) -> None:
        """Выводит итоговый результат сканирования."""
        if result.error is not None:
            error = result.error.to_dict() if hasattr(result.error, "to_dict") else result.error
            result_text = (
                f"[bold red]Сканирование не выполнено[/bold red]\n\n"
                f"[bold]URL:[/bold] {url}\n"
                f"[bold]Ошибка:[/bold] {error}"
            )
            if result.page_response_code is not None:
                result_text += f"\n[dim]Код ответа: {result.page_response_code}[/dim]"
            self.console.print(Panel(result_text, title="Результат", border_style="red", box=box.ROUNDED))
            return
        
        violations = result.results.get("violations", [])
        result_text = (
            f"[bold green]Сканирование завершено[/bold green]\n\n"
            f"[bold]URL:[/bold] {url}\n"
            f"[bold]Заголовок:[/bold] {result.page_title}\n"
            f"[dim]Код ответа: {result.page_response_code} | "
            f"Браузер: {result.browser_spec} | Разрешение: {result.browser_resolution}[/dim]"
        )
        if result.scanned_url:
            result_text += f"\n[yellow]Просканирована перенаправленная страница:[/yellow] {result.scanned_url}"
        
        self.console.print()
        self.console.print(Panel(result_text, title="Результат", border_style="green", box=box.ROUNDED))
        self.console.print(self._build_violations_table(violations))
        self.console.print()
    
    def _build_violations_table(self, violations: list[Dict[str, Any]]) -> Table:
        table = Table(
            title=f"Нарушения: {len(violations)}",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Критичность", width=10)
        table.add_column("Правила", justify="right")
        table.add_column("Элементы", justify="right")
        
        rules = Counter(v.get("impact") or "unknown" for v in violations)
        nodes = Counter()
        for violation in violations:
            nodes[violation.get("impact") or "unknown"] += len(violation.get("nodes", []))
        
        for impact, count in rules.most_common():
            style = IMPACT_STYLES.get(impact, "white")
            table.add_row(f"[{style}]{impact}[/{style}]", str(count), str(nodes[impact]))
        
        return table
