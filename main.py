"""
Page Scanner - accessibility сканирование страницы из командной строки.

Запуск:
    python main.py https://example.com --content-source ./axe.min.js

Требования:
    - Python 3.10+
    - Установленные зависимости: pip install -e .
    - Playwright: playwright install chromium
"""

import argparse
import asyncio
import sys
import logging

from page_scanner.config import get_config
from page_scanner.ui.cli import CLI


# Настройка логирования
def setup_logging(level: str = "INFO") -> None:
    """Настраивает логирование."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    
    # Уменьшаем шум от библиотек
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("playwright").setLevel(logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Проверка веб-страницы на проблемы доступности.")
    parser.add_argument("url", help="URL для сканирования")
    parser.add_argument("--content-source", help="Путь к axe.min.js")
    parser.add_argument("--ws-endpoint", help="Подключиться к запущенному браузеру вместо запуска нового")
    parser.add_argument("--executable", help="Путь к исполняемому файлу браузера")
    parser.add_argument("--json", action="store_true", help="Вывести результат в JSON")
    parser.add_argument("--log-level", default=None, help="Уровень логирования (по умолчанию LOG_LEVEL из .env)")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    """Точка входа в приложение."""
    args = parse_args(argv)
    config = get_config()
    
    setup_logging(args.log_level or config.log_level)
    
    if args.ws_endpoint:
        config.browser.browser_ws_endpoint = args.ws_endpoint
    if args.executable:
        config.browser.browser_executable_path = args.executable
    
    cli = CLI(config)
    return await cli.scan(args.url, args.content_source, as_json=args.json)


def run() -> None:
    """Синхронная обёртка для запуска."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nВыход...")
        sys.exit(130)


if __name__ == "__main__":
    run()
