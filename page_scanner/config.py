"""
Конфигурация приложения.

Модуль содержит настройки браузера и сканеров,
загружаемые из переменных окружения.
"""

import os
from typing import Literal, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

from .constants import Timeouts, PageDefaults

# Загружаем переменные окружения из .env файла
load_dotenv()


@dataclass
class BrowserStartOptions:
    """
    Параметры запуска браузера для Page.create().
    
    Attributes:
        browser_executable_path: Путь к исполняемому файлу браузера
        browser_ws_endpoint: Endpoint уже запущенного браузера (CDP)
    """
    browser_executable_path: Optional[str] = None
    browser_ws_endpoint: Optional[str] = None


@dataclass
class BrowserConfig:
    """Конфигурация браузера."""
    
    # Тип браузера: chromium, firefox или webkit
    browser_type: Literal["chromium", "firefox", "webkit"] = "chromium"
    
    # Сканер работает без UI
    headless: bool = True
    
    # Переопределение исполняемого файла браузера
    browser_executable_path: Optional[str] = None
    
    # Подключение к удалённому браузеру вместо запуска
    browser_ws_endpoint: Optional[str] = None
    
    # Размер viewport
    viewport_width: int = PageDefaults.VIEWPORT_WIDTH
    viewport_height: int = PageDefaults.VIEWPORT_HEIGHT
    
    user_agent: str = PageDefaults.USER_AGENT
    
    # Таймауты навигации (мс)
    navigation_timeout: int = Timeouts.NAVIGATION
    network_idle_timeout: int = Timeouts.NETWORK_IDLE
    
    def start_options(self) -> BrowserStartOptions:
        """Возвращает параметры запуска для Page.create()."""
        return BrowserStartOptions(
            browser_executable_path=self.browser_executable_path,
            browser_ws_endpoint=self.browser_ws_endpoint,
        )


@dataclass
class ScannerConfig:
    """Конфигурация сканеров."""
    
    # Путь к axe.min.js, если не передан content_source_path
    axe_source_path: Optional[str] = None


@dataclass
class Config:
    """Основная конфигурация приложения."""
    
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    
    # Уровень логирования
    log_level: str = "INFO"
    
    @classmethod
    def from_env(cls) -> "Config":
        """
        Создаёт конфигурацию из переменных окружения.
        
        Returns:
            Config: Объект конфигурации с настройками из .env
        """
        browser_config = BrowserConfig(
            browser_type=os.getenv("BROWSER_TYPE", "chromium"),
            headless=os.getenv("HEADLESS", "true").lower() == "true",
            browser_executable_path=os.getenv("BROWSER_EXECUTABLE_PATH") or None,
            browser_ws_endpoint=os.getenv("BROWSER_WS_ENDPOINT") or None,
            viewport_width=int(os.getenv("VIEWPORT_WIDTH", str(PageDefaults.VIEWPORT_WIDTH))),
            viewport_height=int(os.getenv("VIEWPORT_HEIGHT", str(PageDefaults.VIEWPORT_HEIGHT))),
            user_agent=os.getenv("USER_AGENT", PageDefaults.USER_AGENT),
            navigation_timeout=int(os.getenv("NAVIGATION_TIMEOUT", str(Timeouts.NAVIGATION))),
            network_idle_timeout=int(os.getenv("NETWORK_IDLE_TIMEOUT", str(Timeouts.NETWORK_IDLE))),
        )
        
        scanner_config = ScannerConfig(
            axe_source_path=os.getenv("AXE_SOURCE_PATH") or None,
        )
        
        return cls(
            browser=browser_config,
            scanner=scanner_config,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# Глобальный экземпляр конфигурации
_config: Config | None = None


def get_config() -> Config:
    """
    Получает глобальный экземпляр конфигурации.
    
    Returns:
        Config: Объект конфигурации
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Сбрасывает глобальную конфигурацию (для тестов)."""
    global _config
    _config = None
