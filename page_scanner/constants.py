"""
Централизованные константы для page-scanner.

Все magic numbers и hardcoded values собраны здесь
для удобства настройки и поддержки.
"""

from typing import Set


class Timeouts:
    """Таймауты в миллисекундах."""
    
    # Навигация
    NAVIGATION = 30000  # Ожидание ответа на goto()
    NETWORK_IDLE = 10000  # Ожидание network idle после навигации


class PageDefaults:
    """Параметры страницы по умолчанию."""
    
    VIEWPORT_WIDTH = 1920
    VIEWPORT_HEIGHT = 1080
    
    # Wait condition для page.goto()
    WAIT_UNTIL = "load"
    
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 WebInsightsScanner"
    )


class UrlEncoding:
    """Символы, которые encodeURI оставляет без изменений (кроме букв и цифр)."""
    
    ENCODE_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


class Security:
    """Настройки безопасности."""
    
    # Разрешённые схемы URL
    ALLOWED_URL_SCHEMES: Set[str] = {"http", "https"}
    
    # Запрещённые схемы (явный blacklist)
    BLOCKED_URL_SCHEMES: Set[str] = {
        "file",
        "javascript",
        "data",
        "vbscript",
        "about",  # кроме about:blank
    }
    
    # Разрешённые исключения
    ALLOWED_SPECIAL_URLS: Set[str] = {"about:blank"}
