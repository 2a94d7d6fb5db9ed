"""
URL Validator - проверка URL перед навигацией.

Сканер открывает только веб-страницы. Отклоняются:
- file:// - доступ к локальной файловой системе
- javascript: - выполнение произвольного JS
- data: - инъекция данных
- vbscript: - выполнение VBScript
"""

import logging
from urllib.parse import urlparse

from ..constants import Security


logger = logging.getLogger(__name__)


class URLValidationError(Exception):
    """Ошибка валидации URL."""
    pass


class URLValidator:
    """
    Валидатор URL для навигации сканера.
    
    Example:
        ```python
        validator = URLValidator()
        
        validator.validate("https://example.com")  # OK
        validator.validate("file:///etc/passwd")  # URLValidationError
        ```
    """
    
    def __init__(
        self,
        allowed_schemes: set[str] | None = None,
        blocked_schemes: set[str] | None = None,
        allowed_special: set[str] | None = None
    ):
        """
        Инициализирует валидатор.
        
        Args:
            allowed_schemes: Разрешённые схемы (по умолчанию http, https)
            blocked_schemes: Явно запрещённые схемы
            allowed_special: Специальные разрешённые URL (например about:blank)
        """
        self.allowed_schemes = allowed_schemes or Security.ALLOWED_URL_SCHEMES
        self.blocked_schemes = blocked_schemes or Security.BLOCKED_URL_SCHEMES
        self.allowed_special = allowed_special or Security.ALLOWED_SPECIAL_URLS
    
    def validate(self, url: str) -> bool:
        """
        Проверяет URL.
        
        В отличие от интерактивного ввода, сканеру нужен абсолютный URL,
        поэтому отсутствие схемы тоже ошибка.
        
        Args:
            url: URL для проверки
            
        Returns:
            bool: True если URL можно открыть
            
        Raises:
            URLValidationError: Если URL опасен или невалиден
        """
        if not url or not url.strip():
            raise URLValidationError("URL не может быть пустым")
        
        if url.lower().strip() in self.allowed_special:
            logger.debug(f"URL разрешён как специальный: {url}")
            return True
        
        try:
            parsed = urlparse(url.strip())
        except ValueError as e:
            raise URLValidationError(f"Невалидный URL: {url}. Ошибка: {e}") from e
        
        scheme = parsed.scheme.lower()
        
        if scheme in self.blocked_schemes:
            logger.warning(f"Заблокирована схема URL: {scheme} в {url}")
            raise URLValidationError(f"Схема URL '{scheme}' запрещена")
        
        if scheme not in self.allowed_schemes:
            raise URLValidationError(
                f"Схема URL '{scheme}' не разрешена. "
                f"Разрешённые схемы: {', '.join(sorted(self.allowed_schemes))}"
            )
        
        if not parsed.netloc:
            raise URLValidationError(f"В URL нет хоста: {url}")
        
        logger.debug(f"URL прошёл валидацию: {url}")
        return True
