"""
Security module.

Проверка URL перед навигацией.
"""

from .url_validator import URLValidator, URLValidationError

__all__ = ["URLValidator", "URLValidationError"]
