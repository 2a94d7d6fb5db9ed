"""
BrowserError - описание неудачной навигации.

Ошибка навигации хранится как данные (а не выбрасывается),
чтобы вызывающий код мог проверить состояние страницы.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class BrowserErrorType(Enum):
    """
    Категория ошибки навигации.
    
    Values:
        HTTP_ERROR_CODE: Сервер ответил кодом >= 400
        URL_NAVIGATION_TIMEOUT: Таймаут загрузки страницы
        SSL_ERROR: Ошибка сертификата
        RESOURCE_LOAD_FAILURE: Хост недоступен или соединение сброшено
        EMPTY_PAGE: Навигация не вернула ответ
        INVALID_URL: URL отклонён валидатором
        NAVIGATION_ERROR: Прочие ошибки браузера
    """
    HTTP_ERROR_CODE = "HttpErrorCode"
    URL_NAVIGATION_TIMEOUT = "UrlNavigationTimeout"
    SSL_ERROR = "SslError"
    RESOURCE_LOAD_FAILURE = "ResourceLoadFailure"
    EMPTY_PAGE = "EmptyPage"
    INVALID_URL = "InvalidUrl"
    NAVIGATION_ERROR = "NavigationError"


@dataclass
class BrowserError:
    """
    Структурированная ошибка навигации.
    
    Attributes:
        message: Описание ошибки
        status_code: HTTP код ответа (если был получен)
        error_type: Категория ошибки
        stack: Исходное сообщение браузера
    """
    message: str
    status_code: Optional[int] = None
    error_type: BrowserErrorType = BrowserErrorType.NAVIGATION_ERROR
    stack: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "errorType": self.error_type.value,
            "message": self.message,
        }
        if self.status_code is not None:
            data["statusCode"] = self.status_code
        if self.stack is not None:
            data["stack"] = self.stack
        return data


def serialize_error(error: Any) -> str:
    """
    Сериализует ошибку в JSON для логов и сообщений об ошибках.
    
    Args:
        error: Исключение или BrowserError
        
    Returns:
        str: JSON строка
    """
    if isinstance(error, BrowserError):
        return json.dumps(error.to_dict(), ensure_ascii=False)
    if isinstance(error, BaseException):
        return json.dumps(
            {"name": type(error).__name__, "message": str(error)},
            ensure_ascii=False,
        )
    return json.dumps(error, ensure_ascii=False, default=str)
