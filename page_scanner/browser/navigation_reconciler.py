"""
Сопоставление результата навигации с запрошенным URL.

Определяет, успешна ли навигация, и был ли просканирован
не тот URL, который запрашивали (редирект или другое кодирование).
"""

from typing import Optional
from urllib.parse import quote

from ..constants import UrlEncoding
from .page_navigator import ResponseMeta


def encode_uri(url: str) -> str:
    """
    Кодирует URL так же, как encodeURI в браузере.
    
    Браузер возвращает page.url в закодированном виде, поэтому
    запрошенный URL нормализуется перед сравнением.
    """
    return quote(url, safe=UrlEncoding.ENCODE_URI_SAFE)


def navigation_succeeded(response: Optional[ResponseMeta]) -> bool:
    return response is not None and response.ok


def is_scanned_url_diverged(
    response: Optional[ResponseMeta],
    request_url: Optional[str],
    observed_url: str,
) -> bool:
    """
    Проверяет, отличается ли просканированный URL от запрошенного.
    
    Args:
        response: Ответ последней навигации (None, если повторная навигация не удалась)
        request_url: Запрошенный URL
        observed_url: URL, на котором фактически выполнено сканирование
        
    Returns:
        bool: True при редиректе или несовпадении закодированного URL
    """
    if response is not None and response.redirect_count > 0:
        return True
    return request_url is not None and encode_uri(request_url) != observed_url
