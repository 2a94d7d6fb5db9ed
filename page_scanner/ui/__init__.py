"""
UI module.

Командный интерфейс на rich.
"""

from .cli import CLI, build_page

__all__ = ["CLI", "build_page"]
