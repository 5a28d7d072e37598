"""
#### Utility Module

Narzędzia pomocnicze współdzielone przez moduły czujników.

#### Główne komponenty:
- `logger`: Polityka logowania, `MessageLogger` i funkcje `debug`/`info`/`warning`/`error`
"""

from .logger import (
    LoggerPolicyPeriod,
    LogLevelType,
    MessageLogger,
    debug,
    error,
    info,
    warning,
)

__all__ = [
    "LoggerPolicyPeriod",
    "LogLevelType",
    "MessageLogger",
    "debug",
    "error",
    "info",
    "warning",
]
