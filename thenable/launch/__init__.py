"""
Launch policies and the execution substrate they select.
"""

from .policy import Launch, validate_launch
from .config import ThenConfig
from .executor import (
    Executor,
    configure,
    get_config,
    get_executor,
)

__all__ = (
    "Executor",
    "Launch",
    "ThenConfig",
    "configure",
    "get_config",
    "get_executor",
    "validate_launch",
)
