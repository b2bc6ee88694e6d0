from .config import StatsConfig, configure, get_config, reset_config
from .exceptions import CorrStatError, InvalidArgumentError, LengthMismatchError

__all__ = [
    "StatsConfig",
    "configure",
    "get_config",
    "reset_config",
    "CorrStatError",
    "InvalidArgumentError",
    "LengthMismatchError",
]
