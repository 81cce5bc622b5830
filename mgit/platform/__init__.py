"""Platform abstraction layer."""

from .paths import (
    home,
    user_config_dir,
)
from .process import (
    CommandResult,
    ExternalCommandError,
    execute,
)

__all__ = [
    # paths
    "home",
    "user_config_dir",
    # process
    "CommandResult",
    "ExternalCommandError",
    "execute",
]
