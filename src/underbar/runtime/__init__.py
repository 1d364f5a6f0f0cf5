"""Configuration and structured logging for underbar.

Example:
    ```python
    from underbar.runtime import init

    init(scheduler='thread', log_level='DEBUG')
    ```
"""

from underbar.runtime._config import (
    SchedulerKind,
    UnderbarConfig,
    get_config,
    init,
)
from underbar.runtime._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

__all__ = [
    'SchedulerKind',
    'UnderbarConfig',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'remove_log_hook',
]
