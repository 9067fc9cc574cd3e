"""Runtime configuration and logging setup."""

from winareas.runtime.debug_config import (
    DebugConfig,
    enabled_union_trace,
    load_debug_config,
    resolve_log_level_name,
)
from winareas.runtime.logging import (
    JsonFormatter,
    configure_logging,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "DebugConfig",
    "JsonFormatter",
    "configure_logging",
    "enabled_union_trace",
    "load_debug_config",
    "resolve_log_level_name",
    "setup_logging",
    "shutdown_logging",
]
