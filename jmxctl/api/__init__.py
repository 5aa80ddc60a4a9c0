"""API module for jmxctl.

Command functions (``cmd_*``) defined under this package are the single source of truth
for the CLI. Each returns a StageResult and never prints.
"""

__all__ = []
