"""Configure file logging from config.json before any command runs."""

from jmxctl.api.config.JmxctlConfig import JmxctlConfig
from jmxctl.utils.logger import configure_logging


def _configure_logging() -> None:
    """Set up jmxctl.log under the jmxctl home.

    A broken config file still gets default logging; the command itself reports the
    configuration error.
    """
    home = JmxctlConfig.get_home_dir()
    try:
        log = JmxctlConfig.load().log
    except ValueError:
        configure_logging(home)
        return
    configure_logging(home, level=log.level, max_bytes=log.max_bytes, backup_count=log.backup_count)
