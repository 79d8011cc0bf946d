"""Severity-tagged log sinks used by the API helper.

:class:`Log` forwards pre-formatted messages to a standard library
logger under three severities: info, success and error. Success is a
custom level between INFO and WARNING so it can be filtered or styled
on its own. Release-mode suppression is not handled here; callers
decide whether to log at all.
"""

import logging
import sys
from typing import Any, Optional

from ..config.settings import get_settings

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

logger = logging.getLogger(__name__)


class Log:
    """Three-sink diagnostic logger.

    :param target: Logger to write to, defaults to this module's logger
    :type target: Optional[logging.Logger]
    """

    def __init__(self, target: Optional[logging.Logger] = None):
        self._logger = target or logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, message: Any) -> None:
        self._logger.info("%s", message)

    def success(self, message: Any) -> None:
        self._logger.log(SUCCESS, "%s", message)

    def error(self, message: Any) -> None:
        self._logger.error("%s", message)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings.

    Installs a stream handler on stderr when none is present and sets
    the root level. Intended for scripts and examples; libraries
    embedding the helper configure logging themselves.

    :param level: Level name; defaults to ``Settings.log_level``
    :type level: Optional[str]
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)
