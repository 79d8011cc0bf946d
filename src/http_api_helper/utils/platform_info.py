"""Host platform detection for the ``User-Agent`` header.

Only two categories are distinguished: the iOS family and everything
else. The capability is injectable so tests do not depend on the
interpreter they run on.
"""

import sys
from dataclasses import dataclass
from typing import Protocol


class PlatformInfo(Protocol):
    """Answers which platform category the process runs on."""

    @property
    def is_ios(self) -> bool:
        ...


@dataclass(frozen=True)
class FixedPlatform:
    """Platform info with a preset answer."""

    is_ios: bool = False


class HostPlatform:
    """Platform info read from the running interpreter."""

    @property
    def is_ios(self) -> bool:
        return sys.platform == "ios"


def user_agent_for(platform: PlatformInfo) -> str:
    """Return the ``User-Agent`` value for a platform category."""
    return "iOS" if platform.is_ios else "Android"
