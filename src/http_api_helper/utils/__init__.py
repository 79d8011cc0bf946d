"""Utility modules: logging, connectivity checks, platform info, rendering."""

from .internet_status import (
    ConnectivityProbe,
    DNSConnectivityProbe,
    HTTPConnectivityProbe,
    has_network,
)
from .log_helper import SUCCESS, Log, setup_logging
from .platform_info import FixedPlatform, HostPlatform, PlatformInfo, user_agent_for
from .pretty import frame, to_pretty_string

__all__ = [
    "ConnectivityProbe",
    "DNSConnectivityProbe",
    "HTTPConnectivityProbe",
    "has_network",
    "SUCCESS",
    "Log",
    "setup_logging",
    "FixedPlatform",
    "HostPlatform",
    "PlatformInfo",
    "user_agent_for",
    "frame",
    "to_pretty_string",
]
