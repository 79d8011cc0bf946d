"""Request configuration model.

A :class:`RequestConfig` is built once per
:class:`~http_api_helper.api_helper.APIHelper` and is immutable
afterwards. Every call derives its headers and target URI from it.
"""

from typing import Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config.settings import get_settings


class RequestConfig(BaseModel):
    """Immutable configuration for one API endpoint.

    :param base_url: Scheme and host, e.g. ``https://dummyjson.com``
    :type base_url: str
    :param end_point: Path appended verbatim to ``base_url``
    :type end_point: str
    :param service_name: Human-readable label used in log output
    :type service_name: str
    :param check_internet: Query the connectivity probe before each call
    :type check_internet: bool
    :param print_request: Log verb, URI and body before sending
    :type print_request: bool
    :param print_response: Log endpoint, status and body on receipt
    :type print_response: bool
    :param print_headers: Log the computed header set
    :type print_headers: bool
    :param is_release_mode: Suppress all diagnostics regardless of the
                            individual toggles
    :type is_release_mode: bool
    :param additional_header: Extra headers merged over the defaults
    :type additional_header: Optional[Dict[str, str]]
    :param use_only_this_header: Exact header set to send, replacing the
                                 defaults and ``additional_header``
    :type use_only_this_header: Optional[Dict[str, str]]
    :param timeout_duration_in_seconds: Hard limit for the transport call
    :type timeout_duration_in_seconds: int
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    end_point: str
    service_name: str = " "
    check_internet: bool = True
    print_request: bool = True
    print_response: bool = False
    print_headers: bool = False
    is_release_mode: bool = Field(
        default_factory=lambda: get_settings().release_mode
    )
    additional_header: Optional[Dict[str, str]] = None
    use_only_this_header: Optional[Dict[str, str]] = None
    timeout_duration_in_seconds: int = Field(
        default_factory=lambda: get_settings().default_timeout_seconds
    )

    @field_validator("timeout_duration_in_seconds")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("timeout_duration_in_seconds must be positive")
        return v

    @property
    def api_uri(self) -> httpx.URL:
        """Target URI: ``base_url`` and ``end_point`` concatenated.

        :return: Parsed request URL
        :rtype: httpx.URL
        """
        return httpx.URL(self.base_url + self.end_point)
