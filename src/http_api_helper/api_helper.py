"""Request execution and result mapping.

:class:`APIHelper` turns a configured verb and optional body into exactly
one :data:`~http_api_helper.result.Outcome`. Expected failure modes
(no network, timeout, non-2xx status, anything raised while building,
sending or decoding) come back as a
:class:`~http_api_helper.result.Failure`; they are never raised.

Example::

    helper = APIHelper(
        RequestConfig(base_url="https://dummyjson.com", end_point="/products")
    )
    outcome = await helper.get_api()
    outcome.fold(on_failure=print, on_success=handle)
"""

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Union

import httpx

from .exceptions import (
    NoInternetException,
    TimeoutException,
    UnexpectedStatusCodeException,
    UnhandledException,
)
from .models import RequestConfig
from .result import Failure, Outcome, Success
from .utils.internet_status import ConnectivityProbe, DNSConnectivityProbe
from .utils.log_helper import Log
from .utils.platform_info import HostPlatform, PlatformInfo, user_agent_for
from .utils.pretty import frame, to_pretty_string

Body = Union[Mapping[str, Any], str, bytes]

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HTTPMethod(Enum):
    """Supported verbs.

    ``MULTIPART_POST`` is only reachable through
    :meth:`APIHelper.post_multipart_api`.
    """

    POST = "POST"
    GET = "GET"
    DELETE = "DELETE"
    PATCH = "PATCH"
    PUT = "PUT"
    MULTIPART_POST = "MULTIPART_POST"

    @property
    def content_type(self) -> str:
        """Default ``Content-Type`` for this verb.

        PUT has no entry of its own and gets the JSON default.
        """
        return _CONTENT_TYPES.get(self, JSON_CONTENT_TYPE)

    @property
    def http_verb(self) -> str:
        """Method name sent on the wire."""
        return "POST" if self is HTTPMethod.MULTIPART_POST else self.value


_CONTENT_TYPES: Dict[HTTPMethod, str] = {
    HTTPMethod.POST: FORM_CONTENT_TYPE,
    HTTPMethod.GET: JSON_CONTENT_TYPE,
    HTTPMethod.DELETE: JSON_CONTENT_TYPE,
    HTTPMethod.PATCH: FORM_CONTENT_TYPE,
    HTTPMethod.MULTIPART_POST: FORM_CONTENT_TYPE,
}


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


class APIHelper:
    """Executes requests against one configured endpoint.

    The helper holds no per-call mutable state, so any number of calls
    on one instance may run concurrently.

    :param config: Endpoint, header, timeout and logging configuration
    :type config: RequestConfig
    :param probe: Reachability check consulted when ``check_internet``
                  is set; defaults to a DNS lookup built from settings
    :type probe: Optional[ConnectivityProbe]
    :param platform: Platform capability used for the ``User-Agent``
    :type platform: Optional[PlatformInfo]
    :param log: Diagnostic sinks
    :type log: Optional[Log]
    :param transport: Transport for the per-call clients
    :type transport: Optional[httpx.AsyncBaseTransport]
    :param client: Shared client used for every call instead of a fresh
                   one; the helper never closes it
    :type client: Optional[httpx.AsyncClient]
    """

    def __init__(
        self,
        config: RequestConfig,
        *,
        probe: Optional[ConnectivityProbe] = None,
        platform: Optional[PlatformInfo] = None,
        log: Optional[Log] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.probe = probe or DNSConnectivityProbe.from_settings()
        self.platform = platform or HostPlatform()
        self.log = log or Log(
            logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        )
        self._transport = transport
        self._client = client

    @property
    def api_uri(self) -> httpx.URL:
        return self.config.api_uri

    @property
    def _quiet(self) -> bool:
        return self.config.is_release_mode

    def get_headers(self, method: HTTPMethod) -> Dict[str, str]:
        """Compute the header set for a verb.

        ``use_only_this_header`` replaces everything when configured.
        Otherwise the verb's content type, a platform ``User-Agent`` and
        ``additional_header`` are combined, in that order.

        :param method: Verb being sent
        :type method: HTTPMethod
        :return: Headers to send
        :rtype: Dict[str, str]
        """
        if self.config.use_only_this_header is not None:
            return dict(self.config.use_only_this_header)

        headers: Dict[str, str] = {"Content-Type": method.content_type}
        headers["User-Agent"] = user_agent_for(self.platform)

        if self.config.additional_header:
            headers.update(self.config.additional_header)

        if self.config.print_headers and not self._quiet:
            self.log.error(f"*** HEADER in {self.config.end_point} API ***")
            self.log.error(to_pretty_string(headers))

        return headers

    async def get_api(self) -> Outcome:
        return await self._execute_request(HTTPMethod.GET)

    async def post_api(
        self, body: Mapping[str, Any], is_form_data: bool = False
    ) -> Outcome:
        """POST ``body`` JSON-encoded, or form-encoded when ``is_form_data``.

        The header keeps POST's form content type either way.
        """
        return await self._execute_request(
            HTTPMethod.POST, body=body, is_form_data=is_form_data
        )

    async def put_api(self, body: Body) -> Outcome:
        return await self._execute_request(HTTPMethod.PUT, body=body)

    async def patch_api(self, body: Body) -> Outcome:
        return await self._execute_request(HTTPMethod.PATCH, body=body)

    async def delete_api(self) -> Outcome:
        return await self._execute_request(HTTPMethod.DELETE)

    async def post_multipart_api(
        self,
        body: Mapping[str, str],
        files: Mapping[str, Union[str, "os.PathLike[str]"]],
    ) -> Outcome:
        """Upload files as ``multipart/form-data``.

        Each ``files`` entry maps a form field name to a path whose
        contents are read in a worker thread and sent as one file part.
        ``body`` entries become plain fields.
        No connectivity check, custom headers or timeout apply here.

        :param body: Plain form fields
        :type body: Mapping[str, str]
        :param files: Field name to file-system path
        :type files: Mapping[str, Union[str, os.PathLike]]
        :return: Decoded object on 2xx, typed failure otherwise
        :rtype: Outcome
        """
        try:
            parts = []
            for field, path in files.items():
                content = await asyncio.to_thread(_read_file, path)
                parts.append((field, (os.path.basename(path), content)))

            async with self._open_client(timeout=None) as client:
                response = await client.request(
                    HTTPMethod.MULTIPART_POST.http_verb,
                    self.api_uri,
                    data=dict(body),
                    files=parts,
                    timeout=None,
                )

            if is_success_status(response.status_code):
                return Success(self._decode(response))
            return Failure(UnexpectedStatusCodeException(response))
        except Exception as e:
            if not self._quiet:
                self.log.error(f"Error: {e!r}")
            return Failure(UnhandledException(e))

    async def _execute_request(
        self,
        method: HTTPMethod,
        body: Optional[Body] = None,
        is_form_data: bool = False,
    ) -> Outcome:
        if method is HTTPMethod.MULTIPART_POST:
            raise NotImplementedError(
                "Multipart post is not supported here, use post_multipart_api"
            )

        timeout = self.config.timeout_duration_in_seconds
        try:
            headers = self.get_headers(method)
            self._print_api_request(method, body)

            if self.config.check_internet and not await self.probe.has_network():
                if not self._quiet:
                    self.log.error(
                        f"No internet, skipped {method.value} {self.api_uri}"
                    )
                return Failure(NoInternetException())

            request_kwargs: Dict[str, Any] = {"headers": headers}
            if method is HTTPMethod.POST:
                if is_form_data:
                    request_kwargs["data"] = body
                else:
                    request_kwargs["content"] = json.dumps(body)
            elif method in (HTTPMethod.PUT, HTTPMethod.PATCH):
                request_kwargs.update(_encode_as_is(body))

            async with self._open_client(timeout=timeout) as client:
                try:
                    response = await asyncio.wait_for(
                        client.request(
                            method.http_verb,
                            self.api_uri,
                            timeout=timeout,
                            **request_kwargs,
                        ),
                        timeout=timeout,
                    )
                except (asyncio.TimeoutError, httpx.TimeoutException):
                    if not self._quiet:
                        self.log.error("timeout exception thrown")
                    return Failure(TimeoutException(timeout))

            self._print_api_response(response)

            if is_success_status(response.status_code):
                return Success(self._decode(response))
            return Failure(UnexpectedStatusCodeException(response))
        except Exception as e:
            if not self._quiet:
                self.log.error(repr(e))
            return Failure(UnhandledException(e))

    @asynccontextmanager
    async def _open_client(
        self, timeout: Optional[float]
    ) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(
            timeout=timeout, transport=self._transport
        ) as client:
            yield client

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        data = response.json()
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return data

    def _print_api_request(self, method: HTTPMethod, body: Optional[Body]) -> None:
        if self._quiet or not self.config.print_request:
            return
        self.log.info(
            frame(
                f"API REQUEST{self._service_suffix()}",
                [
                    f"Type   :- {method.value}",
                    f"URL    :- {self.api_uri}",
                    f"Params :- {body}",
                ],
            )
        )

    def _print_api_response(self, response: httpx.Response) -> None:
        if self._quiet or not self.config.print_response:
            return
        try:
            response_body = to_pretty_string(self._decode(response))
        except (ValueError, TypeError):
            self.log.error(
                f"-- RESPONSE BODY IS NOT PROPER in {self.config.end_point} API --"
            )
            response_body = response.text

        message = frame(
            f"API RESPONSE{self._service_suffix()}",
            [
                f"API        :- {self.config.end_point}",
                f"StatusCode :- {response.status_code}",
                "Response   :- ",
                "",
                *response_body.splitlines(),
                "",
            ],
        )
        if is_success_status(response.status_code):
            self.log.success(message)
        else:
            self.log.error(message)

    def _service_suffix(self) -> str:
        name = self.config.service_name.strip()
        return f" ({name})" if name else ""


def _encode_as_is(body: Optional[Body]) -> Dict[str, Any]:
    """Map a PUT/PATCH body onto httpx request arguments."""
    if body is None:
        return {}
    if isinstance(body, (str, bytes)):
        return {"content": body}
    return {"data": body}


def _read_file(path: Union[str, "os.PathLike[str]"]) -> bytes:
    with open(path, "rb") as f:
        return f.read()
