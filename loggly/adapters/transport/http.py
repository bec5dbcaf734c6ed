"""
HTTP transport for the Loggly ingestion API.

Role in the system:
- Receives pre-encoded bodies and pre-rendered tag headers.
- Performs exactly one POST per call.
- Maps the HTTP response onto ResponseStatus.

Endpoints:
    POST {endpoint}/inputs/{token}   single event
    POST {endpoint}/bulk/{token}     newline-delimited batch

Architectural constraints:
- No retries, backoff or rate limiting.
- Network exceptions from requests are NOT caught here; the dispatcher
  decides what a failure means.
- Connection pooling is delegated to a requests.Session.
"""

from __future__ import annotations

from typing import Optional

import requests

from loggly.adapters.transport.base import LogglyTransport
from loggly.enums.status import ResponseStatus
from loggly.constants import (
    HTTP_TIMEOUT_S_DEFAULT,
    LOGGLY_BULK_PATH,
    LOGGLY_CONTENT_TYPE,
    LOGGLY_DEFAULT_ENDPOINT,
    LOGGLY_INPUTS_PATH,
    LOGGLY_OK_RESPONSE,
    LOGGLY_TAG_HEADER,
)


class HttpTransport(LogglyTransport):
    """
    requests-backed Loggly transport.

    Design:
    - One shared session per transport instance
    - A caller-supplied session is used as-is and never closed here
    """

    def __init__(
        self,
        *,
        endpoint: str = LOGGLY_DEFAULT_ENDPOINT,
        timeout_s: float = HTTP_TIMEOUT_S_DEFAULT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout_s = timeout_s
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    # ------------------------------------------------------------------
    # Public API (LogglyTransport contract)
    # ------------------------------------------------------------------

    def send_single(
        self,
        token: str,
        tags: Optional[str],
        body: str,
    ) -> ResponseStatus:
        return self._post(LOGGLY_INPUTS_PATH, token, tags, body)

    def send_bulk(
        self,
        token: str,
        tags: Optional[str],
        body: str,
    ) -> ResponseStatus:
        return self._post(LOGGLY_BULK_PATH, token, tags, body)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _post(
        self,
        path: str,
        token: str,
        tags: Optional[str],
        body: str,
    ) -> ResponseStatus:
        url = self._endpoint + path.format(token=token)

        headers = {"Content-Type": LOGGLY_CONTENT_TYPE}
        if tags is not None:
            headers[LOGGLY_TAG_HEADER] = tags

        response = self._session.post(
            url,
            data=body.encode("utf-8"),
            headers=headers,
            timeout=self._timeout_s,
        )
        return self._to_status(response)

    @staticmethod
    def _to_status(response: requests.Response) -> ResponseStatus:
        """
        Map an HTTP response to ResponseStatus.

        OK requires a 2xx status AND Loggly's {"response": "ok"} body.
        """
        if not response.ok:
            return ResponseStatus.ERROR

        try:
            payload = response.json()
        except ValueError:
            return ResponseStatus.ERROR

        if isinstance(payload, dict) and payload.get("response") == LOGGLY_OK_RESPONSE:
            return ResponseStatus.OK
        return ResponseStatus.ERROR
