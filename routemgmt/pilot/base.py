import abc
import asyncio
import logging
from functools import partial
from typing import Iterable, List, Type

import requests
from pydantic import ValidationError

from routemgmt import settings
from routemgmt.exceptions import UpstreamError
from routemgmt.models.base import GatewayDocument, KeyValue
from routemgmt.models.credentials import GatewayCredentials

logger = logging.getLogger()


def readable_body(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return f"{error.get('statusCode', response.status_code)}: {error['message']}"
        if error:
            return str(error)
    return str(body)


class GatewayPilotAPI(abc.ABC):
    def __init__(self, timeout: float = None, verify: bool = None):
        self.timeout = settings.GATEWAY_TIMEOUT if timeout is None else timeout
        self.verify = settings.GATEWAY_VERIFY_TLS if verify is None else verify

    async def _request(
        self,
        method: str,
        resource: str,
        credentials: GatewayCredentials,
        failure: str,
        expected: Iterable[int] = (200,),
        **kwargs,
    ) -> requests.Response:
        url = credentials.url(resource=resource)
        logger.debug(f"{method} {url}")

        call = partial(
            requests.request,
            method=method,
            url=url,
            headers=credentials.headers,
            timeout=self.timeout,
            verify=self.verify,
            **kwargs,
        )
        try:
            response = await asyncio.get_running_loop().run_in_executor(None, call)
        except requests.RequestException as e:
            raise UpstreamError(message=f"{failure}: {e}") from e

        if response.status_code not in expected:
            raise UpstreamError(message=f"{failure}: {readable_body(response)}")
        return response

    async def _list(
        self,
        resource: str,
        model: Type[GatewayDocument],
        credentials: GatewayCredentials,
        failure: str,
        params: KeyValue = None,
    ) -> List[GatewayDocument]:
        response = await self._request(
            method="GET",
            resource=resource,
            credentials=credentials,
            failure=failure,
            params=params or {},
        )
        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(message=f"{failure}: invalid response body") from e

        if not isinstance(body, list):
            raise UpstreamError(message=f"{failure}: expected a list, got {readable_body(response)}")

        try:
            return [model.model_validate(item) for item in body]
        except ValidationError as e:
            raise UpstreamError(message=f"{failure}: {e}") from e
