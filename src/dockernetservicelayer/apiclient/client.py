# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from typing import Any, TypeVar
from urllib.parse import quote, urljoin

from aiohttp import (
    ClientError,
    ClientSession,
    ClientTimeout,
    ContentTypeError,
)
from pydantic import BaseModel, ValidationError
import structlog

from dockernetcommon.constants import REQUEST_ID_HEADER
from dockernetservicelayer.apiclient.exceptions import (
    NapiException,
    NapiNotFoundException,
)
from dockernetservicelayer.models.networks import Network, NetworkPool
from dockernetservicelayer.models.vlans import FabricVlan
from dockernetservicelayer.settings import NapiConfig

logger = structlog.getLogger()

ModelT = TypeVar("ModelT", bound=BaseModel)


class NapiClient:
    """Client for the NAPI (network API) service.

    A single client is meant to be created for the whole process and shared
    by all the requests: the HTTP session is created on first use and reused
    until `close()` is called.
    """

    def __init__(self, config: NapiConfig):
        self.base_url = config.url.rstrip("/") + "/"
        self._timeout = ClientTimeout(
            total=config.request_timeout, connect=config.connect_timeout
        )
        self._session: ClientSession | None = None

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=self._timeout)
        return self._session

    async def request(
        self,
        method: str,
        path: str,
        request_id: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = urljoin(self.base_url, path.lstrip("/"))
        headers = {REQUEST_ID_HEADER: request_id}
        try:
            async with self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
            ) as response:
                if response.status >= 400:
                    raise await self._build_exception(response)
                if response.status == 204:
                    return None
                # NAPI doesn't always set a content type on empty bodies.
                return await response.json(content_type=None)
        except (ClientError, asyncio.TimeoutError, ValueError) as e:
            raise NapiException(
                status_code=None, message=f"NAPI request failed: {e}"
            ) from e

    async def _build_exception(self, response) -> NapiException:
        try:
            body = await response.json()
        except (ContentTypeError, ValueError):
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("message") or response.reason or "Unknown error"
        logger.debug(
            "NAPI request failed",
            method=response.method,
            url=str(response.url),
            status=response.status,
            body=body,
        )
        exc_class = (
            NapiNotFoundException if response.status == 404 else NapiException
        )
        return exc_class(
            status_code=response.status,
            message=message,
            code=body.get("code"),
            errors=body.get("errors"),
        )

    async def list_networks(
        self, params: dict[str, Any], request_id: str
    ) -> list[Network]:
        networks = await self.request(
            "GET", "/networks", request_id, params=params
        )
        return self._parse_list(Network, networks)

    async def list_network_pools(
        self, params: dict[str, Any], request_id: str
    ) -> list[NetworkPool]:
        pools = await self.request(
            "GET", "/network_pools", request_id, params=params
        )
        return self._parse_list(NetworkPool, pools)

    async def get_fabric_vlan(
        self, owner_uuid: str, vlan_id: int, request_id: str
    ) -> FabricVlan:
        vlan = await self.request(
            "GET", self._vlans_path(owner_uuid, vlan_id), request_id
        )
        return self._parse(FabricVlan, vlan)

    async def list_fabric_vlans(
        self, owner_uuid: str, request_id: str
    ) -> list[FabricVlan]:
        vlans = await self.request(
            "GET", self._vlans_path(owner_uuid), request_id
        )
        return self._parse_list(FabricVlan, vlans)

    async def create_fabric_vlan(
        self, owner_uuid: str, params: dict[str, Any], request_id: str
    ) -> FabricVlan:
        vlan = await self.request(
            "POST", self._vlans_path(owner_uuid), request_id, json=params
        )
        return self._parse(FabricVlan, vlan)

    async def delete_fabric_vlan(
        self, owner_uuid: str, vlan_id: int, request_id: str
    ) -> None:
        await self.request(
            "DELETE", self._vlans_path(owner_uuid, vlan_id), request_id
        )

    async def create_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        params: dict[str, Any],
        request_id: str,
    ) -> Network:
        network = await self.request(
            "POST",
            self._vlans_path(owner_uuid, vlan_id) + "/networks",
            request_id,
            json=params,
        )
        return self._parse(Network, network)

    async def delete_fabric_network(
        self,
        owner_uuid: str,
        vlan_id: int,
        network_uuid: str,
        request_id: str,
    ) -> None:
        await self.request(
            "DELETE",
            self._vlans_path(owner_uuid, vlan_id)
            + f"/networks/{quote(network_uuid, safe='')}",
            request_id,
        )

    def _parse(self, model: type[ModelT], record: Any) -> ModelT:
        try:
            return model.model_validate(record)
        except ValidationError as e:
            raise NapiException(
                status_code=None,
                message=f"Invalid {model.__name__} returned by NAPI: {e}",
            ) from e

    def _parse_list(
        self, model: type[ModelT], records: Any
    ) -> list[ModelT]:
        if records is None:
            return []
        if not isinstance(records, list):
            raise NapiException(
                status_code=None,
                message=f"Expected a list of {model.__name__} from NAPI",
            )
        return [self._parse(model, record) for record in records]

    def _vlans_path(self, owner_uuid: str, vlan_id: int | None = None) -> str:
        path = f"/fabrics/{quote(owner_uuid, safe='')}/vlans"
        if vlan_id is not None:
            path += f"/{vlan_id}"
        return path

    async def close(self):
        if self._session is not None:
            await self._session.close()
            self._session = None
