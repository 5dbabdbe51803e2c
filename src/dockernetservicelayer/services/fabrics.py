# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Awaitable, Callable, Iterable

from netaddr import AddrFormatError, IPAddress
import structlog

from dockernetcommon.constants import (
    FREE_VLAN_CANDIDATES,
    RESERVED_VLAN_ID,
    VLAN_ID_COUNT,
    VLAN_ID_IN_USE_MESSAGE,
)
from dockernetcommon.utils.ids import network_uuid_to_docker_id
from dockernetcommon.utils.network import get_provision_range
from dockernetservicelayer.apiclient.exceptions import NapiException
from dockernetservicelayer.exceptions.catalog import (
    ResourceExhaustedException,
    ValidationException,
    wrap_napi_exception,
)
from dockernetservicelayer.models.networks import Network
from dockernetservicelayer.models.requests import NetworkCreateRequest
from dockernetservicelayer.models.responses import NetworkCreateResponse
from dockernetservicelayer.services.base import Service

logger = structlog.getLogger()


def find_free_vlan_ids(
    taken_vlan_ids: Iterable[int], limit: int = FREE_VLAN_CANDIDATES
) -> list[int]:
    """Return up to `limit` VLAN ids that aren't in `taken_vlan_ids`.

    Ids are returned in increasing order, and the reserved id is never
    returned.
    """
    taken = set(taken_vlan_ids)
    free_vlan_ids = []
    for vlan_id in range(VLAN_ID_COUNT):
        if len(free_vlan_ids) >= limit:
            break
        if vlan_id == RESERVED_VLAN_ID or vlan_id in taken:
            continue
        free_vlan_ids.append(vlan_id)
    return free_vlan_ids


@dataclass
class Compensation:
    """Undoes the creation of a resource when the pipeline fails."""

    description: str
    action: Callable[[], Awaitable[None]]
    log_fields: dict[str, Any] = field(default_factory=dict)


class FabricsService(Service):
    """Creation of fabric networks, each on a fabric VLAN of its own."""

    async def create_network(
        self, request: NetworkCreateRequest, account_uuid: str
    ) -> NetworkCreateResponse:
        """Create the fabric network described by `request`.

        A new fabric VLAN is created for the network, unless the request
        has the `triton.network.vlan_id` label, in which case a VLAN with
        that id must already exist.

        Whatever was created is deleted again if a later step fails, and
        the error of the failing step is raised.
        """
        vlan_id = request.get_vlan_id()
        network_params = self._build_network_params(request)

        compensations: list[Compensation] = []
        try:
            if vlan_id is not None:
                await self._get_fabric_vlan(account_uuid, vlan_id)
            else:
                vlan_id = await self._create_fabric_vlan(account_uuid)
                compensations.append(
                    Compensation(
                        description="fabric vlan",
                        action=partial(
                            self.napi_client.delete_fabric_vlan,
                            account_uuid,
                            vlan_id,
                            self.request_id,
                        ),
                        log_fields={"vlan_id": vlan_id},
                    )
                )

            network = await self._create_fabric_network(
                account_uuid, vlan_id, network_params
            )
            compensations.append(
                Compensation(
                    description="fabric network",
                    action=partial(
                        self.napi_client.delete_fabric_network,
                        account_uuid,
                        vlan_id,
                        network.uuid,
                        self.request_id,
                    ),
                    log_fields={
                        "vlan_id": vlan_id,
                        "fabric_network_uuid": network.uuid,
                    },
                )
            )
            return NetworkCreateResponse(
                Id=network_uuid_to_docker_id(network.uuid)
            )
        except Exception as e:
            logger.error(f"Unable to create docker network, err: {e}")
            await self._rollback(compensations)
            raise

    def _build_network_params(
        self, request: NetworkCreateRequest
    ) -> dict[str, Any]:
        config = request.ipam_config
        # The provisioning range is the IPRange, or else the whole Subnet.
        try:
            get_provision_range(config.subnet)
            start, end = get_provision_range(config.ip_range or config.subnet)
        except ValueError as e:
            raise ValidationException.build_for_field(
                field="IPAM.Config[0]", message="Invalid Subnet or IPRange"
            ) from e

        params = {
            "name": request.name,
            "provision_start_ip": str(start),
            "provision_end_ip": str(end),
            "subnet": config.subnet,
        }
        if config.gateway:
            try:
                params["gateway"] = str(IPAddress(config.gateway))
            except (AddrFormatError, ValueError) as e:
                raise ValidationException.build_for_field(
                    field="IPAM.Config[0].Gateway", message="Invalid Gateway"
                ) from e
        return params

    async def _get_fabric_vlan(self, account_uuid: str, vlan_id: int) -> None:
        try:
            await self.napi_client.get_fabric_vlan(
                account_uuid, vlan_id, self.request_id
            )
        except NapiException as e:
            logger.warning(f"napi getFabricVLAN error: {e}")
            raise wrap_napi_exception(e, "Unable to find fabric vlan") from e

    async def _create_fabric_vlan(self, account_uuid: str) -> int:
        """Create a fabric VLAN on a free id and return the id.

        Another request may take a free id between the moment the VLANs are
        listed and the moment ours is created, so a handful of free ids are
        tried one after the other.
        """
        try:
            vlans = await self.napi_client.list_fabric_vlans(
                account_uuid, self.request_id
            )
        except NapiException as e:
            raise wrap_napi_exception(e, "Unable to list fabric vlans") from e

        if len(vlans) >= VLAN_ID_COUNT:
            raise ResourceExhaustedException("No free vlan ids")

        free_vlan_ids = find_free_vlan_ids(vlan.vlan_id for vlan in vlans)
        logger.debug(f"freeVlanIds: {free_vlan_ids}")

        for vlan_id in free_vlan_ids:
            try:
                await self.napi_client.create_fabric_vlan(
                    account_uuid, {"vlan_id": vlan_id}, self.request_id
                )
            except NapiException as e:
                if e.has_message(VLAN_ID_IN_USE_MESSAGE):
                    logger.debug(
                        "Fabric vlan id already in use, trying the next one",
                        vlan_id=vlan_id,
                    )
                    continue
                raise wrap_napi_exception(
                    e, "Unable to create fabric vlan"
                ) from e
            return vlan_id

        raise ResourceExhaustedException(
            "No available VLAN for network creation"
        )

    async def _create_fabric_network(
        self, account_uuid: str, vlan_id: int, params: dict[str, Any]
    ) -> Network:
        logger.debug("creating fabric network", vlan_id=vlan_id, params=params)
        try:
            return await self.napi_client.create_fabric_network(
                account_uuid,
                vlan_id,
                {**params, "vlan_id": vlan_id},
                self.request_id,
            )
        except NapiException as e:
            raise wrap_napi_exception(e, "Unable to create network") from e

    async def _rollback(self, compensations: list[Compensation]) -> None:
        results = await asyncio.gather(
            *(compensation.action() for compensation in compensations),
            return_exceptions=True,
        )
        for compensation, result in zip(compensations, results):
            if isinstance(result, Exception):
                logger.warning(
                    "Unable to delete newly created "
                    f"{compensation.description}, deletion err: {result}",
                    **compensation.log_fields,
                )
