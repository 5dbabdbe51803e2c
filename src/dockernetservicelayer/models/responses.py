# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Optional, Self

from pydantic import BaseModel

from dockernetcommon.constants import (
    DOCKER_NETWORK_DRIVER,
    DOCKER_NETWORK_MTU_OPTION,
    VLAN_ID_LABEL,
)
from dockernetcommon.enums.network import NetworkScope
from dockernetcommon.utils.ids import network_uuid_to_docker_id
from dockernetservicelayer.models.networks import NetworkOrPool, NetworkPool


class IPAMConfigResponse(BaseModel):
    Subnet: Optional[str]
    Gateway: Optional[str]


class IPAMResponse(BaseModel):
    Driver: str
    Options: Optional[dict[str, Any]]


class DockerNetworkResponse(BaseModel):
    """A network (or pool) in the format docker expects.

    Only the fields that were set are meant to be rendered, see
    `to_docker()`.
    """

    Driver: str
    Id: str
    IPAM: IPAMResponse
    Name: str
    Options: dict[str, str]
    Scope: NetworkScope
    Config: Optional[list[IPAMConfigResponse]] = None
    Labels: Optional[dict[str, str]] = None

    @classmethod
    def from_model(cls, network: NetworkOrPool) -> Self:
        is_pool = isinstance(network, NetworkPool)
        if is_pool:
            scope = NetworkScope.POOL
        elif network.fabric:
            scope = NetworkScope.OVERLAY
        else:
            scope = NetworkScope.EXTERNAL

        fields = dict(
            Driver=DOCKER_NETWORK_DRIVER,
            Id=network_uuid_to_docker_id(network.uuid),
            IPAM=IPAMResponse(Driver="default", Options=None),
            Name=network.name,
            Options={},
            Scope=scope,
        )
        # Pools don't have subnet or mtu details, just the uuids of the
        # networks that reside in the pool.
        if is_pool:
            return cls(**fields)

        fields["Config"] = [
            IPAMConfigResponse(Subnet=network.subnet, Gateway=network.gateway)
        ]
        if network.mtu:
            fields["Options"] = {DOCKER_NETWORK_MTU_OPTION: str(network.mtu)}
        if network.vlan_id is not None:
            fields["Labels"] = {VLAN_ID_LABEL: str(network.vlan_id)}
        return cls(**fields)

    def to_docker(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class NetworkCreateResponse(BaseModel):
    Id: str
