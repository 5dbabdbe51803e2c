# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Optional

from dockernetservicelayer.models.base import NapiBaseModel


class Network(NapiBaseModel):
    subnet: Optional[str] = None
    gateway: Optional[str] = None
    mtu: Optional[int] = None
    vlan_id: Optional[int] = None
    fabric: bool = False
    owner_uuids: Optional[list[str]] = None
    nic_tag: Optional[str] = None
    provision_start_ip: Optional[str] = None
    provision_end_ip: Optional[str] = None
    description: Optional[str] = None


class NetworkPool(NapiBaseModel):
    nic_tag: Optional[str] = None
    networks: list[str] = []
    description: Optional[str] = None


NetworkOrPool = Network | NetworkPool
