# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Optional

from pydantic import BaseModel, ConfigDict


class FabricVlan(BaseModel):
    model_config = ConfigDict(extra="allow")

    vlan_id: int
    name: Optional[str] = None
    owner_uuid: Optional[str] = None
    description: Optional[str] = None
    vnet_id: Optional[int] = None
