# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dockernetcommon.constants import RESERVED_VLAN_ID, VLAN_ID_LABEL
from dockernetservicelayer.exceptions.catalog import (
    BaseExceptionDetail,
    ValidationException,
)


def _build_json_path(loc: tuple[Any, ...]) -> str:
    elements: list[str] = []
    for elem in loc:
        if isinstance(elem, int) and elements:
            elements.append(f"{elements.pop()}[{elem}]")
        else:
            elements.append(str(elem))
    return ".".join(elements)


class IPAMConfigRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subnet: str = Field(alias="Subnet")
    ip_range: Optional[str] = Field(default=None, alias="IPRange")
    gateway: Optional[str] = Field(default=None, alias="Gateway")


class IPAMRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    driver: Optional[str] = Field(default=None, alias="Driver")
    config: list[IPAMConfigRequest] = Field(alias="Config", min_length=1)


class NetworkCreateRequest(BaseModel):
    """The body of a docker `network create` request."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    driver: Optional[str] = Field(default=None, alias="Driver")
    labels: Optional[dict[str, Any]] = Field(default=None, alias="Labels")
    ipam: IPAMRequest = Field(alias="IPAM")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """Build the request from the JSON payload sent by docker.

        :raises ValidationException: if the payload is malformed.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise ValidationException(
                details=[
                    BaseExceptionDetail(
                        type=err["type"],
                        message=err["msg"],
                        field=_build_json_path(err["loc"]),
                    )
                    for err in e.errors()
                ]
            ) from e

    @property
    def ipam_config(self) -> IPAMConfigRequest:
        return self.ipam.config[0]

    def get_vlan_id(self) -> int | None:
        """Return the fabric VLAN id requested through the labels, if any.

        Note that 0 is a valid VLAN id, whilst 1 is reserved.

        :raises ValidationException: if the label value isn't a valid id.
        """
        value = (self.labels or {}).get(VLAN_ID_LABEL)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise ValidationException.build_for_field(
                field=f"Labels.{VLAN_ID_LABEL}",
                message=f"Label value for {VLAN_ID_LABEL} must be a string",
            )
        digits = value.strip()
        # Only plain ASCII decimal digits, so there's no sign to check.
        vlan_id = None
        if digits.isascii() and digits.isdigit():
            vlan_id = int(digits)
        if vlan_id is None or vlan_id == RESERVED_VLAN_ID:
            raise ValidationException.build_for_field(
                field=f"Labels.{VLAN_ID_LABEL}",
                message=f"Invalid value for {VLAN_ID_LABEL}: {value}",
            )
        return vlan_id
