# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from dataclasses import dataclass
from typing import Optional

from dockernetservicelayer.exceptions.catalog import ValidationException


@dataclass
class NetworkFilter:
    """Filter for listing the networks (or pools) an account can provision.

    Exactly one of `name` and `uuid` is set. A `uuid` ending with `*` is a
    prefix search.
    """

    provisionable_by: str
    name: Optional[str] = None
    uuid: Optional[str] = None

    def __post_init__(self):
        if (self.name is None) == (self.uuid is None):
            raise ValidationException.build_for_field(
                field="name",
                message="Exactly one of 'name' or 'uuid' must be set.",
            )

    @property
    def is_prefix(self) -> bool:
        return self.uuid is not None and self.uuid.endswith("*")

    @property
    def uuid_prefix(self) -> str | None:
        """The uuid prefix of a prefix search, None for other filters."""
        if not self.is_prefix:
            return None
        return self.uuid[:-1]

    def to_params(self) -> dict[str, str]:
        params = {"provisionable_by": self.provisionable_by}
        if self.name is not None:
            params["name"] = self.name
        else:
            params["uuid"] = self.uuid
        return params
