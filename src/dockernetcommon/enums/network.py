# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from enum import StrEnum


class NetworkScope(StrEnum):
    """The scope reported to docker for a network or network pool."""

    # A pool of networks, provisioned as a single unit.
    POOL = "pool"

    # An account-private fabric network.
    OVERLAY = "overlay"

    # A shared network, e.g. a public one.
    EXTERNAL = "external"

    def __str__(self) -> str:
        return str(self.value)
