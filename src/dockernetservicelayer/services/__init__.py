#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from typing import Self

from dockernetservicelayer.apiclient.client import NapiClient
from dockernetservicelayer.context import Context
from dockernetservicelayer.services.fabrics import FabricsService
from dockernetservicelayer.services.networks import NetworksService


class ServiceCollection:
    """Provide all the services."""

    # Keep them in alphabetical order, please
    fabrics: FabricsService
    networks: NetworksService

    @classmethod
    async def produce(
        cls,
        context: Context,
        napi_client: NapiClient,
    ) -> Self:
        services = cls()
        services.fabrics = FabricsService(
            context=context, napi_client=napi_client
        )
        services.networks = NetworksService(
            context=context, napi_client=napi_client
        )
        return services
