# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from typing import Awaitable, Callable, Sequence

import structlog

from dockernetcommon.constants import ADMIN_NIC_TAG
from dockernetcommon.utils.ids import (
    is_possible_exact_id,
    is_possible_partial_id,
    ldap_escape,
    short_network_id_to_uuid_prefix,
)
from dockernetservicelayer.apiclient.exceptions import (
    NapiException,
    NapiNotFoundException,
)
from dockernetservicelayer.exceptions.catalog import (
    AmbiguousNetworkIdException,
    NetworkNotFoundException,
    wrap_napi_exception,
)
from dockernetservicelayer.models.filters import NetworkFilter
from dockernetservicelayer.models.networks import NetworkOrPool
from dockernetservicelayer.models.responses import DockerNetworkResponse
from dockernetservicelayer.services.base import Service

logger = structlog.getLogger()

SearchOutcome = list[NetworkOrPool] | BaseException


def pick_best_match(
    name: str, outcomes: Sequence[SearchOutcome]
) -> tuple[NetworkOrPool | None, BaseException | None]:
    """Choose the result of a lookup among the outcomes of its searches.

    `outcomes` must be ordered by preference. The first outcome that is
    either an error or a non-empty list decides the lookup, regardless of
    what the less preferred searches found.

    Returns a (network, error) tuple where at most one is set. When both are
    None nothing matched.
    """
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            return None, outcome
        match len(outcome):
            case 0:
                continue
            case 1:
                return outcome[0], None
            case _:
                return None, AmbiguousNetworkIdException(name)
    return None, None


class NetworksService(Service):
    """Lookup of the networks and network pools an account can provision."""

    async def get_networks_or_pools(
        self, filter: NetworkFilter
    ) -> list[NetworkOrPool]:
        """Return the networks, or else the pools, matching `filter`.

        Networks are preferred over pools. A search that NAPI answers with a
        404 or an empty list falls through to the next one; any other error
        is the outcome of the whole lookup.
        """
        return await self._search(filter, not_found=[])

    async def _search(
        self, filter: NetworkFilter, not_found: list[NapiNotFoundException]
    ) -> list[NetworkOrPool]:
        # 404s are appended to `not_found` and don't stop the search.
        searches = (
            self._list_networks,
            self._list_networks_by_prefix,
            self._list_network_pools,
            self._list_network_pools_by_prefix,
        )
        try:
            for search in searches:
                found = await search(filter, not_found)
                if found:
                    return found
        except NapiException as e:
            raise wrap_napi_exception(e, "Unable to list networks") from e
        return []

    async def _list_networks(
        self, filter: NetworkFilter, not_found: list[NapiNotFoundException]
    ) -> list[NetworkOrPool]:
        return await self._list_or_empty(
            self.napi_client.list_networks, filter.to_params(), not_found
        )

    async def _list_networks_by_prefix(
        self, filter: NetworkFilter, not_found: list[NapiNotFoundException]
    ) -> list[NetworkOrPool]:
        # Fallback for older versions of NAPI that don't support matching
        # uuids by prefix.
        return await self._filter_by_prefix(
            self.napi_client.list_networks, filter, not_found
        )

    async def _list_network_pools(
        self, filter: NetworkFilter, not_found: list[NapiNotFoundException]
    ) -> list[NetworkOrPool]:
        return await self._list_or_empty(
            self.napi_client.list_network_pools, filter.to_params(), not_found
        )

    async def _list_network_pools_by_prefix(
        self, filter: NetworkFilter, not_found: list[NapiNotFoundException]
    ) -> list[NetworkOrPool]:
        return await self._filter_by_prefix(
            self.napi_client.list_network_pools, filter, not_found
        )

    async def _filter_by_prefix(
        self,
        list_fn: Callable[..., Awaitable[list[NetworkOrPool]]],
        filter: NetworkFilter,
        not_found: list[NapiNotFoundException],
    ) -> list[NetworkOrPool]:
        # Names can't be prefix searched.
        prefix = filter.uuid_prefix
        if prefix is None:
            return []
        everything = await self._list_or_empty(
            list_fn,
            {"provisionable_by": filter.provisionable_by},
            not_found,
        )
        return [item for item in everything if item.uuid.startswith(prefix)]

    async def _list_or_empty(
        self,
        list_fn: Callable[..., Awaitable[list[NetworkOrPool]]],
        params: dict[str, str],
        not_found: list[NapiNotFoundException],
    ) -> list[NetworkOrPool]:
        try:
            return await list_fn(params, self.request_id)
        except NapiNotFoundException as e:
            not_found.append(e)
            return []

    async def find_network_or_pool_by_name_or_id(
        self, name: str, account_uuid: str
    ) -> NetworkOrPool:
        """Find the network (or pool) that `name` refers to.

        The searches run concurrently, but their results are considered in
        the order docker prefers to resolve ids:

          1. exact id match
          2. exact name match
          3. partial id match

        A 404 from NAPI counts as an empty result, but like the errors of
        the searches that weren't chosen it is logged as a warning.

        :raises AmbiguousNetworkIdException: if the preferred search matched
            more than one network.
        :raises NetworkNotFoundException: if nothing matched.
        """
        not_found: list[NapiNotFoundException] = []
        outcomes = await asyncio.gather(
            self._find_by_exact_id(name, account_uuid, not_found),
            self._find_by_name(name, account_uuid, not_found),
            self._find_by_partial_id(name, account_uuid, not_found),
            return_exceptions=True,
        )
        network, error = pick_best_match(name, outcomes)

        if error is not None:
            logger.error(
                f"Networks: Error finding network to match {name}",
                identifier=name,
                error=str(error),
            )
            raise error

        if network is None:
            logger.info(
                f"Networks: no results for name {name}",
                identifier=name,
                user=account_uuid,
            )
            raise NetworkNotFoundException(name)

        errors = [
            outcome
            for outcome in outcomes
            if isinstance(outcome, BaseException)
        ]
        errors.extend(not_found)
        if errors:
            # These could hide an outage of NAPI, keep them visible.
            logger.warning(
                "Networks: non-critical error searching NAPI",
                identifier=name,
                errors=[str(e) for e in errors],
            )

        logger.debug(
            f"Networks: chose {network.name}/{network.uuid}",
            network_uuid=network.uuid,
        )
        return network

    async def _find_by_exact_id(
        self,
        name: str,
        account_uuid: str,
        not_found: list[NapiNotFoundException],
    ) -> list[NetworkOrPool]:
        # Under the double-uuid convention the first half of a full id is
        # equal to the second half, anything else can't exist.
        if not is_possible_exact_id(name):
            logger.debug(
                f"Networks: impossible exactId: {name}, skipping",
                identifier=name,
            )
            return []
        uuid = short_network_id_to_uuid_prefix(name)
        return await self._search(
            NetworkFilter(
                provisionable_by=account_uuid, uuid=ldap_escape(uuid)
            ),
            not_found,
        )

    async def _find_by_name(
        self,
        name: str,
        account_uuid: str,
        not_found: list[NapiNotFoundException],
    ) -> list[NetworkOrPool]:
        logger.debug(
            f"Networks: searching for network {name}", identifier=name
        )
        return await self._search(
            NetworkFilter(provisionable_by=account_uuid, name=name),
            not_found,
        )

    async def _find_by_partial_id(
        self,
        name: str,
        account_uuid: str,
        not_found: list[NapiNotFoundException],
    ) -> list[NetworkOrPool]:
        if not is_possible_partial_id(name):
            logger.info(
                f"Networks: impossible network id {name}, skipping",
                identifier=name,
            )
            return []
        # Search for the (potentially partial) uuid the id maps to.
        uuid_search = ldap_escape(short_network_id_to_uuid_prefix(name)) + "*"
        logger.debug(
            f"Networks: searching for network {uuid_search}", identifier=name
        )
        return await self._search(
            NetworkFilter(provisionable_by=account_uuid, uuid=uuid_search),
            not_found,
        )

    async def get_networks_for_account(
        self, account_uuid: str
    ) -> list[NetworkOrPool]:
        """Return the networks and pools `account_uuid` can provision.

        Admin networks are never returned, nor are the networks that belong
        to one of the returned pools.
        """
        params = {"provisionable_by": account_uuid}
        try:
            pools, networks = await asyncio.gather(
                self.napi_client.list_network_pools(params, self.request_id),
                self.napi_client.list_networks(params, self.request_id),
            )
        except NapiException as e:
            raise wrap_napi_exception(e, "Unable to list networks") from e

        pools = [pool for pool in pools if pool.nic_tag != ADMIN_NIC_TAG]
        pooled = {uuid for pool in pools for uuid in pool.networks}
        networks = [
            network
            for network in networks
            if network.nic_tag != ADMIN_NIC_TAG and network.uuid not in pooled
        ]
        found = [*pools, *networks]
        logger.debug(
            f"listNetworks: {len(found)} networks found",
            networks=[network.uuid for network in found],
        )
        return found

    async def list_networks(
        self, account_uuid: str
    ) -> list[DockerNetworkResponse]:
        return [
            DockerNetworkResponse.from_model(network)
            for network in await self.get_networks_for_account(account_uuid)
        ]

    async def inspect_network(
        self, name: str, account_uuid: str
    ) -> DockerNetworkResponse:
        network = await self.find_network_or_pool_by_name_or_id(
            name, account_uuid
        )
        return DockerNetworkResponse.from_model(network)
