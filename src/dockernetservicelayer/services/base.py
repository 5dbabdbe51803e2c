#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from abc import ABC

from dockernetservicelayer.apiclient.client import NapiClient
from dockernetservicelayer.context import Context


class Service(ABC):  # noqa: B024
    """Base class for services."""

    def __init__(self, context: Context, napi_client: NapiClient):
        self.context = context
        self.napi_client = napi_client

    @property
    def request_id(self) -> str:
        return self.context.context_id
