#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from unittest.mock import Mock

import pytest

from dockernetservicelayer.apiclient.client import NapiClient
from dockernetservicelayer.context import Context

ACCOUNT_UUID = "930896af-bf8c-48d4-885c-6573a94b1853"
REQUEST_ID = "0f3a6b6e-4c1d-4d7e-8f1a-2b3c4d5e6f70"


@pytest.fixture
def context() -> Context:
    return Context(context_id=REQUEST_ID)


@pytest.fixture
def napi_client() -> Mock:
    """A NAPI client whose requests are all mocked."""
    return Mock(NapiClient)
