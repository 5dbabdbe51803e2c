# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import pytest
import structlog

from dockernetcommon.tracing import TRACE_ID


@pytest.fixture(autouse=True)
def setup_testenv(monkeypatch, tmpdir):
    # Never pick up the configuration of the host.
    monkeypatch.setenv("DOCKERNET_CONFIG", str(tmpdir.join("dockernet.yaml")))
    monkeypatch.delenv("DOCKERNET_NAPI_URL", raising=False)
    yield


@pytest.fixture(autouse=True)
def clean_globals():
    TRACE_ID.set("")
    yield
    structlog.contextvars.clear_contextvars()
