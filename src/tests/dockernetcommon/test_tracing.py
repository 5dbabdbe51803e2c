# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import asyncio
from unittest.mock import patch
import uuid

import pytest

from dockernetcommon.tracing import (
    get_or_set_trace_id,
    get_trace_id,
    set_trace_id,
    TRACE_ID,
)


class TestTracing:
    def test_get_trace_id_default(self):
        assert get_trace_id() == ""

    def test_set_trace_id_sets_value(self):
        set_trace_id("custom-trace-123")
        assert TRACE_ID.get() == "custom-trace-123"

    def test_get_or_set_trace_id_returns_existing(self):
        TRACE_ID.set("existing-trace-456")
        assert get_or_set_trace_id() == "existing-trace-456"

    @patch("uuid.uuid4")
    def test_get_or_set_trace_id_generates_new(self, mock_uuid4):
        mock_uuid4.return_value = uuid.UUID(
            "12345678-1234-5678-1234-567812345678"
        )
        result = get_or_set_trace_id()
        assert result == "12345678-1234-5678-1234-567812345678"
        assert TRACE_ID.get() == result

    @pytest.mark.asyncio
    async def test_trace_id_isolated_between_tasks(self):
        async def task(trace_id):
            set_trace_id(trace_id)
            await asyncio.sleep(0)
            return get_trace_id()

        results = await asyncio.gather(task("first"), task("second"))
        assert results == ["first", "second"]
