#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import structlog

from dockernetcommon.tracing import get_trace_id
from dockernetservicelayer.context import Context


class TestContext:
    def test_context_id_given(self):
        context = Context(context_id="abc")
        assert context.context_id == "abc"
        assert get_trace_id() == "abc"

    def test_context_id_generated(self):
        context = Context()
        assert context.context_id
        assert get_trace_id() == context.context_id

    def test_context_id_reuses_trace_id(self):
        first = Context()
        second = Context()
        assert first.context_id == second.context_id

    def test_binds_request_id_to_logs(self):
        context = Context(context_id="abc")
        assert structlog.contextvars.get_contextvars() == {
            "req_id": context.context_id
        }

    def test_elapsed_time(self):
        assert Context().get_elapsed_time_seconds() >= 0
