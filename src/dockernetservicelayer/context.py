# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import time

import structlog

from dockernetcommon.tracing import get_or_set_trace_id, set_trace_id


class Context:
    """State shared by the services handling a single request.

    The context id is the trace id of the request: it is sent to NAPI as the
    request id of every call and bound to the structlog context so that all
    the log entries of the request can be correlated.
    """

    def __init__(self, context_id: str | None = None):
        if context_id:
            set_trace_id(context_id)
        self.context_id = context_id or get_or_set_trace_id()
        self._start_timestamp = time.time()
        structlog.contextvars.bind_contextvars(req_id=self.context_id)

    def get_elapsed_time_seconds(self) -> float:
        return time.time() - self._start_timestamp
