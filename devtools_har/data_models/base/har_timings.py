"""
devtools_har/data_models/base/har_timings.py

Timing breakdown of a request/response round trip, in milliseconds.

Reference: http://www.softwareishard.com/blog/har-12-spec/#timings

Each phase is either absent (None), not applicable (-1) or a measurement.
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_float


class HarTimings(HarObject):
    """
    Time spent in each phase of the request. `send`, `wait` and `receive` are required.
    """
    blocked: float | None = Field(default=None, description="Time spent in a queue waiting for a network connection")
    dns: float | None = Field(default=None, description="DNS resolution time")
    connect: float | None = Field(default=None, description="Time required to create a TCP connection")
    send: float = Field(description="Time required to send the HTTP request to the server")
    wait: float = Field(description="Waiting for a response from the server")
    receive: float = Field(description="Time required to read the entire response")
    ssl: float | None = Field(default=None, description="Time required for SSL/TLS negotiation (included in connect)")

    @property
    def total(self) -> float:
        """
        Sum of all phases, skipping absent and not-applicable (-1) values.
        `ssl` is not added since HAR 1.2 counts it inside `connect`.
        """
        phases = (self.blocked, self.dns, self.connect, self.send, self.wait, self.receive)
        return sum(phase for phase in phases if phase is not None and phase >= 0)

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        required = {}
        for key in ("send", "wait", "receive"):
            value = optional_float(json.get(key))
            expect(value is not None, f'{cls.__name__}: "{key}" is required and must be numeric')
            expect(value is None or value >= 0, f'{cls.__name__}: "{key}" must be non-negative, got {value}')
            required[key] = value if value is not None else 0.0

        fields = super()._fields_from_json(json)
        fields.update(
            blocked=optional_float(json.get("blocked")),
            dns=optional_float(json.get("dns")),
            connect=optional_float(json.get("connect")),
            ssl=optional_float(json.get("ssl")),
            **required,
        )
        return fields
