"""
devtools_har/data_models/devtools/devtools_har_entry.py

Entry with the DevTools extension fields and WebSocket frames.
"""

from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_request import HarRequest
from devtools_har.data_models.base.har_response import HarResponse
from devtools_har.data_models.base.har_timings import HarTimings
from devtools_har.data_models.devtools.devtools_har_request import DevToolsHarRequest
from devtools_har.data_models.devtools.devtools_har_response import DevToolsHarResponse
from devtools_har.data_models.devtools.devtools_har_timings import DevToolsHarTimings
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import (
    Json,
    expect,
    optional_bool,
    optional_float,
    optional_int,
    optional_str,
    parse_object_list,
)


class DevToolsHarWebSocketMessage(HarObject):
    """
    A single WebSocket frame recorded on a WebSocket entry.
    """
    type: str = Field(description='Direction of the frame, "send" or "receive"')
    time: float = Field(description="Timestamp of the frame in seconds since the epoch")
    opcode: int = Field(description="WebSocket opcode (1 = text, 2 = binary)")
    data: str | None = Field(default=None, description="Frame payload (base64 for binary frames)")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        message_type = optional_str(json.get("type"))
        expect(message_type is not None, f'{cls.__name__}: "type" is required')
        time = optional_float(json.get("time"))
        expect(time is not None, f'{cls.__name__}: "time" is required and must be numeric')
        opcode = optional_int(json.get("opcode"))
        expect(opcode is not None, f'{cls.__name__}: "opcode" is required and must be numeric')

        fields = super()._fields_from_json(json)
        fields.update(
            type=message_type or "",
            time=time if time is not None else 0.0,
            opcode=opcode if opcode is not None else 0,
            data=optional_str(json.get("data")),
        )
        return fields


class DevToolsHarEntry(DevToolsMixin, HarEntry):
    """
    A HarEntry with DevTools request/response/timings and the entry-level
    underscore fields Chrome writes (cache origin, initiator, priority, ...).
    """
    REQUEST_MODEL: ClassVar[type[HarRequest]] = DevToolsHarRequest
    RESPONSE_MODEL: ClassVar[type[HarResponse]] = DevToolsHarResponse
    TIMINGS_MODEL: ClassVar[type[HarTimings]] = DevToolsHarTimings

    request: DevToolsHarRequest = Field(description="Detailed info about the request")
    response: DevToolsHarResponse = Field(description="Detailed info about the response")
    timings: DevToolsHarTimings = Field(description="Detailed timing info about request/response round trip")

    from_cache: str | None = Field(
        default=None,
        alias="_fromCache",
        description='Cache the response was served from, e.g. "disk" or "memory"',
    )
    from_service_worker: bool | None = Field(
        default=None,
        alias="_fromServiceWorker",
        description="Set if the response was served by a service worker",
    )
    initiator: dict[str, Any] | None = Field(
        default=None,
        alias="_initiator",
        description="What triggered the request (parser, script, preflight, ...), kept as raw JSON",
    )
    priority: str | None = Field(default=None, alias="_priority", description="Browser-assigned resource priority")
    resource_type: str | None = Field(
        default=None,
        alias="_resourceType",
        description='DevTools resource type, e.g. "document", "xhr", "websocket"',
    )
    web_socket_messages: list[DevToolsHarWebSocketMessage] | None = Field(
        default=None,
        alias="_webSocketMessages",
        description="Frames exchanged on a WebSocket connection",
    )

    @classmethod
    def _devtools_fields_from_json(cls, json: Json) -> dict[str, Any]:
        initiator = json.get("_initiator")
        expect(
            initiator is None or isinstance(initiator, dict),
            f'{cls.__name__}: "_initiator" must be a JSON object',
        )
        messages = json.get("_webSocketMessages")
        return {
            "from_cache": optional_str(json.get("_fromCache")),
            "from_service_worker": optional_bool(json.get("_fromServiceWorker")),
            "initiator": initiator if isinstance(initiator, dict) else None,
            "priority": optional_str(json.get("_priority")),
            "resource_type": optional_str(json.get("_resourceType")),
            "web_socket_messages": (
                None if messages is None
                else parse_object_list(
                    messages, DevToolsHarWebSocketMessage.from_json, f'{cls.__name__}: "_webSocketMessages"',
                )
            ),
        }

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        fields["request"] = DevToolsHarRequest.from_base(fields["request"])
        fields["response"] = DevToolsHarResponse.from_base(fields["response"])
        fields["timings"] = DevToolsHarTimings.from_base(fields["timings"])
        return fields
