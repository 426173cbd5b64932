# Copyright contributors to the resource-conditions project. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from datetime import datetime
from enum import Enum
from typing import Any, Dict, NewType, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_serializer,
)

from resource_conditions.app.utils import format_timestamp
from resource_conditions.common.clock import Clock, get_default_clock
from resource_conditions.common.strings import capitalize, format_message

# A ConditionType names an aspect of resource state. Callers may define their own.
ConditionType = NewType("ConditionType", str)

# A ConditionReason explains why a condition holds its current status.
ConditionReason = NewType("ConditionReason", str)

TYPE_READY = ConditionType("Ready")

REASON_AVAILABLE = ConditionReason("Resource is available for use")
REASON_UNAVAILABLE = ConditionReason("Resource is not available for use")


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(BaseModel):
    """A condition that may apply to a resource.

    Conditions are frozen. Use :meth:`with_message` or build a new one to
    change anything, and hand it to ``ConditionedStatus.set_conditions``.
    """

    model_config = ConfigDict(frozen=True)

    type: ConditionType = Field(..., description="Type of this condition. At most one of each type may apply to a resource at any time.")
    status: ConditionStatus = Field(..., description='The status of the condition: "True", "False", or "Unknown".')
    lastTransitionTime: Optional[datetime] = Field(
        default=None, description="The last time the condition transitioned from one status to another."
    )
    reason: ConditionReason = Field(default=ConditionReason(""), description="A reason for the condition's last transition.")
    message: str = Field(default="", description="Details about the condition's last transition, if any. Omitted when empty.")

    @field_validator("reason", "message", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_serializer("lastTransitionTime", when_used="json")
    def _serialize_transition_time(self, v: Optional[datetime]) -> Optional[str]:
        return format_timestamp(v)

    @model_serializer(mode="wrap")
    def _omit_empty_message(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if isinstance(data, dict) and not data.get("message"):
            data.pop("message", None)
        return data

    def equal(self, other: "Condition") -> bool:
        """True if identical to other, ignoring lastTransitionTime."""
        return self.type == other.type and self.status == other.status and self.reason == other.reason and self.message == other.message

    def matches(self, other: "Condition") -> bool:
        """True if identical to other, ignoring lastTransitionTime and message."""
        return self.type == other.type and self.status == other.status and self.reason == other.reason

    def with_message(self, msg: str) -> "Condition":
        return self.model_copy(update={"message": capitalize(msg)})

    def with_messagef(self, msg: str, *args: Any) -> "Condition":
        """Return a copy whose message is the capitalized template formatted with args.

        The template is capitalized before substitution, so a template that
        starts with a placeholder is title-cased into a directive that cannot
        be rendered, and comes out as a ``%!S(str=value)`` marker.
        """
        return self.model_copy(update={"message": format_message(capitalize(msg), *args)})


def available(clock: Optional[Clock] = None) -> Condition:
    """A condition indicating the resource is currently observed to be available for use."""
    clock = clock if clock else get_default_clock()
    return Condition(type=TYPE_READY, status=ConditionStatus.TRUE, lastTransitionTime=clock.now(), reason=REASON_AVAILABLE)


def unavailable(clock: Optional[Clock] = None) -> Condition:
    """A condition indicating the resource is not currently available for use.

    Set it only when the resource is expected to be available but is known not
    to be, for example because its API reports it is unhealthy.
    """
    clock = clock if clock else get_default_clock()
    return Condition(type=TYPE_READY, status=ConditionStatus.FALSE, lastTransitionTime=clock.now(), reason=REASON_UNAVAILABLE)
