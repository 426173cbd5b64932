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

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from resource_conditions.models.condition import (
    Condition,
    ConditionStatus,
    ConditionType,
)
from resource_conditions.observer import (
    CONDITION_ADDED,
    CONDITION_TRANSITIONED,
    Observer,
)

logger = logging.getLogger(__name__)


def _merge(conditions: List[Condition], new: Condition) -> Tuple[Optional[str], Optional[Condition]]:
    for i, existing in enumerate(conditions):
        if existing.type != new.type:
            continue
        if existing.equal(new):
            return None, existing
        conditions[i] = new
        return CONDITION_TRANSITIONED, existing
    conditions.append(new)
    return CONDITION_ADDED, None


class ConditionedStatus(BaseModel):
    """The observed status of a resource. Only one condition of each type may exist.

    Do not manipulate ``conditions`` directly, use :meth:`set_conditions`.
    """

    conditions: List[Condition] = Field(default_factory=list, description="Conditions of the resource.")

    @model_validator(mode="after")
    def _collapse_duplicate_types(self) -> "ConditionedStatus":
        if len({c.type for c in self.conditions}) == len(self.conditions):
            return self
        logger.warning(f"Status holds more than one condition of the same type; keeping the last of each: {[c.type for c in self.conditions]}")
        merged: List[Condition] = []
        for c in self.conditions:
            _merge(merged, c)
        self.conditions = merged
        return self

    @model_serializer(mode="wrap")
    def _omit_empty_conditions(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if isinstance(data, dict) and not data.get("conditions"):
            data.pop("conditions", None)
        return data

    def get_condition(self, ct: ConditionType) -> Condition:
        """Return the condition of the given type, or an Unknown placeholder if none is set."""
        for c in self.conditions:
            if c.type == ct:
                return c
        return Condition(type=ct, status=ConditionStatus.UNKNOWN)

    def set_conditions(self, *conditions: Condition, observer: Optional[Observer] = None) -> List[Condition]:
        """Set the supplied conditions, replacing any existing conditions of the same type.

        A condition identical to the stored one (ignoring lastTransitionTime)
        is a no-op, so the stored transition time is kept. Returns the
        conditions that were actually written.
        """
        written = []
        for new in conditions:
            event, previous = _merge(self.conditions, new)
            if event is None:
                continue
            written.append(new)
            if previous is None:
                logger.debug(f"Condition '{new.type}' added with status '{new.status.value}'")
            else:
                logger.debug(f"Condition '{new.type}' transitioned from '{previous.status.value}' to '{new.status.value}'")
            if observer:
                observer.notify(event, {"type": new.type, "previous": previous, "condition": new})
        return written

    def equal(self, other: Optional["ConditionedStatus"]) -> bool:
        """True if other holds the same conditions, ignoring order and lastTransitionTime."""
        if other is None:
            return False
        if len(other.conditions) != len(self.conditions):
            return False

        # there is at most one condition of each type
        sc = sorted(self.conditions, key=lambda c: c.type)
        oc = sorted(other.conditions, key=lambda c: c.type)
        return all(s.equal(o) for s, o in zip(sc, oc))


def status_equal(s: Optional[ConditionedStatus], other: Optional[ConditionedStatus]) -> bool:
    if s is None or other is None:
        return s is None and other is None
    return s.equal(other)


def new_conditioned_status(*conditions: Condition) -> ConditionedStatus:
    s = ConditionedStatus()
    s.set_conditions(*conditions)
    return s
