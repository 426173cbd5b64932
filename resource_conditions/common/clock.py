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

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from resource_conditions.app.config import load_config
from resource_conditions.app.utils import get_timestamp


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):

    def __init__(self, truncate_to_seconds: bool = True) -> None:
        self.truncate_to_seconds = truncate_to_seconds

    def now(self) -> datetime:
        timestamp = get_timestamp()
        if self.truncate_to_seconds:
            return timestamp.replace(microsecond=0)
        return timestamp


class FixedClock(Clock):
    """A clock that only moves when told to. Useful in tests."""

    def __init__(self, timestamp: datetime) -> None:
        self.timestamp = timestamp

    def now(self) -> datetime:
        return self.timestamp

    def advance(self, delta: timedelta) -> datetime:
        self.timestamp = self.timestamp + delta
        return self.timestamp


_default_clock: Optional[Clock] = None


def get_default_clock() -> Clock:
    global _default_clock
    if _default_clock is None:
        _default_clock = SystemClock(truncate_to_seconds=bool(load_config().truncate_timestamps))
    return _default_clock


def set_default_clock(clock: Optional[Clock]) -> None:
    """Replace the process-wide clock. Passing None restores the system clock on next use."""
    global _default_clock
    _default_clock = clock
