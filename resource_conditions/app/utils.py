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

from datetime import datetime, timezone
from typing import Optional


def get_timestamp() -> datetime:
    return datetime.now(timezone.utc)


def get_timestamp_iso() -> str:
    return format_timestamp(get_timestamp().replace(microsecond=0))


def format_timestamp(timestamp: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as RFC 3339, using ``Z`` for UTC.

    Whole-second values are written without a fractional part, the way
    Kubernetes-style status documents carry them.
    """
    if timestamp is None:
        return None
    timespec = "seconds" if timestamp.microsecond == 0 else "microseconds"
    return timestamp.isoformat(timespec=timespec).replace("+00:00", "Z")
