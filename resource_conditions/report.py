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

import pandas as pd
from pandas import DataFrame

from resource_conditions.models.status import ConditionedStatus


class Column:
    type = "type"
    status = "status"
    reason = "reason"
    message = "message"
    last_transition_time = "lastTransitionTime"


def to_dataframe(status: ConditionedStatus) -> DataFrame:
    """Tabulate the conditions of a status in their stored order."""
    if len(status.conditions) > 0:
        rows = [
            {
                Column.type: c.type,
                Column.status: c.status.value,
                Column.reason: c.reason,
                Column.message: c.message,
                Column.last_transition_time: c.lastTransitionTime,
            }
            for c in status.conditions
        ]
        df = DataFrame(rows)
        df[Column.last_transition_time] = pd.to_datetime(df[Column.last_transition_time], utc=True)
        return df
    return pd.DataFrame(
        {
            Column.type: pd.Series(dtype="str"),
            Column.status: pd.Series(dtype="str"),
            Column.reason: pd.Series(dtype="str"),
            Column.message: pd.Series(dtype="str"),
            Column.last_transition_time: pd.Series(dtype="datetime64[ns, UTC]"),
        }
    )
