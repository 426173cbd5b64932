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

import os
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OUTPUT_FORMAT = "yaml"

PROJECT_LOG_LEVEL = os.getenv("PROJECT_LOG_LEVEL", "")
ROOT_LOG_LEVEL = os.getenv("ROOT_LOG_LEVEL", "")


class ConditionsConfig(BaseSettings):
    truncate_timestamps: Optional[bool] = Field(
        True,
        description="Truncate transition timestamps to whole seconds so they survive second-precision serialization. Default is True.",
    )
    output_format: Optional[Literal["yaml", "json", "table"]] = Field(
        DEFAULT_OUTPUT_FORMAT, description="Default format used by the command line to print a status. Default is yaml."
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="RESOURCE_CONDITIONS_", extra="ignore")


def load_config() -> ConditionsConfig:
    return ConditionsConfig()
