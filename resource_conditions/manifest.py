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

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from resource_conditions.models.status import ConditionedStatus

logger = logging.getLogger(__name__)

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"

_SUFFIXES = {
    ".json": FORMAT_JSON,
    ".yaml": FORMAT_YAML,
    ".yml": FORMAT_YAML,
}


class ManifestError(ValueError):
    pass


def format_for_path(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in _SUFFIXES:
        raise ManifestError(f"Unsupported status document '{path}': expected one of {sorted(_SUFFIXES)}")
    return _SUFFIXES[suffix]


def _extract_status(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"Status document must be a mapping, got {type(data).__name__}")
    # a full resource manifest carries its status under 'status'
    if "status" in data:
        status = data["status"]
        return status if status else {}
    return data


def loads_status(text: str, fmt: str = FORMAT_YAML) -> ConditionedStatus:
    if fmt == FORMAT_JSON:
        data = json.loads(text) if text.strip() else None
    elif fmt == FORMAT_YAML:
        data = yaml.safe_load(text)
    else:
        raise ManifestError(f"Unsupported format '{fmt}'")
    return ConditionedStatus.model_validate(_extract_status(data))


def load_status(path: Union[str, Path]) -> ConditionedStatus:
    fmt = format_for_path(path)
    logger.debug(f"Load status from '{path}' as {fmt}")
    with Path(path).open("r") as f:
        return loads_status(f.read(), fmt)


def dumps_status(status: ConditionedStatus, fmt: str = FORMAT_YAML) -> str:
    if fmt == FORMAT_JSON:
        return status.model_dump_json(indent=2)
    elif fmt == FORMAT_YAML:
        return yaml.safe_dump(status.model_dump(mode="json"), sort_keys=False)
    raise ManifestError(f"Unsupported format '{fmt}'")


def dump_status(status: ConditionedStatus, path: Union[str, Path]):
    fmt = format_for_path(path)
    with Path(path).open("w") as f:
        f.write(dumps_status(status, fmt))
