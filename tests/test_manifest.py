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

import pytest
import yaml

from resource_conditions.manifest import (
    FORMAT_JSON,
    FORMAT_YAML,
    ManifestError,
    dump_status,
    dumps_status,
    load_status,
    loads_status,
)
from resource_conditions.models.condition import ConditionStatus, ConditionType
from resource_conditions.models.status import ConditionedStatus
from tests import conditions

RESOURCE_MANIFEST = """
apiVersion: database.example.org/v1alpha1
kind: PostgreSQLInstance
metadata:
  name: app-db
spec:
  engineVersion: "15"
status:
  conditions:
  - type: Ready
    status: "False"
    lastTransitionTime: "2024-10-01T00:00:00Z"
    reason: Resource is not available for use
    message: Instance is still provisioning
  - type: Synced
    status: "True"
    lastTransitionTime: 2024-10-01T00:00:05Z
    reason: ReconcileSuccess
"""


def test_loads_status_from_resource_manifest():
    s = loads_status(RESOURCE_MANIFEST, FORMAT_YAML)
    ready = s.get_condition(ConditionType("Ready"))
    assert ready.status == ConditionStatus.FALSE
    assert ready.message == "Instance is still provisioning"
    synced = s.get_condition(ConditionType("Synced"))
    assert synced.status == ConditionStatus.TRUE
    assert synced.message == ""
    assert synced.lastTransitionTime.second == 5


def test_loads_status_bare_and_empty():
    s = loads_status('{"conditions": [{"type": "Ready", "status": "True", "lastTransitionTime": null, "reason": ""}]}', FORMAT_JSON)
    assert s.get_condition(ConditionType("Ready")).status == ConditionStatus.TRUE
    assert loads_status("", FORMAT_YAML).equal(ConditionedStatus())
    assert loads_status("", FORMAT_JSON).equal(ConditionedStatus())
    assert loads_status("kind: Thing\nstatus: {}\n", FORMAT_YAML).equal(ConditionedStatus())


def test_loads_status_rejects_non_mapping():
    with pytest.raises(ManifestError):
        loads_status("- a\n- b\n", FORMAT_YAML)
    with pytest.raises(ManifestError):
        loads_status("{}", "toml")


def test_dumps_status_yaml_keeps_field_names():
    text = dumps_status(conditions.DEPLOYED, FORMAT_YAML)
    data = yaml.safe_load(text)
    first = data["conditions"][0]
    assert list(first.keys()) == ["type", "status", "lastTransitionTime", "reason"]
    assert first["status"] == "True"
    assert loads_status(text, FORMAT_YAML).equal(conditions.DEPLOYED)


@pytest.mark.parametrize("name", ["status.json", "status.yaml", "status.yml"])
def test_dump_and_load_file(tmp_path, name):
    path = tmp_path / name
    dump_status(conditions.DEPLOYED, path)
    restored = load_status(path)
    assert restored.equal(conditions.DEPLOYED)
    assert [c.lastTransitionTime for c in restored.conditions] == [c.lastTransitionTime for c in conditions.DEPLOYED.conditions]


def test_load_status_unknown_suffix(tmp_path):
    path = tmp_path / "status.txt"
    path.write_text(json.dumps({"conditions": []}))
    with pytest.raises(ManifestError):
        load_status(path)
