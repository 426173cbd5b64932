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

import yaml

from resource_conditions import main as cli
from resource_conditions.common import log
from resource_conditions.manifest import dump_status
from tests import conditions


def write_statuses(tmp_path):
    initial = tmp_path / "initial.yaml"
    deployed = tmp_path / "deployed.json"
    reordered = tmp_path / "reordered.yaml"
    dump_status(conditions.INITIAL, initial)
    dump_status(conditions.DEPLOYED, deployed)
    dump_status(conditions.DEPLOYED_REORDERED, reordered)
    return initial, deployed, reordered


def test_get_prints_condition(tmp_path, capsys):
    _, deployed, _ = write_statuses(tmp_path)
    assert cli.main(["get", "-f", str(deployed), "-t", "Deployed"]) == cli.EXIT_EQUAL
    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "True"
    assert data["reason"] == "DeploymentSucceeded"


def test_get_missing_type_prints_unknown(tmp_path, capsys):
    _, deployed, _ = write_statuses(tmp_path)
    assert cli.main(["get", "-f", str(deployed), "-t", "Ready"]) == cli.EXIT_EQUAL
    data = json.loads(capsys.readouterr().out)
    assert data == {"type": "Ready", "status": "Unknown", "lastTransitionTime": None, "reason": ""}


def test_diff(tmp_path, capsys):
    initial, deployed, reordered = write_statuses(tmp_path)
    assert cli.main(["diff", str(deployed), str(reordered)]) == cli.EXIT_EQUAL
    assert cli.main(["diff", str(initial), str(deployed)]) == cli.EXIT_DIFFERENT
    assert capsys.readouterr().out.split() == ["Deployed"]


def test_show_formats(tmp_path, capsys):
    initial, _, _ = write_statuses(tmp_path)
    assert cli.main(["show", "-f", str(initial), "-o", "json"]) == cli.EXIT_EQUAL
    assert len(json.loads(capsys.readouterr().out)["conditions"]) == 3

    assert cli.main(["show", "-f", str(initial), "-o", "table"]) == cli.EXIT_EQUAL
    out = capsys.readouterr().out
    assert "FaultInjected" in out and "lastTransitionTime" in out


def test_show_uses_configured_format(tmp_path, capsys, monkeypatch):
    initial, _, _ = write_statuses(tmp_path)
    monkeypatch.setenv("RESOURCE_CONDITIONS_OUTPUT_FORMAT", "yaml")
    assert cli.main(["show", "-f", str(initial)]) == cli.EXIT_EQUAL
    data = yaml.safe_load(capsys.readouterr().out)
    assert [c["type"] for c in data["conditions"]] == ["Deployed", "FaultInjected", "Destroyed"]


def test_errors_exit_with_error_code(tmp_path, caplog):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with caplog.at_level(logging.ERROR, logger=log.PROJECT_LOGGER_NAME):
        assert cli.main(["get", "-f", str(broken), "-t", "Ready"]) == cli.EXIT_ERROR
        assert cli.main(["get", "-f", str(tmp_path / "missing.yaml"), "-t", "Ready"]) == cli.EXIT_ERROR
        assert cli.main(["show", "-f", str(tmp_path / "status.txt")]) == cli.EXIT_ERROR
    assert "Failed to run 'get'" in caplog.text
