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

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from resource_conditions.app.config import load_config
from resource_conditions.common import log
from resource_conditions.manifest import (
    FORMAT_JSON,
    FORMAT_YAML,
    dumps_status,
    load_status,
)
from resource_conditions.models.condition import ConditionType
from resource_conditions.models.status import ConditionedStatus
from resource_conditions.report import to_dataframe

logger = logging.getLogger(__name__)

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def differing_types(a: ConditionedStatus, b: ConditionedStatus) -> List[str]:
    types = sorted({c.type for c in a.conditions} | {c.type for c in b.conditions})
    return [t for t in types if not a.get_condition(ConditionType(t)).equal(b.get_condition(ConditionType(t)))]


def get(args) -> int:
    status = load_status(args.file)
    condition = status.get_condition(ConditionType(args.type))
    print(condition.model_dump_json(indent=2))
    return EXIT_EQUAL


def diff(args) -> int:
    a = load_status(args.file_a)
    b = load_status(args.file_b)
    if a.equal(b):
        logger.info(f"'{args.file_a}' and '{args.file_b}' hold the same conditions")
        return EXIT_EQUAL
    for t in differing_types(a, b):
        print(t)
    return EXIT_DIFFERENT


def show(args) -> int:
    status = load_status(args.file)
    output = args.output if args.output else load_config().output_format
    if output == "table":
        print(to_dataframe(status).to_string(index=False))
    else:
        print(dumps_status(status, output))
    return EXIT_EQUAL


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect the conditions of a resource status")
    parser.add_argument("-v", "--verbose", help="Display verbose output", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_get = subparsers.add_parser("get", description="Print one condition of a status", help="see `get -h`")
    parser_get.add_argument("-f", "--file", type=str, help="Path to a status or resource manifest (.json, .yaml).", required=True)
    parser_get.add_argument("-t", "--type", type=str, help="Condition type, e.g. Ready.", required=True)

    parser_diff = subparsers.add_parser(
        "diff", description="Compare two statuses ignoring order and transition times", help="see `diff -h`"
    )
    parser_diff.add_argument("file_a", type=str, help="Path to the first status document.")
    parser_diff.add_argument("file_b", type=str, help="Path to the second status document.")

    parser_show = subparsers.add_parser("show", description="Print all conditions of a status", help="see `show -h`")
    parser_show.add_argument("-f", "--file", type=str, help="Path to a status or resource manifest (.json, .yaml).", required=True)
    parser_show.add_argument("-o", "--output", type=str, choices=[FORMAT_YAML, FORMAT_JSON, "table"], help="Output format.")

    args = parser.parse_args(argv)

    if args.verbose > 0:
        log.init(logging.DEBUG)
    else:
        log.init()

    commands = {"get": get, "diff": diff, "show": show}
    try:
        return commands[args.command](args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to run '{args.command}': {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
