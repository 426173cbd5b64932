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

import re
from typing import Any, Optional, Tuple


def _is_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalnum():
        return False
    return ch.isspace()


def _title(word: str) -> str:
    chars = []
    prev = " "
    for ch in word:
        if _is_separator(prev):
            upper = ch.title()
            chars.append(upper if len(upper) == 1 else ch)
        else:
            chars.append(ch)
        prev = ch
    return "".join(chars)


def capitalize(s: str) -> str:
    """Uppercase the first word of a string.

    Only the text before the first space is touched. Within that word every
    letter that starts a new word segment is uppercased, so ``"x-ray scan"``
    becomes ``"X-Ray scan"``.
    """
    sep = " "
    parts = s.split(sep, 1)
    if len(parts) > 1:
        return sep.join([_title(parts[0]), parts[1]])
    return _title(s)


def string(v: str) -> Optional[str]:
    return v


def string_value(v: Optional[str]) -> str:
    """Return the value or an empty string if it is None."""
    if v is not None:
        return v
    return ""


_DIRECTIVE = re.compile(r"%(?:\((?P<key>[^)]*)\))?(?P<flags>[#0\- +]*\d*(?:\.\d+)?)(?P<verb>.?)", re.DOTALL)


def _describe(value: Any) -> str:
    return f"{type(value).__name__}={value}"


def _format_leniently(template: str, args: Tuple[Any, ...]) -> str:
    mapping = args[0] if len(args) == 1 and isinstance(args[0], dict) else None
    remaining = [] if mapping is not None else list(args)
    out = []
    pos = 0
    for m in _DIRECTIVE.finditer(template):
        out.append(template[pos : m.start()])
        pos = m.end()
        key, verb = m.group("key"), m.group("verb")
        if verb == "%":
            out.append("%")
            continue
        if not verb:
            out.append("%!(NOVERB)")
            continue
        if key is not None:
            if mapping is None or key not in mapping:
                out.append(f"%!{verb}(MISSING)")
                continue
            value = mapping[key]
        elif remaining:
            value = remaining.pop(0)
        else:
            out.append(f"%!{verb}(MISSING)")
            continue
        try:
            out.append(f"%{m.group('flags')}{verb}" % (value,))
        except (TypeError, ValueError):
            out.append(f"%!{verb}({_describe(value)})")
    out.append(template[pos:])
    if remaining:
        out.append(f"%!(EXTRA {', '.join(_describe(v) for v in remaining)})")
    return "".join(out)


def format_message(template: str, *args: Any) -> str:
    """Apply printf-style formatting without ever failing.

    A single dict argument feeds ``%(name)s`` placeholders. Directives that
    cannot be rendered are written as ``%!verb(type=value)``, missing values
    as ``%!verb(MISSING)`` and leftover values as ``%!(EXTRA type=value)``.
    """
    try:
        if len(args) == 1 and isinstance(args[0], dict):
            return template % args[0]
        return template % args
    except (TypeError, ValueError, KeyError):
        return _format_leniently(template, args)
