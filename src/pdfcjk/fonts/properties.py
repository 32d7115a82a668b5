# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Parsing of ``key=value`` font property resources.

The resources use the Java properties layout: ``#`` and ``!`` start
comment lines, keys are separated from values by ``=``, ``:`` or
whitespace, and a trailing backslash continues the value on the next
line. Long /W width lists rely on continuation lines.
"""

from collections.abc import Mapping
from types import MappingProxyType

from ..exceptions import FormatError

_SEPARATORS = "=:"


def _logical_lines(text: str):
    """Yields logical lines with continuation lines joined."""
    pending = ""
    for raw_line in text.splitlines():
        line = raw_line.lstrip()
        if not pending and (not line or line[0] in "#!"):
            continue
        # An odd number of trailing backslashes means continuation
        stripped = line.rstrip("\\")
        if (len(line) - len(stripped)) % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    for i, char in enumerate(line):
        if char in _SEPARATORS:
            return line[:i].rstrip(), line[i + 1 :].strip()
        if char.isspace():
            key = line[:i]
            rest = line[i:].lstrip()
            if rest and rest[0] in _SEPARATORS:
                rest = rest[1:]
            return key, rest.strip()
    return line, ""


def parse_properties(text: str) -> Mapping[str, str]:
    """Parses properties text into a read-only mapping.

    Later duplicates of a key override earlier ones.

    Args:
        text: Resource contents.

    Returns:
        Read-only mapping of key to value.

    Raises:
        FormatError: If an entry has an empty key.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        if not key:
            raise FormatError(f"invalid property line: {line!r}")
        entries[key] = value
    return MappingProxyType(entries)
