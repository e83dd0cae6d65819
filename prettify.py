"""
Readable rendering of nested response structures.

boto3 responses are plain dicts and lists holding datetimes and, for some
services, bytes or streaming bodies. prettify() walks such values (and
dataclasses built from them) and produces indented text:

    prettify(Parameter(name="/app/db", type=ParameterType.STRING, value="x", version=1))

    {
      name: "/app/db",
      type: "String",
      value: "x",
      version: 1
    }
"""
import dataclasses
import datetime
import json
from collections.abc import Mapping
from enum import Enum
from io import StringIO
from typing import Any

INDENT = 2
# Sequences longer than this are written one element per line
INLINE_SEQUENCE_MAX = 3


def prettify(value: Any) -> str:
    """Return the textual representation of value."""
    buf = StringIO()
    _prettify(value, 0, buf)
    return buf.getvalue()


def _prettify(value: Any, indent: int, buf: StringIO) -> None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [
            f.name for f in dataclasses.fields(value)
            if not f.name.startswith('_') and getattr(value, f.name) is not None
        ]
        _write_fields(
            [(name, getattr(value, name)) for name in names], indent, buf
        )
    elif isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        buf.write(str(value))
    elif isinstance(value, (bytes, bytearray, memoryview)):
        buf.write(f'<binary> len {len(value)}')
    elif callable(getattr(value, 'read', None)):
        buf.write('<buffer>')
    elif isinstance(value, Mapping):
        _write_fields([(str(k), v) for k, v in value.items()], indent, buf)
    elif isinstance(value, (list, tuple)):
        _write_sequence(value, indent, buf)
    elif isinstance(value, Enum):
        _prettify(value.value, indent, buf)
    elif value is None:
        buf.write('<invalid value>')
    elif isinstance(value, bool):
        buf.write('true' if value else 'false')
    elif isinstance(value, str):
        buf.write(json.dumps(value, ensure_ascii=False))
    else:
        buf.write(str(value))


def _write_fields(items, indent: int, buf: StringIO) -> None:
    buf.write('{\n')
    for i, (name, item) in enumerate(items):
        buf.write(' ' * (indent + INDENT))
        buf.write(f'{name}: ')
        _prettify(item, indent + INDENT, buf)
        if i < len(items) - 1:
            buf.write(',\n')
    buf.write('\n' + ' ' * indent + '}')


def _write_sequence(items, indent: int, buf: StringIO) -> None:
    nl, closing, prefix = '', '', ''
    if len(items) > INLINE_SEQUENCE_MAX:
        nl, closing, prefix = '\n', ' ' * indent, ' ' * (indent + INDENT)
    buf.write('[' + nl)
    for i, item in enumerate(items):
        buf.write(prefix)
        _prettify(item, indent + INDENT, buf)
        if i < len(items) - 1:
            buf.write(',' + nl)
    buf.write(nl + closing + ']')
