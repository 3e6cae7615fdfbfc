"""Display the structure of arbitrary values, one leaf per line."""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Iterator
from typing import Any

_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}

_INTERFACE_NAMES = ("Any", "typing.Any", "object")


def _go_quote(s: str) -> str:
    """Quote s with double quotes, escaping what is not printable."""
    parts = []
    for ch in s:
        cp = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif cp < 0x20 or cp == 0x7F:
            parts.append(f"\\x{cp:02x}")
        elif cp < 0x10000:
            parts.append(f"\\u{cp:04x}")
        else:
            parts.append(f"\\U{cp:08x}")
    return '"' + "".join(parts) + '"'


def _type_name(v: Any) -> str:
    if v is None:
        return "<nil>"
    t = type(v)
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def _is_reference(v: Any) -> bool:
    return isinstance(v, (list, dict, set, bytearray)) or callable(v)


def format_atom(v: Any) -> str:
    """Format a value without inspecting its internal structure."""
    if v is None:
        return "invalid"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(int(v))
    if isinstance(v, str):
        return _go_quote(str.__str__(v))
    if _is_reference(v):
        return f"{_type_name(v)} 0x{id(v):x}"
    return f"{_type_name(v)} value"


def format_any(v: Any) -> str:
    """Format any value as a string."""
    return format_atom(v)


def _is_interface(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation in _INTERFACE_NAMES
    return annotation is Any or annotation is object


def _is_struct(v: Any) -> bool:
    return (
        hasattr(v, "__dict__")
        and not isinstance(v, (type, types.ModuleType))
        and not inspect.isroutine(v)
        and type(v).__module__ != "builtins"
    )


def _walk(path: str, v: Any, top: bool = False) -> Iterator[str]:
    if v is None:
        yield f"{path} = {'invalid' if top else 'nil'}"
    elif isinstance(v, (list, tuple, bytes, bytearray)):
        for i, item in enumerate(v):
            yield from _walk(f"{path}[{i}]", item)
    elif dataclasses.is_dataclass(v) and not isinstance(v, type):
        for f in dataclasses.fields(v):
            field_path = f"{path}.{f.name}"
            value = getattr(v, f.name)
            if _is_interface(f.type):
                if value is None:
                    yield f"{field_path} = nil"
                else:
                    yield f"{field_path}.type = {_type_name(value)}"
                    yield from _walk(field_path + ".value", value)
            else:
                yield from _walk(field_path, value)
    elif isinstance(v, dict):
        for key, item in v.items():
            yield from _walk(f"{path}[{format_atom(key)}]", item)
    elif _is_struct(v):
        for name, value in vars(v).items():
            yield from _walk(f"{path}.{name}", value)
    else:
        yield f"{path} = {format_atom(v)}"


def display_lines(name: str, x: Any) -> list[str]:
    """Return the display of x: a heading, then one line per leaf value."""
    return [f"Display {name} ({_type_name(x)}):", *_walk(name, x, top=True)]


def display(name: str, x: Any) -> None:
    """Print the display of x."""
    for line in display_lines(name, x):
        print(line)