"""Find explicit module descriptors (module-info.class) inside jars."""

from __future__ import annotations

import re
import struct
import zipfile
from pathlib import Path
from typing import Protocol

from jpack_analyzer.analyzer.models import ModuleDescriptor
from jpack_analyzer.errors import DescriptorReadError

MODULE_INFO = "module-info.class"
_VERSIONED_RE = re.compile(r"^META-INF/versions/(\d+)/module-info\.class$")

_CLASS_MAGIC = 0xCAFEBABE

# Constant pool tag -> payload size in bytes (Utf8 is variable-length)
_CP_UTF8 = 1
_CP_MODULE = 19
_CP_SIZES = {
    3: 4, 4: 4,             # Integer, Float
    5: 8, 6: 8,             # Long, Double (take two slots)
    7: 2, 8: 2, 16: 2,      # Class, String, MethodType
    9: 4, 10: 4, 11: 4,     # Field/Method/InterfaceMethod refs
    12: 4, 17: 4, 18: 4,    # NameAndType, Dynamic, InvokeDynamic
    15: 3,                  # MethodHandle
    19: 2, 20: 2,           # Module, Package
}


class DescriptorProvider(Protocol):
    """Protocol for looking up the JPMS descriptor of a jar."""

    def describe(self, jar: Path) -> ModuleDescriptor | None:
        """Return the jar's descriptor, or None if it has none."""
        ...


class JarDescriptorProvider:
    """Reports explicit modules only; plain jars yield None."""

    def describe(self, jar: Path) -> ModuleDescriptor | None:
        try:
            with zipfile.ZipFile(jar) as zf:
                entry = _find_module_info(zf.namelist())
                if entry is None:
                    return None
                data = zf.read(entry)
        except (OSError, zipfile.BadZipFile) as e:
            raise DescriptorReadError(f"error reading {jar}: {e}") from e

        try:
            name = module_name_from_class(data)
        except (ValueError, KeyError, IndexError, struct.error) as e:
            raise DescriptorReadError(f"malformed {entry} in {jar}: {e}") from e
        return ModuleDescriptor(name=name, automatic=False)


def _find_module_info(names: list[str]) -> str | None:
    if MODULE_INFO in names:
        return MODULE_INFO
    versioned = []
    for n in names:
        m = _VERSIONED_RE.match(n)
        if m:
            versioned.append((int(m.group(1)), n))
    if not versioned:
        return None
    return max(versioned)[1]


def module_name_from_class(data: bytes) -> str:
    """Module name stored in the Module attribute of a module-info class file."""
    magic, _minor, _major, cp_count = struct.unpack_from(">IHHH", data, 0)
    if magic != _CLASS_MAGIC:
        raise ValueError("not a class file")
    pos = 10

    utf8: dict[int, str] = {}
    modules: dict[int, int] = {}
    i = 1
    while i < cp_count:
        tag = data[pos]
        pos += 1
        if tag == _CP_UTF8:
            (length,) = struct.unpack_from(">H", data, pos)
            pos += 2
            utf8[i] = data[pos:pos + length].decode("utf-8", errors="replace")
            pos += length
        elif tag in _CP_SIZES:
            if tag == _CP_MODULE:
                (modules[i],) = struct.unpack_from(">H", data, pos)
            pos += _CP_SIZES[tag]
            if tag in (5, 6):
                i += 1
        else:
            raise ValueError(f"unknown constant pool tag {tag}")
        i += 1

    # access_flags, this_class, super_class, interfaces_count
    (interfaces,) = struct.unpack_from(">H", data, pos + 6)
    pos += 8 + 2 * interfaces

    # fields and methods (both empty in practice, skipped generically)
    for _ in range(2):
        (count,) = struct.unpack_from(">H", data, pos)
        pos += 2
        for _ in range(count):
            pos += 6
            pos = _skip_attributes(data, pos)

    (attr_count,) = struct.unpack_from(">H", data, pos)
    pos += 2
    for _ in range(attr_count):
        name_index, length = struct.unpack_from(">HI", data, pos)
        pos += 6
        if utf8.get(name_index) == "Module":
            (module_index,) = struct.unpack_from(">H", data, pos)
            return utf8[modules[module_index]]
        pos += length
    raise ValueError("no Module attribute")


def _skip_attributes(data: bytes, pos: int) -> int:
    (count,) = struct.unpack_from(">H", data, pos)
    pos += 2
    for _ in range(count):
        _name, length = struct.unpack_from(">HI", data, pos)
        pos += 6 + length
    return pos
