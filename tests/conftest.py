"""Shared fixtures: hand-built jars, module-info classes and a fake jdeps."""

from __future__ import annotations

import struct
import zipfile
from pathlib import Path

import pytest


def module_info_class(name: str) -> bytes:
    """Minimal module-info.class declaring module *name*."""
    def utf8(s: str) -> bytes:
        b = s.encode()
        return struct.pack(">BH", 1, len(b)) + b

    pool = [
        utf8("module-info"),                # 1
        struct.pack(">BH", 7, 1),           # 2 Class -> 1
        utf8("Module"),                     # 3
        utf8(name),                         # 4
        struct.pack(">BH", 19, 4),          # 5 Module -> 4
        struct.pack(">BQ", 5, 42),          # 6-7 Long, two slots
    ]
    cp_count = 8
    # module_name, flags, version, requires/exports/opens/uses/provides counts
    module_attr = struct.pack(">HHHHHHHH", 5, 0, 0, 0, 0, 0, 0, 0)
    body = struct.pack(">HHHHHHH", 0x8000, 2, 0, 0, 0, 0, 1)
    body += struct.pack(">HI", 3, len(module_attr)) + module_attr
    return struct.pack(">IHHH", 0xCAFEBABE, 0, 53, cp_count) + b"".join(pool) + body


@pytest.fixture
def make_jar(tmp_path):
    """Factory: make_jar(name, automatic_name=None, module=None, manifest=True)."""
    def _make(
        name: str,
        *,
        automatic_name: str | None = None,
        module: str | None = None,
        manifest: bool = True,
        directory: Path | None = None,
    ) -> Path:
        d = directory or tmp_path / "repo"
        d.mkdir(parents=True, exist_ok=True)
        path = d / name
        with zipfile.ZipFile(path, "w") as zf:
            if manifest:
                lines = ["Manifest-Version: 1.0", "Created-By: test"]
                if automatic_name:
                    lines.append(f"Automatic-Module-Name: {automatic_name}")
                zf.writestr("META-INF/MANIFEST.MF", "\r\n".join(lines) + "\r\n\r\n")
            if module:
                zf.writestr("module-info.class", module_info_class(module))
            zf.writestr("com/example/Foo.class", b"\xca\xfe\xba\xbe")
        return path
    return _make


class FakeJdeps:
    """JdepsRunner writing canned output keyed by source jar file name."""

    def __init__(self, outputs: dict[str, str] | None = None) -> None:
        self.outputs = outputs or {}
        self.commands: list[list[str]] = []

    def run(self, command: list[str], stdout) -> None:
        self.commands.append(command)
        stdout.write(self.outputs.get(Path(command[-1]).name, ""))


@pytest.fixture
def fake_jdeps():
    return FakeJdeps()
