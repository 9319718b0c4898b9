"""Tests for parsing jdeps --print-module-deps output."""

from pathlib import Path

import pytest

from jpack_analyzer.analyzer.jdeps_output import parse_jdeps_output
from jpack_analyzer.analyzer.registry import ModuleRegistry
from jpack_analyzer.errors import JdepsOutputError


def _write(tmpdir: Path, lines: list[str]) -> Path:
    p = tmpdir / "x.jdeps"
    p.write_text("\n".join(lines) + "\n")
    return p


def test_splits_diagnostics_from_module_lists(tmp_path):
    reg = ModuleRegistry(system_modules=("java.base",))
    out = _write(tmp_path, ["Warning: bad thing", "java.base,com.foo.mod", "Warning: bad thing"])

    deps = parse_jdeps_output(out, "n1", reg)

    assert reg.warnings == ["Warning: bad thing"]
    assert reg.errors == []
    assert deps.linked_system == ["java.base"]
    assert deps.linked == ["com.foo.mod"]
    assert deps.automatic == []
    assert deps.all == ["java.base", "com.foo.mod"]
    assert reg.linked_system_modules == ["java.base"]
    assert reg.linked_modules == ["com.foo.mod"]
    assert reg.all_modules == ["java.base", "com.foo.mod"]


def test_error_lines_are_collected_not_raised(tmp_path):
    reg = ModuleRegistry()
    out = _write(tmp_path, ["Error: missing dependencies", "Error: missing dependencies"])
    parse_jdeps_output(out, "n1", reg)
    assert reg.errors == ["Error: missing dependencies"]
    assert reg.all_modules == []


def test_known_automatic_module_is_not_linked(tmp_path):
    reg = ModuleRegistry(system_modules=("java.base",))
    reg.automatic_modules.append("mod.auto")
    out = _write(tmp_path, ["java.base,mod.auto,mod.other"])

    deps = parse_jdeps_output(out, "n1", reg)

    assert deps.automatic == ["mod.auto"]
    assert deps.linked == ["mod.other"]
    assert "mod.auto" not in reg.linked_modules
    # parsing never asserts automatic status on its own
    assert reg.automatic_modules == ["mod.auto"]


def test_system_module_wins_over_linked(tmp_path):
    reg = ModuleRegistry(system_modules=("java.sql",))
    out = _write(tmp_path, ["java.sql", "java.sql,java.sql"])
    parse_jdeps_output(out, "n1", reg)
    assert reg.linked_system_modules == ["java.sql"]
    assert "java.sql" not in reg.linked_modules


def test_dedup_across_nodes(tmp_path):
    reg = ModuleRegistry(system_modules=("java.base",))
    a = tmp_path / "a.jdeps"
    b = tmp_path / "b.jdeps"
    a.write_text("Warning: w\njava.base,mod.x\n")
    b.write_text("Warning: w\nmod.x,java.base,mod.y\n")

    parse_jdeps_output(a, "a", reg)
    parse_jdeps_output(b, "b", reg)

    assert reg.all_modules == ["java.base", "mod.x", "mod.y"]
    assert reg.linked_modules == ["mod.x", "mod.y"]
    assert reg.warnings == ["Warning: w"]
    assert reg.all_modules_map["b"] == ["mod.x", "java.base", "mod.y"]


def test_reparsing_same_node_is_idempotent(tmp_path):
    reg = ModuleRegistry(system_modules=("java.base",))
    out = _write(tmp_path, ["java.base,mod.x", "mod.x"])

    first = parse_jdeps_output(out, "n1", reg)
    first_lists = (list(first.all), list(first.linked), list(first.linked_system))
    parse_jdeps_output(out, "n1", reg)

    assert (reg.all_modules_map["n1"], reg.linked_modules_map["n1"],
            reg.linked_system_modules_map["n1"]) == first_lists
    assert reg.linked_modules == ["mod.x"]


def test_blank_lines_and_whitespace_ignored(tmp_path):
    reg = ModuleRegistry()
    out = _write(tmp_path, ["", " mod.a , mod.b ", ""])
    deps = parse_jdeps_output(out, "n1", reg)
    assert deps.all == ["mod.a", "mod.b"]


def test_crlf_line_endings(tmp_path):
    reg = ModuleRegistry()
    out = tmp_path / "x.jdeps"
    out.write_bytes(b"Warning: w\r\nmod.a\r\n")
    parse_jdeps_output(out, "n1", reg)
    assert reg.warnings == ["Warning: w"]
    assert reg.all_modules == ["mod.a"]


def test_read_failure_is_fatal_but_maps_stay_seeded(tmp_path):
    reg = ModuleRegistry()
    with pytest.raises(JdepsOutputError) as exc:
        parse_jdeps_output(tmp_path / "missing.jdeps", "n1", reg)
    assert "n1" in str(exc.value)
    assert isinstance(exc.value.__cause__, OSError)
    for m in (reg.all_modules_map, reg.linked_modules_map,
              reg.automatic_modules_map, reg.linked_system_modules_map):
        assert m["n1"] == []
