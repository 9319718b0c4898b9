"""Read main attributes from a jar's META-INF/MANIFEST.MF."""

from __future__ import annotations

import zipfile
from pathlib import Path

from jpack_analyzer.errors import ManifestReadError

MANIFEST_PATH = "META-INF/MANIFEST.MF"
AUTOMATIC_MODULE_NAME = "Automatic-Module-Name"


def parse_main_attributes(text: str) -> dict[str, str]:
    """Parse the main section of a manifest.

    Keys are lower-cased since attribute names are case-insensitive.
    Continuation lines (leading single space) are joined to the previous value.
    """
    attrs: dict[str, str] = {}
    last_key: str | None = None
    for line in text.splitlines():
        if not line:
            break  # end of main section
        if line.startswith(" ") and last_key is not None:
            attrs[last_key] += line[1:]
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        last_key = key.strip().lower()
        attrs[last_key] = value.strip()
    return attrs


def read_main_attributes(jar: Path) -> dict[str, str] | None:
    """Main manifest attributes of jar, or None if it has no manifest."""
    try:
        with zipfile.ZipFile(jar) as zf:
            try:
                data = zf.read(MANIFEST_PATH)
            except KeyError:
                return None
    except (OSError, zipfile.BadZipFile) as e:
        raise ManifestReadError(f"error reading manifest of {jar}: {e}") from e
    return parse_main_attributes(data.decode("utf-8", errors="replace"))


def automatic_module_name(jar: Path) -> str | None:
    """Value of Automatic-Module-Name, or None when the jar does not declare one."""
    attrs = read_main_attributes(jar)
    if not attrs:
        return None
    # an empty value names no module, so the jar stays on the class path
    return attrs.get(AUTOMATIC_MODULE_NAME.lower()) or None
