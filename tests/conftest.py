from pathlib import Path

import pytest


GUID_A = "0123456789abcdef0123456789abcdef"
GUID_F = "ffffffffffffffffffffffffffffffff"


def write_meta(path: Path, guid: str, newline: str = "\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["fileFormatVersion: 2", f"guid: {guid}", "TextureImporter:", "  mipmaps: 1"]
    path.write_bytes(newline.join(lines).encode("utf-8") + newline.encode("utf-8"))
    return path


@pytest.fixture
def pack_tree(tmp_path: Path) -> Path:
    base = tmp_path / "installed"
    write_meta(base / "a" / "x.meta", GUID_A)
    write_meta(base / "b" / "y.meta", GUID_F)
    return base


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    out = tmp_path / "manifest.txt"
    out.touch()
    return out
