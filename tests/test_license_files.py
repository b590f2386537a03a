from __future__ import annotations

import json

import pytest

from licident.adapters.license_files import FileLicenseSource, load_license_file, load_manifest
from licident.core.license import License


def test_load_license_file_keeps_body_verbatim(tmp_path) -> None:
    path = tmp_path / "LICENSE"
    path.write_text("MIT License\r\n\r\nPermission is hereby granted\n", encoding="utf-8", newline="")

    labeled = load_license_file(str(path), url="https://opensource.org/licenses/MIT")

    assert labeled.label == str(path)
    assert labeled.license.body == "MIT License\r\n\r\nPermission is hereby granted\n"
    assert str(labeled.license.url) == "https://opensource.org/licenses/MIT"


def test_load_manifest_with_inline_and_file_bodies(tmp_path) -> None:
    (tmp_path / "epl.txt").write_text("Eclipse Public License\n", encoding="utf-8")
    manifest = tmp_path / "licenses.json"
    manifest.write_text(
        json.dumps(
            [
                {"url": "http://www.eclipse.org/legal/epl-v10.html", "body_file": "epl.txt"},
                {"body": "Eclipse  Public License", "label": "feature.xml"},
                {"url": "not a url", "body": "BSD"},
            ]
        ),
        encoding="utf-8",
    )

    loaded = load_manifest(str(manifest))

    assert [item.label for item in loaded] == [
        str(tmp_path / "epl.txt"),
        "feature.xml",
        f"{manifest}[2]",
    ]
    assert loaded[0].license == loaded[1].license
    assert loaded[2].license.url is None


def test_manifest_entry_without_body_is_rejected(tmp_path) -> None:
    manifest = tmp_path / "licenses.json"
    manifest.write_text(json.dumps([{"body": "ok"}, {"url": "http://example.com"}]), encoding="utf-8")

    with pytest.raises(ValueError, match="entry 1"):
        load_manifest(str(manifest))


def test_manifest_must_be_a_list(tmp_path) -> None:
    manifest = tmp_path / "licenses.json"
    manifest.write_text(json.dumps({"body": "x"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_manifest(str(manifest))


def test_manifest_null_body_fails_construction(tmp_path) -> None:
    manifest = tmp_path / "licenses.json"
    manifest.write_text(json.dumps([{"body": None}]), encoding="utf-8")

    with pytest.raises(ValueError, match="body cannot be null"):
        load_manifest(str(manifest))


def test_file_source_combines_files_and_manifest(tmp_path) -> None:
    license_file = tmp_path / "COPYING"
    license_file.write_text("GPL", encoding="utf-8")
    manifest = tmp_path / "m.json"
    manifest.write_text(json.dumps([{"body": "GPL "}]), encoding="utf-8")

    loaded = FileLicenseSource([str(license_file)], manifest=str(manifest)).load()

    assert len(loaded) == 2
    assert loaded[0].license == loaded[1].license == License(None, "GPL")


def test_manifest_entry_must_be_an_object(tmp_path) -> None:
    manifest = tmp_path / "licenses.json"
    manifest.write_text(json.dumps([{"body": "ok"}, "MIT"]), encoding="utf-8")

    with pytest.raises(ValueError, match="entry 1 must be a JSON object"):
        load_manifest(str(manifest))
