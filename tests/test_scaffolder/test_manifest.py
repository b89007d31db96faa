"""Tests for package.json patching.

Covers:
- Only name, description and homepage change; other fields and key order
  are kept
- Extra dependencies merge without dropping existing ones
- Two-space formatting with a trailing newline
- Missing or malformed manifests
"""

from __future__ import annotations

import json

import pytest

from examplegen.errors import ManifestParseError, SourceNotFoundError
from examplegen.scaffolder.manifest import apply_manifest_fields, patch_manifest


pytestmark = pytest.mark.unit


_FIELDS = dict(
    name="fhevm-example-fhe-counter",
    description="A simple FHE counter",
    homepage="https://github.com/zama-ai/fhevm-examples/fhe-counter",
)


@pytest.fixture
def manifest_path(template_dir):
    return template_dir / "package.json"


# ---------------------------------------------------------------------------
# apply_manifest_fields
# ---------------------------------------------------------------------------


class TestApplyManifestFields:
    def test_does_not_mutate_input(self):
        original = {"name": "old", "version": "1.0.0"}
        patched = apply_manifest_fields(original, **_FIELDS)
        assert original["name"] == "old"
        assert patched["name"] == _FIELDS["name"]

    def test_missing_keys_appended(self):
        patched = apply_manifest_fields({"version": "1.0.0"}, **_FIELDS)
        assert list(patched) == ["version", "name", "description", "homepage"]

    def test_merge_into_absent_dependencies(self):
        patched = apply_manifest_fields(
            {"name": "x"}, extra_dependencies={"a": "^1.0.0"}, **_FIELDS
        )
        assert patched["dependencies"] == {"a": "^1.0.0"}

    def test_non_object_dependencies(self):
        with pytest.raises(ValueError):
            apply_manifest_fields(
                {"dependencies": ["a"]}, extra_dependencies={"b": "1"}, **_FIELDS
            )


# ---------------------------------------------------------------------------
# patch_manifest
# ---------------------------------------------------------------------------


class TestPatchManifest:
    def test_identifying_fields_replaced(self, manifest_path):
        patched = patch_manifest(manifest_path, **_FIELDS)
        on_disk = json.loads(manifest_path.read_text())
        assert on_disk == patched
        assert on_disk["name"] == _FIELDS["name"]
        assert on_disk["description"] == _FIELDS["description"]
        assert on_disk["homepage"] == _FIELDS["homepage"]

    def test_other_fields_unchanged(self, manifest_path):
        before = json.loads(manifest_path.read_text())
        after = patch_manifest(manifest_path, **_FIELDS)
        for key in before:
            if key not in ("name", "description", "homepage"):
                assert after[key] == before[key]
        assert list(after) == list(before)

    def test_formatting(self, manifest_path):
        patch_manifest(manifest_path, **_FIELDS)
        text = manifest_path.read_text()
        assert text.endswith("}\n")
        assert '\n  "name": "fhevm-example-fhe-counter",' in text

    def test_extra_dependencies_merged(self, manifest_path):
        extra = {"@openzeppelin/confidential-contracts": "^0.1.0"}
        patched = patch_manifest(manifest_path, extra_dependencies=extra, **_FIELDS)
        assert patched["dependencies"] == {
            "encrypted-types": "^0.0.4",
            "@fhevm/solidity": "^0.9.1",
            "@openzeppelin/confidential-contracts": "^0.1.0",
        }
        assert patched["devDependencies"] == {"hardhat": "^2.26.0"}

    def test_extra_dependency_overrides_version(self, manifest_path):
        patched = patch_manifest(
            manifest_path, extra_dependencies={"encrypted-types": "^0.1.0"}, **_FIELDS
        )
        assert patched["dependencies"]["encrypted-types"] == "^0.1.0"
        assert "@fhevm/solidity" in patched["dependencies"]

    def test_unicode_written_as_is(self, manifest_path):
        patch_manifest(
            manifest_path,
            name="x",
            description="Chiffrement homomorphe complet: démo",
            homepage="h",
        )
        assert "démo" in manifest_path.read_text(encoding="utf-8")

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            patch_manifest(tmp_path / "package.json", **_FIELDS)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{ not json")
        with pytest.raises(ManifestParseError):
            patch_manifest(path, **_FIELDS)

    def test_root_not_object(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("[1, 2]")
        with pytest.raises(ManifestParseError, match="not an object"):
            patch_manifest(path, **_FIELDS)
        assert path.read_text() == "[1, 2]"

    def test_bad_dependencies_field(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"dependencies": "none"}')
        with pytest.raises(ManifestParseError):
            patch_manifest(path, extra_dependencies={"a": "1"}, **_FIELDS)
