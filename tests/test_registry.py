"""
Tests for the repository registry.
"""
import pytest

from commitgrid.exit_codes import RegistryError, DATA_ERROR
from commitgrid.services import RegistryService, merge


class TestMerge:
    """Tests for merge()."""

    def test_into_empty(self):
        assert merge([], ["/a", "/b"]) == ["/a", "/b"]

    def test_existing_path_not_repeated(self):
        assert merge(["/p"], ["/p"]) == ["/p"]

    @pytest.mark.parametrize("existing", [[], ["/p"], ["/x", "/p", "/y"], ["/x"]])
    def test_exactly_one_occurrence(self, existing):
        assert merge(existing, ["/p"]).count("/p") == 1

    def test_order_preserved_and_new_appended(self):
        merged = merge(["/a", "/b"], ["/c", "/b", "/a", "/d"])
        assert merged == ["/a", "/b", "/c", "/d"]

    def test_duplicates_within_incoming_collapsed(self):
        assert merge(["/a"], ["/b", "/b"]) == ["/a", "/b"]

    def test_existing_left_untouched(self):
        existing = ["/a", "/a"]
        assert merge(existing, []) == ["/a", "/a"]
        assert existing == ["/a", "/a"]

    def test_exact_string_match(self):
        assert merge(["/a"], ["/a/"]) == ["/a", "/a/"]


class TestRegistryService:
    """Tests for RegistryService persistence."""

    def test_first_scan_creates_file(self, tmp_path):
        path = tmp_path / ".gogitlocalstats"
        assert not path.exists()

        RegistryService(path).add(["/code/one", "/code/two"])

        assert path.exists()
        assert path.read_text().splitlines() == ["/code/one", "/code/two"]

    def test_load_creates_empty_file(self, tmp_path):
        path = tmp_path / "registry"
        assert RegistryService(path).load() == []
        assert path.exists()
        assert path.read_text() == ""

    def test_add_merges_with_existing(self, tmp_path):
        path = tmp_path / "registry"
        path.write_text("/code/one\n/code/two\n")

        merged = RegistryService(path).add(["/code/three", "/code/one"])

        assert merged == ["/code/one", "/code/two", "/code/three"]
        assert path.read_text().splitlines() == merged

    def test_repeated_scans_do_not_duplicate(self, tmp_path):
        registry = RegistryService(tmp_path / "registry")
        registry.add(["/code/one"])
        registry.add(["/code/one"])
        assert registry.load() == ["/code/one"]

    def test_blank_lines_ignored(self, tmp_path):
        path = tmp_path / "registry"
        path.write_text("/code/one\n\n/code/two")
        assert RegistryService(path).load() == ["/code/one", "/code/two"]

    def test_whitespace_in_paths_preserved(self, tmp_path):
        path = tmp_path / "registry"
        registry = RegistryService(path)
        registry.add(["/code/trailing ", " /code/leading"])

        assert path.read_text() == "/code/trailing \n /code/leading\n"
        assert registry.load() == ["/code/trailing ", " /code/leading"]

        registry.add(["/code/trailing"])
        assert registry.load() == ["/code/trailing ", " /code/leading", "/code/trailing"]

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "registry"
        path.write_bytes(b"/code/one\r\n/code/two\r\n")
        assert RegistryService(path).load() == ["/code/one", "/code/two"]

    def test_unreadable_registry(self, tmp_path):
        # A directory where the file should be
        registry = RegistryService(tmp_path)
        with pytest.raises(RegistryError) as exc_info:
            registry.load()
        assert exc_info.value.exit_code == DATA_ERROR

    def test_unwritable_registry(self, tmp_path):
        registry = RegistryService(tmp_path / "missing_dir" / "registry")
        with pytest.raises(RegistryError):
            registry.add(["/code/one"])

    def test_from_config(self, tmp_path):
        config = {'general': {'registry_file': str(tmp_path / "configured")}}
        assert RegistryService.from_config(config).path == tmp_path / "configured"

    def test_from_config_override(self, tmp_path):
        config = {'general': {'registry_file': str(tmp_path / "configured")}}
        registry = RegistryService.from_config(config, override=str(tmp_path / "other"))
        assert registry.path == tmp_path / "other"

    def test_from_config_without_file(self):
        with pytest.raises(RegistryError):
            RegistryService.from_config({'general': {'registry_file': ''}})
