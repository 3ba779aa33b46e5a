"""Unit tests for stripping version segments from incoming paths."""

import pytest

from versioned_uri.config import VersionedURIConfig
from versioned_uri.exceptions import MalformedInputError
from versioned_uri.undo import strip_version


class TestStripVersion:
    """Tests for strip_version with the current version."""

    def test_strips_current_version(self, path_config: VersionedURIConfig) -> None:
        assert strip_version("/static/v1.2.3/foo.png", "/", path_config) == "/static/foo.png"

    def test_nested_path(self, path_config: VersionedURIConfig) -> None:
        result = strip_version("/static/v1.2.3/img/foo.png", "/", path_config)
        assert result == "/static/img/foo.png"

    def test_unversioned_path_unchanged(self, path_config: VersionedURIConfig) -> None:
        assert strip_version("/static/foo.png", "/", path_config) == "/static/foo.png"

    def test_other_prefix_unchanged(self, path_config: VersionedURIConfig) -> None:
        path = "/media/v1.2.3/foo.png"
        assert strip_version(path, "/", path_config) == path

    def test_old_version_kept_by_default(self, path_config: VersionedURIConfig) -> None:
        path = "/static/v1.0.0/foo.png"
        assert strip_version(path, "/", path_config) == path

    def test_query_mode_is_noop(self, query_config: VersionedURIConfig) -> None:
        path = "/static/v1.2.3/foo.png"
        assert strip_version(path, "/", query_config) == path

    def test_no_patterns_is_noop(self) -> None:
        config = VersionedURIConfig(in_path=True, version="1.2.3")
        path = "/static/v1.2.3/foo.png"
        assert strip_version(path, "/", config) == path

    def test_mount_path(self, path_config: VersionedURIConfig) -> None:
        result = strip_version("/app/static/v1.2.3/foo.png", "/app", path_config)
        assert result == "/app/static/foo.png"

    def test_only_first_segment_stripped(self, path_config: VersionedURIConfig) -> None:
        result = strip_version("/static/v1.2.3/v1.2.3/foo.png", "/", path_config)
        assert result == "/static/v1.2.3/foo.png"


class TestStripAnyVersion:
    """Tests for strip_version with any_version=True."""

    @pytest.mark.parametrize("segment", ["v1.0.0", "v2", "v2024.10.19", "v1_2"])
    def test_strips_any_version(self, path_config: VersionedURIConfig, segment: str) -> None:
        result = strip_version(f"/static/{segment}/foo.png", "/", path_config, any_version=True)
        assert result == "/static/foo.png"

    def test_requires_v_prefix(self, path_config: VersionedURIConfig) -> None:
        path = "/static/images/foo.png"
        assert strip_version(path, "/", path_config, any_version=True) == path

    def test_file_named_like_version_kept(self, path_config: VersionedURIConfig) -> None:
        path = "/static/v1.css"
        assert strip_version(path, "/", path_config, any_version=True) == path

    @pytest.mark.parametrize("directory", ["vendor", "videos", "vue", "v", "v.1", "v1-beta"])
    def test_directories_starting_with_v_kept(
        self, path_config: VersionedURIConfig, directory: str
    ) -> None:
        path = f"/static/{directory}/x.js"
        assert strip_version(path, "/", path_config, any_version=True) == path


class TestMalformed:
    """Malformed input raises MalformedInputError."""

    def test_non_string(self, path_config: VersionedURIConfig) -> None:
        with pytest.raises(MalformedInputError):
            strip_version(42, "/", path_config)  # type: ignore[arg-type]

    def test_unparsable_base(self, path_config: VersionedURIConfig) -> None:
        with pytest.raises(MalformedInputError):
            strip_version("/static/v1.2.3/a", "http://[::1/", path_config)
