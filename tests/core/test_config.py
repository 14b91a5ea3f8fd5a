from pathlib import Path

import pytest

from core.models.errors import ConfigurationError
from core.utils.config import get_gallery_root, get_media_prefix
from core.utils.constants import ENV_GALLERY_MEDIA_PREFIX, ENV_GALLERY_ROOT


class TestGalleryRoot:
    def test_reads_root_from_environment(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv(ENV_GALLERY_ROOT, str(tmp_path))

        assert get_gallery_root() == tmp_path.resolve()

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_root_raises(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv(ENV_GALLERY_ROOT, value)

        with pytest.raises(ConfigurationError) as exc_info:
            get_gallery_root()

        assert exc_info.value.error_code == "GALLERY_ROOT_MISSING"

    def test_unset_root_raises(self, monkeypatch) -> None:
        monkeypatch.delenv(ENV_GALLERY_ROOT, raising=False)

        with pytest.raises(ConfigurationError):
            get_gallery_root()


class TestMediaPrefix:
    def test_default_prefix(self, monkeypatch) -> None:
        monkeypatch.delenv(ENV_GALLERY_MEDIA_PREFIX, raising=False)

        assert get_media_prefix() == "/media"

    def test_trailing_slash_is_removed(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_GALLERY_MEDIA_PREFIX, "https://cdn.example.com/files/")

        assert get_media_prefix() == "https://cdn.example.com/files"
