"""
Unit tests for JSON profile loading
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from langprobe.core.exceptions.custom_exceptions import ProfileError
from langprobe.profiles.loader import default_profiles_dir, load_profile, load_profiles


@pytest.fixture
def profile_dir(tmp_path: Path, json_profiles) -> Path:
    """Directory holding lang1 and lang2 profile files"""
    for raw in json_profiles:
        name = json.loads(raw)["name"]
        (tmp_path / name).write_text(raw, encoding="utf-8")
    return tmp_path


class TestLoadProfile:
    """Test single file loading"""

    def test_load(self, profile_dir):
        """Test a valid file is parsed"""
        profile = load_profile(profile_dir / "lang1")
        assert profile.name == "lang1"
        assert profile.n_words == [12, 3, 4]
        assert profile.freq["ABC"] == 2

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ProfileError"""
        with pytest.raises(ProfileError) as exc_info:
            load_profile(tmp_path / "nope")
        assert exc_info.value.error_code == "PROFILE_READ_ERROR"

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ProfileError"""
        path = tmp_path / "bad"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ProfileError):
            load_profile(path)

    def test_invalid_schema(self, tmp_path):
        """Test a schema violation raises ProfileError"""
        path = tmp_path / "bad"
        path.write_text('{"name": "bad", "freq": []}', encoding="utf-8")
        with pytest.raises(ProfileError) as exc_info:
            load_profile(path)
        assert exc_info.value.error_code == "PROFILE_INVALID"


class TestLoadProfiles:
    """Test directory loading"""

    def test_sorted_order(self, profile_dir):
        """Test files load in name order"""
        profiles = load_profiles(profile_dir)
        assert [p.name for p in profiles] == ["lang1", "lang2"]

    def test_language_filter(self, profile_dir):
        """Test loading a subset"""
        profiles = load_profiles(profile_dir, languages=["lang2"])
        assert [p.name for p in profiles] == ["lang2"]

    def test_unknown_language(self, profile_dir):
        """Test requesting a language without file fails"""
        with pytest.raises(ProfileError) as exc_info:
            load_profiles(profile_dir, languages=["lang2", "xx"])
        assert exc_info.value.details["languages"] == ["xx"]

    def test_missing_directory(self, tmp_path):
        """Test a missing directory fails"""
        with pytest.raises(ProfileError) as exc_info:
            load_profiles(tmp_path / "missing")
        assert exc_info.value.error_code == "PROFILE_DIR_NOT_FOUND"

    def test_subdirectories_ignored(self, profile_dir):
        """Test only regular files are loaded"""
        (profile_dir / "nested").mkdir()
        assert len(load_profiles(profile_dir)) == 2

    def test_bundled_corpus(self):
        """Test the default corpus ships 55 languages"""
        profiles = load_profiles()
        names = [p.name for p in profiles]

        assert len(profiles) == 55
        assert {"de", "en", "fr", "ja", "vi", "zh-cn"} <= set(names)
        assert names == sorted(names)

    def test_configured_directory(self, profile_dir):
        """Test PROFILES_DIR overrides the bundled corpus"""
        with patch("langprobe.profiles.loader.settings") as mock_settings:
            mock_settings.PROFILES_DIR = str(profile_dir)
            assert default_profiles_dir() == profile_dir
            assert [p.name for p in load_profiles()] == ["lang1", "lang2"]
