"""
Language profile loading from JSON files.

A profile directory holds one JSON file per language, named after the
language code (``en``, ``zh-cn``, ...). Without an explicit directory the
profiles bundled with the langdetect distribution are used.
"""

import json
from pathlib import Path
from typing import List, Optional, Sequence, Union

import langdetect
from pydantic import ValidationError

from langprobe.core.config.settings import settings
from langprobe.core.exceptions.custom_exceptions import ProfileError
from langprobe.core.logging.logger import get_logger
from langprobe.profiles.profile import LanguageProfile

logger = get_logger(__name__)


def default_profiles_dir() -> Path:
    """Return the configured profile directory, or langdetect's bundled one."""
    if settings.PROFILES_DIR:
        return Path(settings.PROFILES_DIR)
    return Path(langdetect.__file__).parent / "profiles"


def load_profile(path: Union[str, Path]) -> LanguageProfile:
    """
    Load a single JSON language profile.

    Raises:
        ProfileError: If the file cannot be read or is not a valid profile
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return LanguageProfile.model_validate(data)
    except (OSError, json.JSONDecodeError) as e:
        raise ProfileError(
            f"Failed to read profile {path}: {e}",
            error_code="PROFILE_READ_ERROR",
            details={"path": str(path)},
        ) from e
    except ValidationError as e:
        raise ProfileError(
            f"Invalid profile {path}: {e}",
            error_code="PROFILE_INVALID",
            details={"path": str(path)},
        ) from e


def load_profiles(
    directory: Optional[Union[str, Path]] = None,
    languages: Optional[Sequence[str]] = None,
) -> List[LanguageProfile]:
    """
    Load every profile of a directory, in file name order.

    Args:
        directory: Profile directory (defaults to default_profiles_dir())
        languages: Optional language codes to restrict loading to

    Raises:
        ProfileError: If the directory is missing or a requested language
            has no profile file
    """
    directory = Path(directory) if directory is not None else default_profiles_dir()
    if not directory.is_dir():
        raise ProfileError(
            f"Profile directory not found: {directory}",
            error_code="PROFILE_DIR_NOT_FOUND",
            details={"path": str(directory)},
        )

    files = sorted(p for p in directory.iterdir() if p.is_file())
    if languages is not None:
        available = {p.name for p in files}
        missing = [lang for lang in languages if lang not in available]
        if missing:
            raise ProfileError(
                f"No profile for languages: {', '.join(missing)}",
                error_code="PROFILE_NOT_FOUND",
                details={"languages": missing, "path": str(directory)},
            )
        wanted = set(languages)
        files = [p for p in files if p.name in wanted]

    profiles = [load_profile(p) for p in files]
    logger.debug("Profiles loaded", directory=str(directory), count=len(profiles))
    return profiles
