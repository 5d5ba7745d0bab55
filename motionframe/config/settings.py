"""Loading and saving resolution settings as JSON."""

import json
import os

from pydantic import ValidationError

from motionframe.config.defaults import ResolutionSettings, get_default_settings
from motionframe.utils import logging as log


def load_settings(settings_path) -> ResolutionSettings:
    """Read settings from a JSON file.

    A missing file gives the defaults. Unknown keys are ignored.

    Raises:
        ValueError: If the file is not valid JSON or holds invalid values
    """
    if not os.path.exists(settings_path):
        log.debug(f"No settings file at {settings_path}, using defaults")
        return get_default_settings()

    with open(settings_path, "r", encoding="utf-8") as f:
        try:
            jdata = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Settings file {settings_path} is not valid JSON: {e}") from e

    try:
        return ResolutionSettings.model_validate(jdata)
    except ValidationError as e:
        raise ValueError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: ResolutionSettings, settings_path) -> None:
    settings_dir = os.path.dirname(settings_path)
    if settings_dir and not os.path.exists(settings_dir):
        os.makedirs(settings_dir, exist_ok=True)
    with open(settings_path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(), f, ensure_ascii=False, indent=4)
    log.debug(f"Saved settings to {settings_path}")
