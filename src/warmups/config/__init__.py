# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Settings loading for warmups."""

from __future__ import annotations

from .loader import (
    CONFIG_FILENAMES,
    CURRENT_YEAR_ENV,
    LoadedSettings,
    discover_config,
    load_settings,
    load_settings_file,
    settings_from_env,
)
from .models import (
    ConfigFieldChoiceError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    InvalidEnvironmentError,
    Settings,
    SettingsModel,
)

__all__ = [
    "CONFIG_FILENAMES",
    "CURRENT_YEAR_ENV",
    "ConfigFieldChoiceError",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "InvalidEnvironmentError",
    "LoadedSettings",
    "Settings",
    "SettingsModel",
    "discover_config",
    "load_settings",
    "load_settings_file",
    "settings_from_env",
]
