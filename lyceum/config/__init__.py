# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

"""Environment-driven settings."""

from lyceum.config.settings import AppConfig, load_config

__all__ = ("AppConfig", "load_config")
