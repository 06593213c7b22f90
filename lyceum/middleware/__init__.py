# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from .error_handler import configure_error_handling

__all__ = ["configure_error_handling"]
