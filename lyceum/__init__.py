# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from lyceum.errors import HttpFailure

__all__ = ["HttpFailure"]
