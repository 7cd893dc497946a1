# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Authenticated REST service for users and budgeted groups."""

__version__ = "0.1.0"
