# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer application for the cloud-deploy command line."""

from __future__ import annotations

from .app import app, main, run_match, run_runtimes

__all__ = ["app", "main", "run_match", "run_runtimes"]
