# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic reporting for pylox."""

from pylox.diagnostics.sink import Diagnostic, DiagnosticSink, ErrorState

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ErrorState",
]
