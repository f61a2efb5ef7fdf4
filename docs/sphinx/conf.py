# Copyright 2026 SwiftSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for SwiftSpec documentation."""

project = "SwiftSpec"
author = "SwiftSpec Contributors"
release = "0.1.0"

# Docstrings use Google style sections (Args, Returns, Raises).
extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
