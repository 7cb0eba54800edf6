"""Shared constants for gleamx.

Names of the Gleam modules and types the generated code depends on, plus
template file conventions.
"""

from __future__ import annotations

# Output builder
BUILDER_MODULE = "gleam/string_builder"
BUILDER_TYPE = "StringBuilder"
BUILDER_VAR = "builder"

# Imported only when a template contains a loop
COLLECTION_MODULE = "gleam/list"

# One level of indentation in generated code
INDENT = "    "

# Names of the generated top-level functions
RENDER_BUILDER_FN = "render_builder"
RENDER_FN = "render"

# File conventions
TEMPLATE_EXTENSION = ".gleamx"
OUTPUT_EXTENSION = ".gleam"
DEFAULT_GENERATOR_NAME = "gleamx"
DEFAULT_SOURCE_DIR = "src"

# Qualifiers the generated code uses to reach the modules above
BUILDER_ALIAS = BUILDER_MODULE.rsplit("/", 1)[-1]
COLLECTION_ALIAS = COLLECTION_MODULE.rsplit("/", 1)[-1]
