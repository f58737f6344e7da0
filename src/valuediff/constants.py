from __future__ import annotations

# Value shapes driving the comparison strategy.
SHAPE_INVALID = "INVALID"
SHAPE_SCALAR = "SCALAR"
SHAPE_FIXED_SEQUENCE = "FIXED_SEQUENCE"
SHAPE_GROWABLE_SEQUENCE = "GROWABLE_SEQUENCE"
SHAPE_MAPPING = "MAPPING"
SHAPE_RECORD = "RECORD"
SHAPE_REFERENCE = "REFERENCE"
SHAPE_BOXED = "BOXED"
SHAPE_OPAQUE = "OPAQUE"

# Shapes whose identity is tracked by the cycle guard.
REFERENCE_LIKE_SHAPES = frozenset(
    {
        SHAPE_REFERENCE,
        SHAPE_MAPPING,
        SHAPE_GROWABLE_SEQUENCE,
        SHAPE_BOXED,
    }
)

# Python records are reached through object references, so record pairs are
# tracked by the cycle guard as well.
CYCLE_TRACKED_SHAPES = REFERENCE_LIKE_SHAPES | {SHAPE_RECORD}

# Shapes that may hold a typed nil.
NILLABLE_SHAPES = REFERENCE_LIKE_SHAPES | {SHAPE_OPAQUE}

DEFAULT_PRIVATE_PREFIX = "_"
DEFAULT_PATH_SEPARATOR = "."

SUPPORTED_INPUT_FORMATS = ("auto", "json", "yaml")
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

EXIT_SUCCESS = 0
EXIT_DIFFERENT = 1
EXIT_INTERNAL_ERROR = 2
