"""Core helpers for displaying runs of adjacent values compactly."""

from .adjacency import (
    CHAR,
    I8,
    I16,
    I32,
    I64,
    I128,
    INTEGER,
    METHOD,
    U8,
    U16,
    U32,
    U64,
    U128,
    Adjacency,
    AdjacencyError,
    CharAdjacency,
    Discrete,
    IntegerAdjacency,
    MethodAdjacency,
    PredicateAdjacency,
    SuccessorAdjacency,
    adjacency_for,
)
from .config import (
    DEFAULT_SETTINGS,
    FormatConfigService,
    FormatSettings,
    load_format_settings,
    parse_format_settings,
)
from .formatting import (
    AdjacentRanges,
    condense_ranges,
    debug_adjacent,
    debug_adjacent_by,
    format_ranges,
    format_run,
    log_adjacent,
)
from .logging_config import (
    LoggingSettings,
    configure_logging,
    get_logger,
    parse_logging_settings,
    setup_logging,
)
from .runs import Run, build_runs, expand_run, expand_runs

__all__ = [
    "Adjacency",
    "AdjacencyError",
    "AdjacentRanges",
    "adjacency_for",
    "build_runs",
    "CHAR",
    "CharAdjacency",
    "condense_ranges",
    "debug_adjacent",
    "debug_adjacent_by",
    "DEFAULT_SETTINGS",
    "Discrete",
    "expand_run",
    "expand_runs",
    "format_ranges",
    "format_run",
    "FormatConfigService",
    "FormatSettings",
    "configure_logging",
    "get_logger",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INTEGER",
    "IntegerAdjacency",
    "load_format_settings",
    "log_adjacent",
    "LoggingSettings",
    "METHOD",
    "MethodAdjacency",
    "parse_format_settings",
    "parse_logging_settings",
    "PredicateAdjacency",
    "Run",
    "setup_logging",
    "SuccessorAdjacency",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
]
