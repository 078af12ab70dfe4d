"""Core constants shared across adjacency, formatting and configuration helpers."""

DEFAULT_FORMAT_SETTINGS = {
    'separator': ", ",
    'range_separator': "-",
    'open_delimiter': "[",
    'close_delimiter': "]",
}
REQUIRED_NON_EMPTY_FORMAT_KEYS = (
    'separator',
    'range_separator',
)
INTEGER_BOUNDS = {
    'u8': (0, 2**8 - 1),
    'u16': (0, 2**16 - 1),
    'u32': (0, 2**32 - 1),
    'u64': (0, 2**64 - 1),
    'u128': (0, 2**128 - 1),
    'i8': (-2**7, 2**7 - 1),
    'i16': (-2**15, 2**15 - 1),
    'i32': (-2**31, 2**31 - 1),
    'i64': (-2**63, 2**63 - 1),
    'i128': (-2**127, 2**127 - 1),
}
MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = (0xD800, 0xDFFF)
LOGGER_NAME = "adjranges"
DEFAULT_LOGGING_SETTINGS = {
    'log_file': 'adjranges.log',
    'console_level': 'WARNING',
    'file_mode': 'w',
    'suppress_root_logger': True,
    'third_party_log_level': 'WARNING',
}
