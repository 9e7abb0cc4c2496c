"""Character, word and line frequency counting for UTF-8 text."""

from .config import CountConfig
from .counter import WORD_PATTERN, FrequencyTable, count
from .options import DEFAULT_COUNT_OPTION, CountOption
from .report import FrequencyReport, escape_token, write_report
from .source import InvalidEncodingError, iter_lines, open_source
from .url import fetch_url, is_url, open_url_source

__all__ = [
    "count",
    "CountOption",
    "DEFAULT_COUNT_OPTION",
    "FrequencyTable",
    "WORD_PATTERN",
    "InvalidEncodingError",
    "iter_lines",
    "open_source",
    "FrequencyReport",
    "write_report",
    "escape_token",
    "CountConfig",
    "is_url",
    "fetch_url",
    "open_url_source",
]
