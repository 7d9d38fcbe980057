"""Word frequency ranking."""

from .cli import main
from .config import ReportConfig
from .counter import WordCount, count_words, fold, is_word, iter_words, tokenize
from .heap import PriorityQueue, RankedEntry
from .ranking import DEFAULT_TOP_N, RankingResult, build_queue, rank_text, top_n
from .report import OUTPUT_FORMATS, format_json, format_report, format_text
from .source import InputUnavailableError, is_url, read_text

__all__ = [
    "count_words",
    "iter_words",
    "is_word",
    "fold",
    "tokenize",
    "WordCount",
    "PriorityQueue",
    "RankedEntry",
    "RankingResult",
    "build_queue",
    "top_n",
    "rank_text",
    "DEFAULT_TOP_N",
    "format_report",
    "format_text",
    "format_json",
    "OUTPUT_FORMATS",
    "ReportConfig",
    "read_text",
    "is_url",
    "InputUnavailableError",
    "main",
]
