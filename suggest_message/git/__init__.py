"""Git Operations Package"""

from suggest_message.git.analyzer import GitAnalyzer, GitError
from suggest_message.git.continuity import extract_added_done_bullets, pick_continuity_key
from suggest_message.git.diff_processor import (
    DiffProcessor,
    ProcessedDiff,
    get_file_diff,
    parse_diff_files,
    parse_diff_header,
)

__all__ = [
    "GitAnalyzer",
    "GitError",
    "DiffProcessor",
    "ProcessedDiff",
    "get_file_diff",
    "parse_diff_files",
    "parse_diff_header",
    "extract_added_done_bullets",
    "pick_continuity_key",
]
