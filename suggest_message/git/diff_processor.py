"""Diff Processor - Split a unified diff per file and collect LLM context."""

from dataclasses import dataclass, field
import re

from suggest_message.git.continuity import extract_added_done_bullets, pick_continuity_key


HEADER_PREFIX = 'diff --git a/'
HEADER_RE = re.compile(r'diff --git a/.* b/(.+?)(\s|$)')


def parse_diff_header(line: str) -> str | None:
    """Return the new path of a per-file header line, or None.

    Malformed headers also return None: callers skip them and keep the
    previous segment active.
    """
    if not line.startswith(HEADER_PREFIX):
        return None
    match = HEADER_RE.match(line)
    if not match:
        return None
    return match.group(1)


def parse_diff_files(diff: str) -> list[str]:
    """List changed paths in diff order (duplicates kept)."""
    files = []
    for line in diff.split('\n'):
        path = parse_diff_header(line)
        if path is not None:
            files.append(path)
    return files


def get_file_diff(diff: str, target: str) -> str:
    """Return the lines of ``diff`` that belong to ``target``, or ''."""
    in_file = False
    result = []

    for line in diff.split('\n'):
        path = parse_diff_header(line)
        if path is not None:
            in_file = path == target
        if in_file:
            result.append(line)

    return '\n'.join(result)


@dataclass
class ProcessedDiff:
    """Everything the prompt needs, extracted from one raw diff."""
    raw_diff: str
    changed_files: list[str] = field(default_factory=list)
    continuity_key: str = ""
    continuity_diff: str = ""
    done_bullets: list[str] = field(default_factory=list)
    non_continuity_diff: str = ""

    @property
    def total_files(self) -> int:
        return len(self.changed_files)

    @property
    def has_continuity(self) -> bool:
        return bool(self.continuity_key)


class DiffProcessor:
    """Turns a raw unified diff into a ProcessedDiff."""

    def process(self, raw_diff: str) -> ProcessedDiff:
        files = parse_diff_files(raw_diff)
        key = pick_continuity_key(files)

        continuity_diff = get_file_diff(raw_diff, key) if key else ""
        bullets = extract_added_done_bullets(continuity_diff) if continuity_diff else []

        return ProcessedDiff(
            raw_diff=raw_diff,
            changed_files=files,
            continuity_key=key,
            continuity_diff=continuity_diff,
            done_bullets=bullets,
            non_continuity_diff=self._build_non_continuity_diff(raw_diff, files, key),
        )

    def _build_non_continuity_diff(self, raw_diff: str, files: list[str], key: str) -> str:
        # Without any parseable header there is nothing to split on
        if not files:
            return raw_diff

        # get_file_diff already returns every segment of a recurring path
        others = [f for f in dict.fromkeys(files) if f != key]
        return "\n\n".join(get_file_diff(raw_diff, f) for f in others)
