"""CONTINUITY.md - Pull newly added "Done" bullets out of the progress log diff."""

from suggest_message import CONTINUITY_FILE

# Section headers are matched as line prefixes, e.g. "Done:" / "Now:"
DONE_SECTION = "Done"
NOW_SECTION = "Now"

# Added line, two-space indent, dash
BULLET_PREFIX = "+  - "

METADATA_PREFIXES = ("diff --git", "index ", "---", "+++", "@@")
DIFF_MARKERS = (" ", "+", "-")


def pick_continuity_key(files: list[str]) -> str:
    """Find the progress log among changed files. Top-level file wins."""
    for path in files:
        if path == CONTINUITY_FILE:
            return path
    for path in files:
        if path.endswith("/" + CONTINUITY_FILE):
            return path
    return ""


def _strip_marker(line: str) -> str:
    if line[:1] in DIFF_MARKERS:
        return line[1:]
    return line


def extract_added_done_bullets(continuity_diff: str) -> list[str]:
    """Return bullets added under "Done", in first-seen order, without duplicates.

    Context and removed lines only move the section state; just added
    ``+  - `` lines inside "Done" are captured. A "Now" header closes the
    section.
    """
    in_done = False
    seen = set()
    bullets = []

    for raw_line in continuity_diff.split("\n"):
        if raw_line.startswith(METADATA_PREFIXES):
            continue

        normalized = _strip_marker(raw_line)
        if normalized.startswith(DONE_SECTION):
            in_done = True
            continue
        if normalized.startswith(NOW_SECTION):
            in_done = False
            continue

        if in_done and raw_line.startswith(BULLET_PREFIX):
            bullet = raw_line[len(BULLET_PREFIX):].strip()
            if bullet and bullet not in seen:
                seen.add(bullet)
                bullets.append(bullet)

    return bullets
