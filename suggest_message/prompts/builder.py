"""Prompt Builder - Construct the commit-message prompt from extracted diff context.

The raw diff is embedded in full. Nothing here truncates it, so bounding
the input size is up to the caller.
"""

from suggest_message import COMMIT_TYPES, CONTINUITY_FILE
from suggest_message.git import ProcessedDiff

MAX_BODY_LINES = 7

# Fallbacks keep every context block non-empty
NO_FILES = "(none detected)"
NO_BULLETS = "(none detected)"
NO_CONTINUITY_DIFF = f"({CONTINUITY_FILE} diff not present in this input)"
NO_OTHER_DIFFS = "(none)"
NO_RAW_DIFF = "(empty)"


def _bullet_list(items: list[str], fallback: str) -> str:
    if not items:
        return fallback
    return "\n".join(f"- {item}" for item in items)


class PromptBuilder:
    """Constructs the single instruction prompt sent to the model."""

    def build(
        self,
        raw_diff: str,
        continuity_diff: str,
        done_bullets: list[str],
        changed_files: list[str],
        non_continuity_diff: str,
    ) -> str:
        sections = [
            self._build_role_section(),
            self._build_format_section(),
            self._build_selection_section(),
            self._build_context_section(
                raw_diff, continuity_diff, done_bullets, changed_files, non_continuity_diff
            ),
        ]
        return "\n\n".join(sections)

    def build_from(self, diff: ProcessedDiff) -> str:
        return self.build(
            diff.raw_diff,
            diff.continuity_diff,
            diff.done_bullets,
            diff.changed_files,
            diff.non_continuity_diff,
        )

    def _build_role_section(self) -> str:
        return """You are the commit-message writer for this repository.

Task:
- Suggest a high-quality git commit message based on the staged diff.
- IMPORTANT: Do NOT do code review. Do NOT judge quality/correctness. Only describe intent, scope, and rationale."""

    def _build_format_section(self) -> str:
        types_list = ", ".join(COMMIT_TYPES)
        return f"""Output format:
- Line 1: Conventional Commits subject, type(scope): summary (e.g. feat(ui): ..., fix(api): ..., refactor: ...)
- Allowed types: {types_list}
- Body: at most {MAX_BODY_LINES} lines, using this structure:
  Why:
  - ...
  What:
  - ...
  Notes:
  - ... (optional)
- Output ONLY the commit message: no preamble, no markdown fences."""

    def _build_selection_section(self) -> str:
        return f"""Selection rules:
- If {CONTINUITY_FILE} "Done:" gained new bullet(s), prioritize those as the source of truth for What (and often the subject).
- Use changed file paths to infer scope (ui/api/workflows/lib/app/etc).
- If multiple distinct changes exist, either:
  - suggest splitting commits (1 line), OR
  - pick the dominant theme and mention the rest briefly in Notes."""

    def _build_context_section(
        self,
        raw_diff: str,
        continuity_diff: str,
        done_bullets: list[str],
        changed_files: list[str],
        non_continuity_diff: str,
    ) -> str:
        blocks = [
            ("Changed files", _bullet_list(changed_files, NO_FILES)),
            (f"{CONTINUITY_FILE} Done bullets added", _bullet_list(done_bullets, NO_BULLETS)),
            (f"{CONTINUITY_FILE} diff", continuity_diff or NO_CONTINUITY_DIFF),
            ("Non-CONTINUITY diffs", non_continuity_diff or NO_OTHER_DIFFS),
            ("Raw diff (full)", raw_diff or NO_RAW_DIFF),
        ]
        return "Context extracted:\n" + "\n\n".join(f"[{title}]\n{body}" for title, body in blocks)
