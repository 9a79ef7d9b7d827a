"""Git Analyzer - Read staged changes from git and commit with a message."""

import asyncio


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitAnalyzer:
    """Runs git as a subprocess on the running event loop."""

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd

    async def _run_git(self, *args: str, stdin_text: str | None = None, capture_stdout: bool = True) -> str:
        """Run a git command and return stdout. Non-zero exit raises GitError."""
        try:
            proc = await asyncio.create_subprocess_exec(
                'git', *args,
                cwd=self.cwd,
                stdin=asyncio.subprocess.PIPE if stdin_text is not None else None,
                stdout=asyncio.subprocess.PIPE if capture_stdout else None,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

        stdout, stderr = await proc.communicate(
            stdin_text.encode('utf-8') if stdin_text is not None else None
        )
        if proc.returncode != 0:
            err = stderr.decode('utf-8', errors='replace')
            raise GitError(f"git {' '.join(args)} failed: {err}")

        return stdout.decode('utf-8', errors='replace') if stdout else ""

    async def get_staged_files(self) -> list[str]:
        """Paths from 'git diff --cached --name-only'."""
        output = await self._run_git('diff', '--cached', '--name-only')
        return [line for line in output.splitlines() if line.strip()]

    async def get_staged_diff(self) -> str:
        return await self._run_git('diff', '--cached')

    async def commit(self, message: str, edit: bool = False) -> str:
        """Commit with ``message`` streamed to 'git commit -F -'.

        With ``edit`` git opens the user's editor before finalizing, so
        stdout stays attached to the terminal.
        """
        args = ['commit', '-e', '-F', '-'] if edit else ['commit', '-F', '-']
        return await self._run_git(*args, stdin_text=message, capture_stdout=not edit)
