"""Terminal Output Formatting Package"""

import asyncio
import re
import sys
import os


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓⠾'.encode(sys.stderr.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}", file=sys.stderr)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_debug(message: str) -> None:
    print(dim(f"[debug] {message}"), file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = re.match(r'^(\w+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        color = COMMIT_TYPE_COLORS.get(match.group(1))
        if color:
            prefix = match.group(0)
            lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


class Spinner:
    """Animated spinner on stderr while an awaitable runs.

    Runs as an asyncio task on the caller's loop. Use as async context
    manager, or call start()/stop() directly. stop() is synchronous so a
    signal handler can call it.
    """
    FRAMES_UNICODE = ['⠾', '⠽', '⠻', '⠧', '⠟', '⠯', '⠷']
    FRAMES_ASCII = ['-', '\\', '|', '/']
    INTERVAL = 0.1
    ERASE = '\r\033[K'

    def __init__(self, message: str = " Calling API...", stream=None, enabled: bool | None = None):
        self.message = message
        self.stream = stream if stream is not None else sys.stderr
        if enabled is None:
            enabled = hasattr(self.stream, 'isatty') and self.stream.isatty()
        self.enabled = enabled
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII
        # Identifies the current run; cleared by stop()
        self._run_token: object | None = None
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._run_token is not None

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    async def _spin(self, token: object) -> None:
        idx = 0
        while self._run_token is token:
            await asyncio.sleep(self.INTERVAL)
            # stop() may have run while we slept
            if self._run_token is not token:
                break
            frame = self._frames[idx % len(self._frames)]
            self._write(f'\r{frame}{self.message}')
            idx += 1

    def start(self) -> None:
        """Begin animating. No-op if already running or disabled."""
        if self.active or not self.enabled:
            return
        token = self._run_token = object()
        self._task = asyncio.get_running_loop().create_task(self._spin(token))

    def stop(self) -> None:
        """Stop animating and erase the line. Safe to call repeatedly."""
        if not self.active:
            return
        self._run_token = None
        try:
            self._write(self.ERASE)
        except (OSError, ValueError, RuntimeError):
            # stream closed during shutdown, or a signal landed mid-write
            pass

    async def __aenter__(self) -> 'Spinner':
        self.start()
        return self

    async def __aexit__(self, *args) -> None:
        self.stop()
        task, self._task = self._task, None
        if task is not None:
            await task


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "success", "error", "dim",
    "print_success", "print_error", "print_debug",
    "colorize_commit_type", "Spinner", "COMMIT_TYPE_COLORS",
]
