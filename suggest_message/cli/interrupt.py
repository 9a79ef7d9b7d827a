"""Interrupt Handling - Clean up the terminal and exit on SIGINT/SIGTERM."""

import signal

from suggest_message.output import Spinner

EXIT_INTERRUPTED = 130


class InterruptHandler:
    """Process-wide SIGINT/SIGTERM handler bound to one spinner.

    On delivery the spinner is stopped (line erased) and SystemExit(130) is
    raised in the main thread. That unwinds asyncio.run and any blocking
    confirmation prompt alike; the in-flight request is simply abandoned.
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, spinner: Spinner):
        self.spinner = spinner
        self.received: int | None = None
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def install(self) -> None:
        """Register for the process lifetime. Further calls do nothing."""
        if self._installed:
            return
        for sig in self.SIGNALS:
            signal.signal(sig, self._handle)
        self._installed = True

    def _handle(self, signum, frame) -> None:
        self.received = signum
        self.spinner.stop()
        raise SystemExit(EXIT_INTERRUPTED)
