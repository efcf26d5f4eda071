import logging
import sys
import threading
import time

import click

QUIET_LOGGERS = ["botocore", "boto3", "urllib3"]


######## Logging
def configure_logging(level: str = "WARNING"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


######## Spinner
class Spinner:
    """
    Context manager that animates a status line while a blocking call runs.

    On exit the line is replaced by ``done_text`` (with the elapsed seconds)
    or ``fail_text``; exceptions always propagate. Frames are only drawn
    when stdout is a terminal, so piped output gets the final line alone.
    """

    FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
    INTERVAL = 0.1

    def __init__(
        self,
        text: str = "",
        done_text: str = "✅ Operation Complete!",
        fail_text: str = "❗ Operation Failed!",
    ):
        self.text = text
        self.done_text = done_text
        self.fail_text = fail_text
        self._stopped = threading.Event()
        self._thread = None
        self._started_at = None
        self._width = 0

    @property
    def elapsed(self) -> int:
        return int(time.monotonic() - self._started_at)

    def _draw(self):
        frame = 0
        while not self._stopped.wait(self.INTERVAL):
            glyph = self.FRAMES[frame % len(self.FRAMES)]
            line = f"{glyph} {self.text} ({self.elapsed}s)"
            self._width = max(self._width, len(line))
            click.echo(f"\r{line}", nl=False)
            frame += 1

    def _finish(self, status: str):
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
            click.echo("\r" + " " * self._width + "\r", nl=False)
        click.echo(status)

    def __enter__(self):
        self._started_at = time.monotonic()
        if sys.stdout.isatty():
            self._thread = threading.Thread(target=self._draw, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self._finish(f"{self.done_text} ({self.elapsed}s)")
        elif issubclass(exc_type, KeyboardInterrupt):
            self._finish("❗ Operation cancelled.")
        else:
            self._finish(self.fail_text)
        return False


if __name__ == "__main__":
    pass
