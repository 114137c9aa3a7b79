# renderer/progress.py
import sys

class ProgressMeter:
    """
    Prints one marker per fixed fraction of completed pixels.

    Purely observational; a disabled meter still counts but prints nothing.
    """
    def __init__(self, total: int, markers: int = 50, stream=None,
                 marker: str = "#", enabled: bool = True):
        self.total = total
        self.markers = markers
        self.stream = stream
        self.marker = marker
        self.enabled = enabled
        self.done = 0
        self.shown = 0

    def _print(self, text: str = "", end: str = "\n"):
        if self.enabled:
            print(text, end=end, file=self.stream or sys.stderr, flush=True)

    def update(self, count: int):
        self.done += count
        due = self.done * self.markers // self.total if self.total else self.markers
        if due > self.shown:
            self._print(self.marker * (due - self.shown), end="")
            self.shown = due

    def finish(self):
        self._print()
