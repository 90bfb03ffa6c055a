"""
Elapsed-time counter for a game session.

The clock holds no timer of its own. An external driver calls ``tick``
about once per second; ticks are ignored unless the clock was started.
"""
from dataclasses import dataclass


@dataclass
class Clock:
    """Count-up clock in whole seconds."""

    value: int = 0
    ticking: bool = False

    def start(self) -> bool:
        """
        Start counting.

        Returns:
            True if the clock was started, False if it was already running.
        """
        if self.ticking:
            return False
        self.ticking = True
        return True

    def stop(self) -> None:
        self.ticking = False

    def reset(self) -> None:
        """Stop the clock and zero it."""
        self.ticking = False
        self.value = 0

    def tick(self) -> int:
        """Advance one second if running and return the current value."""
        if self.ticking:
            self.value += 1
        return self.value

    def format(self, width: int = 3) -> str:
        """Zero-pad the value to ``width`` digits."""
        return str(self.value).zfill(width)
