"""A message shown on screen for a while, fading in and then removed."""

from __future__ import annotations


def _lerp(start: float, end: float, alpha: float) -> float:
    return start + alpha * (end - start)


class ScreenMessage:
    """Opacity over time of an on-screen message.

    The message fades in for ``fade_duration``, stays for ``life_time``, runs
    one more fade of ``fade_duration`` and is then removed.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.life_time = 5.0
        self.fade_duration = 2.0
        self.elapsed_time = 0.0
        self.opacity = 0.0
        self.removed = False

    def setup_durations(self, life_time: float, fade_duration: float) -> None:
        """Set how long the message lives and how long each fade lasts."""
        self.life_time = life_time
        self.fade_duration = fade_duration

    def _fraction(self, time: float) -> float:
        if self.fade_duration == 0:
            return 1.0
        return time / self.fade_duration

    def tick(self, delta_time: float) -> None:
        """Update the opacity for the current time, then advance the clock."""
        if self.removed:
            return

        opacity = 1.0
        fade_end = self.life_time + self.fade_duration
        if self.elapsed_time > fade_end + self.fade_duration:
            self.removed = True
            return
        if self.elapsed_time > fade_end:
            opacity = _lerp(0.0, 1.0, self._fraction(self.elapsed_time - fade_end))
        elif self.elapsed_time <= self.fade_duration:
            opacity = _lerp(0.0, 1.0, self._fraction(self.elapsed_time))

        self.opacity = opacity
        self.elapsed_time += delta_time