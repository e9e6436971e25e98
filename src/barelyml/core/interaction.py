"""Click-versus-drag link activation."""

import math
import webbrowser
from typing import Callable, Optional

from barelyml.config import Settings
from barelyml.formatting.ir import Block, Link


# Maximum pointer travel, in pixels, for a press to count as a click
DEFAULT_CLICK_THRESHOLD = 20.0

Position = tuple[float, float]


def open_in_browser(link: Link) -> None:
    webbrowser.open(link.target)


class LinkActivator:
    """Activate a block's link when a press is released close to where it started.

    A renderer calls ``mouse_down`` with the block under the pointer and
    ``mouse_up`` on release. Releases further than ``threshold`` pixels
    from the press are treated as drags and ignored.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_CLICK_THRESHOLD,
        on_activate: Optional[Callable[[Link], None]] = None,
    ) -> None:
        self.threshold = threshold
        self.on_activate = on_activate or open_in_browser
        self._pressed: Optional[Block] = None
        self._pressed_at: Optional[Position] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        on_activate: Optional[Callable[[Link], None]] = None,
    ) -> "LinkActivator":
        return cls(threshold=settings.click_threshold, on_activate=on_activate)

    def mouse_down(self, block: Optional[Block], position: Position) -> None:
        self._pressed = block
        self._pressed_at = position

    def mouse_up(self, position: Position) -> Optional[Link]:
        """Finish a press; returns the activated link, if any."""
        block, start = self._pressed, self._pressed_at
        self._pressed = None
        self._pressed_at = None
        if block is None or start is None or block.link is None or not block.link.target:
            return None
        distance = math.hypot(position[0] - start[0], position[1] - start[1])
        if distance >= self.threshold:
            return None
        self.on_activate(block.link)
        return block.link
