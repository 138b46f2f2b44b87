import asyncio
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)

CODE_BLOCK_SELECTOR = ".post-content .code-block"
IDLE_LABEL = "Copy"
COPIED_LABEL = "Copied!"


class ControlState(str, Enum):
    IDLE = "idle"
    COPYING = "copying"


def call_later(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


class CopyControl:
    """One copy button attached to one rendered code block."""

    def __init__(self, block: Tag, button: Tag):
        self.block = block
        self.button = button
        self.state = ControlState.IDLE
        self.attached = True
        self._timer: Optional[Any] = None

    @property
    def text(self) -> str:
        code = self.block.select_one("pre code")
        return code.get_text() if code is not None else ""

    @property
    def label(self) -> str:
        return self.button.get_text()

    @property
    def disabled(self) -> bool:
        return self.button.has_attr("disabled")


class CopyControls:
    """
    Copy-to-clipboard controls for a rendered post view.

    ``mount`` attaches one ``<button class="copy-code">`` per code block,
    ``click`` copies the block's literal text and shows "Copied!" with the
    button disabled for ``feedback_ms``, ``unmount`` removes every button and
    cancels pending reversions. ``schedule(delay_seconds, callback)`` must
    return a handle with ``cancel()``; it defaults to the running asyncio
    loop's ``call_later``.
    """

    def __init__(
        self,
        clipboard: Callable[[str], None],
        feedback_ms: int = 3000,
        schedule: Callable[[float, Callable[[], None]], Any] = call_later,
    ):
        self.clipboard = clipboard
        self.feedback_ms = feedback_ms
        self.schedule = schedule
        self.controls: List[CopyControl] = []
        self._view: Optional[BeautifulSoup] = None

    @property
    def mounted(self) -> bool:
        return self._view is not None

    def mount(self, view: BeautifulSoup) -> List[CopyControl]:
        if self.mounted:
            raise RuntimeError("Copy controls are already mounted")

        self._view = view
        for block in view.select(CODE_BLOCK_SELECTOR):
            button = view.new_tag(
                "button", attrs={"type": "button", "class": "copy-code"}
            )
            button.string = IDLE_LABEL
            block.append(button)
            self.controls.append(CopyControl(block, button))

        logger.debug(f"Attached {len(self.controls)} copy controls")
        return list(self.controls)

    def click(self, control: CopyControl) -> bool:
        """Returns False when the click was ignored."""
        if not control.attached or control.state is not ControlState.IDLE:
            return False

        # a failing clipboard leaves the control idle
        self.clipboard(control.text)
        control.state = ControlState.COPYING
        control.button["disabled"] = ""
        control.button.string = COPIED_LABEL
        control._timer = self.schedule(
            self.feedback_ms / 1000, lambda: self._revert(control)
        )
        return True

    def unmount(self) -> None:
        for control in self.controls:
            if control._timer is not None:
                control._timer.cancel()
                control._timer = None
            control.attached = False
            control.button.decompose()

        logger.debug(f"Removed {len(self.controls)} copy controls")
        self.controls = []
        self._view = None

    @contextmanager
    def attached_to(self, view: BeautifulSoup) -> Iterator[List[CopyControl]]:
        """Mount for the duration of the block; controls are removed on any exit."""
        controls = self.mount(view)
        try:
            yield controls
        finally:
            self.unmount()

    def _revert(self, control: CopyControl) -> None:
        control._timer = None
        # the view may have been torn down before the timer fired
        if not control.attached:
            return
        control.state = ControlState.IDLE
        del control.button["disabled"]
        control.button.string = IDLE_LABEL
