# marklist/ui/review/review_display.py
# Interactive review interface w/ rich UI components for marking a file line by line

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from readchar import readkey

from ...core.commands import CommandTable, MarkSession
from ...mark_io.console import console
from ..core.rich_components import Live, RenderableType
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer, create_renderer_from_console
from .review_state import ReviewState, ReviewStateManager, SaveCallback, display_name


# * Orchestrates one review session: state, rendering & key handling
class InteractiveReviewer:
    def __init__(
        self,
        session: MarkSession,
        path: Path | None = None,
        view_height: int = 20,
        on_save: SaveCallback | None = None,
        renderer: ReviewRenderer | None = None,
    ):
        self._state = ReviewState(
            session=session, filename=display_name(path), view_height=view_height
        )
        self._state_manager = ReviewStateManager(self._state, on_save=on_save)
        self._renderer = renderer or create_renderer_from_console()
        self._input_handler = ReviewInputHandler(
            self._state, self._state_manager, CommandTable.from_session(session)
        )
        self._state_manager.sync_viewport()

    @property
    def state(self) -> ReviewState:
        return self._state

    @property
    def input_handler(self) -> ReviewInputHandler:
        return self._input_handler

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    def render_screen(self) -> RenderableType:
        return self._renderer.render_screen(self._state)

    def handle_key(self, k: str) -> bool:
        # False ends the loop
        return self._input_handler.handle_key(k)

    # * Feed keys without a terminal (scripted sessions & tests); stops at a quit key
    def replay(self, keys: Iterable[str]) -> ReviewState:
        for k in keys:
            if not self.handle_key(k):
                break
        return self._state

    def run(self) -> ReviewState:
        with Live(
            self.render_screen(), console=console, screen=True, refresh_per_second=30
        ) as live:
            while not self.is_complete:
                if not self.handle_key(readkey()):
                    break
                live.update(self.render_screen())

        return self._state
