# marklist/ui/review/review_input.py
# Input handling for the interactive review screen

from __future__ import annotations

from readchar import key

from ...core.commands import CommandTable
from .review_state import ReviewState, ReviewStateManager

QUIT_KEYS = (key.ESC, key.CTRL_C, key.CTRL_Q)


class ReviewInputHandler:

    def __init__(
        self,
        state: ReviewState,
        state_manager: ReviewStateManager,
        commands: CommandTable | None = None,
    ):
        self.state = state
        self.manager = state_manager
        self.commands = commands or CommandTable.from_session(state.session)

    # * Editing keys first, then the command table, then plain insertion
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            self.manager.request_quit()
            return False

        if k == key.CTRL_S:
            self.manager.save()
        elif k == key.UP:
            self.manager.move_up()
        elif k == key.DOWN:
            self.manager.move_down()
        elif k == key.LEFT:
            self.manager.move_left()
        elif k == key.RIGHT:
            self.manager.move_right()
        elif k in (key.HOME, key.CTRL_A):
            self.manager.line_start()
        elif k in (key.END, key.CTRL_E):
            self.manager.line_end()
        elif k in (key.ENTER, key.CR, key.LF):
            self.manager.next_line()
        elif k == key.BACKSPACE:
            self.manager.delete_before_cursor()
        elif self.commands.dispatch(k):
            pass
        elif len(k) == 1 and k.isprintable():
            self.manager.insert_char(k)

        self.manager.sync_viewport()
        return True
