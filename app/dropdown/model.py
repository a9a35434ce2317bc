"""
Expand/collapse state machine behind the dropdown
"""
from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.logger import Logger
from kivy.properties import BooleanProperty, ListProperty, StringProperty

from dropdown import config, layout


class DropdownModel(EventDispatcher):
    """
    Selection state of one dropdown.

    The selection itself belongs to the caller: every commit is announced
    through the ``on_select`` event so the owner can mirror it in its own
    state. ``expanded`` always starts out False.

    In non-dynamic mode a commit is written COMMIT_DELAY seconds after the
    collapse starts, otherwise the re-filtered rows flash in mid-animation.
    The scheduled write is held in a handle; a later commit replaces it and
    re-opening the list applies it first.
    """

    __events__ = ("on_select",)

    options = ListProperty([])
    selection = StringProperty("")
    dynamic = BooleanProperty(True)
    expanded = BooleanProperty(False)
    pending = StringProperty("")

    def __init__(self, clock=None, commit_delay=config.COMMIT_DELAY, **kwargs):
        super().__init__(**kwargs)
        self.clock = clock if clock is not None else Clock
        self.commit_delay = commit_delay
        self._pending_event = None

    # Derived layout

    @property
    def index(self):
        return layout.selected_index(self.options, self.selection)

    @property
    def rows(self):
        return layout.visible_rows(self.options, self.selection, self.dynamic)

    @property
    def has_pending(self):
        return self._pending_event is not None

    def content_offset(self, row_height):
        return layout.content_offset(
            self.options, self.selection, self.dynamic, row_height
        )

    def mask_height(self, row_height):
        return layout.mask_height(self.options, self.expanded, row_height)

    def mask_offset(self, row_height):
        return layout.mask_offset(
            self.options, self.selection, self.dynamic, self.expanded, row_height
        )

    # Transitions

    def tap(self, label):
        """Handle a tap on the row showing label. Returns True if state changed."""
        if not self.expanded:
            # Only the active row opens the list
            if label != self.selection:
                return False
            self.flush_pending()
            self.expanded = True
            Logger.debug(f"DropdownModel: expanded on {label!r}")
            return True

        self.expanded = False
        self.cancel_pending()
        if self.dynamic:
            self.commit(label)
        else:
            self.pending = label
            self._pending_event = self.clock.schedule_once(
                self._apply_pending, self.commit_delay
            )
            Logger.debug(
                f"DropdownModel: collapsed, {label!r} due in {self.commit_delay}s"
            )
        return True

    def commit(self, label):
        self.selection = label
        Logger.debug(f"DropdownModel: selected {label!r}")
        self.dispatch("on_select", label)

    def cancel_pending(self):
        if self._pending_event is None:
            return
        self._pending_event.cancel()
        Logger.debug(f"DropdownModel: dropped pending {self.pending!r}")
        self._pending_event = None
        self.pending = ""

    def flush_pending(self):
        if self._pending_event is None:
            return
        self._pending_event.cancel()
        self._apply_pending(0)

    def _apply_pending(self, dt):
        label = self.pending
        self._pending_event = None
        self.pending = ""
        self.commit(label)

    def on_select(self, label):
        pass
