"""
Dropdown selector that expands in place
"""
from kivy.animation import Animation
from kivy.clock import Clock
from kivy.graphics import (
    Color,
    Rectangle,
    StencilPop,
    StencilPush,
    StencilUnUse,
    StencilUse,
)
from kivy.logger import Logger
from kivy.properties import (
    BooleanProperty,
    ColorProperty,
    ListProperty,
    NumericProperty,
)
from kivy.uix.label import Label
from kivy.uix.widget import Widget

from dropdown import config, layout
from dropdown.chevron import ChevronIndicator
from dropdown.model import DropdownModel
from dropdown.spring import spring_transition


class DropdownRow(Label):
    """One full-width, left-aligned row with an optional highlight"""

    active = BooleanProperty(False)
    fill = ColorProperty(config.ACTIVE_FILL)

    def __init__(self, **kwargs):
        kwargs.setdefault("bold", True)
        kwargs.setdefault("font_size", config.ROW_FONT_SIZE)
        kwargs.setdefault("color", config.ROW_TEXT_COLOR)
        kwargs.setdefault("padding", [config.ROW_PADDING_X, 0])
        kwargs.setdefault("size_hint", (None, None))
        kwargs.setdefault("halign", "left")
        kwargs.setdefault("valign", "middle")
        super().__init__(**kwargs)

        with self.canvas.before:
            self._fill_color = Color(0, 0, 0, 0)
            self._fill_rect = Rectangle(pos=self.pos, size=self.size)

        self.bind(pos=self.update_fill, size=self.update_fill)
        self.bind(active=self.update_fill, fill=self.update_fill)
        self.bind(size=lambda *_: setattr(self, "text_size", self.size))
        self.update_fill()

    def update_fill(self, *args):
        self._fill_rect.pos = self.pos
        self._fill_rect.size = self.size
        # Inactive rows let the container background show through
        self._fill_color.rgba = self.fill if self.active else (0, 0, 0, 0)


class SelectableList(Widget):
    """
    Dropdown that shows the active row when collapsed and the full
    stack when expanded.

    The widget's own bounds are the first visible row; the expanded stack
    overflows below them and is clipped to a mask window. In dynamic mode the
    stack keeps the options' order and is shifted so the selected row lines
    up with the widget; otherwise the selected row is pinned first.

    Listen to ``on_select(label)`` to keep the caller's copy of the
    selection up to date.
    """

    __events__ = ("on_select",)

    options = ListProperty([])
    active_fill = ColorProperty(config.ACTIVE_FILL)
    inactive_fill = ColorProperty(config.INACTIVE_FILL)
    dynamic = BooleanProperty(True)
    row_height = NumericProperty(config.ROW_HEIGHT)

    # Animated geometry, y pointing down from the widget's top edge
    content_offset = NumericProperty(0)
    mask_height = NumericProperty(config.ROW_HEIGHT)
    mask_offset = NumericProperty(0)

    def __init__(self, selection="", clock=None, **kwargs):
        super().__init__(**kwargs)
        self.model = DropdownModel(
            options=list(self.options),
            selection=selection,
            dynamic=self.dynamic,
            clock=clock,
        )
        self._rows = []
        self._transition = spring_transition(
            config.SPRING_RESPONSE, config.SPRING_DAMPING, config.SPRING_DURATION
        )
        self._trigger_animate = Clock.create_trigger(self.animate)

        with self.canvas.before:
            StencilPush()
            self._mask_rect = Rectangle()
            StencilUse()
            self._background_color = Color(rgba=self.inactive_fill)
            self._background_rect = Rectangle()
        with self.canvas.after:
            StencilUnUse()
            self._unmask_rect = Rectangle()
            StencilPop()

        self.chevron = ChevronIndicator(
            size_hint=(None, None),
            size=(config.CHEVRON_SIZE, config.CHEVRON_SIZE * 1.5),
        )

        self.bind(options=self._sync_model, dynamic=self._sync_model)
        self.bind(active_fill=self._update_fills, inactive_fill=self._update_fills)
        self.bind(
            pos=self.update_layout,
            size=self.update_layout,
            content_offset=self.update_layout,
            mask_height=self.update_layout,
            mask_offset=self.update_layout,
            row_height=self._on_row_height,
        )
        self.model.bind(
            on_select=lambda _, label: self.dispatch("on_select", label),
            selection=self._on_selection,
            expanded=lambda *_: self._trigger_animate(),
            options=self._on_model_options,
            dynamic=self._on_model_options,
        )

        self.build_rows()
        self.apply_targets()

    # Caller-facing state

    @property
    def selection(self):
        return self.model.selection

    @selection.setter
    def selection(self, value):
        # The caller's value replaces any deferred commit still in flight
        self.model.cancel_pending()
        self.model.selection = value

    @property
    def expanded(self):
        return self.model.expanded

    @property
    def row_labels(self):
        return [row.text for row in self._rows]

    def on_select(self, label):
        pass

    # Rows

    def build_rows(self):
        for row in self._rows:
            self.remove_widget(row)
        if self.chevron.parent is self:
            self.remove_widget(self.chevron)

        self._rows = [
            DropdownRow(text=label, fill=self.active_fill)
            for label in self.model.rows
        ]
        for row in self._rows:
            self.add_widget(row)
        # Added last so it draws above the rows
        self.add_widget(self.chevron)

        self.refresh_highlight()
        self.update_layout()
        Logger.debug(f"SelectableList: rows {self.row_labels}")

    def refresh_highlight(self):
        for row in self._rows:
            row.active = row.text == self.model.selection

    # Geometry

    def targets(self):
        h = self.row_height
        return {
            "content_offset": self.model.content_offset(h),
            "mask_height": self.model.mask_height(h),
            "mask_offset": self.model.mask_offset(h),
        }

    def apply_targets(self):
        targets = self.targets()
        Animation.cancel_all(self, *targets.keys())
        for name, value in targets.items():
            setattr(self, name, value)

    def animate(self, *args):
        targets = self.targets()
        Animation.cancel_all(self, *targets.keys())
        if all(getattr(self, name) == value for name, value in targets.items()):
            return
        Animation(
            d=config.SPRING_DURATION, t=self._transition, **targets
        ).start(self)

    def mask_bottom(self):
        return self.top - self.mask_offset - self.mask_height

    def mask_collide_point(self, x, y):
        bottom = self.mask_bottom()
        return self.x <= x <= self.right and bottom < y <= bottom + self.mask_height

    def update_layout(self, *args):
        h = self.row_height
        stack_top = self.top - self.content_offset

        for i, row in enumerate(self._rows):
            row.size = (self.width, h)
            row.pos = (self.x, stack_top - (i + 1) * h)

        self._background_rect.pos = (self.x, stack_top - len(self._rows) * h)
        self._background_rect.size = (self.width, len(self._rows) * h)

        mask_pos = (self.x, self.mask_bottom())
        mask_size = (self.width, self.mask_height)
        self._mask_rect.pos = self._unmask_rect.pos = mask_pos
        self._mask_rect.size = self._unmask_rect.size = mask_size

        # Trailing edge of the first visible row
        self.chevron.pos = (
            self.right - config.CHEVRON_PADDING - self.chevron.width,
            self.top - h / 2 - self.chevron.height / 2,
        )

    # Touch

    def on_touch_down(self, touch):
        if not self.mask_collide_point(*touch.pos):
            return super().on_touch_down(touch)

        index = layout.row_at(
            self.top - touch.y, self.content_offset, len(self._rows), self.row_height
        )
        if index is None:
            return super().on_touch_down(touch)

        label = self._rows[index].text
        if self.model.tap(label):
            Logger.debug(
                f"SelectableList: tap {label!r}, expanded={self.model.expanded}"
            )
        return True

    # Bindings

    def _sync_model(self, *args):
        self.model.options = list(self.options)
        self.model.dynamic = self.dynamic

    def _on_model_options(self, *args):
        self.build_rows()
        self._trigger_animate()

    def _on_selection(self, *args):
        if self.model.dynamic:
            self.refresh_highlight()
        else:
            # Pinned row changes, so the order changes
            self.build_rows()
        self._trigger_animate()

    def _on_row_height(self, *args):
        self.update_layout()
        self._trigger_animate()

    def _update_fills(self, *args):
        self._background_color.rgba = self.inactive_fill
        for row in self._rows:
            row.fill = self.active_fill
