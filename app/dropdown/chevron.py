"""
Up/down chevron disclosure indicator
"""
from kivy.clock import Clock
from kivy.graphics import Canvas, Color, Line
from kivy.properties import ColorProperty, NumericProperty
from kivy.uix.widget import Widget

from dropdown import config


class ChevronIndicator(Widget):
    """Stacked up and down chevrons, centred in the widget"""

    color = ColorProperty(config.CHEVRON_COLOR)
    line_width = NumericProperty(config.CHEVRON_WIDTH)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.canvas is None:
            self.canvas = Canvas()
        self.bind(pos=self.update_canvas, size=self.update_canvas)
        self.bind(color=self.update_canvas, line_width=self.update_canvas)
        Clock.schedule_once(lambda dt: self.update_canvas())

    def chevron_points(self):
        """Point lists for the upper (^) and lower (v) strokes"""
        cx = self.x + self.width / 2
        cy = self.y + self.height / 2
        half_w = self.width / 2
        arm = self.height / 4  # vertical reach of each stroke
        gap = self.height / 8

        up = [
            cx - half_w, cy + gap,
            cx, cy + gap + arm,
            cx + half_w, cy + gap,
        ]
        down = [
            cx - half_w, cy - gap,
            cx, cy - gap - arm,
            cx + half_w, cy - gap,
        ]
        return up, down

    def update_canvas(self, *args):
        if self.width == 0 or self.height == 0:
            return

        up, down = self.chevron_points()
        self.canvas.clear()
        with self.canvas:
            Color(*self.color)
            Line(points=up, width=self.line_width, cap="round", joint="round")
            Line(points=down, width=self.line_width, cap="round", joint="round")
