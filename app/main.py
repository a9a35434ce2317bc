"""
Demo application hosting a single dropdown
"""
from kivy.app import App
from kivy.core.window import Window
from kivy.logger import Logger
from kivy.uix.anchorlayout import AnchorLayout

from dropdown import SelectableList, config


class DropDownApp(App):
    """Main application"""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.selection = config.DEMO_SELECTION

    def build(self):
        Window.clearcolor = config.BACKGROUND_COLOR

        root = AnchorLayout(
            anchor_x="center",
            anchor_y="top",
            padding=[0, config.DEMO_TOP_PADDING, 0, 0],
        )

        self.dropdown = SelectableList(
            options=config.DEMO_OPTIONS,
            selection=self.selection,
            active_fill=config.ACTIVE_FILL,
            inactive_fill=config.INACTIVE_FILL,
            dynamic=config.DEMO_DYNAMIC,
            size_hint=(None, None),
            size=(config.DEFAULT_WIDTH, config.ROW_HEIGHT),
        )
        self.dropdown.bind(on_select=self.on_difficulty_select)
        root.add_widget(self.dropdown)

        Logger.info(
            f"DropDownApp: mounted with {self.selection!r} (dynamic={config.DEMO_DYNAMIC})"
        )
        return root

    def on_difficulty_select(self, instance, label):
        """Mirror the dropdown's selection"""
        self.selection = label
        Logger.info(f"DropDownApp: selection -> {label}")


if __name__ == "__main__":
    DropDownApp().run()
