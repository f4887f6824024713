# meadbrain app
# main.py

import os
import sys

# Window ID is 'MeadBrain', not 'python'
os.environ['SDL_VIDEO_X11_WMCLASS'] = "MeadBrain"

# 1. Import Config first
from kivy.config import Config
Config.set('input', 'mouse', 'mouse,disable_multitouch')
Config.set('graphics', 'width', '480')
Config.set('graphics', 'height', '640')
Config.set('graphics', 'resizable', '1')

from kivy.app import App
from kivy.lang import Builder
from kivy.properties import StringProperty, ListProperty, BooleanProperty
from kivy.uix.popup import Popup
from kivy.uix.screenmanager import Screen, ScreenManager

# --- BACKEND IMPORTS ---
from settings_manager import SettingsManager
from mead_form import (
    evaluate_form, restore_form_values, UnitSwitch,
    UNIT_OPTIONS, SWEETNESS_OPTIONS, LEVEL_COLORS, PROMPT_MESSAGE
)
import mead_info

KV = '''
<InfoPopup>:
    size_hint: 0.9, 0.8
    BoxLayout:
        orientation: 'vertical'
        padding: dp(10)
        spacing: dp(10)
        ScrollView:
            Label:
                text: root.info_text
                markup: True
                halign: 'left'
                valign: 'top'
                text_size: self.width, None
                size_hint_y: None
                height: self.texture_size[1]
        Button:
            text: 'OK'
            size_hint_y: None
            height: dp(44)
            on_release: root.dismiss()

<FormLabel@Label>:
    halign: 'left'
    valign: 'middle'
    text_size: self.size

<ResultLabel@Label>:
    markup: True
    halign: 'left'
    valign: 'middle'
    text_size: self.size

<CalculatorScreen>:
    BoxLayout:
        orientation: 'vertical'
        padding: dp(15)
        spacing: dp(10)

        Label:
            text: '[b][color=#D2A24C]Mead Ingredients Calculator[/color][/b]'
            markup: True
            font_size: '20sp'
            size_hint_y: None
            height: dp(40)

        GridLayout:
            cols: 2
            spacing: dp(10)
            size_hint_y: None
            height: dp(200)

            FormLabel:
                text: 'Batch volume:'
            BoxLayout:
                spacing: dp(5)
                TextInput:
                    text: root.volume_text
                    multiline: False
                    input_filter: 'float'
                    on_text: root.volume_text = self.text
                Spinner:
                    text: root.unit_label
                    values: root.unit_options
                    size_hint_x: 0.6
                    on_text: root.unit_label = self.text
                Button:
                    text: 'Water Info'
                    size_hint_x: 0.7
                    on_release: root.show_water_info()

            FormLabel:
                text: 'Target ABV (%):'
            TextInput:
                text: root.abv_text
                multiline: False
                input_filter: 'int'
                on_text: root.abv_text = self.text

            FormLabel:
                text: 'Sweetness:'
            BoxLayout:
                spacing: dp(5)
                Spinner:
                    text: root.sweetness_label
                    values: root.sweetness_options
                    on_text: root.sweetness_label = self.text
                Button:
                    text: 'Honey Info'
                    size_hint_x: 0.6
                    on_release: root.show_honey_info()

            FormLabel:
                text: 'Use Turbo yeast:'
            Switch:
                active: root.turbo_active
                on_active: root.turbo_active = self.active

        Button:
            text: 'Calculate Ingredients'
            size_hint_y: None
            height: dp(48)
            on_release: root.calculate()

        Label:
            text: '[b][color=#A0522D]RESULTS:[/color][/b]'
            markup: True
            size_hint_y: None
            height: dp(30)

        ResultLabel:
            text: 'OG (Original Gravity): [b]' + root.og_text + '[/b]'
        ResultLabel:
            text: 'FG (Final Gravity): [b]' + root.fg_text + '[/b]'
        ResultLabel:
            text: 'Required honey: [b]' + root.honey_text + '[/b]'
        ResultLabel:
            text: 'Water to top off: [b]' + root.water_text + '[/b]'
        ResultLabel:
            text: 'Total gravity points: [b]' + root.points_text + '[/b]'

        Label:
            text: root.message
            color: root.message_color
            halign: 'left'
            valign: 'middle'
            text_size: self.size
'''

Builder.load_string(KV)


class InfoPopup(Popup):
    info_text = StringProperty("")


class CalculatorScreen(Screen):
    # --- INPUTS ---
    volume_text = StringProperty("5.0")
    abv_text = StringProperty("14")
    unit_label = StringProperty(UNIT_OPTIONS[0])
    sweetness_label = StringProperty("Semi-Sweet")
    turbo_active = BooleanProperty(False)

    unit_options = ListProperty(UNIT_OPTIONS)
    sweetness_options = ListProperty(SWEETNESS_OPTIONS)

    # --- RESULTS ---
    og_text = StringProperty("--")
    fg_text = StringProperty("--")
    honey_text = StringProperty("--")
    water_text = StringProperty("--")
    points_text = StringProperty("--")
    message = StringProperty(PROMPT_MESSAGE)
    message_color = ListProperty(LEVEL_COLORS["info"])

    def __init__(self, **kwargs):
        self._unit_switch = UnitSwitch()
        super().__init__(**kwargs)

    def load_session(self):
        self._restore_last_inputs()
        self.calculate()

    def _restore_last_inputs(self):
        sm = App.get_running_app().settings_manager
        values = restore_form_values(sm.get_last_inputs(), sm.is_metric())

        # Silence the unit converter while restoring saved values
        self._unit_switch.ignore_changes = True
        self.unit_label = values["unit_label"]
        self._unit_switch.restore(self.unit_label)
        self._unit_switch.ignore_changes = False

        self.volume_text = values["volume_text"]
        self.abv_text = values["abv_text"]
        self.sweetness_label = values["sweetness_label"]
        self.turbo_active = values["turbo"]

    def on_unit_label(self, instance, value):
        converted = self._unit_switch.convert(self.volume_text, value)
        if converted is not None:
            self.volume_text = converted
            self.calculate()

    def calculate(self):
        out = evaluate_form(
            self.volume_text, self.abv_text,
            self.unit_label, self.sweetness_label, self.turbo_active
        )

        self.message = out.message
        self.message_color = out.message_color

        if not out.ok:
            # Keep the previous results on screen
            print(f"[CalculatorScreen] Rejected input: {out.message}")
            return

        self.og_text = out.og_text
        self.fg_text = out.fg_text
        self.honey_text = out.honey_text
        self.water_text = out.water_text
        self.points_text = out.points_text

        App.get_running_app().settings_manager.save_last_inputs(out.calc_input)

    def show_water_info(self):
        self._open_info(mead_info.WATER_INFO_TITLE, mead_info.WATER_INFO)

    def show_honey_info(self):
        self._open_info(mead_info.HONEY_INFO_TITLE, mead_info.HONEY_INFO)

    def _open_info(self, title, text):
        popup = InfoPopup(title=title)
        popup.info_text = text
        popup.open()


class MeadBrainApp(App):

    def build(self):
        self.title = f"MeadBrain {mead_info.VERSION_STRING}"
        # Data lives beside the project folder, not inside it
        src_dir = os.path.dirname(os.path.abspath(__file__))
        project_dir = os.path.dirname(src_dir)
        root_dir = os.path.dirname(project_dir)

        self.settings_manager = SettingsManager(root_dir)

        sm = ScreenManager()
        self.calculator_screen = CalculatorScreen(name='calculator')
        sm.add_widget(self.calculator_screen)
        return sm

    def on_start(self):
        print(f"[App] Started. Metric={self.settings_manager.is_metric()}")
        self.calculator_screen.load_session()

    def on_stop(self):
        """Called by Kivy when the app is closing normally."""
        print("[App] Stopping...")


def main():
    MeadBrainApp().run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
