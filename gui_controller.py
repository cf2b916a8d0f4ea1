import time
import dearpygui.dearpygui as dpg

from constants import GRAVITY_RANGE, PASSES_RANGE

from ropesim.presets import PRESETS


def _make_callbacks(shared):
    def passes_cb(sender, app_data, user_data):
        shared['relaxation_passes'] = int(app_data)
    def gravity_cb(sender, app_data, user_data):
        try:
            shared['gravity'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def tool_cb(sender, app_data, user_data):
        shared['tool'] = 'link' if app_data == 'Link' else 'point'
    def preset_cb(sender, app_data, user_data):
        shared['preset'] = str(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def clear_cb():
        shared['clear_world'] = True
    def load_preset_cb():
        shared['load_preset'] = True
    def save_cb():
        shared['save_world'] = True
    def load_cb():
        shared['load_world'] = True
    def exit_cb():
        shared['__exit__'] = True
    return passes_cb, gravity_cb, tool_cb, preset_cb, pause_cb, clear_cb, load_preset_cb, save_cb, load_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes requests into `shared`; the
    simulation process polls and clears them between frames.
    """
    dpg.create_context()

    passes_cb, gravity_cb, tool_cb, preset_cb, pause_cb, clear_cb, \
        load_preset_cb, save_cb, load_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Rope Controls", tag="controls_window", width=380, height=420):
        dpg.add_text("Tool")
        dpg.add_radio_button(("Point", "Link"), tag="tool_radio", horizontal=True,
                             default_value="Link" if shared.get('tool') == 'link' else "Point",
                             callback=tool_cb)
        dpg.add_separator()
        dpg.add_text("Relaxation passes per frame")
        dpg.add_slider_int(label="Passes", tag="passes_slider", default_value=int(shared.get('relaxation_passes', 500)),
                           min_value=PASSES_RANGE[0], max_value=PASSES_RANGE[1], callback=passes_cb)
        dpg.add_text("Gravity (px/ms^2)")
        dpg.add_slider_float(label="Gravity", tag="gravity_slider", default_value=float(shared.get('gravity', 0.0008)),
                             min_value=GRAVITY_RANGE[0], max_value=GRAVITY_RANGE[1], format="%.5f", callback=gravity_cb)
        dpg.add_separator()
        dpg.add_text("Presets")
        dpg.add_combo(sorted(PRESETS), tag="preset_combo", default_value=str(shared.get('preset', 'rope')),
                      callback=preset_cb)
        dpg.add_button(label="Load Preset", callback=lambda s, a, u: load_preset_cb())
        dpg.add_separator()
        dpg.add_button(label="Pause / Resume", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Clear World", callback=lambda s, a, u: clear_cb())
        with dpg.group(horizontal=True):
            dpg.add_button(label="Save", callback=lambda s, a, u: save_cb())
            dpg.add_button(label="Load", callback=lambda s, a, u: load_cb())
        dpg.add_button(label="Exit GUI", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Rope Controls', width=400, height=460)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"{'running' if shared.get('running') else 'paused'}, "
                      f"points={shared.get('point_count', 0)}, links={shared.get('constraint_count', 0)}, "
                      f"link tool: {shared.get('link_state', 'idle')}")
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['relaxation_passes'] = 500
    shared['gravity'] = 0.0008
    shared['tool'] = 'point'
    run_gui(shared)
