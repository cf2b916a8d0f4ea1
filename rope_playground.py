import argparse
import logging
from multiprocessing import Manager, Process

import pygame

import gui_controller as gui_ctrl
from constants import BLACK, DEFAULT_PRESET, FPS, GREY, HEIGHT, SAVE_FILE, WHITE, WIDTH
from ropesim.config import SimulationConfig
from ropesim.editor import Tool, TopologyEditor
from ropesim.errors import PresetError
from ropesim.logging_config import setup_logging
from ropesim.presets import load_preset
from ropesim.renderer import draw_world
from ropesim.serialization import load_world, save_world
from ropesim.world import World

logger = logging.getLogger("ropesim.playground")

HELP = "LMB: place/lock/delete or link  RMB drag: move locked point  L/P: link/point tool  SPACE: run  C: clear  S/O: save/load"


def _drag_target(world, pos):
    handle = world.points.find_at_position(pos)
    if handle is None or not world.points.get(handle).locked:
        return None
    return handle


def _poll_gui(shared, world, editor):
    """Apply requests posted by the controls process. Returns the (possibly replaced) world and editor."""
    world.set_relaxation_passes(shared.get('relaxation_passes', world.config.relaxation_passes))
    world.set_gravity(shared.get('gravity', world.config.gravity))

    tool = Tool(shared.get('tool', editor.tool.value))
    if tool is not editor.tool:
        editor.select_tool(tool)

    if shared.get('toggle_pause', False):
        world.toggle_pause()
        shared['toggle_pause'] = False
    if shared.get('clear_world', False):
        editor.clear_all()
        shared['clear_world'] = False
    if shared.get('load_preset', False):
        shared['load_preset'] = False
        try:
            load_preset(world, shared.get('preset', DEFAULT_PRESET))
            # drop any half-made link into the old layout
            editor.select_tool(editor.tool)
        except PresetError as exc:
            logger.warning("%s", exc)
    if shared.get('save_world', False):
        shared['save_world'] = False
        save_world(world, SAVE_FILE)
    if shared.get('load_world', False):
        shared['load_world'] = False
        world, editor = _load(world, editor)

    shared['running'] = world.running
    shared['point_count'] = len(world.points)
    shared['constraint_count'] = len(world.constraints)
    shared['link_state'] = editor.link_state.value
    return world, editor


def _load(world, editor):
    try:
        loaded = load_world(SAVE_FILE, clock=pygame.time.get_ticks)
    except (OSError, PresetError) as exc:
        logger.warning("could not load %s: %s", SAVE_FILE, exc)
        return world, editor
    new_editor = TopologyEditor(loaded)
    new_editor.select_tool(editor.tool)
    return loaded, new_editor


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive rope and cloth playground.")
    parser.add_argument("--preset", default=None, help="start from a built-in layout")
    parser.add_argument("--passes", type=int, default=500, help="relaxation passes per frame")
    parser.add_argument("--seed", type=int, default=None, help="seed for the solver's shuffle")
    parser.add_argument("--no-gui", action="store_true", help="don't start the controls window")
    parser.add_argument("--debug", action="store_true", help="log structural edits")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Rope Playground")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)

    world = World(SimulationConfig(relaxation_passes=args.passes, seed=args.seed),
                  clock=pygame.time.get_ticks)
    editor = TopologyEditor(world)
    if args.preset:
        try:
            load_preset(world, args.preset)
        except PresetError as exc:
            logger.warning("%s", exc)

    shared = None
    gui_proc = None
    if not args.no_gui:
        # controls live in their own process; the dict is the only channel
        mgr = Manager()
        shared = mgr.dict()
        shared['relaxation_passes'] = world.config.relaxation_passes
        shared['gravity'] = world.config.gravity
        shared['tool'] = editor.tool.value
        shared['preset'] = args.preset or DEFAULT_PRESET
        shared['__exit__'] = False
        gui_proc = Process(target=gui_ctrl.run_gui, args=(shared,), daemon=True)
        gui_proc.start()

    running = True
    dragging = None
    while running:
        # all edits for this frame happen before the step reads the stores
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                editor.click(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                dragging = _drag_target(world, event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 3:
                dragging = None
            elif event.type == pygame.MOUSEMOTION and dragging is not None:
                if dragging in world.points:
                    world.points.get(dragging).move_to(event.pos)
                else:
                    dragging = None
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    world.toggle_pause()
                elif event.key == pygame.K_l:
                    editor.select_tool(Tool.LINK)
                elif event.key == pygame.K_p:
                    editor.select_tool(Tool.POINT)
                elif event.key == pygame.K_c:
                    editor.clear_all()
                elif event.key == pygame.K_s:
                    save_world(world, SAVE_FILE)
                elif event.key == pygame.K_o:
                    world, editor = _load(world, editor)
                elif event.key == pygame.K_ESCAPE:
                    running = False
                if shared is not None:
                    shared['tool'] = editor.tool.value

        if shared is not None:
            world, editor = _poll_gui(shared, world, editor)
            if shared.get('__exit__', False):
                running = False

        world.tick()

        draw_world(screen, world, editor=editor, cursor=pygame.mouse.get_pos(), background=WHITE)
        status = f"{'RUNNING' if world.running else 'PAUSED'}  tool={editor.tool.value}  dt={world.dt:.1f}ms"
        screen.blit(font.render(status, True, BLACK), (10, 10))
        screen.blit(font.render(HELP, True, GREY), (10, HEIGHT - 24))
        pygame.display.flip()
        clock.tick(FPS)

    if gui_proc is not None:
        shared['__exit__'] = True
        gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
