from config import AppConfig
from core.interfaces import Command, GameState
from runners.run_snake import SnakeApp
from viz.renderer_headless import HeadlessRenderer
from main import build_config, parse_args

def _app(place, snake, food, velocity, **cfg):
    app = SnakeApp(AppConfig(seed=11, **cfg), renderer=HeadlessRenderer())
    place(app.engine, snake, food, velocity)
    app.start()
    return app

def test_one_tick_per_interval(place):
    app = _app(place, [(5, 5)], food=(20, 20), velocity=(1, 0))
    assert app.update(89) == 0
    assert app.update(1) == 1
    assert app.engine.snake[0] == (6, 5)

def test_game_over_stops_timer_mid_batch(place):
    app = _app(place, [(1, 5)], food=(20, 20), velocity=(-1, 0))
    # three ticks due, but the second one hits the wall
    assert app.update(270) == 2
    assert app.engine.state is GameState.GAME_OVER
    assert not app.ticker.running
    assert app.games_played == 1
    assert app.update(1000) == 0

def test_reset_restarts_timer(place):
    app = _app(place, [(0, 5)], food=(20, 20), velocity=(-1, 0))
    app.update(90)
    assert not app.ticker.running
    app.handle_command(Command.RESET)
    assert app.ticker.running
    assert app.engine.state is GameState.RUNNING
    assert len(app.engine.snake) == 1

def test_reset_ignored_while_running(place):
    app = _app(place, [(5, 5), (4, 5)], food=(20, 20), velocity=(1, 0))
    app.handle_command(Command.RESET)
    assert len(app.engine.snake) == 2

def test_step_applies_input_before_tick(place):
    app = _app(place, [(5, 5), (4, 5)], food=(20, 20), velocity=(1, 0))
    app.step(90, [Command.LEFT, Command.DOWN])
    assert app.engine.snake[0] == (5, 6)
    assert app.renderer.frames_drawn == 1

def test_quit_stops_app(place):
    app = _app(place, [(5, 5)], food=(20, 20), velocity=(1, 0))
    app.step(90, [Command.QUIT])
    assert not app.running
    assert app.engine.tick_count == 0

def test_cli_overrides():
    cfg = build_config(parse_args(["--width", "900", "--tick-ms", "50", "--seed", "3"]))
    assert cfg.board_width == 900
    assert cfg.height == 900
    assert cfg.tick_ms == 50
    assert cfg.seed == 3
    assert build_config(parse_args(["--height", "400"])).height == 400

def test_full_board_is_a_game_over_not_a_crash(place, serpentine):
    app = _app(place, serpentine(30), food=(0, 0), velocity=(-1, 0))
    assert app.update(90) == 1
    assert app.engine.reason == "full"
    assert not app.ticker.running
    assert app.games_played == 1
    app.handle_command(Command.RESET)
    assert app.ticker.running
    assert app.engine.score == 0

def test_renderer_tick_reports_elapsed_ms():
    ren = HeadlessRenderer()
    ren.open(AppConfig())
    assert ren.tick(60) == 0
