import pytest
from blessed.keyboard import Keystroke

from conftest import arrow
from mower.components import Position
from mower.main import FrameLoop, MowerApp


@pytest.fixture
def app(term):
    written = []
    application = MowerApp(term, out=written.append)
    application.written = written
    return application


def test_first_frame_fits_field_and_draws(app):
    app.frame(1.0)
    assert (app.game.num_x, app.game.num_y) == (10, 6)
    assert app.written[0] == '<home><clear>'
    assert len(app.written) == 2
    assert app.game.mowed_count == 1


def test_arrow_key_moves_player(app, term):
    app.frame(1.0)
    term.keys.append(arrow('KEY_RIGHT'))
    app.frame(1.1)
    assert app.game.player_pos == Position(1, 0)
    assert app.game.mowed_count == 2


def test_quit_key(app, term):
    term.keys.append(Keystroke('q'))
    app.frame(1.0)
    assert not app.running


def test_game_over_drawn_once_then_idle(app):
    app.frame(1.0)
    app.game.enemy_pos = Position(0, 0)
    app.frame(1.1)
    assert not app.game.running
    drawn = len(app.written)

    app.frame(1.2)
    app.frame(5.0)
    assert len(app.written) == drawn


def test_restart_only_after_game_over(app, term):
    app.frame(1.0)
    term.keys.append(Keystroke('r'))
    app.frame(1.1)
    assert app.game.mowed_count == 1

    app.game.enemy_pos = Position(0, 0)
    app.frame(1.2)
    assert not app.game.running

    term.keys.append(Keystroke('r'))
    app.frame(1.3)
    assert app.game.running
    assert app.game.enemy_pos != Position(0, 0)


def test_resize_restarts_game(app, term):
    app.frame(1.0)
    term.width, term.height = 30, 12
    app.frame(1.1)
    assert (app.game.num_x, app.game.num_y) == (15, 10)
    assert app.renderer.width == 30
    assert app.written.count('<home><clear>') == 2


def test_frame_loop_reads_clock_every_frame():
    ticks = iter([0.0, 0.001, 0.02, 0.021, 0.04, 0.041])
    seen = []
    sleeps = []
    loop = FrameLoop(seen.append, frame_time=0.016,
                     clock=lambda: next(ticks), sleep=sleeps.append)
    loop.run(lambda: len(seen) < 3)

    assert seen == [0.0, 0.02, 0.04]
    assert len(sleeps) == 3
    assert all(0 < s < 0.016 for s in sleeps)


def test_frame_loop_stop():
    loop = FrameLoop(lambda now: loop.stop(), clock=lambda: 0.0, sleep=lambda s: None)
    loop.run()
    assert not loop.active


def test_frame_loop_keeps_running_after_game_over(app):
    frames = []

    def on_frame(now):
        frames.append(now)
        app.frame(now)
        if len(frames) == 1:
            app.game.enemy_pos = app.game.player_pos.copy()
        if len(frames) == 5:
            loop.stop()

    loop = FrameLoop(on_frame, clock=lambda: 0.0, sleep=lambda s: None)
    loop.run(lambda: app.running)
    assert len(frames) == 5
    assert not app.game.running
