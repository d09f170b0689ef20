import pygame
import pytest

from flappy import client as client_module
from flappy.config import Bounds
from flappy.client import FlappyClient
from flappy.data_models import GameState


class StubEngine:
    def __init__(self, state=GameState.PLAYING):
        self.state = state
        self.calls = []

    def get_state(self):
        return self.state

    def trigger_jump(self):
        self.calls.append("jump")

    def trigger_start(self):
        self.calls.append("start")

    def trigger_reset(self):
        self.calls.append("reset")

    def tick(self):
        self.calls.append("tick")
        return self.state


@pytest.fixture
def game(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    flappy = FlappyClient()
    flappy.running = True
    yield flappy
    pygame.quit()


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def click():
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10))


def test_click_starts_on_start_screen(game):
    assert game.engine.get_state() == GameState.START
    game.handle_event(click())
    assert game.engine.get_state() == GameState.PLAYING


@pytest.mark.parametrize("state, event, expected", [
    (GameState.START, click, ["start"]),
    (GameState.PLAYING, click, ["jump"]),
    (GameState.PLAYING, lambda: key(pygame.K_SPACE), ["jump"]),
    (GameState.PLAYING, lambda: key(pygame.K_UP), ["jump"]),
    (GameState.GAME_OVER, lambda: key(pygame.K_r), ["reset"]),
    (GameState.GAME_OVER, lambda: key(pygame.K_RETURN), ["reset"]),
])
def test_input_maps_to_triggers(game, state, event, expected):
    game.engine = StubEngine(state)
    game.handle_event(event())
    assert game.engine.calls == expected
    assert game.running


@pytest.mark.parametrize("event", [
    lambda: pygame.event.Event(pygame.QUIT),
    lambda: key(pygame.K_ESCAPE),
])
def test_quit_and_escape_stop_the_loop(game, event):
    game.engine = StubEngine()
    game.handle_event(event())
    assert not game.running
    assert game.engine.calls == []


def test_resize_changes_reported_bounds(game):
    game.handle_event(pygame.event.Event(pygame.VIDEORESIZE, size=(320, 480), w=320, h=480))
    assert game.current_bounds() == Bounds(320, 480)


def test_run_stops_without_ticking_after_quit(game):
    stub = StubEngine()
    game.engine = stub
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert not game.running
    assert "tick" not in stub.calls


def test_main_exits_non_zero_on_bad_config(monkeypatch):
    monkeypatch.setenv("FLAPPY_JUMP", "3")
    with pytest.raises(SystemExit) as excinfo:
        client_module.main()
    assert excinfo.value.code == 2
