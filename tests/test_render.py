"""
Tests for scene drawing, the numpy and pygame render surfaces, and the HUD.
"""

import numpy as np
import pytest

from fruit_catch.catch_core.clock import ManualClock
from fruit_catch.catch_core.config_loader import load_config
from fruit_catch.catch_core.game import CatchGame
from fruit_catch.catch_core.render_solid import ArrayRenderSurface
from fruit_catch.catch_core.render_surface import DisplaySink, RecordingDisplay, RenderSurface


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    game = CatchGame(config=config, seed=42, clock=ManualClock())
    game.start()
    return game


@pytest.fixture
def surface(config):
    return ArrayRenderSurface(
        config.playfield.width,
        config.playfield.height,
        background=config.session.background
    )


class CallLog:
    """RenderSurface that records calls."""

    def __init__(self, images=()):
        self.calls = []
        self._images = set(images)

    def clear(self):
        self.calls.append(("clear",))

    def draw_rect(self, pos, size, color):
        self.calls.append(("rect", pos, size, color))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", center, radius, color))

    def draw_image(self, name, pos, size):
        self.calls.append(("image", name, pos, size))

    def has_image(self, name):
        return name in self._images


class TestArrayRenderSurface:
    """Test numpy drawing primitives."""

    def test_clear_fills_background(self, surface, config):
        assert surface.pixels.shape == (500, 800, 3)
        assert (surface.pixels == np.array(config.session.background)).all()

    def test_draw_rect(self, surface):
        surface.draw_rect((10, 20), (5, 4), (1, 2, 3))
        assert tuple(surface.pixels[20, 10]) == (1, 2, 3)
        assert tuple(surface.pixels[23, 14]) == (1, 2, 3)
        assert tuple(surface.pixels[24, 14]) != (1, 2, 3)
        assert tuple(surface.pixels[23, 15]) != (1, 2, 3)

    def test_draw_rect_clips(self, surface):
        surface.draw_rect((-10, -10), (20, 20), (9, 9, 9))
        surface.draw_rect((790, 490), (50, 50), (9, 9, 9))
        surface.draw_rect((2000, 2000), (5, 5), (9, 9, 9))
        assert tuple(surface.pixels[0, 0]) == (9, 9, 9)
        assert tuple(surface.pixels[499, 799]) == (9, 9, 9)

    def test_draw_circle(self, surface):
        surface.draw_circle((100, 100), 25, (200, 0, 0))
        assert tuple(surface.pixels[100, 100]) == (200, 0, 0)
        # Bounding-box corner is outside the circle
        assert tuple(surface.pixels[76, 76]) != (200, 0, 0)

    def test_draw_image_scales(self, surface):
        image = np.zeros((2, 2, 3), dtype=np.uint8)
        image[0, 0] = (255, 0, 0)
        image[1, 1] = (0, 0, 255)
        surface.add_image("apple", image)

        surface.draw_image("apple", (10, 10), (20, 20))

        assert tuple(surface.pixels[10, 10]) == (255, 0, 0)
        assert tuple(surface.pixels[29, 29]) == (0, 0, 255)

    def test_add_image_rejects_bad_shape(self, surface):
        with pytest.raises(ValueError):
            surface.add_image("apple", np.zeros((4, 4), dtype=np.uint8))

    def test_satisfies_protocol(self, surface):
        assert isinstance(surface, RenderSurface)
        assert isinstance(RecordingDisplay(), DisplaySink)


class TestSceneDrawing:
    """Test CatchGame.render()."""

    def test_one_call_per_entity_with_fallbacks(self, game):
        game.add_fruit("apple", x=0, y=0)
        game.add_fruit("lemon", x=100, y=0)
        log = CallLog()

        game.render(log)

        kinds = [c[0] for c in log.calls]
        # clear, basket body + handle, one circle per fruit
        assert kinds == ["clear", "rect", "rect", "circle", "circle"]
        assert log.calls[3][1] == (25, 25)
        assert log.calls[3][2] == 25

    def test_images_used_when_available(self, game):
        game.add_fruit("apple", x=0, y=0)
        game.add_fruit("lemon", x=100, y=0)
        log = CallLog(images={"basket", "apple"})

        game.render(log)

        kinds = [c[0] for c in log.calls]
        assert kinds == ["clear", "image", "image", "circle"]
        assert log.calls[1][1] == "basket"
        assert log.calls[2][1] == "apple"

    def test_rendered_pixels(self, game, surface, config):
        game.add_fruit("apple", x=0, y=0)
        game.render(surface)

        basket = game.basket
        apple_color = config.fruit_types[0].color
        center = surface.pixels[int(basket.y + basket.height / 2), int(basket.center_x)]

        assert tuple(center) == config.basket.color
        assert tuple(surface.pixels[25, 25]) == apple_color

    def test_render_clears_previous_frame(self, game, surface, config):
        fruit = game.add_fruit("pear", x=0, y=0)
        game.render(surface)
        assert tuple(surface.pixels[25, 25]) == config.fruit_types[2].color

        fruit.x = 300
        game.render(surface)
        assert tuple(surface.pixels[25, 25]) == config.session.background


class TestPygameRenderSurface:
    """Test the pygame surface on an off-screen buffer."""

    def test_draws_scene_off_screen(self, game, config):
        pygame = pytest.importorskip("pygame")
        from fruit_catch.catch_core.render_full_pygame import PygameRenderSurface

        target = pygame.Surface((config.playfield.width, config.playfield.height))
        surface = PygameRenderSurface(target, background=config.session.background)
        game.add_fruit("apple", x=0, y=0)

        game.render(surface)
        pixels = surface.to_array()

        assert pixels.shape == (500, 800, 3)
        assert tuple(pixels[25, 25]) == config.fruit_types[0].color
        assert tuple(pixels[450, 400]) == config.basket.color
        assert tuple(pixels[5, 400]) == config.session.background
        assert not surface.has_image("apple")


class TestPygameHud:
    """Test the pygame score / lives / game-over overlay as a display sink."""

    BOX_FILL = (255, 252, 245)

    @pytest.fixture
    def pygame(self):
        return pytest.importorskip("pygame")

    @pytest.fixture
    def hud(self, pygame):
        from fruit_catch.catch_core.render_full_pygame import PygameHud
        return PygameHud()

    def draw_frame(self, pygame, game, hud, started):
        from fruit_catch.catch_core.render_full_pygame import PygameRenderSurface

        width, height = game.playfield_size
        screen = pygame.Surface((int(width), int(height)))
        surface = PygameRenderSurface(screen, background=game.config.session.background)
        game.render(surface)
        hud.draw(screen, started=started)
        return surface.to_array()

    def test_tracks_session_through_game_over_and_restart(self, config, hud):
        clock = ManualClock()
        game = CatchGame(config=config, seed=1, clock=clock, display=hud)
        game.start()
        assert hud.lives == 3
        assert hud.final_score is None

        game.basket.x = 0
        game.add_fruit("lemon", x=0, y=400, speed=1)
        for x in (700, 650, 600):
            game.add_fruit("apple", x=x, y=500, speed=1)
        game.tick(clock.advance(16))

        assert game.is_over
        assert hud.score == 30
        assert hud.lives == 0
        assert hud.final_score == 30

        game.restart()
        assert hud.final_score is None
        assert hud.score == 0
        assert hud.lives == 3

    def test_game_over_box_only_while_over(self, pygame, config, hud):
        clock = ManualClock()
        game = CatchGame(config=config, seed=1, clock=clock, display=hud)
        game.start()
        # Inside the centred box, clear of its border and text
        inside_box = (250, 250)

        pixels = self.draw_frame(pygame, game, hud, started=True)
        assert tuple(pixels[inside_box[1], inside_box[0]]) == config.session.background

        for x in (700, 650, 600):
            game.add_fruit("apple", x=x, y=500, speed=1)
        game.tick(clock.advance(16))
        pixels = self.draw_frame(pygame, game, hud, started=True)
        assert tuple(pixels[inside_box[1], inside_box[0]]) == self.BOX_FILL

        game.restart()
        pixels = self.draw_frame(pygame, game, hud, started=True)
        assert tuple(pixels[inside_box[1], inside_box[0]]) == config.session.background

    def test_start_box_before_first_session(self, pygame, config, hud):
        game = CatchGame(config=config, seed=1, clock=ManualClock(), display=hud)
        pixels = self.draw_frame(pygame, game, hud, started=False)
        assert tuple(pixels[250, 250]) == self.BOX_FILL
        # Outside the box the playfield is dimmed
        assert tuple(pixels[5, 5]) != config.session.background
