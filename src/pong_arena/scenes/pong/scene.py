"""
In-game scene: the player against the CPU paddle.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.utils import logger

from pong_arena.config import SimulationConfig
from pong_arena.constants import ARENA_CENTER, ARENA_MAX, MS_PER_SECOND
from pong_arena.scenes.commands import PauseGameCommand, ToggleThemeCommand
from pong_arena.scenes.pong.models import (
    IntentInput,
    PongIntent,
    PongTickContext,
    PongWorld,
)
from pong_arena.scenes.pong.render import PercentRenderer
from pong_arena.simulation import PongSimulation
from pong_arena.theme import palette_for


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down
        pressed = ctx.input_frame.keys_pressed

        return PongIntent(
            move_up=Key.UP in down or Key.W in down,
            move_down=Key.DOWN in down or Key.S in down,
            increase_difficulty=Key.RIGHT in down,
            decrease_difficulty=Key.LEFT in down,
            pause=Key.ESCAPE in pressed,
            toggle_theme=Key.T in pressed,
        )


@dataclass
class PongPauseSystem:
    """System to handle pausing the Pong game."""

    name: str = "pong_pause"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Pause the game if pause intent is triggered."""
        if not ctx.intent or not ctx.intent.pause:
            return

        # avoid re-triggering every frame
        if ctx.world.paused:
            return

        ctx.world.paused = True
        # the first frame after resuming carries the whole pause as dt
        ctx.world.simulation.skip_next_tick()
        ctx.commands.push(PauseGameCommand())


@dataclass
class PongThemeSystem:
    """Switches palettes on request."""

    name: str = "pong_theme"
    order: int = 13

    def step(self, ctx: PongTickContext):
        """Push a theme toggle when asked for."""
        if ctx.intent is not None and ctx.intent.toggle_theme:
            ctx.commands.push(ToggleThemeCommand())


@dataclass
class PongSimulationSystem:
    """
    Advance the match by one frame.
    """

    name: str = "pong_simulation"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Feed the intent to the simulation and tick it."""
        if ctx.world.paused:
            return

        if ctx.intent is not None:
            ctx.world.input.intent = ctx.intent

        ctx.world.simulation.update(ctx.dt * MS_PER_SECOND)


def _renderer(backend: Backend, ctx: PongTickContext) -> PercentRenderer:
    return PercentRenderer(backend, ctx.world.viewport)


class DrawArena(Drawable[PongTickContext]):
    """
    Drawable to render the background and the dashed center line.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        render = _renderer(backend, ctx)
        palette = palette_for(ctx.world.theme)
        render.clear(palette.background)

        dash = 4.0
        y = 0.0
        while y < ARENA_MAX:
            render.segment(
                Position2D(ARENA_CENTER, y),
                Position2D(ARENA_CENTER, min(y + dash, ARENA_MAX)),
                palette.line,
            )
            y += dash * 2


class DrawPaddles(Drawable[PongTickContext]):
    """
    Drawable to render both paddles.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        render = _renderer(backend, ctx)
        color = palette_for(ctx.world.theme).paddle
        for paddle in ctx.world.simulation.paddles:
            render.rectangle(paddle.position, paddle.size, color)


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.simulation.ball
        _renderer(backend, ctx).circle(
            ball.position, ball.radius, palette_for(ctx.world.theme).ball
        )


class DrawScore(Drawable[PongTickContext]):
    """
    Drawable to render the score and the difficulty level.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        render = _renderer(backend, ctx)
        color = palette_for(ctx.world.theme).text
        simulation = ctx.world.simulation

        render.text(
            Position2D(40, 5), str(simulation.score.left), color, centered=True
        )
        render.text(
            Position2D(60, 5), str(simulation.score.right), color, centered=True
        )
        render.text(
            Position2D(ARENA_CENTER, 94),
            f"DIFFICULTY: {simulation.difficulty.upper()}",
            color,
            centered=True,
        )


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawArena(), ctx=ctx),
            DrawCall(drawable=DrawPaddles(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
            DrawCall(drawable=DrawScore(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    Player (left) against the CPU (right).
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        settings = self.context.settings
        config = SimulationConfig.for_difficulty(
            getattr(settings, "difficulty", None)
        )
        intent_input = IntentInput()

        self.world = PongWorld(
            viewport=(vw, vh),
            simulation=PongSimulation(intent_input, config),
            input=intent_input,
            theme=getattr(settings, "theme", "dark"),
        )
        logger.info(f"Match started on {config.difficulty.upper()}")

        self.systems.extend(
            [
                PongInputSystem(),
                PongPauseSystem(),
                PongThemeSystem(),
                PongSimulationSystem(),
                PongRenderSystem(),
            ]
        )
