"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from pong_arena.interfaces import LogicalKey
from pong_arena.simulation import PongSimulation


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar move_up (bool): Up key held.
    :ivar move_down (bool): Down key held.
    :ivar increase_difficulty (bool): Harder key held.
    :ivar decrease_difficulty (bool): Easier key held.
    :ivar pause (bool): Whether to pause the game.
    :ivar toggle_theme (bool): Whether to switch palettes.
    """

    move_up: bool = False
    move_down: bool = False
    increase_difficulty: bool = False
    decrease_difficulty: bool = False
    pause: bool = False
    toggle_theme: bool = False


class IntentInput:
    """
    Input source reading the latest :class:`PongIntent`.

    The scene refreshes :attr:`intent` every tick before the simulation
    polls it.
    """

    def __init__(self):
        self.intent = PongIntent()

    def is_pressed(self, key: LogicalKey) -> bool:
        """Whether ``key`` is held in the latest intent."""
        return {
            LogicalKey.MOVE_UP: self.intent.move_up,
            LogicalKey.MOVE_DOWN: self.intent.move_down,
            LogicalKey.INCREASE_DIFFICULTY: self.intent.increase_difficulty,
            LogicalKey.DECREASE_DIFFICULTY: self.intent.decrease_difficulty,
        }[key]


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar viewport (tuple[float, float]): Viewport size (width, height).
    :ivar simulation (PongSimulation): Ball, paddles and score.
    :ivar input (IntentInput): Input bridge polled by the simulation.
    :ivar theme (str): Active palette name.
    :ivar paused (bool): Whether the simulation is frozen.
    """

    viewport: tuple[float, float]
    simulation: PongSimulation
    input: IntentInput
    theme: str = "dark"
    paused: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick, in seconds.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    :ivar packet (Optional[RenderPacket]): Render packet for this tick.
    """
