"""The application loop and the demo scene."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from ecsengine.collision import Collision
from ecsengine.components import Camera, Collider, Mesh, Physics, Spin, Transform
from ecsengine.input import Keyboard, Mouse
from ecsengine.movement import Movement
from ecsengine.registry import Clock, Registry, State
from ecsengine.rotation import Rotation
from ecsengine.vector import Vector3

_TITLE = "Game"
_DEFAULT_FRAMES = 600

_UNIT_CUBE = (
    (-0.5, 0.5, -0.5),
    (0.5, 0.5, -0.5),
    (-0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5),
    (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
)


def _cube_collider() -> Collider:
    return Collider(vertices=[Vector3(*point) for point in _UNIT_CUBE])


class Application:
    """Owns the registry, the frame clock, the shared state and the input devices."""

    def __init__(self) -> None:
        self.registry = Registry()
        self.clock = Clock()
        self.state = State()
        self.keyboard = Keyboard()
        self.mouse = Mouse()
        self._start = time.perf_counter()

    def step(self, now: float) -> None:
        """Advance the clock to ``now`` (seconds since start) and run every system."""
        self.clock.tick(now)
        self.registry.run(self.state, self.clock)

    def run(self, frames: int) -> None:
        """Run ``frames`` frames timed by the wall clock."""
        if frames < 0:
            raise ValueError(f"frame count must not be negative, got {frames}")
        for _ in range(frames):
            self.step(time.perf_counter() - self._start)

    def title(self) -> str:
        """Window title showing the frame rate of the last frame."""
        delta = self.clock.delta_time
        fps = int(1 / delta) if delta > 0 else 0
        return f"{_TITLE} [{fps} fps]"


class Game(Application):
    """A camera-carrying player, a falling-ready triangle and a spinning cube."""

    PLAYER = 0
    TRIANGLE = 1
    CUBE = 2

    def __init__(self) -> None:
        super().__init__()
        registry = self.registry

        registry.add(self.PLAYER, Transform())
        registry.add(self.PLAYER, Camera())
        registry.add(self.PLAYER, _cube_collider())

        registry.add(self.TRIANGLE, Transform(position=Vector3(-1.0, 0.0, -2.0)))
        registry.add(self.TRIANGLE, Mesh.create_triangle(1, 0))
        registry.add(self.TRIANGLE, Physics())

        registry.add(self.CUBE, Transform(position=Vector3(1.0, 0.0, -2.0)))
        registry.add(self.CUBE, Mesh.create_cube(1, 1))
        registry.add(self.CUBE, _cube_collider())
        registry.add(self.CUBE, Spin(axis=Vector3.UP, speed=100.0))

        self.state.active_camera = self.PLAYER

        registry.activate(Movement, self.keyboard, self.mouse)
        registry.activate(Rotation)
        registry.activate(Collision)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo scene for a number of frames and print the last title."""
    parser = argparse.ArgumentParser(description="Run the demo scene headless.")
    parser.add_argument(
        "--frames",
        type=int,
        default=_DEFAULT_FRAMES,
        help="number of frames to run",
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    game = Game()
    game.run(args.frames)
    print(game.title())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())