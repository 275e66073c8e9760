"""The application main loop and the single global application."""

from __future__ import annotations

from typing import Any, Callable, Optional

from yukiengine.errors import AppCreatedError, EngineError, raise_error
from yukiengine.logger import Logger


class Application:
    """Drives the create, awake, update and destroy cycle of the engine parts.

    Every part except the logger is optional; a missing part is skipped.
    ``on_frame`` is called with the application at the end of each update.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        window: Any = None,
        graphics: Any = None,
        input_controller: Any = None,
        worker_pool: Any = None,
        system: Any = None,
        on_frame: Optional[Callable[[Application], None]] = None,
    ) -> None:
        self.logger = logger if logger is not None else Logger()
        self.window = window
        self.graphics = graphics
        self.input_controller = input_controller
        self.worker_pool = worker_pool
        self.system = system
        self.on_frame = on_frame
        self.current_scene: Any = None
        self.alive = False
        self.will_create = True
        self.will_update = False
        self.will_destroy = False
        self.will_terminate = False

    def run(self) -> None:
        """Loop until terminated; an engine error is logged and ends the loop."""
        try:
            self.alive = True
            while self.alive:
                if self.will_create:
                    self.create()
                    self.awake()
                if self.will_update:
                    self.update()
                if self.will_destroy or self.will_terminate:
                    self.destroy()
        except EngineError as error:
            error.push_error_message(self.logger)

    def create(self) -> None:
        self.logger.create()
        if self.window is not None:
            self.window.create()
        if self.graphics is not None:
            self.graphics.create()
        if self.worker_pool is not None:
            self.worker_pool.start()
            self.worker_pool.wait_for_pool_ready()
        if self.system is not None:
            self.system.create()
        if self.input_controller is not None:
            self.input_controller.create()
        self.will_create = False

    def awake(self) -> None:
        if self.window is not None:
            self.window.awake()
        if self.graphics is not None:
            self.graphics.awake()
        if self.current_scene is not None:
            self.current_scene.awake()
        self.will_update = True

    def update(self) -> None:
        scene = self.current_scene
        if scene is not None and not scene.is_ready():
            scene.create()
        if self.worker_pool is not None:
            self.worker_pool.notify_workers()
        if self.graphics is not None:
            self.graphics.render()
        if self.window is not None:
            self.window.update()
        if scene is not None:
            scene.update()
        if self.on_frame is not None:
            self.on_frame(self)
        if self.window is not None and self.window.should_close():
            self.terminate()

    def destroy(self) -> None:
        if self.current_scene is not None:
            self.current_scene.destroy()
        if self.input_controller is not None:
            self.input_controller.destroy()
        if self.graphics is not None:
            self.graphics.destroy()
        if self.window is not None:
            self.window.destroy()
        if self.worker_pool is not None:
            self.worker_pool.terminate()
            self.worker_pool.join()
        self.logger.destroy()
        if self.will_terminate:
            self.alive = False
        else:
            self.will_create = True
            self.will_destroy = False
            self.will_terminate = False

    def reload(self) -> None:
        """Tear everything down and create it again on the next loop pass."""
        self.will_destroy = True

    def terminate(self) -> None:
        """Tear everything down and leave the loop."""
        self.will_terminate = True

    def set_current_scene(self, scene: Any) -> None:
        self.current_scene = scene


_app: Optional[Application] = None


def create_app(**kwargs: Any) -> Application:
    """Create the one global application; a second call raises."""
    global _app
    if _app is not None:
        raise_error(AppCreatedError)
    _app = Application(**kwargs)
    return _app


def get_app() -> Optional[Application]:
    """The global application, or None if none was created."""
    return _app


def reset_app() -> Optional[Application]:
    """Forget the global application and return the one that was forgotten."""
    global _app
    previous, _app = _app, None
    return previous