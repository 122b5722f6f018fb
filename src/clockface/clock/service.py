"""Clock service: the repeating timer that drives the renderer."""

import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from clockface.clock.geometry import ClockTime, ViewportGeometry
from clockface.clock.renderer import ClockFaceRenderer
from clockface.clock.style import ClockStyle
from clockface.clock.svg import SvgSurface
from clockface.config import Settings, get_settings
from clockface.logging.config import get_logger

logger = get_logger(__name__)


class ClockTicker:
    """
    Calls a function once per interval on a background thread.

    Ticks are scheduled against a monotonic deadline, so a slow callback
    does not push later ticks back. ``stop()`` joins the thread; once it
    returns the callback is never invoked again.
    """

    def __init__(self, callback: Callable[[], None], interval: float = 1.0):
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        self.callback = callback
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start ticking. The first tick fires immediately."""
        with self._lock:
            if self.running:
                return
            # A thread left behind by a timed-out stop keeps its own event
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), name="clock-ticker", daemon=True
            )
            self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Cancel the timer and wait for an in-flight tick to finish."""
        with self._lock:
            self._stop_event.set()
            thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self, stop_event: threading.Event) -> None:
        deadline = time.monotonic()
        while not stop_event.is_set():
            try:
                self.callback()
            except Exception as e:
                logger.error(f"Error in clock tick: {e}", exc_info=True)

            deadline += self.interval
            delay = deadline - time.monotonic()
            if delay < 0:
                # Fell behind; skip missed ticks instead of bursting
                deadline = time.monotonic()
                delay = 0
            stop_event.wait(delay)

    def __enter__(self) -> "ClockTicker":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


class ClockService:
    """Renders the clock once per tick and saves it as SVG."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        now: Callable[[], datetime] = datetime.now,
        renderer: Optional[ClockFaceRenderer] = None,
    ):
        """
        Initialize clock service.

        Args:
            settings: Settings, defaults to ``get_settings()``
            now: Time source sampled on every tick
            renderer: Renderer, defaults to one styled from settings
        """
        self.settings = settings or get_settings()
        self.now = now
        self.renderer = renderer or ClockFaceRenderer(style=ClockStyle.from_settings(self.settings))
        self.viewport = ViewportGeometry.from_settings(self.settings)
        self.output_path = Path(self.settings.svg_output_path)
        self.settings.ensure_directories()
        self.ticker = ClockTicker(self.update_clock, interval=self.settings.update_interval)

    def resize(self, width: float, height: float) -> None:
        """Use a new viewport size from the next frame on."""
        self.viewport = self.viewport.resized(width, height)
        logger.debug(f"Viewport resized to {width}x{height}, radius {self.viewport.radius}")

    def render_svg(self, when: Optional[datetime] = None) -> str:
        """Render one frame as SVG for ``when`` (defaults to the time source)."""
        clock_time = ClockTime.from_datetime(when or self.now())
        primitives = self.renderer.render(self.viewport, clock_time)
        surface = SvgSurface(self.viewport.width, self.viewport.height)
        return surface.draw(primitives)

    def update_clock(self) -> None:
        """Generate and save updated clock SVG."""
        svg_content = self.render_svg()

        # Atomic write
        temp_path = self.output_path.with_suffix(".tmp")
        temp_path.write_text(svg_content, encoding="utf-8")
        temp_path.replace(self.output_path)

    def start(self) -> None:
        logger.info(f"Clock service started, outputting to {self.output_path}")
        self.ticker.start()

    def stop(self) -> None:
        self.ticker.stop()
        logger.info("Clock service stopped")

    def run_daemon(self) -> None:
        """Run the clock service until interrupted."""
        self.start()
        try:
            while self.ticker.running:
                time.sleep(0.5)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
