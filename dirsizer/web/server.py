"""Explicit HTTP server lifecycle: start, serve, and bounded graceful shutdown."""

from __future__ import annotations

import logging
import signal
import threading
import time
from http.server import ThreadingHTTPServer

from ..config import DEFAULT_SHUTDOWN_TIMEOUT
from .app import ScanRequestHandler
from .stats import StatsReporter

logger = logging.getLogger(__name__)


class _ScanHTTPServer(ThreadingHTTPServer):
    """Threading server that counts handlers still serving a request."""

    daemon_threads = True

    def __init__(self, address: tuple[str, int], stats_reporter: StatsReporter) -> None:
        super().__init__(address, ScanRequestHandler)
        self.stats_reporter = stats_reporter
        self._active_requests = 0
        self._idle = threading.Condition()

    @property
    def active_requests(self) -> int:
        with self._idle:
            return self._active_requests

    def process_request(self, request, client_address) -> None:
        with self._idle:
            self._active_requests += 1
        try:
            super().process_request(request, client_address)
        except BaseException:
            self._request_finished()
            raise

    def process_request_thread(self, request, client_address) -> None:
        try:
            super().process_request_thread(request, client_address)
        finally:
            self._request_finished()

    def _request_finished(self) -> None:
        with self._idle:
            self._active_requests -= 1
            if self._active_requests == 0:
                self._idle.notify_all()

    def wait_idle(self, timeout: float) -> bool:
        """Block until no request is being served or ``timeout`` elapses."""
        with self._idle:
            return self._idle.wait_for(lambda: self._active_requests == 0, timeout=max(0.0, timeout))


class DirSizerServer:
    """One web front end bound to ``host:port``.

    Port ``0`` binds an ephemeral port; ``address`` reports the real one once
    the socket is bound in ``__init__``.
    """

    def __init__(
        self,
        host: str,
        port: int,
        stats_reporter: StatsReporter | None = None,
        shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT,
    ) -> None:
        self.shutdown_timeout = shutdown_timeout
        self._httpd = _ScanHTTPServer((host, port), stats_reporter or StatsReporter(None))
        self._thread: threading.Thread | None = None
        self._stop_requested = threading.Event()

    @property
    def address(self) -> tuple[str, int]:
        host, port = self._httpd.server_address[:2]
        return str(host), int(port)

    @property
    def url(self) -> str:
        host, port = self.address
        return f"http://{host}:{port}/"

    def start(self) -> None:
        """Serve requests on a background thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._httpd.serve_forever,
            name="dirsizer-http",
            daemon=True,
        )
        self._thread.start()
        logger.info("server listening on %s", self.url)

    def shutdown(self, timeout: float | None = None) -> bool:
        """Stop accepting, drain in-flight requests, and close the socket.

        Everything shares one deadline of ``timeout`` seconds (default
        ``shutdown_timeout``): stopping the serve loop, then waiting for
        handlers that are still answering. Returns ``False`` when either did
        not finish in time; the socket is closed either way.
        """
        limit = self.shutdown_timeout if timeout is None else timeout
        deadline = time.monotonic() + limit
        stopped = True
        if self._thread is not None:
            stopper = threading.Thread(target=self._httpd.shutdown, name="dirsizer-http-shutdown", daemon=True)
            stopper.start()
            stopper.join(max(0.0, deadline - time.monotonic()))
            self._thread.join(max(0.0, deadline - time.monotonic()))
            stopped = not self._thread.is_alive()
            self._thread = None
        drained = self._httpd.wait_idle(deadline - time.monotonic())
        self._httpd.server_close()
        if stopped and drained:
            logger.info("server stopped")
        else:
            logger.warning(
                "server did not stop within %.1fs (%d requests still active); closing anyway",
                limit,
                self._httpd.active_requests,
            )
        return stopped and drained

    def request_stop(self) -> None:
        self._stop_requested.set()

    def serve_until_interrupted(self) -> bool:
        """Run until SIGINT/SIGTERM (or ``request_stop``), then shut down.

        Must be called from the main thread so signal handlers can be set.
        """
        def _on_signal(signum: int, _frame: object) -> None:
            logger.info("received %s, shutting down", signal.Signals(signum).name)
            self._stop_requested.set()

        previous = {sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)}
        try:
            self.start()
            while not self._stop_requested.wait(0.5):
                pass
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
        return self.shutdown()


__all__ = ["DirSizerServer"]
