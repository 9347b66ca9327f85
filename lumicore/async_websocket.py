"""A WebSocket client whose socket work happens on a background thread."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Optional, Tuple

import websocket

from lumicore.events import Signal

_log = logging.getLogger(__name__)

_JOIN_TIMEOUT = 5.0

_Command = Optional[Tuple[Callable[..., None], Tuple[Any, ...]]]


class AsyncWebSocket:
    """WebSocket client that never blocks its caller.

    ``open``, ``close`` and ``send_binary_message`` only queue their work;
    a worker thread carries it out in order. Results are reported through
    the ``connected``, ``disconnected``, ``binary_message_received`` and
    ``error`` signals, which are emitted from background threads.
    """

    def __init__(self) -> None:
        self.connected = Signal()
        self.disconnected = Signal()
        self.binary_message_received = Signal()
        self.error = Signal()

        self._app: Optional[websocket.WebSocketApp] = None
        self._runner: Optional[threading.Thread] = None
        self._is_connected = False
        self._shut_down = False
        self._commands: "queue.Queue[_Command]" = queue.Queue()
        self._worker = threading.Thread(target=self._run, name="async-websocket", daemon=True)
        self._worker.start()

    @property
    def socket(self) -> Optional[websocket.WebSocketApp]:
        """The current connection object, if one has been opened."""
        return self._app

    # -- public commands --------------------------------------------------

    def open(self, url: str) -> None:
        """Connect to ``url``, replacing any existing connection."""
        self._enqueue(self._open_in_thread, url)

    def close(self) -> None:
        """Close the current connection."""
        self._enqueue(self._close_in_thread)

    def send_binary_message(self, data: bytes) -> int:
        """Queue ``data`` to be sent as one binary message.

        The send happens later, so the number of bytes reported is always 0.
        """
        self._enqueue(self._send_in_thread, bytes(data))
        return 0

    def shutdown(self) -> None:
        """Close the connection and stop the worker thread."""
        if self._shut_down:
            return
        self._shut_down = True
        self._commands.put(None)
        self._worker.join(_JOIN_TIMEOUT)

    # -- worker thread ----------------------------------------------------

    def _enqueue(self, function: Callable[..., None], *args: Any) -> None:
        if self._shut_down:
            raise RuntimeError("socket has been shut down")
        self._commands.put((function, args))

    def _run(self) -> None:
        while True:
            command = self._commands.get()
            if command is None:
                self._close_in_thread()
                return
            function, args = command
            try:
                function(*args)
            except Exception:  # keep the worker alive for later commands
                _log.exception("websocket command failed")

    def _open_in_thread(self, url: str) -> None:
        if self._app is not None:
            self._close_in_thread()
        app = websocket.WebSocketApp(
            url,
            on_open=self._on_open,
            on_message=self._on_message,
            on_error=self._on_error,
            on_close=self._on_close,
        )
        runner = threading.Thread(target=app.run_forever, name="websocket-runner", daemon=True)
        self._app = app
        self._runner = runner
        runner.start()

    def _close_in_thread(self) -> None:
        app, runner = self._app, self._runner
        self._app = None
        self._runner = None
        if app is not None:
            app.close()
        if runner is not None:
            runner.join(_JOIN_TIMEOUT)

    def _send_in_thread(self, data: bytes) -> None:
        app = self._app
        sock = app.sock if app is not None else None
        if sock is None or not sock.connected:
            _log.debug("dropping message: websocket is not connected")
            return
        try:
            app.send(data, opcode=websocket.ABNF.OPCODE_BINARY)
        except (websocket.WebSocketException, OSError) as exc:
            _log.debug("websocket send failed: %s", exc)
            self.error.emit(exc)

    # -- callbacks from the runner thread ---------------------------------

    def _on_open(self, _ws: Any) -> None:
        self._is_connected = True
        self.connected.emit()

    def _on_message(self, _ws: Any, message: Any) -> None:
        if isinstance(message, (bytes, bytearray)):
            self.binary_message_received.emit(bytes(message))

    def _on_error(self, _ws: Any, error: Exception) -> None:
        _log.debug("websocket error: %s", error)
        self.error.emit(error)

    def _on_close(self, _ws: Any, _code: Any = None, _reason: Any = None) -> None:
        if self._is_connected:
            self._is_connected = False
            self.disconnected.emit()