import asyncio
import dataclasses
import http.server
import json
import logging
import os
import socketserver
import threading
import typing

import websockets
import websockets.asyncio.server
import websockets.exceptions

import harmonic_delay.calculator
import harmonic_delay.metaphysics
import harmonic_delay.pitch
import harmonic_delay.timing

logger = logging.getLogger(__name__)

_INPUT_FIELDS = {field.name for field in dataclasses.fields(harmonic_delay.calculator.CalculatorInputs)}


def handle_message (
    message: str,
    chakra_table: typing.Optional[typing.Mapping[str, harmonic_delay.metaphysics.NoteClassification]] = None
) -> typing.Dict[str, typing.Any]:

    """
    Evaluate one request from the browser and return the reply payload.

    The request is a JSON object holding any ``CalculatorInputs`` fields
    (missing fields take their defaults), plus optional ``scale`` and
    ``chord`` objects: ``{"root": "D", "mode": "Dorian"}`` and
    ``{"root": "C", "type": "min7"}``.  Invalid requests produce
    ``{"error": "..."}`` instead of raising.
    """

    try:
        request = json.loads(message)
    except json.JSONDecodeError as e:
        return {"error": f"Invalid JSON: {e.msg}"}

    if not isinstance(request, dict):
        return {"error": "Expected a JSON object"}

    fields = {key: value for key, value in request.items() if key in _INPUT_FIELDS}

    try:
        inputs = harmonic_delay.calculator.CalculatorInputs(**fields).clamped()
        snapshot = harmonic_delay.calculator.evaluate(inputs, chakra_table)
    except (TypeError, ValueError, OverflowError) as e:
        return {"error": str(e)}

    reply = snapshot.as_dict()

    scale = request.get("scale")
    if isinstance(scale, dict):
        reply["scale"] = harmonic_delay.pitch.generate_scale(scale.get("root", ""), scale.get("mode", ""))

    chord = request.get("chord")
    if isinstance(chord, dict):
        reply["chord"] = harmonic_delay.pitch.generate_chord(chord.get("root", ""), chord.get("type", ""))

    return reply


class WebUI:

    """
    Browser front end for the calculator.
    Serves the static page over HTTP from a background thread, and answers
    each WebSocket message with a freshly evaluated snapshot.
    """

    def __init__ (
        self,
        http_port: int = 8080,
        ws_port: int = 8765,
        chakra_table: typing.Optional[typing.Mapping[str, harmonic_delay.metaphysics.NoteClassification]] = None
    ) -> None:

        self.http_port = http_port
        self.ws_port = ws_port
        self.chakra_table = chakra_table
        self._http_thread: typing.Optional[threading.Thread] = None
        self._ws_server: typing.Optional[websockets.asyncio.server.Server] = None

    async def start (self) -> None:

        self._start_http_server()
        await self._start_ws_server()

    def _start_http_server (self) -> None:

        if self._http_thread and self._http_thread.is_alive():
            return

        web_dir = os.path.join(os.path.dirname(__file__), "assets", "web")

        class Handler(http.server.SimpleHTTPRequestHandler):
            def __init__(self, *args: typing.Any, **kwargs: typing.Any) -> None:
                super().__init__(*args, directory=web_dir, **kwargs)
            def log_message(self, format: str, *args: typing.Any) -> None:
                pass # Suppress HTTP access logging to keep the console clean

        def run_server() -> None:
            socketserver.TCPServer.allow_reuse_address = True
            with socketserver.TCPServer(("", self.http_port), Handler) as httpd:
                try:
                    httpd.serve_forever()
                except Exception as e:
                    logger.error(f"HTTP Server error: {e}")

        self._http_thread = threading.Thread(target=run_server, daemon=True)
        self._http_thread.start()
        logger.info(f"Calculator available at http://localhost:{self.http_port}")

    async def _handle_client (self, websocket: websockets.asyncio.server.ServerConnection) -> None:

        try:
            async for message in websocket:
                reply = handle_message(message, self.chakra_table)
                await websocket.send(json.dumps(reply))
        except websockets.exceptions.ConnectionClosed:
            pass

    async def _start_ws_server (self) -> None:

        try:
            self._ws_server = await websockets.asyncio.server.serve(self._handle_client, "0.0.0.0", self.ws_port)
        except OSError as e:
            logger.error(f"WebSocket server error: {e}")

    @property
    def ws_bound_port (self) -> typing.Optional[int]:

        """The port the WebSocket server is listening on (useful when started with port 0)."""

        if self._ws_server is None:
            return None

        for sock in self._ws_server.sockets:
            return sock.getsockname()[1]

        return None

    async def serve_forever (self) -> None:

        await self.start()

        if self._ws_server is None:
            return

        await self._ws_server.wait_closed()

    async def stop (self) -> None:

        if self._ws_server:
            self._ws_server.close()
            await self._ws_server.wait_closed()
            self._ws_server = None
