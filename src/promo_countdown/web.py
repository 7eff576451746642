"""FastAPI web app serving countdown images."""

import logging
from datetime import datetime
from typing import Callable

from fastapi import FastAPI, HTTPException, Query
from fastapi.requests import Request
from fastapi.responses import PlainTextResponse, Response

from .countdown.clock import compute_remaining
from .countdown_pipeline import encode_countdown
from .errors import ConfigError, RenderFailure
from .settings import CountdownSettings, GifMode, parse_gif_mode

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

ENDPOINTS = ("/countdown.gif", "/countdown.png", "/countdown.svg")


def system_clock(settings: CountdownSettings) -> Clock:
    """Clock returning instants in the target's timezone."""
    tz = settings.target_date.tzinfo
    return lambda: datetime.now(tz)


def create_app(settings: CountdownSettings, clock: Clock | None = None) -> FastAPI:
    """
    Build the countdown web app.

    Args:
        settings: Configuration fixed for the lifetime of the process
        clock: Callable returning the current instant; defaults to the system clock
    """
    app = FastAPI(title="Promo Countdown")
    app.state.settings = settings
    app.state.clock = clock or system_clock(settings)

    def render(request: Request, output_format: str, gif_mode: GifMode | None = None) -> Response:
        now = request.app.state.clock()
        try:
            result = encode_countdown(now, request.app.state.settings, output_format, gif_mode=gif_mode)
        except RenderFailure:
            logger.error("Error generating %s countdown", output_format, exc_info=True)
            return PlainTextResponse("Error generating image", status_code=500)

        return Response(
            content=result.content,
            media_type=result.media_type,
            headers={**NO_CACHE_HEADERS, "X-Countdown-Mode": result.mode.value},
        )

    @app.get("/", response_class=PlainTextResponse)
    async def index(request: Request):
        """List the image endpoints."""
        base = str(request.base_url).rstrip("/")
        return "\n".join(f"{base}{path}" for path in ENDPOINTS) + "\n"

    @app.get("/health")
    async def health(request: Request):
        state = request.app.state
        return {
            "status": "ok",
            "target": state.settings.target_date.isoformat(),
            "remaining": compute_remaining(state.clock(), state.settings.target_date),
        }

    @app.get("/countdown.gif")
    def countdown_gif(
        request: Request,
        mode: str | None = Query(None, description="Animation mode: pulse or countdown"),
    ):
        """Animated countdown; pulses by default or ticks one frame per second."""
        gif_mode = None
        if mode is not None:
            try:
                gif_mode = parse_gif_mode(mode)
            except ConfigError as e:
                raise HTTPException(status_code=400, detail=str(e))
        return render(request, "gif", gif_mode)

    @app.get("/countdown.png")
    def countdown_png(request: Request):
        """Static countdown snapshot."""
        return render(request, "png")

    @app.get("/countdown.svg")
    def countdown_svg(request: Request):
        return render(request, "svg")

    return app
