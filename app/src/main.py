"""FastAPI web app entry point for promo-countdown deployments."""

from promo_countdown.settings import CountdownSettings
from promo_countdown.web import create_app

app = create_app(CountdownSettings.from_env())
