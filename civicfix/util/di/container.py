"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from civicfix.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API runs with: PostgreSQL persistence."""
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` so ``FromDishka`` parameters resolve per request."""
    setup_dishka(container, app)
