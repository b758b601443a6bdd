"""Production container wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from discuss.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the real implementation of every component."""
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve each request of ``app`` from a REQUEST scope of ``container``."""
    setup_dishka(container=container, app=app)
