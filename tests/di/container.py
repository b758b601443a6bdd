"""Test container builder with selective unmocking."""

from typing import Any

from dishka import AsyncContainer, Provider, Scope, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from discuss.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    overrides: dict[type, Any] | None = None,
) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Settings are loaded from environment variables.

    Args:
        unmock: Components that should use their production implementation
        overrides: Instances that replace the provided dependency of their
            key type, for wiring in failing or slow collaborators

    Returns:
        Configured test container

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit and API tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})

        # API tests against a broken store
        container = build_test_container(
            overrides={CommentRepository: UnavailableCommentRepository()}
        )
    """
    unmock = unmock or set()
    mockable = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - mockable
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__mock_component__)
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    overrides = overrides or {}
    if overrides:
        override_provider = Provider(scope=Scope.APP)
        for dependency in overrides:
            override_provider.from_context(provides=dependency, scope=Scope.APP)
        providers.append(override_provider)

    return make_async_container(*providers, FastapiProvider(), context=overrides)
