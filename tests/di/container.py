"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from skillswap.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables; ``tests/conftest.py``
    sets ``ENVIRONMENT=test``.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, PostgreSQL must be running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.is_mockable() and base.component_name() not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no mockable provider declares.

    Raises:
        ValueError: If unknown components are named
    """
    known = {base.component_name() for base in PROVIDERS if base.is_mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
