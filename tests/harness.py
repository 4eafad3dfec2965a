"""Test harness for unit, integration and API tests.

Unit tests run entirely in memory. Integration tests that unmock
persistence expect a migrated PostgreSQL database reachable through the
settings loaded from the environment.
"""

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container, and with it the store, afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_toggle_like(unit_env):
            vote_service = await unit_env.get(VoteService)
            state = await vote_service.toggle_vote(...)
            assert state.like_count == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
