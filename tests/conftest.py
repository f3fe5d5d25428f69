"""Shared fixtures for StackIt AI tests."""

import random

import pytest

from stackit.services.ai_service import AIService

from fakes import FakeClient


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_service(sleeps):
    """Build an AIService around a FakeClient with a seeded RNG and no real sleeping."""
    def _make(responses=None, error=None, seed=7, mock_latency=0.0):
        client = FakeClient(responses, error)
        return AIService(client, rng=random.Random(seed), mock_latency=mock_latency, sleep=sleeps.append)
    return _make
