from __future__ import annotations

import pytest


SAMPLE_COMPLETION = """## Transcript
Host: Welcome to the show about machine learning.
Guest: Thanks for having me.
Host: Let's talk about neural networks.
Guest: They learn patterns from data.

Summary:
The video introduces machine learning. It explains neural networks.

Key Points:
- Machine learning learns from data
- Neural networks are layered models

Topics:
- Machine Learning (8)
- Neural Networks (6)

Sentiment: 7/10 positive

Questions:
- How much data is needed?
- What are common pitfalls?
"""


class FixedRandom:
    """Stand-in for random.Random that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def sample_completion() -> str:
    return SAMPLE_COMPLETION


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.5)
