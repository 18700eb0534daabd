"""Pytest configuration and shared fixtures."""

import pytest

from theater.domain import Genre, Invoice, Performance, Play


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", type=Genre.TRAGEDY),
        "as-like": Play(name="As You Like It", type=Genre.COMEDY),
        "othello": Play(name="Othello", type=Genre.TRAGEDY),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )
