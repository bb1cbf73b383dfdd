import random

import pytest

from minigames.app import app as flask_app


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def client():
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as client:
        yield client
