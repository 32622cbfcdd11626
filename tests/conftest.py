import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from vehicle_rental import create_system


@pytest.fixture
def users_file(tmp_path):
    """Path to a not-yet-existing users file in a clean temp directory."""
    return tmp_path / "users.txt"


@pytest.fixture
def system(users_file):
    """Freshly bootstrapped system: default fleet, admin account, empty users file."""
    return create_system(users_file=users_file)


@pytest.fixture
def memory_system():
    """Same bootstrap, no users file at all."""
    return create_system(users_file=None)


@pytest.fixture
def alice(memory_system):
    """A registered, logged-in customer."""
    memory_system.register("alice", "pw123")
    return memory_system.login("alice", "pw123").user
