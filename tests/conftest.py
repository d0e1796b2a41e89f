# File: tests/conftest.py

import os

# Must be set before blemap.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402

from blemap.db.session import engine  # noqa: E402
from blemap.models.base import Base  # noqa: E402
from blemap.models import project, user  # noqa: E402,F401


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
