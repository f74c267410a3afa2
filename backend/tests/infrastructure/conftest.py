"""Infrastructure fixtures — a session stand-in whose store calls fail."""

import pytest
from sqlalchemy.exc import OperationalError


class BrokenSession:
    """Quacks like AsyncSession; every store call raises OperationalError."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self):
        raise OperationalError(
            "SELECT", {}, Exception("connection reset by peer: secret-host"),
        )

    async def execute(self, *args, **kwargs):
        self._fail()

    def add(self, obj):
        pass

    async def commit(self):
        self._fail()

    async def refresh(self, obj):
        pass

    async def delete(self, obj):
        self._fail()

    async def rollback(self):
        self.rolled_back = True


@pytest.fixture
def broken_session():
    return BrokenSession()
