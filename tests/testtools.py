import asyncio
from unittest.mock import AsyncMock, Mock


class MockReader:
    "A StreamReader mock, fed through `feed` (exceptions are raised by readline)"

    def __init__(self):
        self.q = asyncio.Queue()
        self.reads = 0

    def feed(self, *items):
        for item in items:
            self.q.put_nowait(item.encode("utf-8") if isinstance(item, str) else item)

    def feed_eof(self):
        self.q.put_nowait(b"")

    async def readline(self, *a):
        item = await self.q.get()
        self.reads += 1
        if isinstance(item, BaseException):
            raise item
        return item

    read = readline


class MockWriter:
    "A StreamWriter mock"

    def __init__(self):
        self.write = Mock()
        self.drain = AsyncMock()
        self.close = Mock()
        self.wait_closed = AsyncMock()
