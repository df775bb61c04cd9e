from __future__ import annotations
import asyncio
import logging
from typing import Callable, Optional

log = logging.getLogger('wordplay.persistence')


class SaveScheduler:
    # Coalesces save requests into one background flush task; without a
    # running event loop the save happens inline.

    def __init__(self, snapshot: Callable[[], str], write: Callable[[str], bool]):
        self._snapshot = snapshot
        self._write = write
        self.dirty: bool = False
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def request(self) -> None:
        self.dirty = True
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.flush_now()
            return
        if self._in_flight():
            return
        self._task = loop.create_task(self._run())

    def flush_now(self) -> bool:
        if self._in_flight():
            # the running flush writes again once its older snapshot lands
            self.dirty = True
            return True
        self.dirty = False
        return self._write(self._snapshot())

    async def drain(self) -> None:
        if self._in_flight():
            await self._task

    def _in_flight(self) -> bool:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return False
        return self.pending and self._task.get_loop() is loop

    async def _run(self):
        try:
            while self.dirty:
                self.dirty = False
                # snapshot on the loop thread, write off it
                payload = self._snapshot()
                await asyncio.to_thread(self._write, payload)
        except asyncio.CancelledError:
            log.warning('Background save cancelled; latest changes may not be on disk')
        except Exception:
            log.exception('Background save failed')
