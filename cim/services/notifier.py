"""
Notifier

Collects the user-visible success/failure messages produced by store
operations. Routers drain it once per request and return the notices with
the response; they are the only feedback channel for remote failures.
"""

from typing import List

from cim.models.notice import Notice, NoticeLevel


class Notifier:
    """In-memory notice sink for one user workspace"""

    def __init__(self):
        self._notices: List[Notice] = []

    def success(self, message: str) -> None:
        self._notices.append(Notice(level=NoticeLevel.SUCCESS, message=message))

    def error(self, message: str) -> None:
        self._notices.append(Notice(level=NoticeLevel.ERROR, message=message))

    @property
    def pending(self) -> List[Notice]:
        return list(self._notices)

    def drain(self) -> List[Notice]:
        """Return and forget all notices collected so far"""
        notices, self._notices = self._notices, []
        return notices
