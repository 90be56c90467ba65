"""Output sinks for fragments that are emitted rather than returned."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO


class StreamSink:
    """Writes fragments to a text stream (stdout when none is given)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so a swapped sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, fragment: str) -> None:
        self.stream.write(fragment)


class BufferSink:
    """Collects fragments in memory, e.g. to build a response body."""

    def __init__(self) -> None:
        self.fragments: List[str] = []

    def write(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def getvalue(self) -> str:
        return "".join(self.fragments)

    def clear(self) -> None:
        self.fragments.clear()
