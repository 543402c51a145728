from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libnamekit.host import HostCollaborator


class StatusSink:
    """Presents latest captured tool text to an observer, one channel per tool kind.

    Purely presentational: concurrent publishes on same channel are last-write-wins
    and nothing here is read back by the pipeline.
    """

    def __init__(self, host: HostCollaborator) -> None:
        self._host = host
        self._last_rendered: dict[str, str] = {}

    def publish(self, channel: str, text: str, *, reveal: bool) -> None:
        """Replace channel content with given text and surface it if requested."""
        output = self._host.output_channel(channel)
        output.clear()
        output.append(text)
        self._last_rendered[channel] = text
        if reveal:
            output.reveal()

    def last_rendered(self, channel: str) -> str | None:
        return self._last_rendered.get(channel)
