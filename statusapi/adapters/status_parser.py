"""Base status parser for game server console output.

This module provides the abstract StatusParser class. A parser turns the
text a server prints for a status request into a normalized record in a
single pass. Parsers never raise on malformed input: fields they cannot
read keep their defaults.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class StatusParser(ABC, Generic[T]):
    """Base class for game-specific status parsing.

    Subclasses implement ``parse`` on top of ``iter_lines``, which applies
    the line conventions shared by Source engine consoles:
    - the reply is split on newline characters only
    - each line is stripped of surrounding whitespace
    - blank lines are dropped
    """

    @staticmethod
    def iter_lines(raw: str) -> Iterator[str]:
        """Yield the stripped, non-blank lines of a console reply.

        Args:
            raw: Full textual reply of the remote command.

        Yields:
            Each non-blank line with surrounding whitespace removed.
        """
        for line in raw.split("\n"):
            line = line.strip()
            if line:
                yield line

    @abstractmethod
    def parse(self, raw: str) -> T:
        """Parse a full console reply into a status record.

        Must not raise for any string input.
        """
        pass
