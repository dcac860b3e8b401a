"""Interface shared by everything that can be added to a figure."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GraphMaker(ABC):
    """
    Interface for graph entities.

    A graph entity accumulates matplotlib statements in its own buffer.
    The figure only needs the accumulated text, which lets any entity kind
    be composed into a figure without the figure knowing about it.
    """

    @abstractmethod
    def get_buffer(self) -> str:
        """
        Return the complete script text accumulated so far.

        Returns:
            The buffer content, newline-terminated statements in call order
        """
        pass
