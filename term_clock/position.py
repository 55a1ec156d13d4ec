"""
Screen anchors for placing the clock along one axis.
"""

from enum import Enum


class Anchor(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"

    def resolve(self, length: int, half: int) -> int:
        """
        Offset of content whose half-extent is *half* on an axis of *length* cells.

        Never negative: content larger than the axis saturates at 0.
        """
        if self is Anchor.START:
            return 1
        if self is Anchor.CENTER:
            return max(length // 2 - half, 0)
        return max(length - (half * 2 + 2), 0)

    @classmethod
    def names(cls) -> list[str]:
        return [anchor.value for anchor in cls]
