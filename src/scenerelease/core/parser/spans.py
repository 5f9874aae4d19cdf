"""Character-span bookkeeping for title subtraction.

The title is whatever is left once every recognised metadata token has
been removed. Instead of rewriting the string after each removal,
:class:`SpanMask` records which characters have been consumed. Later
patterns run against :meth:`SpanMask.view`, where consumed characters are
blanked, so a token can never be removed twice and removals never shift
the offsets of earlier matches.
"""

from __future__ import annotations

from re import Pattern


class SpanMask:
    """A string with a per-character consumed marker.

    Example:
        >>> mask = SpanMask("Movie.2020.1080p")
        >>> mask.consume(5, 10)
        >>> mask.view()
        'Movie     .1080p'
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._consumed = bytearray(len(text))
        self._view = list(text)

    def __len__(self) -> int:
        return len(self.text)

    def consume(self, start: int, end: int) -> None:
        """Mark ``text[start:end]`` as consumed."""
        start = max(start, 0)
        end = min(end, len(self.text))
        if end <= start:
            return
        self._consumed[start:end] = b"\x01" * (end - start)
        self._view[start:end] = " " * (end - start)

    def consume_pattern(self, pattern: Pattern[str]) -> int:
        """Consume every match of pattern in the current view.

        Returns:
            The number of matches consumed.
        """
        count = 0
        for match in pattern.finditer(self.view()):
            if match.end() > match.start():
                self.consume(match.start(), match.end())
                count += 1
        return count

    def is_consumed(self, index: int) -> bool:
        return bool(self._consumed[index])

    def view(self) -> str:
        """Return the text with consumed characters replaced by spaces."""
        return "".join(self._view)

    def render(self, start: int = 0, end: int | None = None) -> str:
        """Return the unconsumed characters of ``text[start:end]``.

        Consumed runs collapse to a single space so neighbouring words stay
        separated.
        """
        if end is None:
            end = len(self.text)
        parts: list[str] = []
        in_gap = False
        for index in range(max(start, 0), min(end, len(self.text))):
            if self._consumed[index]:
                if not in_gap:
                    parts.append(" ")
                    in_gap = True
                continue
            parts.append(self.text[index])
            in_gap = False
        return "".join(parts)
