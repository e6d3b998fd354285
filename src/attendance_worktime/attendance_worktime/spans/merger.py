from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .model import ClampedSpan, MergedInterval


@dataclass(frozen=True)
class MergeResult:
    intervals: tuple[MergedInterval, ...]
    minutes: int


class IntervalMerger:
    """Sort-and-sweep merge of spans sharing one (user, date) key.

    Touching intervals ([a, b) and [b, c)) are merged as well as overlapping
    ones, so the output is the minimal disjoint cover. Minutes are rounded per
    merged interval, never per raw span.
    """

    def merge(self, spans: Iterable[Union[ClampedSpan, MergedInterval]]) -> list[MergedInterval]:
        ordered = sorted(spans, key=lambda s: (s.start, s.end))

        merged: list[MergedInterval] = []
        for s in ordered:
            if merged and s.start <= merged[-1].end:
                last = merged[-1]
                if s.end > last.end:
                    merged[-1] = MergedInterval(start=last.start, end=s.end)
                continue
            merged.append(MergedInterval(start=s.start, end=s.end))
        return merged

    @staticmethod
    def total_minutes(intervals: Iterable[MergedInterval]) -> int:
        return sum(i.minutes for i in intervals)

    def merge_and_sum(self, spans: Iterable[Union[ClampedSpan, MergedInterval]]) -> MergeResult:
        intervals = self.merge(spans)
        return MergeResult(intervals=tuple(intervals), minutes=self.total_minutes(intervals))
