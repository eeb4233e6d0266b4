"""Reference listing and localized step narration."""

from __future__ import annotations

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "ja"

SOURCE_LISTING: tuple[str, ...] = (
    "def quick_sort(arr, low, high):",
    "    if low < high:",
    "        pi = partition(arr, low, high)",
    "        quick_sort(arr, low, pi - 1)",
    "        quick_sort(arr, pi + 1, high)",
    "",
    "def partition(arr, low, high):",
    "    pivot = arr[high]",
    "    i = low - 1",
    "    for j in range(low, high):",
    "        if arr[j] < pivot:",
    "            i += 1",
    "            arr[i], arr[j] = arr[j], arr[i]",
    "    arr[i+1], arr[high] = arr[high], arr[i+1]",
)

# Listing lines highlighted for each step kind.
LINE_START = 0
LINE_PIVOT = 7
LINE_BOUNDARY = 8
LINE_COMPARE = 10
LINE_SWAP = 12
LINE_PLACE_PIVOT = 13


@dataclass(frozen=True)
class Narrator:
    """Message templates for one locale."""

    locale: str
    start: str
    pivot_selected: str
    range_start: str
    compare: str
    swap: str
    partition_done: str
    complete: str

    def describe_start(self) -> str:
        return self.start

    def describe_pivot(self, pivot: int) -> str:
        return self.pivot_selected.format(pivot=pivot)

    def describe_range(self, low: int, high: int) -> str:
        return self.range_start.format(low=low, last=high - 1)

    def describe_compare(self, pivot: int, value: int) -> str:
        return self.compare.format(pivot=pivot, value=value)

    def describe_swap(self, value: int, index: int) -> str:
        return self.swap.format(value=value, index=index)

    def describe_partition(self, pivot: int, index: int) -> str:
        return self.partition_done.format(pivot=pivot, index=index)

    def describe_complete(self) -> str:
        return self.complete


CATALOGS: dict[str, Narrator] = {
    "ja": Narrator(
        locale="ja",
        start="クイックソート（分割統治法）を開始します。高速な並び替えを実現します。",
        pivot_selected="ピボット（基準となる値）を {pivot} に設定します。",
        range_start="インデックス {low} から {last} までの範囲で比較を開始します。",
        compare="ピボット {pivot} と {value} を比較します。",
        swap="{value} はピボットより小さいので、左側のグループ（インデックス {index}）へ移動します。",
        partition_done="最後に、ピボット {pivot} を中央（インデックス {index}）に配置して、分割完了です。",
        complete="すべての分割と整列が終了しました！最速の証です。",
    ),
    "en": Narrator(
        locale="en",
        start="Starting quicksort (divide and conquer).",
        pivot_selected="Pivot set to {pivot}.",
        range_start="Comparing elements from index {low} to {last}.",
        compare="Comparing pivot {pivot} with {value}.",
        swap="{value} is smaller than the pivot, moving it to the left group (index {index}).",
        partition_done="Placing pivot {pivot} at index {index}; partition complete.",
        complete="All partitions are sorted.",
    ),
}


def get_narrator(locale: str = DEFAULT_LOCALE) -> Narrator:
    """Return the narrator for a locale, falling back to the default."""
    narrator = CATALOGS.get(locale)
    if narrator is None:
        logger.warning("Unknown narration locale %r, using %s", locale, DEFAULT_LOCALE)
        return CATALOGS[DEFAULT_LOCALE]
    return narrator
