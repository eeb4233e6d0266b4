"""Quick Sort Studio: step-by-step quicksort visualizer."""

from quick_sort_studio.errors import InvalidInput, QuickSortStudioError
from quick_sort_studio.playback import PlaybackController, PlaybackState
from quick_sort_studio.trace import Step, StepKind, Trace, generate

__all__ = [
    "InvalidInput",
    "PlaybackController",
    "PlaybackState",
    "QuickSortStudioError",
    "Step",
    "StepKind",
    "Trace",
    "generate",
]
