from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a cmd_* function hands back before any work has run.

    Iterating progress_callback(result) does the work, yields (fraction, message)
    pairs and fills in result, output and success.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
