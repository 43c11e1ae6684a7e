"""Truncate command - apply the excerpt filter to a post body on disk."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.excerpt import ExcerptTruncateOutput
from ._find_marker import _find_marker
from .postmore_filter import postmore_filter


def cmd_truncate(path: Path, url: str, text: str) -> StageResult:
    """Read a rendered post body and cut it at its more marker.

    Args:
        path: UTF-8 file holding the rendered post body
        url: Read-more link target
        text: Read-more link label

    Returns:
        StageResult with the filtered body in the 'content' field of output
    """
    path = Path(path)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("excerpt")
        yield (0.3, "Reading post body...")
        try:
            body = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            result_obj.result = f"Cannot read {path}: {e}"
            result_obj.output = ExcerptTruncateOutput(
                errors=[str(e)],
                path=str(path),
                marker="",
                truncated=False,
                content="",
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.7, "Looking for more marker...")
        marker = _find_marker(body)
        content = postmore_filter(body, url, text)

        if marker is None:
            logger.info("No more marker in %s, body left unchanged", path)
            result_obj.result = f"No more marker in {path}, body unchanged"
        else:
            logger.info("Truncated %s at %r", path, marker)
            result_obj.result = f"Truncated {path} at {marker}"

        result_obj.output = ExcerptTruncateOutput(
            errors=[],
            warnings=[],
            path=str(path),
            marker=marker or "",
            truncated=marker is not None,
            content=content,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Truncating {path}...",
        progress_callback=do_work,
    )
