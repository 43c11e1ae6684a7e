"""Render command - render a Jinja2 template with the excerpt filter installed."""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from jinja2 import FileSystemLoader

from ...templating import create_environment
from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.excerpt import ExcerptRenderOutput
from ..config.ConfigError import ConfigError
from ..config.PostMoreConfig import PostMoreConfig


def cmd_render(template_path: Path, variables: Mapping[str, Any] | None = None) -> StageResult:
    """Render a template file.

    The filter is registered under the configured filter_name, so a template
    can write ``{{ content | postmore(url, "Read more") }}``.

    Args:
        template_path: Jinja2 template file
        variables: Template context

    Returns:
        StageResult with the rendered text in the 'content' field of output
    """
    template_path = Path(template_path)
    context = dict(variables or {})

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.result = message
        result_obj.output = ExcerptRenderOutput(
            errors=[message],
            template=str(template_path),
            content="",
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("excerpt")
        yield (0.2, "Loading configuration...")
        try:
            config = PostMoreConfig.load()
        except ConfigError as e:
            logger.error("Render aborted: %s", e)
            _fail(result_obj, str(e))
            yield (1.0, "Failed")
            return

        if not template_path.is_file():
            _fail(result_obj, f"Template not found: {template_path}")
            yield (1.0, "Failed")
            return

        yield (0.5, "Rendering template...")
        env = create_environment(
            filter_name=config.filter_name,
            loader=FileSystemLoader(str(template_path.parent)),
        )
        try:
            content = env.get_template(template_path.name).render(**context)
        except Exception as e:
            logger.error("Render of %s failed: %s", template_path, e)
            _fail(result_obj, f"Render failed: {e}")
            yield (1.0, "Failed")
            return

        logger.info("Rendered %s", template_path)
        result_obj.result = f"Rendered {template_path}"
        result_obj.output = ExcerptRenderOutput(
            errors=[],
            warnings=[],
            template=str(template_path),
            content=content,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Rendering {template_path}...",
        progress_callback=do_work,
    )
