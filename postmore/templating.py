"""Jinja2 integration for the postmore excerpt filter."""

from __future__ import annotations

import logging
from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined, pass_eval_context
from jinja2.ext import Extension
from jinja2.nodes import EvalContext
from markupsafe import Markup

from .api.excerpt.postmore_filter import postmore_filter
from .constants import DEFAULT_FILTER_NAME

FILTER_NAME = DEFAULT_FILTER_NAME

logger = logging.getLogger(__name__)


@pass_eval_context
def _postmore(eval_ctx: EvalContext, value: Any, url: Any, text: Any) -> str:
    # The link markup must survive autoescaping; url and text stay verbatim
    result = postmore_filter(str(value), str(url), str(text))
    if eval_ctx.autoescape:
        return Markup(result)
    return result


def register_filter(env: Environment, name: str = FILTER_NAME) -> Environment:
    """Install the excerpt filter into env under name.

    Templates then use it as ``{{ content | postmore(url, text) }}``.
    """
    env.filters[name] = _postmore
    logger.debug("Registered excerpt filter as %r", name)
    return env


class PostMoreExtension(Extension):
    """Jinja2 extension registering the excerpt filter under its default name.

    Enable with ``Environment(extensions=["postmore.templating.PostMoreExtension"])``.
    """

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        register_filter(environment)


def create_environment(filter_name: str = FILTER_NAME, **env_kwargs: Any) -> Environment:
    """Build a Jinja2 environment with the excerpt filter registered."""
    env_kwargs.setdefault("loader", BaseLoader())
    env_kwargs.setdefault("trim_blocks", True)
    env_kwargs.setdefault("lstrip_blocks", True)
    env_kwargs.setdefault("undefined", StrictUndefined)
    return register_filter(Environment(**env_kwargs), filter_name)


_ENV = create_environment()


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
