"""Unit tests for postmore.templating module."""

import pytest
from jinja2 import Environment, UndefinedError
from jinja2.nodes import EvalContext
from markupsafe import Markup

from postmore.templating import (
    FILTER_NAME,
    PostMoreExtension,
    create_environment,
    register_filter,
    render_template,
)

pytestmark = pytest.mark.excerpt

LINK = "<p class='more'><a href='/p/1'>Read more</a></p>"
TEMPLATE = "{{ body | postmore(url, 'Read more') }}"


def test_default_filter_name():
    assert FILTER_NAME == "postmore"


def test_register_filter_returns_env():
    env = Environment()
    assert register_filter(env) is env
    assert "postmore" in env.filters


def test_register_filter_custom_name():
    env = register_filter(Environment(), "excerpt")
    assert "excerpt" in env.filters
    out = env.from_string("{{ body | excerpt('/p/1', 'Read more') }}").render(body="A<!--more-->B")
    assert out == "A" + LINK


def test_filter_in_template():
    env = register_filter(Environment())
    out = env.from_string(TEMPLATE).render(body="A<!-- more -->B", url="/p/1")
    assert out == "A" + LINK


def test_filter_without_marker():
    env = register_filter(Environment())
    out = env.from_string(TEMPLATE).render(body="<p>All of it</p>", url="/p/1")
    assert out == "<p>All of it</p>"


def test_extension_registers_filter():
    env = Environment(extensions=["postmore.templating.PostMoreExtension"])
    assert "postmore" in env.filters
    env = Environment(extensions=[PostMoreExtension])
    out = env.from_string(TEMPLATE).render(body="A<!--more-->B", url="/p/1")
    assert out == "A" + LINK


def test_autoescape_keeps_link_markup():
    env = Environment(autoescape=True, extensions=[PostMoreExtension])
    out = env.from_string(TEMPLATE).render(body="<b>A</b><!--more-->B", url="/p/1")
    assert out == "<b>A</b>" + LINK


def test_autoescape_does_not_escape_values():
    env = Environment(autoescape=True, extensions=[PostMoreExtension])
    out = env.from_string("{{ body | postmore('a&b', '<b>') }}").render(body="X<!--more-->")
    assert out == "X<p class='more'><a href='a&b'><b></a></p>"


def test_non_string_values_are_stringified():
    env = register_filter(Environment())
    out = env.from_string("{{ 42 | postmore(7, 'go') }}").render()
    assert out == "42"


def test_create_environment_uses_strict_undefined():
    env = create_environment()
    with pytest.raises(UndefinedError):
        env.from_string(TEMPLATE).render(body="A<!--more-->B")


def test_create_environment_custom_name_and_kwargs():
    env = create_environment(filter_name="teaser", autoescape=True)
    assert "teaser" in env.filters
    assert "postmore" not in env.filters
    out = env.from_string("{{ body | teaser('/p/1', 'Read more') }}").render(body="<i>A</i><!--more-->")
    assert out == "<i>A</i>" + LINK
    assert isinstance(env.filters["teaser"](EvalContext(env), "x", "", ""), Markup)

    plain = register_filter(Environment())
    assert not isinstance(plain.filters["postmore"](EvalContext(plain), "x", "", ""), Markup)


def test_render_template():
    out = render_template(TEMPLATE, {"body": "A<!--more-->B", "url": "/p/1"})
    assert out == "A" + LINK
