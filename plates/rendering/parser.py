"""Template definition parsing.

A definition is plain text holding any number of named blocks::

    {% define "src/app.py" %}
    print("{{ ask("Greeting") }}")
    {% enddefine %}

Text outside every block forms the unnamed root unit. Block bodies are
Jinja2 templates whose functions come from a ``FunctionEnvironment``.
"""

from __future__ import annotations

import logging
import re

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, meta, nodes

from ..core.models import Block, TemplateDefinition
from ..errors import TemplateParseError
from ..store import TemplateStore
from .functions import FunctionEnvironment

logger = logging.getLogger(__name__)

ROOT_NAME = ""

_TAG_PATTERN = re.compile(
    r"\{%(?P<lstrip>-?)\s*"
    r"(?:define\s+\"(?P<name>[^\"]*)\"|(?P<end>enddefine))"
    r"\s*(?P<rstrip>-?)%\}"
)


def build_environment(functions: FunctionEnvironment) -> Environment:
    """Create the Jinja2 environment block bodies are compiled in.

    Args:
        functions: Functions made available to every block body

    Returns:
        Environment with ``args`` and ``ask`` registered as globals
    """
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update(functions.as_globals())
    return env


def _line_of(source: str, offset: int) -> int:
    return source.count("\n", 0, offset) + 1


def split_blocks(source: str) -> list[tuple[str, str]]:
    """Split definition source into ``(name, body)`` pairs.

    The root unit comes first under the empty name. A later block with an
    already used name replaces the earlier body in its original position.

    Raises:
        TemplateParseError: On nested, unterminated or unopened blocks
    """
    blocks: dict[str, str] = {ROOT_NAME: ""}
    root_parts: list[str] = []
    root_defined = False

    open_name: str | None = None
    open_line = 0
    cursor = 0
    strip_next = False

    for match in _TAG_PATTERN.finditer(source):
        text = _trim_after_tag(source[cursor : match.start()], cursor, strip_next)
        if match.group("lstrip"):
            text = text.rstrip()
        line = _line_of(source, match.start())

        if match.group("end"):
            if open_name is None:
                raise TemplateParseError(f"line {line}: enddefine without define")
            blocks[open_name] = text
            root_defined = root_defined or open_name == ROOT_NAME
            open_name = None
        else:
            if open_name is not None:
                raise TemplateParseError(
                    f"line {line}: block {match.group('name')!r} opened inside "
                    f"block {open_name!r} (line {open_line})"
                )
            root_parts.append(text)
            open_name = match.group("name")
            open_line = line

        cursor = match.end()
        strip_next = bool(match.group("rstrip"))

    if open_name is not None:
        raise TemplateParseError(
            f"line {open_line}: block {open_name!r} is never closed"
        )

    root_parts.append(_trim_after_tag(source[cursor:], cursor, strip_next))
    if not root_defined:
        blocks[ROOT_NAME] = "".join(root_parts)

    return list(blocks.items())


def _trim_after_tag(text: str, cursor: int, strip_next: bool) -> str:
    # A tag swallows the newline that ends its line, like trim_blocks.
    if strip_next:
        return text.lstrip()
    if cursor and text.startswith("\n"):
        return text[1:]
    return text


def _unknown_names(env: Environment, tree: nodes.Template) -> list[str]:
    unknown = {
        f"function or variable {name}"
        for name in meta.find_undeclared_variables(tree) - set(env.globals)
    }
    unknown.update(
        f"filter {node.name}"
        for node in tree.find_all(nodes.Filter)
        if node.name not in env.filters
    )
    unknown.update(
        f"test {node.name}"
        for node in tree.find_all(nodes.Test)
        if node.name not in env.tests
    )
    return sorted(unknown)


def _compile_block(env: Environment, name: str, body: str) -> Block:
    try:
        tree = env.parse(body)
        unknown = _unknown_names(env, tree)
        if unknown:
            raise TemplateParseError(
                f"block {name!r}: unknown {', '.join(unknown)}"
            )
        template = env.from_string(body)
    except TemplateSyntaxError as e:
        raise TemplateParseError(
            f"block {name!r}, line {e.lineno}: {e.message}"
        ) from e

    return Block(name=name, raw_body=body, template=template)


def parse_definition(
    name: str, source: str, functions: FunctionEnvironment
) -> TemplateDefinition:
    """Parse a template definition with ``functions`` bound to its blocks.

    Args:
        name: Template name, used for messages
        source: Full definition text
        functions: Function environment of the current execution

    Returns:
        The parsed definition, root unit first

    Raises:
        TemplateParseError: If any part of the source is malformed
    """
    env = build_environment(functions)
    try:
        blocks = [
            _compile_block(env, block_name, body)
            for block_name, body in split_blocks(source)
        ]
    except TemplateParseError as e:
        raise TemplateParseError(f"{name}: {e}") from e

    logger.debug(f"Parsed template {name!r}: {len(blocks) - 1} block(s)")
    return TemplateDefinition(name=name, blocks=blocks)


def open_template(
    store: TemplateStore, name: str, functions: FunctionEnvironment
) -> TemplateDefinition:
    """Load ``name`` from ``store`` and parse it."""
    return parse_definition(name, store.read(name), functions)
