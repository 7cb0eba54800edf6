"""Environment: configuration and entry points of the gleamx pipeline.

    source --tokenize--> tokens --parse--> nodes --Renderer.render--> Gleam

Example:
    >>> from gleamx import Environment
    >>> env = Environment()
    >>> gleam = env.compile_source("{> with name as String\\nHello {{ name }}", "hello.gleamx")

"""

from __future__ import annotations

import logging
from typing import Protocol

from gleamx.utils.constants import DEFAULT_GENERATOR_NAME

logger = logging.getLogger(__name__)


class Loader(Protocol):
    def get_source(self, name: str) -> tuple[str, str]: ...

    def list_templates(self) -> list[str]: ...


class Environment:
    """Compile configuration shared across templates.

    Attributes:
        loader: Where ``compile_template`` finds template source
        generator_name: Program named in each generated header comment

    Thread-Safety:
        Configuration is read-only after construction and every compile
        builds its own lexer, parser and render state.

    """

    __slots__ = ("_renderer", "generator_name", "loader")

    def __init__(
        self,
        loader: Loader | None = None,
        generator_name: str = DEFAULT_GENERATOR_NAME,
    ):
        from gleamx.compiler import Renderer

        self.loader = loader
        self.generator_name = generator_name
        self._renderer = Renderer()

    def compile_source(self, source: str, filename: str = "<template>") -> str:
        """Compile template source text to a Gleam module.

        Args:
            source: Template text
            filename: Name used in error messages and the generated header

        Raises:
            TemplateSyntaxError: The source does not lex or parse
            RenderError: The node tree cannot be rendered
        """
        from gleamx.lexer import tokenize
        from gleamx.parser import parse

        tokens = tokenize(source, filename)
        nodes = parse(tokens, source, filename)
        logger.debug("Compiling %s: %d top-level nodes", filename, len(nodes))
        return self._renderer.render(nodes, self.generator_name, filename)

    def compile_template(self, name: str) -> str:
        """Load ``name`` through the loader and compile it.

        The template name, not the loader's filename, goes in the header so
        output does not depend on the directory the compile ran from.
        """
        source, _ = self._require_loader().get_source(name)
        return self.compile_source(source, name)

    def list_templates(self) -> list[str]:
        return self._require_loader().list_templates()

    def _require_loader(self) -> Loader:
        if self.loader is None:
            raise RuntimeError("Environment has no loader configured")
        return self.loader
