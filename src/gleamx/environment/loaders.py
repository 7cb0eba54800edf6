"""Template loaders for the gleamx environment.

Loaders provide template source to the Environment. They implement
`get_source(name)` returning `(source, filename)` and `list_templates()`.

Built-in Loaders:
- `FileSystemLoader`: Load `.gleamx` files from directories
- `DictLoader`: Load from an in-memory dictionary (testing/embedded)

"""

from __future__ import annotations

from pathlib import Path

from gleamx.environment.exceptions import TemplateEncodingError, TemplateNotFoundError
from gleamx.utils.constants import TEMPLATE_EXTENSION


def read_template(path: Path, encoding: str = "utf-8") -> str:
    """Read a template file, reporting undecodable bytes as a template error.

    Raises:
        TemplateEncodingError: The file is not valid in ``encoding``
    """
    try:
        return path.read_text(encoding)
    except UnicodeDecodeError as e:
        raise TemplateEncodingError(
            f"Cannot decode {path.as_posix()} as {encoding}: {e.reason} at byte {e.start}"
        ) from e


class FileSystemLoader:
    """Load templates from filesystem directories.

    Directories are searched in order and the first match wins:
        ```python
        loader = FileSystemLoader(["src/", "vendor/templates/"])
        source, filename = loader.get_source("pages/home.gleamx")
        ```

    Raises:
        TemplateNotFoundError: If template not found in any search path

    """

    __slots__ = ("_encoding", "_extension", "_paths")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        encoding: str = "utf-8",
        extension: str = TEMPLATE_EXTENSION,
    ):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._encoding = encoding
        self._extension = extension

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def get_source(self, name: str) -> tuple[str, str]:
        for base in self._paths:
            path = base / name
            if path.is_file():
                return read_template(path, self._encoding), str(path)

        raise TemplateNotFoundError(
            f"Template '{name}' not found in: {', '.join(str(p) for p in self._paths)}"
        )

    def list_templates(self) -> list[str]:
        """All template names under the search paths, sorted, as POSIX paths."""
        templates: set[str] = set()
        for base in self._paths:
            if base.is_dir():
                for path in base.rglob(f"*{self._extension}"):
                    if path.is_file():
                        templates.add(path.relative_to(base).as_posix())
        return sorted(templates)


class DictLoader:
    """Load templates from an in-memory dictionary.

    Example:
            >>> loader = DictLoader({"hello.gleamx": "Hello {{ name }}"})
            >>> env = Environment(loader=loader)
            >>> env.compile_template("hello.gleamx")

    Raises:
        TemplateNotFoundError: If template name not in mapping

    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: dict[str, str]):
        self._mapping = mapping

    def get_source(self, name: str) -> tuple[str, str]:
        if name not in self._mapping:
            raise TemplateNotFoundError(f"Template '{name}' not found")
        return self._mapping[name], name

    def list_templates(self) -> list[str]:
        return sorted(self._mapping)
