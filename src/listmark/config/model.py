# topmark:header:start
#
#   project      : ListMark
#   file         : model.py
#   file_relpath : src/listmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering configuration model and merge policy.

This module defines:
    - `RenderConfig`: an immutable snapshot used by the serializer, the list
      renderers and the CLI.
    - `MutableRenderConfig`: a mutable builder used while loading and merging;
      it can be frozen into `RenderConfig` and thawed back for edits.

Sources, lowest precedence first:
    1. Built-in defaults (`MutableRenderConfig.from_defaults`).
    2. A config file: ``listmark.toml`` (top level) or ``pyproject.toml``
       (``[tool.listmark]``), found by `discover_config_file` or given explicitly.
    3. Explicit overrides (CLI options or an API mapping), via `apply_overrides`.

Example ``listmark.toml``:

```toml
indent = 2
empty_text = "Nothing here yet"
list_kind = "ol"

[html]
xhtml_void = true
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from listmark.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from listmark.config.logging import get_logger
from listmark.config.types import ListKind
from listmark.constants import (
    DEFAULT_EMPTY_TEXT,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from listmark.errors import ConfigError

if TYPE_CHECKING:
    from listmark.config.logging import ListmarkLogger
    from listmark.config.types import ArgsLike, TomlTable

logger: ListmarkLogger = get_logger(__name__)

ALLOWED_NEWLINES: tuple[str, ...] = ("\n", "\r\n")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering configuration.

    Attributes:
        indent (int): Spaces per nesting level; ``0`` renders compact markup on one line.
        newline (str): Line separator used when ``indent > 0``.
        xhtml_void (bool): Render void elements as ``<br />`` instead of ``<br>``.
        empty_text (str): Default fallback text used by the CLI for empty lists.
        list_kind (ListKind): Default list kind used by the CLI.
        config_files (tuple[str, ...]): Config sources that contributed to this snapshot.
    """

    indent: int = 0
    newline: str = "\n"
    xhtml_void: bool = False
    empty_text: str = DEFAULT_EMPTY_TEXT
    list_kind: ListKind = ListKind.UNORDERED
    config_files: tuple[str, ...] = ()

    @property
    def pretty(self) -> bool:
        """Whether markup is rendered one element per line."""
        return self.indent > 0

    def to_toml_dict(self) -> TomlTable:
        """Return the snapshot in the ``listmark.toml`` layout."""
        return {
            "indent": self.indent,
            "newline": self.newline,
            "empty_text": self.empty_text,
            "list_kind": self.list_kind.value,
            "html": {"xhtml_void": self.xhtml_void},
        }

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableRenderConfig: A mutable builder initialized from this snapshot.
        """
        return MutableRenderConfig(
            indent=self.indent,
            newline=self.newline,
            xhtml_void=self.xhtml_void,
            empty_text=self.empty_text,
            list_kind=self.list_kind,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableRenderConfig:
    """Mutable configuration used during loading and merging.

    ``None`` means "not set by this source" so that `merge_with` can layer
    sources without clobbering values with defaults.
    """

    indent: int | None = None
    newline: str | None = None
    xhtml_void: bool | None = None
    empty_text: str | None = None
    list_kind: ListKind | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> RenderConfig:
        """Validate and freeze this builder into an immutable `RenderConfig`.

        Unset values fall back to the `RenderConfig` defaults.

        Raises:
            ConfigError: If ``indent`` is negative or ``newline`` is not ``\\n`` / ``\\r\\n``.
        """
        defaults = RenderConfig()
        indent: int = defaults.indent if self.indent is None else self.indent
        newline: str = defaults.newline if self.newline is None else self.newline
        if indent < 0:
            raise ConfigError(f"indent must be >= 0 (got {indent})")
        if newline not in ALLOWED_NEWLINES:
            raise ConfigError(f"newline must be one of {ALLOWED_NEWLINES!r} (got {newline!r})")

        return RenderConfig(
            indent=indent,
            newline=newline,
            xhtml_void=defaults.xhtml_void if self.xhtml_void is None else self.xhtml_void,
            empty_text=defaults.empty_text if self.empty_text is None else self.empty_text,
            list_kind=self.list_kind or defaults.list_kind,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return a builder holding the built-in defaults."""
        return RenderConfig().thaw()

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableRenderConfig:
        """Create a draft config from a parsed ``listmark.toml`` table.

        Args:
            data (TomlTable): The parsed TOML table (already unwrapped from
                ``[tool.listmark]`` for ``pyproject.toml``).
            config_file (Path | None): Optional path of the source file.

        Returns:
            MutableRenderConfig: The resulting draft; keys absent from ``data`` stay unset.

        Raises:
            ConfigError: If ``list_kind`` is not a known list kind or ``indent``
                is not an integer.
        """
        html_tbl: TomlTable = get_table_value(data, "html")
        logger.trace("TOML [html]: %s", html_tbl)

        draft = cls(
            indent=get_int_value_or_none(data, "indent"),
            newline=get_string_value_or_none(data, "newline"),
            xhtml_void=get_bool_value_or_none(html_tbl, "xhtml_void"),
            empty_text=get_string_value_or_none(data, "empty_text"),
        )

        kind_raw: str | None = get_string_value_or_none(data, "list_kind")
        if kind_raw is not None:
            kind: ListKind | None = ListKind.parse(kind_raw)
            if kind is None:
                raise ConfigError(f"Unknown list_kind {kind_raw!r} in {config_file or 'config'}")
            draft.list_kind = kind

        if config_file is not None:
            draft.config_files = [str(config_file)]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``listmark.toml`` and ``pyproject.toml``; for the latter
        the ``[tool.listmark]`` section is extracted.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableRenderConfig | None: The draft if successful; None if a
                ``pyproject.toml`` has no ``[tool.listmark]`` section.
        """
        logger.debug("Creating MutableRenderConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        search_from: Path | None = None,
        overrides: ArgsLike | None = None,
    ) -> MutableRenderConfig:
        """Build a draft from defaults, one config file and explicit overrides.

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            search_from (Path | None): Directory to start discovery from when no
                explicit file is given. ``None`` skips discovery.
            overrides (ArgsLike | None): Highest-precedence values (see `apply_overrides`).

        Returns:
            MutableRenderConfig: The merged draft, ready to `freeze`.
        """
        merged: MutableRenderConfig = cls.from_defaults()

        path: Path | None = config_file
        if path is None and search_from is not None:
            path = discover_config_file(search_from)
        if path is not None:
            layer: MutableRenderConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)

        if overrides:
            merged.apply_overrides(overrides)
        return merged

    # ------------------------------ Merging -------------------------------

    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new builder where values set in ``other`` override ``self``.

        Args:
            other (MutableRenderConfig): The higher-precedence layer.

        Returns:
            MutableRenderConfig: The merged builder; neither input is modified.
        """
        return MutableRenderConfig(
            indent=other.indent if other.indent is not None else self.indent,
            newline=other.newline if other.newline is not None else self.newline,
            xhtml_void=other.xhtml_void if other.xhtml_void is not None else self.xhtml_void,
            empty_text=other.empty_text if other.empty_text is not None else self.empty_text,
            list_kind=other.list_kind if other.list_kind is not None else self.list_kind,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_overrides(self, args: ArgsLike) -> MutableRenderConfig:
        """Apply explicit overrides in place; ``None`` values are ignored.

        Recognized keys: ``indent``, ``newline``, ``xhtml_void``, ``empty_text``,
        ``list_kind`` (a `ListKind` or its string form).

        Args:
            args (ArgsLike): Override mapping (CLI namespace or API dict).

        Returns:
            MutableRenderConfig: ``self``, for chaining.

        Raises:
            ConfigError: If ``list_kind`` cannot be parsed.
        """
        if args.get("indent") is not None:
            self.indent = int(args["indent"])
        if args.get("newline") is not None:
            self.newline = str(args["newline"])
        if args.get("xhtml_void") is not None:
            self.xhtml_void = bool(args["xhtml_void"])
        if args.get("empty_text") is not None:
            self.empty_text = str(args["empty_text"])
        kind_any = args.get("list_kind")
        if kind_any is not None:
            kind = kind_any if isinstance(kind_any, ListKind) else ListKind.parse(str(kind_any))
            if kind is None:
                raise ConfigError(f"Unknown list kind: {kind_any!r}")
            self.list_kind = kind
        return self


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory, ``listmark.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.listmark]`` table.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The config file path, or None if nothing was found.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        local: Path = directory / LOCAL_TOML_CONFIG_NAME
        if local.is_file():
            logger.debug("Discovered config file: %s", local)
            return local
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and _has_tool_section(pyproject):
            logger.debug("Discovered config file: %s", pyproject)
            return pyproject
    return None


def _has_tool_section(pyproject: Path) -> bool:
    try:
        data: TomlTable = load_toml_dict(pyproject)
    except ConfigError:
        logger.warning("Ignoring unreadable %s during config discovery", pyproject)
        return False
    return bool(get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION))
