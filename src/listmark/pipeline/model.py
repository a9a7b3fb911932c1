# topmark:header:start
#
#   project      : ListMark
#   file         : model.py
#   file_relpath : src/listmark/pipeline/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The two-state rendering pipeline.

A `Pipeline` holds an ordered, fully materialized sequence of items in one of
two branches:

- `Branch.SUCCESS`: the happy path; items destined for normal rendering.
- `Branch.FALLBACK`: the alternate path; items to render when the normal case
  is considered empty or otherwise overridden.

Every transformation returns a new `Pipeline`; instances are frozen. A chain
reads left to right and ends in exactly one terminal operation:

```python
from listmark.markup.tags import li, ul
from listmark.markup.nodes import text
from listmark.pipeline.constructors import items_of

node = (
    items_of(lambda s: li([text(s)]), names)
    .empty([li([text("nobody")])])
    .as_root(ul)
)
```

Design:
    - The branch is an explicit tag (`Branch`), not a subclass: a pipeline is a
      tagged union over one ``tuple`` of items.
    - No operation raises. "Empty" is a branch chosen by the caller, never an
      exceptional condition.
    - Only `empty` converts between branches based on content; `filter` never
      does, and `negate` swaps the tag unconditionally.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from listmark.config.logging import get_logger

if TYPE_CHECKING:
    from listmark.config.logging import ListmarkLogger
    from listmark.markup.nodes import Node

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

logger: ListmarkLogger = get_logger(__name__)


class Branch(str, Enum):
    """Which side of a `Pipeline` is active."""

    SUCCESS = "success"
    FALLBACK = "fallback"

    @property
    def opposite(self) -> Branch:
        """Return the other branch."""
        return Branch.FALLBACK if self is Branch.SUCCESS else Branch.SUCCESS


@dataclass(frozen=True, slots=True)
class Pipeline(Generic[T]):
    """Immutable success/fallback container over an ordered sequence of items.

    Any iterable passed as ``items`` is materialized into a ``tuple``, whether
    the pipeline comes from the `success` / `fallback` factories, the
    constructors in `listmark.pipeline.constructors` or a direct call.

    Attributes:
        branch (Branch): The active branch.
        items (tuple[T, ...]): The items of the active branch, in rendering order.
    """

    branch: Branch
    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    # --------------------------- Factories ---------------------------

    @classmethod
    def success(cls, items: Iterable[T] = ()) -> Pipeline[T]:
        """Return a pipeline in the success branch holding ``items``."""
        return cls(Branch.SUCCESS, tuple(items))

    @classmethod
    def fallback(cls, items: Iterable[T] = ()) -> Pipeline[T]:
        """Return a pipeline in the fallback branch holding ``items``."""
        return cls(Branch.FALLBACK, tuple(items))

    @property
    def is_success(self) -> bool:
        """Whether the success branch is active."""
        return self.branch is Branch.SUCCESS

    @property
    def is_fallback(self) -> bool:
        """Whether the fallback branch is active."""
        return self.branch is Branch.FALLBACK

    # ------------------------ Transformations ------------------------

    def map(self, f: Callable[[T], T]) -> Pipeline[T]:
        """Apply ``f`` to every item of the active branch.

        The branch tag is preserved: a fallback pipeline maps its fallback
        items and stays a fallback.

        Args:
            f (Callable[[T], T]): Item transformation.

        Returns:
            Pipeline[T]: A new pipeline in the same branch.
        """
        return replace(self, items=tuple(f(item) for item in self.items))

    def map_both(self, f: Callable[[T], U]) -> Pipeline[U]:
        """Apply ``f`` to the items regardless of the active branch.

        Unlike `map`, ``f`` may change the element type; it is applied
        uniformly to success and fallback content alike. The branch tag is
        preserved.

        Args:
            f (Callable[[T], U]): Item transformation.

        Returns:
            Pipeline[U]: A new pipeline in the same branch.
        """
        return Pipeline(self.branch, tuple(f(item) for item in self.items))

    def map_tag(
        self: Pipeline[Node],
        wrap: Callable[[Sequence[Node]], Node],
    ) -> Pipeline[Node]:
        """Wrap every item of the active branch in its own parent node.

        Each item is passed to ``wrap`` as a one-element child list, e.g.
        ``map_tag(li)`` turns ``[a, b]`` into ``[li([a]), li([b])]``.

        Args:
            wrap (Callable[[Sequence[Node]], Node]): Tag capability.

        Returns:
            Pipeline[Node]: A new pipeline in the same branch.
        """
        return Pipeline(self.branch, tuple(wrap([item]) for item in self.items))

    def filter(self, pred: Callable[[T], bool]) -> Pipeline[T]:
        """Keep the items of the active branch that satisfy ``pred``.

        The branch tag never changes, even when every item is dropped. Use
        `empty` to turn an empty success into a fallback.

        Args:
            pred (Callable[[T], bool]): Predicate deciding which items survive.

        Returns:
            Pipeline[T]: A new pipeline in the same branch.
        """
        return replace(self, items=tuple(item for item in self.items if pred(item)))

    def backwards(self) -> Pipeline[T]:
        """Return the pipeline with the active branch's items in reverse order."""
        return replace(self, items=self.items[::-1])

    def negate(self) -> Pipeline[T]:
        """Swap the branch tag, leaving the items untouched."""
        return replace(self, branch=self.branch.opposite)

    def empty(self, fallback_items: Iterable[T]) -> Pipeline[T]:
        """Declare what to render when there is nothing to render.

        - Non-empty success: returned unchanged.
        - Empty success: becomes ``Fallback(fallback_items)``.
        - Fallback (any content): becomes ``Fallback(fallback_items)``; the
          previous fallback content is discarded, the last call wins.

        Args:
            fallback_items (Iterable[T]): Caller-supplied fallback content.

        Returns:
            Pipeline[T]: ``self`` or a new fallback pipeline.
        """
        if self.is_success and self.items:
            return self
        if self.is_success:
            logger.trace("empty(): success branch is empty, switching to fallback")
        else:
            logger.trace("empty(): replacing %d fallback item(s)", len(self.items))
        return Pipeline.fallback(fallback_items)

    # ------------------------- Terminal ops --------------------------

    def as_children(self) -> list[T]:
        """Return the active branch's items as a new list, dropping the branch tag."""
        return list(self.items)

    def as_root(self, wrap: Callable[[list[T]], R]) -> R:
        """Wrap the active branch's items under a single parent.

        Both branches render under the same wrapper; only the content differs.
        Equivalent to ``wrap(self.as_children())``.

        Args:
            wrap (Callable[[list[T]], R]): Tag capability.

        Returns:
            R: The wrapped node.
        """
        return wrap(self.as_children())

    def unwrap(
        self,
        wrap_fallback: Callable[[list[T]], R],
        wrap_success: Callable[[list[T]], R],
    ) -> R:
        """Collapse the pipeline using a branch-specific wrapper.

        Args:
            wrap_fallback (Callable[[list[T]], R]): Wrapper used when the fallback
                branch is active.
            wrap_success (Callable[[list[T]], R]): Wrapper used when the success
                branch is active.

        Returns:
            R: The wrapped node.
        """
        logger.trace(
            "unwrap(): rendering %s branch (%d item(s))", self.branch.value, len(self.items)
        )
        wrap = wrap_success if self.is_success else wrap_fallback
        return wrap(self.as_children())
