"""Extension-point bus for the interactive init pipeline.

Two hook kinds, both invoked strictly in registration order:

- :class:`BailHook` stops at the first handler returning anything but ``None``.
- :class:`WaterfallHook` threads an accumulator through every handler.

A :class:`~shipctl.prompts.PromptAborted` raised by a handler propagates
unchanged; any other exception is wrapped in :class:`HookError`.

There is no priority and no reordering. Default behaviour is tapped by the
pipeline *after* plugins have initialized, so a plugin handler that produces a
result always wins over the default.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from shipctl.prompts import PromptAborted

if TYPE_CHECKING:
    from shipctl.domain.rc import AuthorInformation, PluginEntry, RepoInformation
    from shipctl.services.env import EnvRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HookError(Exception):
    """A handler raised while a hook was being invoked."""

    def __init__(self, hook_name: str, tap_name: str, cause: BaseException) -> None:
        self.hook_name = hook_name
        self.tap_name = tap_name
        self.cause = cause
        super().__init__(f"{tap_name!r} failed in hook {hook_name!r}: {cause}")


@dataclass(frozen=True)
class Tap:
    """A single hook registration."""

    name: str
    fn: Callable[..., Any]


class _Hook:
    """Ordered list of taps shared by both hook kinds."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._taps: list[Tap] = []

    def tap(self, name: str, fn: Callable[..., Any]) -> None:
        """Append a handler. Registration never fails."""
        self._taps.append(Tap(name=name, fn=fn))
        logger.debug("Tapped %s by %s", self.name, name)

    @property
    def taps(self) -> tuple[Tap, ...]:
        return tuple(self._taps)

    def __len__(self) -> int:
        return len(self._taps)

    def _invoke(self, tap: Tap, *args: Any) -> Any:
        try:
            return tap.fn(*args)
        except PromptAborted:
            raise
        except Exception as exc:
            logger.warning("Hook %s failed in %s", self.name, tap.name, exc_info=True)
            raise HookError(self.name, tap.name, exc) from exc


class BailHook(_Hook, Generic[T]):
    """Ordered handler chain that stops at the first non-``None`` result."""

    def call(self, *args: Any) -> T | None:
        for tap in self.taps:
            result = self._invoke(tap, *args)
            if result is not None:
                logger.debug("Hook %s resolved by %s", self.name, tap.name)
                return result
        logger.debug("Hook %s produced no result", self.name)
        return None


class WaterfallHook(_Hook, Generic[T]):
    """Ordered handler chain threading an accumulator through every handler."""

    def call(self, initial: T, *args: Any) -> T:
        current = initial
        for tap in self.taps:
            current = self._invoke(tap, current, *args)
        logger.debug("Hook %s ran %d handler(s)", self.name, len(self))
        return current


@dataclass
class InitHooks:
    """Extension points exposed by :class:`~shipctl.services.init.InteractiveInit`.

    Attributes:
        write_rc_file: Override where/how the configuration is persisted.
            Receives the finished record, returns the artifact name.
        get_repo: Get or verify the repository identity. ``True`` means
            "verified, nothing to merge".
        get_author: Get or verify the commit author identity.
        configure_plugin: Run extra configuration for a plugin identifier.
            Returns the plugin entry to record (bare name or name/options pair).
        create_env: Collect environment variables to ask the user for.
            Seeded with an empty tuple.
    """

    write_rc_file: BailHook[str] = field(default_factory=lambda: BailHook("write_rc_file"))
    get_repo: BailHook[RepoInformation | bool] = field(
        default_factory=lambda: BailHook("get_repo")
    )
    get_author: BailHook[AuthorInformation | bool] = field(
        default_factory=lambda: BailHook("get_author")
    )
    configure_plugin: BailHook[PluginEntry] = field(
        default_factory=lambda: BailHook("configure_plugin")
    )
    create_env: WaterfallHook[Sequence[EnvRequest]] = field(
        default_factory=lambda: WaterfallHook("create_env")
    )


def make_init_hooks() -> InitHooks:
    """Build a fresh, empty set of init extension points."""
    return InitHooks()
