from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from ..exceptions import ConfigurationConflictError, UnknownModeError

if TYPE_CHECKING:
    from playwright.async_api import Page

    from ..actions.goto import GotoDispatcher
    from ..config import BotSettings
    from ..utils.logger import BotLogger
    from ..utils.translate import Translator


@dataclass(frozen=True)
class StrategyResult:
    """
    Immutable strategy output.

    Note: `data` is deep-copied on creation to prevent accidental mutation.
    """

    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", deepcopy(self.data))


@dataclass
class StrategyContext:
    """Everything a strategy may use while it runs."""

    dispatcher: "GotoDispatcher"
    page: "Page"
    settings: "BotSettings"
    log: "BotLogger"
    lang: "Translator"


@runtime_checkable
class RunnableStrategy(Protocol):
    name: str

    async def run(self, context: StrategyContext) -> StrategyResult:
        ...


class ModeRegistry:
    """
    Immutable mapping from mode key to strategy.

    Built once from `(key, strategy)` pairs. A duplicate key raises
    `ConfigurationConflictError`; resolving an unknown key raises
    `UnknownModeError`.
    """

    def __init__(self, entries: Iterable[Tuple[str, RunnableStrategy]]) -> None:
        table: Dict[str, RunnableStrategy] = {}
        for key, strategy in entries:
            if key in table:
                raise ConfigurationConflictError(key)
            table[key] = strategy
        self._table: Mapping[str, RunnableStrategy] = MappingProxyType(table)

    def resolve(self, mode_key: str) -> RunnableStrategy:
        try:
            return self._table[mode_key]
        except KeyError:
            raise UnknownModeError(mode_key, self._table.keys()) from None

    def list_keys(self) -> FrozenSet[str]:
        return frozenset(self._table)

    def as_mapping(self) -> Mapping[str, RunnableStrategy]:
        return self._table

    def __contains__(self, mode_key: object) -> bool:
        return mode_key in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)
