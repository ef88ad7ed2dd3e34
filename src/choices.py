"""Ordered registry of selectable entries for the select list.

Usage:
    from choices import Choices

    registry = Choices()
    registry.append('Apple', 1)
    registry.extend([('Banana', 2), 'Cherry'])
    registry.at(3).value  # 'Cherry'

Positions are 1-based. Names do not have to be unique.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional

from errors import ConfigurationError

NOT_SET = object()


@dataclass(frozen=True)
class Choice:
    name: str
    value: Any = None
    action: Optional[Callable[[Any], Any]] = None

    @classmethod
    def from_value(cls, item: Any) -> 'Choice':
        """Build a choice from one of the accepted shorthand forms.

        Accepts a Choice, a bare name, a (name[, value[, action]]) sequence
        or a single-entry {name: value} dict. A bare name is its own value.
        """
        if isinstance(item, Choice):
            return item
        if isinstance(item, dict):
            if len(item) != 1:
                raise ConfigurationError(f"choice dict must have exactly one entry, got {item!r}")
            (name, value), = item.items()
            return cls(str(name), value)
        if isinstance(item, (tuple, list)):
            if not 1 <= len(item) <= 3:
                raise ConfigurationError(f"choice must be (name[, value[, action]]), got {item!r}")
            name = item[0]
            value = item[1] if len(item) > 1 else name
            action = item[2] if len(item) > 2 else None
            return cls(str(name), value, action)
        return cls(str(item), item)


class Choices:
    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Choice] = []
        self._frozen = False
        self.extend(items)

    def append(self, name: Any, value: Any = NOT_SET, action: Optional[Callable[[Any], Any]] = None) -> Choice:
        if self._frozen:
            raise ConfigurationError("cannot add choices once the list is rendering")
        if isinstance(name, Choice):
            choice = name
        elif value is NOT_SET and action is None:
            choice = Choice.from_value(name)
        elif value is NOT_SET:
            choice = Choice(str(name), name, action)
        else:
            choice = Choice(str(name), value, action)
        self._items.append(choice)
        return choice

    def extend(self, items: Iterable[Any]) -> None:
        for item in items:
            self.append(item)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def size(self) -> int:
        return len(self._items)

    def at(self, index: int) -> Choice:
        """Return the choice at 1-based ``index``."""
        if not 1 <= index <= len(self._items):
            raise IndexError(f"choice index {index} out of range (1 - {len(self._items)})")
        return self._items[index - 1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Choice]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Choices({self._items!r})"
