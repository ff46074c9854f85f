"""Registries that build objects from an identifier."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Hashable, TypeVar

from multitetris.block import Block
from multitetris.types import TypeBlock, TypeColor

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class ObjectFactory(Generic[K, T]):
    """Maps identifiers to creators; the first creator registered for a key wins."""

    def __init__(self) -> None:
        self._creators: Dict[K, Callable[..., T]] = {}

    def add(self, key: K, creator: Callable[..., T]) -> None:
        """Register ``creator`` under ``key`` unless the key is already taken."""
        self._creators.setdefault(key, creator)

    def create(self, key: K, *args: object) -> T:
        """Build a new object registered under ``key``.

        Raises KeyError if nothing is registered under ``key``.
        """
        try:
            creator = self._creators[key]
        except KeyError:
            raise KeyError(f"nothing registered for {key!r}") from None
        return creator(*args)

    def __len__(self) -> int:
        return len(self._creators)

    def __contains__(self, key: object) -> bool:
        return key in self._creators


class BlocksFactory(ObjectFactory[TypeBlock, Block]):
    """Factory of tetrominoes keyed by block type."""

    def create(self, key: TypeBlock, color: TypeColor) -> Block:  # type: ignore[override]
        """Build a block of kind ``key`` with ``color``."""
        return super().create(key, color)