"""Choosing scene loaders and savers by file-name extension."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class Loader(ABC):
    """Reads a file of one format into a scene graph.

    Subclasses set :attr:`ext` to the extension they handle, without the dot.
    """

    ext: str = ""

    @abstractmethod
    def load(self, filename: PathLike, scene: Any) -> bool:
        """Fill *scene* from *filename*; return True on success."""


class Saver(ABC):
    """Writes a scene graph to a file of one format.

    Subclasses set :attr:`ext` to the extension they handle, without the dot.
    """

    ext: str = ""

    @abstractmethod
    def save(self, filename: PathLike, scene: Any) -> bool:
        """Write *scene* to *filename*; return True on success."""


def file_extension(filename: Optional[PathLike]) -> Optional[str]:
    """Return the text after the last dot of *filename*, or None if it has none."""
    if filename is None:
        return None
    name = os.fspath(filename)
    head, dot, tail = name.rpartition(".")
    if not dot:
        return None
    return tail


class LoaderRegistry:
    """Maps file extensions to loaders; the first loader registered for an
    extension is the one kept."""

    def __init__(self) -> None:
        self._loaders: dict[str, Loader] = {}

    def __contains__(self, ext: str) -> bool:
        return ext in self._loaders

    def __len__(self) -> int:
        return len(self._loaders)

    def register(self, loader: Optional[Loader]) -> None:
        """Register *loader* under its extension unless one is already there."""
        if loader is None:
            return
        self._loaders.setdefault(loader.ext, loader)

    def load(self, filename: Optional[PathLike], scene: Any) -> bool:
        """Load *filename* into *scene* with the loader for its extension.

        Returns False when the name has no extension or no loader handles it.
        """
        ext = file_extension(filename)
        if ext is None:
            return False
        loader = self._loaders.get(ext)
        if loader is None:
            return False
        return bool(loader.load(filename, scene))


class SaverRegistry:
    """Maps file extensions to savers; the first saver registered for an
    extension is the one kept."""

    def __init__(self) -> None:
        self._savers: dict[str, Saver] = {}

    def __contains__(self, ext: str) -> bool:
        return ext in self._savers

    def __len__(self) -> int:
        return len(self._savers)

    def register(self, saver: Optional[Saver]) -> None:
        """Register *saver* under its extension unless one is already there."""
        if saver is None:
            return
        self._savers.setdefault(saver.ext, saver)

    def save(self, filename: Optional[PathLike], scene: Any) -> bool:
        """Save *scene* to *filename* with the saver for its extension.

        Returns False when the name has no extension or no saver handles it.
        """
        ext = file_extension(filename)
        if ext is None:
            return False
        saver = self._savers.get(ext)
        if saver is None:
            return False
        return bool(saver.save(filename, scene))