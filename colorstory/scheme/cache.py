# Copyright (c) 2026 ColorStory
# SPDX-License-Identifier: MIT

"""
Single-slot memoization of enumerated configurations.

The cache remembers only the most recent (palette, mode) pair; asking for a
different palette or mode recomputes and evicts the previous result. It is an
explicit object, owned by whichever component enumerates repeatedly (e.g. a
UI layer re-rendering the same palette).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from colorstory.scheme.enumerate import EnumerationConfig, enumerate_configurations
from colorstory.schema import Color, Configuration, Mode

logger = logging.getLogger(__name__)

Enumerator = Callable[..., list[Configuration]]


def hash_palette(colors: Sequence[Color]) -> str:
    """Palette identity: sorted color names joined by commas."""
    return ",".join(sorted(color.name for color in colors))


@dataclass(frozen=True, slots=True)
class CacheEntry:
    palette_hash: str
    mode: Mode
    configurations: tuple[Configuration, ...]


class ConfigCache:
    """
    Get-or-recompute cache in front of an enumerator.

    Args:
        enumerator: Called as ``enumerator(colors, mode, config=..., seed=...)``
            on a miss. Defaults to enumerate_configurations.
        config: Search bounds forwarded to the enumerator
        seed: Seed forwarded to the enumerator (None = fresh randomness
            on every recompute)
    """

    def __init__(
        self,
        enumerator: Enumerator = enumerate_configurations,
        *,
        config: Optional[EnumerationConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self._enumerator = enumerator
        self._config = config
        self._seed = seed
        self._entry: Optional[CacheEntry] = None
        # Guards the read-check-recompute-write sequence
        self._lock = threading.Lock()

    @property
    def entry(self) -> Optional[CacheEntry]:
        """Current slot contents, or None when unset."""
        return self._entry

    def get(self, colors: Sequence[Color], mode: Union[Mode, str]) -> list[Configuration]:
        """Configurations for ``colors`` in ``mode``, recomputing on a key change."""
        mode = Mode(mode)
        palette_hash = hash_palette(colors)

        with self._lock:
            entry = self._entry
            if entry is not None and entry.palette_hash == palette_hash and entry.mode is mode:
                logger.debug("Config cache hit for %s (%s)", palette_hash, mode.value)
                return list(entry.configurations)

            logger.debug("Config cache miss for %s (%s)", palette_hash, mode.value)
            configurations = self._enumerator(colors, mode, config=self._config, seed=self._seed)
            self._entry = CacheEntry(palette_hash, mode, tuple(configurations))
            return list(configurations)

    def clear(self) -> None:
        """Reset the slot so the next get() recomputes."""
        with self._lock:
            self._entry = None
