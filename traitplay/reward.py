"""Reward transfer object shared by the reward models."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_U32_MAX = 2**32 - 1


class RewardGroup(enum.Enum):
    """Broad category a reward belongs to."""

    ASSET = "ASSET"
    AVATAR = "AVATAR"
    ITEM = "ITEM"
    COUPON = "COUPON"
    QUEST = "QUEST"


def _check_u32(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must be within 0..{_U32_MAX}, got {value}")


@dataclass(frozen=True)
class RewardDto:
    """Raw reward data as received, before it becomes a concrete reward."""

    group: RewardGroup
    reward_type: str
    delta: int = 0
    name: str | None = None
    code: str | None = None
    min: int | None = None
    max: int | None = None
    url: str | None = None
    is_hidden: bool = False
    shelf_life: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.group, RewardGroup):
            raise TypeError(f"group must be a RewardGroup, got {self.group!r}")
        _check_u32("delta", self.delta)
        _check_u32("min", self.min)
        _check_u32("max", self.max)

    def replace(self, **kwargs: Any) -> RewardDto:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)