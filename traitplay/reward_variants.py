"""Rewards as a closed family of variants sharing one display interface."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from traitplay.reward import RewardDto, RewardGroup
from traitplay.reward_objects import label


class RewardVariant:
    """Common display behaviour; defaults describe a reward with nothing to show."""

    def is_hidden(self) -> bool:
        """Whether the reward is hidden from users."""
        return False

    def unit_image(self) -> str:
        """Image for one unit of the reward."""
        return ""

    def image(self) -> str:
        """Image for the reward."""
        return ""

    def fmt_string(self) -> str:
        """Short text describing the reward."""
        return ""

    def shelf_life(self) -> datetime | None:
        """Moment the reward expires, if it does."""
        return None

    def has_expired(self, now: datetime | None = None) -> bool:
        """Whether the shelf life lies before ``now``."""
        moment = self.shelf_life()
        if moment is None:
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        return moment < now

    def fmt_expire_time(self) -> str:
        """Shelf life as ``YYYY-MM-DD HH:MM:SS``, or an empty string."""
        moment = self.shelf_life()
        return "" if moment is None else label(moment)


@dataclass(frozen=True)
class ItemReward(RewardVariant):
    """A named item."""

    url: str
    name: str
    delta: int
    hidden: bool = False
    expiry: datetime | None = None

    def is_hidden(self) -> bool:
        return self.hidden

    def unit_image(self) -> str:
        return "Item Image"

    def image(self) -> str:
        return self.url

    def fmt_string(self) -> str:
        return f"{self.name} Item"

    def shelf_life(self) -> datetime | None:
        return self.expiry


@dataclass(frozen=True)
class GemReward(RewardVariant):
    """An amount of gems."""

    delta: int
    min: int | None = None
    max: int | None = None
    hidden: bool = False

    def is_hidden(self) -> bool:
        return self.hidden

    def unit_image(self) -> str:
        return "Gem Image"

    def image(self) -> str:
        return "Gem Image"

    def fmt_string(self) -> str:
        return f"{self.delta} Gems"


@dataclass(frozen=True)
class UnknownReward(RewardVariant):
    """A reward whose kind is not recognised."""


def reward_from_dto(dto: RewardDto) -> RewardVariant:
    """Pick the variant for raw reward data; items need a url and a name."""
    if dto.group is RewardGroup.ITEM:
        if dto.url is None:
            raise ValueError("item reward requires a url")
        if dto.name is None:
            raise ValueError("item reward requires a name")
        return ItemReward(
            url=dto.url,
            name=dto.name,
            delta=dto.delta,
            hidden=dto.is_hidden,
            expiry=dto.shelf_life,
        )
    if dto.group is RewardGroup.ASSET and dto.reward_type == "XP":
        return GemReward(delta=dto.delta, min=dto.min, max=dto.max, hidden=dto.is_hidden)
    return UnknownReward()


def run_demo() -> None:
    """Print the display details of a gem and an item."""
    dto = RewardDto(group=RewardGroup.ASSET, reward_type="XP", delta=3000)
    dto2 = RewardDto(
        group=RewardGroup.ITEM,
        reward_type="1000XP",
        delta=1,
        name="1,000-Gem Pouch",
        url="https://static.example.com/__asset/item_1000_gem_pack.png",
        shelf_life=datetime.now(timezone.utc),
    )
    reward = reward_from_dto(dto)
    reward2 = reward_from_dto(dto2)
    print(f"v2 reward1: {reward.fmt_string()}")
    print(f"v2 reward1: {reward.image()}")
    print(f"v2 reward1: {reward.unit_image()}")
    print(f"v2 reward2: {reward2.fmt_string()}")
    print(f"v2 reward2: {reward2.image()}")
    print(f"v2 reward2: {reward2.unit_image()}")
    print(f"v2 reward2: {reward2.fmt_expire_time()}")