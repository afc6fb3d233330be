"""Rewards as separate classes built by interchangeable factories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from traitplay.reward import RewardDto, RewardGroup


@dataclass(frozen=True)
class RewardDisplay:
    """What is needed to show a reward to a user."""

    unit_image: str
    image: str
    fmt_string: str


class RewardCastError(Exception):
    """Raised when a reward is not of the requested concrete kind."""


class Reward:
    """Base for every reward; by default a reward has nothing to show."""

    def try_display(self) -> RewardDisplay | None:
        """Return how to show this reward, or None if it is not shown."""
        return None


class Unknown(Reward):
    """A reward whose kind is not recognised."""

    def __repr__(self) -> str:
        return "Unknown()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unknown)

    def __hash__(self) -> int:
        return hash(Unknown)


@dataclass(frozen=True)
class Gem(Reward):
    """An amount of gems."""

    delta: int
    min: int | None = None
    max: int | None = None
    is_hidden: bool = False

    @classmethod
    def from_dto(cls, dto: RewardDto) -> Gem:
        """Build a gem from raw reward data."""
        return cls(delta=dto.delta, min=dto.min, max=dto.max, is_hidden=dto.is_hidden)

    def display(self) -> RewardDisplay:
        """Return how to show this gem."""
        return RewardDisplay("Gem Image", "Gem Image", f"{self.delta} Gems")

    def try_display(self) -> RewardDisplay | None:
        return None if self.is_hidden else self.display()

    def shine(self) -> str:
        """Print and return the gem's shine message."""
        message = f"bling bling {self.delta}"
        print(message)
        return message

    @classmethod
    def downcast_from(cls, reward: Reward) -> Gem:
        """Return ``reward`` as a gem or raise RewardCastError."""
        if isinstance(reward, cls):
            return reward
        raise RewardCastError(f"{reward!r} is not a Gem")


@dataclass(frozen=True)
class Item(Reward):
    """A named item, possibly with an expiry time."""

    url: str
    name: str
    delta: int
    shelf_life: datetime | None = None
    is_hidden: bool = False

    @classmethod
    def from_dto(cls, dto: RewardDto) -> Item:
        """Build an item from raw reward data; url and name are required."""
        if dto.url is None:
            raise ValueError("item reward requires a url")
        if dto.name is None:
            raise ValueError("item reward requires a name")
        return cls(
            url=dto.url,
            name=dto.name,
            delta=dto.delta,
            shelf_life=dto.shelf_life,
            is_hidden=dto.is_hidden,
        )

    def display(self) -> RewardDisplay:
        """Return how to show this item."""
        return RewardDisplay("", "", f"Item({self.name})")

    def try_display(self) -> RewardDisplay | None:
        return self.display()

    def expired_at(self, now: datetime | None = None) -> datetime | None:
        """Return the shelf life if it lies before ``now``, else None."""
        return expired_at(self.shelf_life, now)

    @classmethod
    def downcast_from(cls, reward: Reward) -> Item:
        """Return ``reward`` as an item or raise RewardCastError."""
        if isinstance(reward, cls):
            return reward
        raise RewardCastError(f"{reward!r} is not an Item")


class RewardFactory(ABC):
    """Turns raw reward data into concrete rewards."""

    @classmethod
    def try_gen(cls, dto: RewardDto) -> Reward:
        """Build the reward for ``dto``; raises ValueError on bad data."""
        if dto.group is RewardGroup.ASSET:
            return Gem.from_dto(dto)
        if dto.group is RewardGroup.ITEM:
            return Item.from_dto(dto)
        return Unknown()

    @classmethod
    @abstractmethod
    def gen(cls, dto: RewardDto) -> Reward:
        """Build the reward for ``dto``."""


class UnsafeRewardFactory(RewardFactory):
    """Factory that lets bad data raise."""

    @classmethod
    def gen(cls, dto: RewardDto) -> Reward:
        return cls.try_gen(dto)


class SafeRewardFactory(RewardFactory):
    """Factory that reports bad data and falls back to an unknown reward."""

    @classmethod
    def gen(cls, dto: RewardDto) -> Reward:
        try:
            return cls.try_gen(dto)
        except ValueError as err:
            print(f"ERROR REPORT: {str(err)!r} (RewardFactory::new)")
            return Unknown()


def gen_reward(factory: type[RewardFactory], dto: RewardDto) -> Reward:
    """Build a reward with the given factory."""
    return factory.gen(dto)


def expired_at(shelf_life: datetime | None, now: datetime | None = None) -> datetime | None:
    """Return ``shelf_life`` if it is set and earlier than ``now``."""
    if shelf_life is None:
        return None
    if now is None:
        now = datetime.now(timezone.utc)
    return shelf_life if shelf_life < now else None


def label(moment: datetime) -> str:
    """Format a moment as ``YYYY-MM-DD HH:MM:SS``."""
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def factory_glitched(dto: RewardDto) -> bool:
    """Build a reward from stripped-down data and use it; return whether it worked."""
    stripped = dto.replace(
        reward_type="*@#&^$*@&#^$",
        name=None,
        url=None,
        code=None,
        min=None,
        max=None,
        shelf_life=None,
    )
    reward = gen_reward(SafeRewardFactory, stripped)
    try:
        if stripped.group is RewardGroup.ASSET:
            gem = Gem.downcast_from(reward)
            print("it shines!: ", end="")
            gem.shine()
        elif stripped.group is RewardGroup.ITEM:
            item = Item.downcast_from(reward)
            print(f"Item name: {item.name}")
    except RewardCastError:
        print("Invalid Reward data: reward_err")
        return False
    return True


def run_demo() -> None:
    """Build a gem and an item, show them, then feed a factory bad data."""
    dto = RewardDto(group=RewardGroup.ASSET, reward_type="XP", delta=3000)
    dto2 = RewardDto(
        group=RewardGroup.ITEM,
        reward_type="1000XP",
        delta=1,
        name="1,000-Gem Pouch",
        url="https://static.example.com/__asset/item_1000_gem_pack.png",
        shelf_life=datetime.now(timezone.utc) - timedelta(days=1),
    )
    dto_invalid = dto2

    reward1 = gen_reward(UnsafeRewardFactory, dto)
    display = reward1.try_display()
    if display is not None:
        print(f"reward1: {display!r}")
    try:
        gem = Gem.downcast_from(reward1)
    except RewardCastError:
        pass
    else:
        print("it shines!: ", end="")
        gem.shine()

    print()
    reward2 = gen_reward(UnsafeRewardFactory, dto2)
    display = reward2.try_display()
    if display is not None:
        print(f"reward2: {display!r}")
    try:
        item = Item.downcast_from(reward2)
    except RewardCastError:
        pass
    else:
        print(f"Item {item.name}", end="")
        expiry = item.expired_at()
        if expiry is not None:
            print(f" (EXPIRED AT {label(expiry)})", end="")
        print()
    print()
    factory_glitched(dto_invalid)