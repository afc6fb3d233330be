from datetime import datetime, timedelta, timezone

import pytest

from traitplay.reward import RewardDto, RewardGroup
from traitplay.reward_objects import (
    Gem,
    Item,
    RewardCastError,
    RewardDisplay,
    SafeRewardFactory,
    Unknown,
    UnsafeRewardFactory,
    expired_at,
    factory_glitched,
    gen_reward,
    label,
    run_demo,
)

UTC = timezone.utc


def gem_dto(**changes):
    return RewardDto(group=RewardGroup.ASSET, reward_type="XP", delta=3000).replace(**changes)


def item_dto(**changes):
    base = RewardDto(
        group=RewardGroup.ITEM,
        reward_type="1000XP",
        delta=1,
        name="1,000-Gem Pouch",
        url="https://static.example.com/item.png",
    )
    return base.replace(**changes)


def test_gem_from_dto_copies_fields():
    gem = Gem.from_dto(gem_dto(min=1, max=5, is_hidden=True))
    assert (gem.delta, gem.min, gem.max, gem.is_hidden) == (3000, 1, 5, True)


def test_gem_display():
    display = Gem.from_dto(gem_dto()).display()
    assert display.unit_image == "Gem Image"
    assert display.image == "Gem Image"
    assert display.fmt_string == "3000 Gems"


def test_hidden_gem_has_no_display():
    assert Gem.from_dto(gem_dto(is_hidden=True)).try_display() is None


def test_visible_gem_try_display_matches_display():
    gem = Gem.from_dto(gem_dto())
    assert gem.try_display() == gem.display()


def test_unknown_has_no_display():
    assert Unknown().try_display() is None


def test_item_from_dto_requires_url_and_name():
    with pytest.raises(ValueError):
        Item.from_dto(item_dto(url=None))
    with pytest.raises(ValueError):
        Item.from_dto(item_dto(name=None))


def test_item_display_even_when_hidden():
    item = Item.from_dto(item_dto(is_hidden=True))
    assert item.try_display() == RewardDisplay("", "", "Item(1,000-Gem Pouch)")


def test_unsafe_factory_builds_kinds():
    assert isinstance(gen_reward(UnsafeRewardFactory, gem_dto()), Gem)
    assert isinstance(gen_reward(UnsafeRewardFactory, item_dto()), Item)
    assert gen_reward(UnsafeRewardFactory, gem_dto(group=RewardGroup.AVATAR)) == Unknown()


def test_unsafe_factory_raises_on_bad_item():
    with pytest.raises(ValueError):
        gen_reward(UnsafeRewardFactory, item_dto(name=None))


def test_safe_factory_reports_and_falls_back(capsys):
    reward = gen_reward(SafeRewardFactory, item_dto(url=None))
    assert reward == Unknown()
    assert "ERROR REPORT:" in capsys.readouterr().out


def test_downcast():
    gem = Gem.from_dto(gem_dto())
    item = Item.from_dto(item_dto())
    assert Gem.downcast_from(gem) is gem
    assert Item.downcast_from(item) is item
    with pytest.raises(RewardCastError):
        Gem.downcast_from(item)
    with pytest.raises(RewardCastError):
        Item.downcast_from(Unknown())


def test_shine(capsys):
    gem = Gem.from_dto(gem_dto())
    message = gem.shine()
    out = capsys.readouterr().out
    assert message in out
    assert message.startswith("bling bling")
    assert str(gem.delta) in message


def test_expired_at():
    now = datetime(2024, 6, 1, tzinfo=UTC)
    past = now - timedelta(days=1)
    future = now + timedelta(days=1)
    assert expired_at(past, now) == past
    assert expired_at(future, now) is None
    assert expired_at(None, now) is None


def test_item_expired_at():
    now = datetime(2024, 6, 1, tzinfo=UTC)
    past = now - timedelta(hours=2)
    item = Item.from_dto(item_dto(shelf_life=past))
    assert item.expired_at(now) == past
    assert Item.from_dto(item_dto()).expired_at(now) is None


def test_label():
    assert label(datetime(2023, 1, 2, 3, 4, 5, tzinfo=UTC)) == "2023-01-02 03:04:05"


def test_factory_glitched_item_fails(capsys):
    assert factory_glitched(item_dto()) is False
    assert "Invalid Reward data: reward_err" in capsys.readouterr().out


def test_factory_glitched_gem_shines(capsys):
    assert factory_glitched(gem_dto()) is True
    assert "it shines!: " in capsys.readouterr().out


def test_run_demo(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert "it shines!: " in out
    assert "EXPIRED AT" in out
    assert "Invalid Reward data: reward_err" in out