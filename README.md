# traitplay

A small collection of polymorphism exercises in two parts.

## Map-like views (`traitplay.jsmap`)

`JsMap` is an abstract read-only interface with `get_value(key)`, `entries()` and `keys()`. `get_value` returns `None` for a missing key. `keys()` is derived from `entries()`. There are two implementations:

* `PairListMap(pairs)` wraps an ordered list of `(key, value)` pairs. A lookup returns the value of the first pair whose key matches.
* `DictMap(mapping)` wraps a copy of a dictionary.

`render_js_map(js_map)` returns a text report with three parts: the entries, the keys, and the entries sorted by key. Booleans appear as `true`/`false`, and finite whole floats appear without a decimal part. `run_version_1()` and `run_version_2()` print reports for a few sample maps.

## Rewards

`traitplay.reward` defines `RewardGroup` (`ASSET`, `AVATAR`, `ITEM`, `COUPON`, `QUEST`) and the frozen dataclass `RewardDto`. `RewardDto` checks that `group` is a `RewardGroup` and that `delta`, `min` and `max` are integers in the unsigned 32-bit range. `RewardDto.replace(**kwargs)` returns a changed copy.

Raw reward data can be turned into rewards in two styles.

**Class hierarchy (`traitplay.reward_objects`)**

* Rewards are `Gem`, `Item` and `Unknown`, all subclasses of `Reward`.
* `try_display()` returns a `RewardDisplay` with `unit_image`, `image` and `fmt_string`, or `None`. A hidden gem returns `None`, and so does an unknown reward.
* `Gem.downcast_from` and `Item.downcast_from` raise `RewardCastError` when the reward is of another kind.
* `Item.from_dto` raises `ValueError` when the url or name is missing.
* The factories build these rewards from a `RewardDto`:
  * `UnsafeRewardFactory` lets that error propagate.
  * `SafeRewardFactory` prints an error report and returns `Unknown()` instead.
* `gen_reward(factory, dto)` picks the factory to use.
* Helpers: `expired_at(shelf_life, now=None)`, `label(moment)` (formats as `YYYY-MM-DD HH:MM:SS`) and `factory_glitched(dto)`.

**Variants (`traitplay.reward_variants`)**

`reward_from_dto(dto)` returns one of `GemReward`, `ItemReward` or `UnknownReward`. An asset becomes a `GemReward` only when its `reward_type` is `"XP"`. An item requires a url and a name, otherwise `ValueError` is raised. All variants provide:

* `is_hidden()`
* `unit_image()`
* `image()`
* `fmt_string()`
* `shelf_life()`
* `has_expired(now=None)`
* `fmt_expire_time()`

## Installation

```
pip install .
pip install ".[test]"   # with pytest
```

## Command line

```
traitplay [--feature {js_map,object,other}]
```

The command runs two demos, labelled `[VERSION 1]` and `[VERSION 2]`, for the chosen feature set:

| Feature | Demos run |
|---|---|
| `js_map` (default) | The two map demos |
| `object` | The reward class-hierarchy demo and the reward variants demo |
| `other` | Two placeholder lines |

Afterwards it writes the result of `Codename.try_from("crane")` to standard error.

`Codename` (from `traitplay.cli`) accepts exactly `asimo`, `balaclava`, `crane` and `ddongJengE`. Any other string raises `ValueError`.

## Library use

```python
from traitplay.jsmap import DictMap, PairListMap, render_js_map

pairs = PairListMap([("3ho", "!!!"), ("1mu", "~~!")])
pairs.get_value("1mu")          # "~~!"
list(pairs.keys())              # ["3ho", "1mu"]
print(render_js_map(DictMap({2: "ya", 1: "mu"})))
```

```python
from traitplay.reward import RewardDto, RewardGroup
from traitplay.reward_objects import Gem, SafeRewardFactory, gen_reward

dto = RewardDto(group=RewardGroup.ASSET, reward_type="XP", delta=3000)
reward = gen_reward(SafeRewardFactory, dto)
Gem.downcast_from(reward).display().fmt_string   # "3000 Gems"
```

```python
from traitplay.reward_variants import reward_from_dto

variant = reward_from_dto(dto)
variant.fmt_string()   # "3000 Gems"
variant.unit_image()   # "Gem Image"
```

## Running the tests

```
pytest
```