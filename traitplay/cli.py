"""Command line entry point running the demos of one feature set."""

from __future__ import annotations

import argparse
import enum
import sys

from traitplay import jsmap, reward_objects, reward_variants


class Codename(enum.Enum):
    """Known code names."""

    ASIMO = "asimo"
    BALACLAVA = "balaclava"
    CRANE = "crane"
    DDONG_JENG_E = "ddongJengE"

    @classmethod
    def try_from(cls, value: str) -> Codename:
        """Return the code name spelled exactly as ``value``; raise ValueError otherwise."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown code name: {value!r}") from None


def _other_version_1() -> None:
    print("other version_1")


def _other_version_2() -> None:
    print("other version_2")


_FEATURES = {
    "js_map": (jsmap.run_version_1, jsmap.run_version_2),
    "object": (reward_objects.run_demo, reward_variants.run_demo),
    "other": (_other_version_1, _other_version_2),
}


def main(argv: list[str] | None = None) -> int:
    """Run both demo versions of the chosen feature set."""
    parser = argparse.ArgumentParser(prog="traitplay", description=__doc__)
    parser.add_argument(
        "--feature",
        choices=sorted(_FEATURES),
        default="js_map",
        help="which set of demos to run (default: js_map)",
    )
    args = parser.parse_args(argv)
    version_1, version_2 = _FEATURES[args.feature]

    print("\n[VERSION 1]")
    version_1()
    print("\n[VERSION 2]")
    version_2()

    try:
        result = f"Ok({Codename.try_from('crane').name})"
    except ValueError:
        result = "Err(())"
    print(f"Codename.try_from('crane') = {result}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())