"""Rule options controlling hand selection."""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict

from poker_hands.evaluation.exceptions import RuleSetError


class Sorting(str, Enum):
    """Which end of the hand ordering an evaluation selects."""
    HIGH = 'high'   # Strongest hand wins
    LOW = 'low'     # Weakest hand wins


@dataclass(frozen=True)
class Options:
    """
    Configuration for hand selection.

    Attributes:
        sorting: Select the highest or the lowest hand
        ignore_straights: Straights (and straight/royal flushes) do not count
        ignore_flushes: Flushes (and straight/royal flushes) do not count
        ace_is_low: Ace ranks below two everywhere, including straights
    """
    sorting: Sorting = Sorting.HIGH
    ignore_straights: bool = False
    ignore_flushes: bool = False
    ace_is_low: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation matching the rule set file format."""
        return {
            'sorting': self.sorting.value,
            'ignore_straights': self.ignore_straights,
            'ignore_flushes': self.ignore_flushes,
            'ace_is_low': self.ace_is_low,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Options':
        """
        Build options from configuration data.

        Missing keys fall back to the defaults.

        Raises:
            RuleSetError: On unknown keys or values of the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise RuleSetError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if 'sorting' in data:
            try:
                kwargs['sorting'] = Sorting(data['sorting'])
            except ValueError:
                raise RuleSetError(f"Invalid sorting: {data['sorting']!r}")

        for name in ('ignore_straights', 'ignore_flushes', 'ace_is_low'):
            if name in data:
                value = data[name]
                if not isinstance(value, bool):
                    raise RuleSetError(f"Option {name} must be a boolean, got {value!r}")
                kwargs[name] = value

        return cls(**kwargs)


DEFAULT_OPTIONS = Options()
