"""Configuration loader for named rule sets."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from poker_hands.evaluation.exceptions import RuleSetError
from poker_hands.evaluation.options import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSet:
    """A named set of evaluation options."""

    id: str
    name: str
    description: str
    options: Options


class RuleSetLoader:
    """Loads and manages rule set configurations."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing rule set JSON files.
                       Defaults to the data/rule_sets directory of the package.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[1] / "data" / "rule_sets"

        self.config_dir = config_dir
        self._rule_sets: dict[str, RuleSet] = {}
        self._loaded = False

    def load_all(self) -> None:
        """Load all rule set files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading rule sets from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Rule set directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Rule set directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))

        if not json_files:
            logger.warning(f"No rule set files found in {self.config_dir}")

        for json_file in json_files:
            rule_set = self._load_file(json_file)
            self._rule_sets[rule_set.id] = rule_set
            logger.debug(f"Loaded rule set {rule_set.id}")

        logger.info(f"Loaded {len(self._rule_sets)} rule sets")
        self._loaded = True

    def _load_file(self, filepath: Path) -> RuleSet:
        """Load a single rule set file."""
        with open(filepath, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise RuleSetError(f"Invalid rule set file {filepath.name}: {e}") from e

        if not isinstance(data, dict):
            raise RuleSetError(f"Rule set file {filepath.name} must contain an object")

        options = data.get("options", {})
        if not isinstance(options, dict):
            raise RuleSetError(f"Options in {filepath.name} must be an object")

        return RuleSet(
            id=data.get("id", filepath.stem),
            name=data.get("name", filepath.stem),
            description=data.get("description", ""),
            options=Options.from_dict(options),
        )

    def get_rule_set(self, rule_set_id: str) -> RuleSet:
        """
        Get a rule set by id.

        Raises:
            RuleSetError: If no rule set has that id
        """
        if not self._loaded:
            self.load_all()

        try:
            return self._rule_sets[rule_set_id]
        except KeyError:
            raise RuleSetError(f"Unknown rule set: {rule_set_id}") from None

    def get_all(self) -> dict[str, RuleSet]:
        """Get all loaded rule sets."""
        if not self._loaded:
            self.load_all()

        return self._rule_sets.copy()


# Global instance
rule_set_loader = RuleSetLoader()


def get_rule_set(rule_set_id: str) -> Options:
    """Convenience function returning the options of a named rule set."""
    return rule_set_loader.get_rule_set(rule_set_id).options
