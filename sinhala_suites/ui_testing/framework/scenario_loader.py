"""
================================================================================
Scenario Loader Module
================================================================================

Loads the translation scenario table from YAML into immutable records.

The table is split into three groups:
    - positive:  inputs the site is expected to transliterate correctly
    - negative:  known-divergent and edge-case inputs
    - ui:        a single incremental-typing (real-time update) scenario

Key Features:
- Frozen dataclasses, never mutated after loading
- Structural validation (required fields, unique ids, prefix check)
- Classification tags for filtering
- Strings are kept verbatim (no trimming of expected output)

================================================================================
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from loguru import logger


DEFAULT_SCENARIO_FILE = Path(__file__).parent.parent / "data" / "translation_cases.yaml"

REQUIRED_FIELDS = ("tc_id", "name", "input", "expected")
REQUIRED_UI_FIELDS = ("tc_id", "name", "input", "partial_input", "expected_full")


class ScenarioDataError(Exception):
    """Raised when the scenario table is missing or malformed."""
    pass


# ================================================================================
# Data Models
# ================================================================================

@dataclass(frozen=True)
class TranslationScenario:
    """One input / expected-output case."""
    tc_id: str
    name: str
    input_text: str
    expected: str
    category: str = ""
    grammar: str = ""
    length: str = ""
    group: str = "positive"

    @property
    def display_name(self) -> str:
        return f"{self.tc_id} - {self.name}"

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(tag for tag in (self.category, self.grammar, self.length) if tag)

    @property
    def has_trailing_whitespace(self) -> bool:
        """Expected output ends with whitespace (e.g. a run of newlines)."""
        return self.expected != self.expected.rstrip()


@dataclass(frozen=True)
class IncrementalScenario:
    """Real-time typing case: a prefix is typed first, then the rest."""
    tc_id: str
    name: str
    input_text: str
    partial_input: str
    expected_full: str
    category: str = ""
    grammar: str = ""
    length: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.tc_id} - {self.name}"

    @property
    def remaining_input(self) -> str:
        return self.input_text[len(self.partial_input):]

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(tag for tag in (self.category, self.grammar, self.length) if tag)


@dataclass(frozen=True)
class ScenarioSuite:
    """The complete, ordered scenario table."""
    positive: Tuple[TranslationScenario, ...]
    negative: Tuple[TranslationScenario, ...]
    ui: IncrementalScenario
    source: Optional[Path] = field(default=None, compare=False)

    @property
    def translations(self) -> Tuple[TranslationScenario, ...]:
        """Positive then negative scenarios, in table order."""
        return self.positive + self.negative

    def get(self, tc_id: str) -> Union[TranslationScenario, IncrementalScenario]:
        if tc_id == self.ui.tc_id:
            return self.ui
        for scenario in self.translations:
            if scenario.tc_id == tc_id:
                return scenario
        raise KeyError(tc_id)

    def filter_by_tag(self, tag: str) -> List[TranslationScenario]:
        return [s for s in self.translations if tag in s.tags]


# ================================================================================
# Scenario Loader
# ================================================================================

class ScenarioLoader:
    """
    Loads and validates the scenario table.

    Example:
        suite = ScenarioLoader().load()
        for scenario in suite.positive:
            print(scenario.display_name)
    """

    def __init__(self, file_path: Union[str, Path, None] = None):
        """
        Args:
            file_path: YAML scenario file (defaults to data/translation_cases.yaml)
        """
        self.file_path = Path(file_path) if file_path else DEFAULT_SCENARIO_FILE

    def load(self) -> ScenarioSuite:
        """
        Load the scenario table.

        Returns:
            ScenarioSuite with positive, negative and ui groups

        Raises:
            ScenarioDataError: On a missing file, invalid YAML or invalid records
        """
        if not self.file_path.exists():
            raise ScenarioDataError(f"Scenario file not found: {self.file_path}")

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ScenarioDataError(f"YAML parsing error in {self.file_path}: {e}") from e

        if not isinstance(content, dict):
            raise ScenarioDataError(f"Scenario file must contain a mapping: {self.file_path}")

        positive = tuple(
            self._parse_scenario(data, "positive") for data in content.get("positive") or []
        )
        negative = tuple(
            self._parse_scenario(data, "negative") for data in content.get("negative") or []
        )

        ui_data = content.get("ui")
        if not ui_data:
            raise ScenarioDataError(f"No 'ui' scenario defined in {self.file_path}")
        ui = self._parse_incremental(ui_data)

        self._check_unique_ids([s.tc_id for s in positive + negative] + [ui.tc_id])

        logger.info(
            f"Loaded {len(positive)} positive, {len(negative)} negative and "
            f"1 UI scenario from {self.file_path.name}"
        )
        return ScenarioSuite(positive=positive, negative=negative, ui=ui, source=self.file_path)

    def _parse_scenario(self, data: Dict[str, Any], group: str) -> TranslationScenario:
        self._check_required(data, REQUIRED_FIELDS)
        return TranslationScenario(
            tc_id=str(data["tc_id"]),
            name=str(data["name"]),
            input_text=str(data["input"]),
            expected=str(data["expected"]),
            category=str(data.get("category") or ""),
            grammar=str(data.get("grammar") or ""),
            length=str(data.get("length") or ""),
            group=group,
        )

    def _parse_incremental(self, data: Dict[str, Any]) -> IncrementalScenario:
        self._check_required(data, REQUIRED_UI_FIELDS)
        scenario = IncrementalScenario(
            tc_id=str(data["tc_id"]),
            name=str(data["name"]),
            input_text=str(data["input"]),
            partial_input=str(data["partial_input"]),
            expected_full=str(data["expected_full"]),
            category=str(data.get("category") or ""),
            grammar=str(data.get("grammar") or ""),
            length=str(data.get("length") or ""),
        )
        if not scenario.input_text.startswith(scenario.partial_input):
            raise ScenarioDataError(
                f"[{scenario.tc_id}] partial_input {scenario.partial_input!r} "
                f"is not a prefix of input {scenario.input_text!r}"
            )
        return scenario

    def _check_required(self, data: Any, required: Tuple[str, ...]) -> None:
        if not isinstance(data, dict):
            raise ScenarioDataError(f"Scenario entry must be a mapping, got: {data!r}")
        missing = [name for name in required if data.get(name) is None]
        if missing:
            raise ScenarioDataError(
                f"Scenario {data.get('tc_id', '<unknown>')} in {self.file_path.name} "
                f"is missing required fields: {missing}"
            )

    def _check_unique_ids(self, ids: List[str]) -> None:
        seen = set()
        duplicates = []
        for tc_id in ids:
            if tc_id in seen:
                duplicates.append(tc_id)
            seen.add(tc_id)
        if duplicates:
            raise ScenarioDataError(f"Duplicate scenario ids: {duplicates}")


__all__ = [
    "TranslationScenario",
    "IncrementalScenario",
    "ScenarioSuite",
    "ScenarioLoader",
    "ScenarioDataError",
]
