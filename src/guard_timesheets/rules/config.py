from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.numbers import parse_number
from ..core import constants


@dataclass(frozen=True)
class RuleConfig:
    """Tunable thresholds for the timesheet rule engine.

    Read-only for the duration of a call; callers pass it explicitly.
    """

    lateness_grace_minutes: int = constants.DEFAULT_LATENESS_GRACE_MINUTES
    early_grace_minutes: int = constants.DEFAULT_EARLY_GRACE_MINUTES
    overtime_threshold_hours: float = constants.DEFAULT_OVERTIME_THRESHOLD_HOURS
    overtime_slack_hours: float = constants.DEFAULT_OVERTIME_SLACK_HOURS
    break_minutes_required: int = constants.DEFAULT_BREAK_MINUTES_REQUIRED
    break_min_hours: float = constants.DEFAULT_BREAK_MIN_HOURS
    short_hours_ratio: float = constants.SHORT_HOURS_RATIO
    overtime_ratio: float = constants.OVERTIME_HOURS_RATIO
    dispute_ratio: float = constants.DISPUTE_RATIO

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "RuleConfig":
        """Build from a settings dict; unknown keys are ignored, bad values keep the default."""
        values = values or {}
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            parsed = parse_number(values[f.name], float(f.default))
            kwargs[f.name] = int(parsed) if isinstance(f.default, int) else parsed
        return cls(**kwargs)


DEFAULT_RULE_CONFIG = RuleConfig()
