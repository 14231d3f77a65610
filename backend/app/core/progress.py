"""Goal progress and weight display reconciliation.

Pure functions over goal and measurement records. Records may be ORM rows,
pydantic models or plain dicts, and dates may be ``date`` objects or
ISO-8601 strings. Nothing here touches the database or raises for bad
data: anything that cannot be computed comes back as ``None``.
"""
import math
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from app.core.constants import (
    PERCENT_MAX,
    PERCENT_MIN,
    WEIGHT_GOAL_TYPE,
    WEIGHT_TITLE_TERMS,
    WEIGHT_UNIT_MARKER,
)
from app.schemas.progress import DisplayWeights, GoalProgress, TrendDirection, WeightTrend


class GoalKind(str, Enum):
    weight = "weight"
    unsupported = "unsupported"


def _field(record, name: str):
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def as_number(value) -> float | None:
    """Return `value` as a finite float, or None if missing or non-numeric.

    Strings are not parsed; a goal typed as "70" is treated as missing.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _as_date(value) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _as_datetime(value) -> datetime | None:
    """Parse to an aware datetime; naive values are taken as UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _weigh_ins(measurements) -> list[tuple[date, float]]:
    """(date, weight) pairs in input order, skipping unusable entries."""
    points = []
    for m in measurements or ():
        day = _as_date(_field(m, "date"))
        weight = as_number(_field(m, "weight"))
        if day is None or weight is None or weight <= 0:
            continue
        points.append((day, weight))
    return points


def first_available(*sources):
    """Return the first non-None source.

    Each source is a value or a zero-argument callable; callables are only
    evaluated once every earlier source came up empty.
    """
    for source in sources:
        value = source() if callable(source) else source
        if value is not None:
            return value
    return None


# Classification rules in priority order. String matching on free text is
# fragile (renamed or translated titles stop matching); kept as-is because
# coaches rely on it.
def _unit_is_weight(goal) -> bool:
    unit = _field(goal, "unit")
    return isinstance(unit, str) and WEIGHT_UNIT_MARKER in unit.lower()


def _title_is_weight(goal) -> bool:
    title = _field(goal, "title")
    if not isinstance(title, str):
        return False
    lowered = title.lower()
    return any(term in lowered for term in WEIGHT_TITLE_TERMS)


def _type_is_weight(goal) -> bool:
    return _field(goal, "goal_type") == WEIGHT_GOAL_TYPE


_WEIGHT_RULES = (_unit_is_weight, _title_is_weight, _type_is_weight)


def classify_goal(goal) -> GoalKind:
    if goal is not None and any(rule(goal) for rule in _WEIGHT_RULES):
        return GoalKind.weight
    return GoalKind.unsupported


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_goal_progress(goal, measurements, cached_weight=None) -> GoalProgress | None:
    """Progress of a weight goal from the client's measurement history.

    `initial` is the earliest weigh-in and `current` the latest. With no
    usable measurements both fall back to `cached_weight` (the client
    profile's current_weight), then to the target itself.

    percent = (current - initial) / (target - initial) * 100, clamped to
    [0, 100] and rounded half up. The same formula covers loss goals
    (target < initial) and gain goals (target > initial). When the goal
    starts at its target, percent is 100 if still there, else 0.

    Returns None if the target is missing/non-numeric or the goal is not a
    weight goal (there is no generic numeric computation).
    """
    if goal is None:
        return None
    target = as_number(_field(goal, "target_value"))
    if target is None:
        return None
    if classify_goal(goal) is not GoalKind.weight:
        return None

    points = _weigh_ins(measurements)
    if points:
        # min/max keep the first-seen entry on equal dates
        initial = min(points, key=lambda p: p[0])[1]
        current = max(points, key=lambda p: p[0])[1]
    else:
        initial = current = first_available(as_number(cached_weight), target)

    if initial == target:
        percent = PERCENT_MAX if current == target else PERCENT_MIN
    else:
        raw = (current - initial) / (target - initial) * 100
        percent = _round_half_up(min(max(raw, PERCENT_MIN), PERCENT_MAX))

    return GoalProgress(percent=percent, initial=initial, current=current, target=target)


def latest_weight(measurements) -> float | None:
    points = _weigh_ins(measurements)
    if not points:
        return None
    return max(points, key=lambda p: p[0])[1]


def resolve_display_weights(goal, progress, measurements, client_profile) -> DisplayWeights:
    """Pick the current and target weight to show for a client.

    Current: computed progress -> latest measurement -> profile cache.
    Target: computed progress -> weight goal's target_value -> profile cache.
    The profile fields are a stale-prone cache and only read last.
    """
    weight_goal = goal if classify_goal(goal) is GoalKind.weight else None

    current = first_available(
        as_number(_field(progress, "current")),
        lambda: latest_weight(measurements),
        lambda: as_number(_field(client_profile, "current_weight")),
    )
    target = first_available(
        as_number(_field(progress, "target")),
        lambda: as_number(_field(weight_goal, "target_value")),
        lambda: as_number(_field(client_profile, "target_weight")),
    )
    return DisplayWeights(current_weight=current, target_weight=target)


def select_weight_goal(goals):
    """The weight goal used for the quick-progress card.

    Most recently created wins. Goals without created_at rank after dated
    ones; remaining ties keep input order.
    """
    candidates = [g for g in goals or () if classify_goal(g) is GoalKind.weight]
    if not candidates:
        return None

    dated = [(g, _as_datetime(_field(g, "created_at"))) for g in candidates]
    dated = [(g, created) for g, created in dated if created is not None]
    if not dated:
        return candidates[0]
    return max(dated, key=lambda pair: pair[1])[0]


def weight_trend(measurements) -> WeightTrend | None:
    """Change between the two most recent weigh-ins, or None with fewer than two."""
    points = sorted(_weigh_ins(measurements), key=lambda p: p[0], reverse=True)
    if len(points) < 2:
        return None

    latest, previous = points[0][1], points[1][1]
    diff = latest - previous
    if diff > 0:
        direction = TrendDirection.up
    elif diff < 0:
        direction = TrendDirection.down
    else:
        direction = TrendDirection.stable

    return WeightTrend(
        value=abs(diff),
        direction=direction,
        percentage=abs(diff / previous * 100),
    )
