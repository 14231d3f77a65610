from datetime import datetime, timezone
from decimal import Decimal

from app.core.progress import (
    GoalKind,
    classify_goal,
    compute_goal_progress,
    first_available,
    resolve_display_weights,
    select_weight_goal,
    weight_trend,
)
from app.schemas.progress import GoalProgress


def weigh_ins(*pairs):
    return [{"date": d, "weight": w} for d, w in pairs]


def weight_goal(target, **extra):
    goal = {"title": "Objectif", "target_value": target, "unit": "kg"}
    goal.update(extra)
    return goal


def test_weight_loss_progress_is_linear():
    ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", 75))
    p = compute_goal_progress(weight_goal(70), ms)
    assert p == GoalProgress(percent=50, initial=80, current=75, target=70)


def test_weight_loss_progress_increases_as_weight_drops():
    percents = []
    for current in (80, 78, 75, 72, 70):
        ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", current))
        percents.append(compute_goal_progress(weight_goal(70), ms).percent)
    assert percents == [0, 20, 50, 80, 100]


def test_weight_gain_progress():
    ms = weigh_ins(("2024-08-01", 60), ("2024-09-01", 65))
    p = compute_goal_progress(weight_goal(70), ms)
    assert p.percent == 50
    assert (p.initial, p.current, p.target) == (60, 65, 70)

    ms = weigh_ins(("2024-08-01", 60), ("2024-09-01", 70))
    assert compute_goal_progress(weight_goal(70), ms).percent == 100


def test_progress_is_clamped():
    # wrong direction
    ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", 90))
    assert compute_goal_progress(weight_goal(70), ms).percent == 0
    # overshoot
    ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", 60))
    assert compute_goal_progress(weight_goal(70), ms).percent == 100


def test_initial_equal_to_target():
    ms = weigh_ins(("2024-08-01", 75), ("2024-09-01", 76))
    assert compute_goal_progress(weight_goal(75), ms).percent == 0

    ms = weigh_ins(("2024-08-01", 75), ("2024-09-01", 75))
    assert compute_goal_progress(weight_goal(75), ms).percent == 100


def test_initial_and_current_follow_dates_not_input_order():
    ms = weigh_ins(("2024-09-01", 70), ("2024-10-01", 68), ("2024-08-01", 72))
    p = compute_goal_progress(weight_goal(60), ms)
    assert p.initial == 72
    assert p.current == 68


def test_missing_or_bad_target_returns_none():
    ms = weigh_ins(("2024-08-01", 80))
    assert compute_goal_progress(weight_goal(None), ms) is None
    assert compute_goal_progress(weight_goal("70"), ms) is None
    assert compute_goal_progress(weight_goal(float("nan")), ms) is None
    assert compute_goal_progress(None, ms) is None


def test_unclassified_goal_returns_none():
    goal = {"title": "Séances par semaine", "target_value": 4}
    assert compute_goal_progress(goal, weigh_ins(("2024-08-01", 80))) is None


def test_classification_rules():
    assert classify_goal({"title": "Squat 1RM", "unit": "KG"}) is GoalKind.weight
    assert classify_goal({"title": "Perte de POIDS"}) is GoalKind.weight
    assert classify_goal({"title": "Target weight"}) is GoalKind.weight
    assert classify_goal({"title": "Cut", "goal_type": "weight"}) is GoalKind.weight
    assert classify_goal({"title": "Masse grasse", "unit": "%"}) is GoalKind.unsupported
    assert classify_goal(None) is GoalKind.unsupported


def test_empty_history_uses_cached_weight_then_target():
    p = compute_goal_progress(weight_goal(70), [], cached_weight=Decimal("80.00"))
    assert (p.initial, p.current, p.percent) == (80, 80, 0)

    p = compute_goal_progress(weight_goal(70), [])
    assert p == GoalProgress(percent=100, initial=70, current=70, target=70)


def test_unusable_measurements_are_ignored():
    ms = [
        {"date": "2024-07-01", "weight": float("nan")},
        {"date": "not a date", "weight": 90},
        {"date": "2024-08-01", "weight": 80},
        {"date": "2024-09-01", "weight": 75},
    ]
    p = compute_goal_progress(weight_goal(70), ms)
    assert (p.initial, p.current) == (80, 75)

    only_bad = [{"date": "2024-07-01", "weight": None}]
    p = compute_goal_progress(weight_goal(70), only_bad, cached_weight=72)
    assert p.initial == 72


def test_progress_is_deterministic():
    ms = weigh_ins(("2024-08-01", 81.3), ("2024-09-01", 77.9))
    goal = weight_goal(70.5)
    assert compute_goal_progress(goal, ms) == compute_goal_progress(goal, ms)


def test_half_percent_rounds_up():
    # raw = 12.5
    ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", 79))
    assert compute_goal_progress(weight_goal(72), ms).percent == 13


def test_display_weights_prefer_progress():
    ms = weigh_ins(("2024-08-01", 80), ("2024-09-01", 75))
    goal = weight_goal(70)
    progress = compute_goal_progress(goal, ms)
    profile = {"current_weight": 90, "target_weight": 65}
    w = resolve_display_weights(goal, progress, ms, profile)
    assert (w.current_weight, w.target_weight) == (75, 70)


def test_display_weights_without_goal():
    ms = weigh_ins(("2024-10-01", 74), ("2024-08-01", 80))
    profile = {"current_weight": 90, "target_weight": 65}
    w = resolve_display_weights(None, None, ms, profile)
    assert (w.current_weight, w.target_weight) == (74, 65)


def test_display_weights_fall_back_to_profile_then_none():
    w = resolve_display_weights(None, None, [], {"current_weight": 90, "target_weight": 65})
    assert (w.current_weight, w.target_weight) == (90, 65)

    w = resolve_display_weights(None, None, [], None)
    assert w.current_weight is None
    assert w.target_weight is None


def test_display_target_uses_goal_when_progress_missing():
    goal = weight_goal(68)
    w = resolve_display_weights(goal, None, [], {"target_weight": 65})
    assert w.target_weight == 68

    # Non-weight goals never provide a target weight
    other = {"title": "Séances par semaine", "target_value": 4}
    w = resolve_display_weights(other, None, [], {"target_weight": 65})
    assert w.target_weight == 65


def test_first_available_is_lazy():
    calls = []

    def source():
        calls.append(1)
        return 3

    assert first_available(None, 2, source) == 2
    assert calls == []
    assert first_available(None, source) == 3
    assert first_available(None, lambda: None) is None


def test_select_weight_goal_prefers_most_recent():
    old = weight_goal(70, id=1, created_at=datetime(2024, 1, 1))
    new = weight_goal(72, id=2, created_at=datetime(2024, 6, 1))
    sessions = {"id": 3, "title": "Séances", "target_value": 4, "created_at": datetime(2024, 9, 1)}
    assert select_weight_goal([old, sessions, new])["id"] == 2


def test_select_weight_goal_undated_and_empty():
    undated = weight_goal(70, id=1)
    dated = weight_goal(72, id=2, created_at="2024-03-01T10:00:00")
    assert select_weight_goal([undated, dated])["id"] == 2
    assert select_weight_goal([undated, weight_goal(71, id=3)])["id"] == 1
    assert select_weight_goal([]) is None
    assert select_weight_goal(None) is None


def test_weight_trend():
    ms = weigh_ins(("2024-09-15", 69.8), ("2024-10-01", 70.2), ("2024-09-01", 69.5))
    trend = weight_trend(ms)
    assert trend.direction == "up"
    assert abs(trend.value - 0.4) < 1e-9
    assert abs(trend.percentage - 0.4 / 69.8 * 100) < 1e-9


def test_weight_trend_down_stable_and_short_history():
    assert weight_trend(weigh_ins(("2024-09-01", 80), ("2024-10-01", 78))).direction == "down"
    assert weight_trend(weigh_ins(("2024-09-01", 80), ("2024-10-01", 80))).direction == "stable"
    assert weight_trend(weigh_ins(("2024-09-01", 80))) is None
    assert weight_trend([]) is None


def test_select_weight_goal_mixes_aware_and_naive_timestamps():
    aware = weight_goal(70, id=1, created_at="2024-03-01T10:00:00+00:00")
    naive = weight_goal(72, id=2, created_at="2024-03-02T10:00:00")
    assert select_weight_goal([aware, naive])["id"] == 2

    # naive values count as UTC
    later_aware = weight_goal(71, id=3, created_at=datetime(2024, 3, 2, 11, tzinfo=timezone.utc))
    assert select_weight_goal([naive, later_aware])["id"] == 3
