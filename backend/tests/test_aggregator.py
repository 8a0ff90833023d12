import random
from datetime import date

from application.aggregator import summarize, to_point
from domain.visit import VisitType

from conftest import make_visit


def test_summarize_empty_is_all_zero():
    summary = summarize([])
    assert summary.to_dict() == {
        "total_visitors": 0,
        "individual_visits": 0,
        "group_visits": 0,
        "age_breakdown": {"children_count": 0, "adults_count": 0, "seniors_count": 0, "students_count": 0},
    }


def test_summarize_counts_visit_types_and_ages(july_visits):
    summary = summarize(july_visits)

    assert summary.individual_visits == 2
    assert summary.group_visits == 1
    assert summary.age_breakdown.children_count == 27
    assert summary.age_breakdown.adults_count == 5
    assert summary.age_breakdown.seniors_count == 1
    assert summary.age_breakdown.students_count == 0
    assert summary.total_visitors == 33


def test_total_visitors_equals_sum_of_all_counts():
    rng = random.Random(7)
    visits = [
        make_visit(
            date(2024, 3, rng.randint(1, 31)),
            rng.choice(list(VisitType)),
            children_count=rng.randint(0, 30),
            adults_count=rng.randint(0, 30),
            seniors_count=rng.randint(0, 30),
            students_count=rng.randint(0, 30),
        )
        for _ in range(50)
    ]
    summary = summarize(visits)

    expected = sum(v.children_count + v.adults_count + v.seniors_count + v.students_count for v in visits)
    assert summary.total_visitors == expected
    assert sum(summary.age_breakdown.to_dict().values()) == expected
    assert summary.individual_visits + summary.group_visits == len(visits)


def test_fold_is_order_independent(july_visits):
    shuffled = list(july_visits)
    random.Random(3).shuffle(shuffled)
    reversed_visits = list(reversed(july_visits))

    assert summarize(shuffled) == summarize(july_visits) == summarize(reversed_visits)
    assert to_point("x", shuffled) == to_point("x", july_visits) == to_point("x", reversed_visits)


def test_to_point_carries_label_and_age_totals(july_visits):
    point = to_point("15", july_visits[:2])

    assert point.to_dict() == {"label": "15", "children": 27, "adults": 3, "seniors": 0, "students": 0}


def test_to_point_accepts_generator():
    point = to_point("W1-25", (v for v in [make_visit(date(2025, 1, 1), students_count=4)]))
    assert point.to_dict() == {"label": "W1-25", "children": 0, "adults": 0, "seniors": 0, "students": 4}
