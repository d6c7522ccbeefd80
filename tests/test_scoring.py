import pytest

from alumni_events.scheduling.scoring import score_hour


@pytest.mark.parametrize("hour, expected", [
    (10, 5), (11, 5),
    (14, 4), (15, 4),
    (9, 3), (16, 3),
    (13, 2), (17, 2),
    (12, 1), (8, 1), (18, 1), (0, 1), (23, 1),
])
def test_score_hour_table(hour, expected):
    assert score_hour(hour) == expected
