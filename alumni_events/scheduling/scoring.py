# Start hour -> desirability. Late morning first, then early afternoon.
HOUR_SCORES = {
    10: 5,
    11: 5,
    14: 4,
    15: 4,
    9: 3,
    16: 3,
    13: 2,
    17: 2,
}

DEFAULT_HOUR_SCORE = 1


def score_hour(hour: int) -> int:
    return HOUR_SCORES.get(hour, DEFAULT_HOUR_SCORE)
