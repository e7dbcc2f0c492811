from customer_health.normalization import clamp_score, inverse_normalize, normalize, round_score


def test_normalize_rescales_linearly():
    assert normalize(0, 0, 60) == 0
    assert normalize(30, 0, 60) == 50
    assert normalize(60, 0, 60) == 100


def test_normalize_clamps_out_of_range_values():
    assert normalize(90, 0, 60) == 100
    assert normalize(-10, 0, 60) == 0


def test_inverse_normalize_mirrors_the_range():
    assert inverse_normalize(0, 0, 30) == 100
    assert inverse_normalize(30, 0, 30) == 0
    assert inverse_normalize(10, 5, 15) == 50
    assert inverse_normalize(45, 0, 30) == 0


def test_degenerate_range_returns_neutral_score():
    assert normalize(7, 5, 5) == 50
    assert inverse_normalize(7, 5, 5) == 50


def test_clamp_score():
    assert clamp_score(-3.2) == 0
    assert clamp_score(42.5) == 42.5
    assert clamp_score(105.8) == 100


def test_round_score_rounds_halves_up():
    assert round_score(18.5) == 19
    assert round_score(62.5) == 63
    assert round_score(13.58) == 14
    assert round_score(21.39) == 21
    assert isinstance(round_score(99.9), int)
