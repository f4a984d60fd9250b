from socialgraph.stats import mle_power_law_exponent


def test_mle_power_law_exponent_exact():
    alpha_true = 3.0
    counts = {k: round(1000 * k ** -alpha_true) for k in range(1, 11)}
    alpha_hat = mle_power_law_exponent(counts, 1)
    rel_err = abs(alpha_hat - alpha_true) / alpha_true
    assert rel_err < 0.01


def test_empty_counts_give_zero():
    assert mle_power_law_exponent({}, 1) == 0.0


def test_all_filtered_by_k_min_gives_zero():
    assert mle_power_law_exponent({1: 50, 2: 10}, 5) == 0.0


def test_zero_counts_ignored():
    assert mle_power_law_exponent({1: 0, 2: 0}, 1) == 0.0


def test_single_degree_gives_zero():
    assert mle_power_law_exponent({4: 30}, 1) == 0.0


def test_k_min_excludes_points():
    counts = {1: 1000, 2: 125, 3: 37, 4: 16, 50: 900}
    with_outlier = mle_power_law_exponent(counts, 1)
    without_low = mle_power_law_exponent({50: 900}, 1)
    assert without_low == 0.0
    assert mle_power_law_exponent(counts, 50) == 0.0
    assert with_outlier < mle_power_law_exponent({k: c for k, c in counts.items() if k < 50}, 1)


def test_decreasing_counts_give_positive_exponent():
    counts = {k: round(1000 * k ** -2.0) for k in range(1, 11)}
    assert mle_power_law_exponent(counts, 1) > 0.0