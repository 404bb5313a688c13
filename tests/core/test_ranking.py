from contributors.core.ranking import competition_ranks


def test_distinct_counts_rank_sequentially():
    assert competition_ranks([10, 5, 1]) == [1, 2, 3]


def test_ties_share_a_rank_and_skip_the_next():
    assert competition_ranks([10, 5, 5, 1]) == [1, 2, 2, 4]


def test_empty_input():
    assert competition_ranks([]) == []
