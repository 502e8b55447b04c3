from algoplay.ranking import emergency_order

PEOPLE = [14, 51, 24, 75, 54, 63]


def test_source_example():
    assert emergency_order(PEOPLE) == [6, 4, 5, 1, 3, 2]


def test_result_is_permutation_of_ranks():
    result = emergency_order(PEOPLE)
    assert sorted(result) == list(range(1, len(PEOPLE) + 1))


def test_larger_value_gets_smaller_rank():
    result = emergency_order(PEOPLE)
    for a, ra in zip(PEOPLE, result):
        for b, rb in zip(PEOPLE, result):
            if a > b:
                assert ra < rb


def test_largest_is_first():
    result = emergency_order(PEOPLE)
    assert result[PEOPLE.index(max(PEOPLE))] == 1
    assert result[PEOPLE.index(min(PEOPLE))] == len(PEOPLE)


def test_empty():
    assert emergency_order([]) == []


def test_ties_keep_original_order():
    result = emergency_order([5, 5, 5])
    assert result == [1, 2, 3]