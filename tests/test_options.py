from exercisekit.lessons.options import maybe_icecream, take_while_present


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_layered_option():
    values = list(range(11))
    expected = 10
    for integer in take_while_present(values):
        assert integer == expected
        expected -= 1
    assert expected == -1


def test_stops_at_missing_value():
    assert list(take_while_present([1, None, 2, 3])) == [3, 2]


def test_does_not_change_input():
    values = [1, 2, 3]
    assert list(take_while_present(values)) == [3, 2, 1]
    assert values == [1, 2, 3]