import pytest

from drills.numbers import (
    balanced_248,
    binary,
    is_power_of_two,
    monkey_steps,
    new_number_system,
    next_power_of_two,
    random_bytes,
    survivor,
    two_egg_drop,
)


def test_balanced_248_short_limit_gives_nothing():
    assert balanced_248(99) == []
    assert balanced_248(-5) == []


def test_balanced_248_starts_at_248():
    assert balanced_248(248) == [248]


def test_balanced_248_results_have_equal_counts():
    result = balanced_248(5000)
    assert result == sorted(result)
    assert result[0] == 248
    for number in result:
        text = str(number)
        assert 248 <= number <= 5000
        assert text.count("2") == text.count("4") == text.count("8") >= 1


def test_balanced_248_skips_numbers_missing_a_digit():
    result = balanced_248(1000)
    assert 249 not in result
    assert 284 in result


def test_new_number_system_single_digits():
    assert [new_number_system(ch) for ch in "ABCDE"] == [1, 2, 3, 4, 5]


def test_new_number_system_places_are_base_five():
    for prefix in ["A", "BC", "EDA", "CCCE"]:
        for last in "ABCDE":
            assert new_number_system(prefix + last) == (
                new_number_system(prefix) * 5 + new_number_system(last)
            )


def test_new_number_system_unknown_characters_count_zero():
    assert new_number_system("Z") == 0
    assert new_number_system("AZ") == new_number_system("A") * 5


@pytest.mark.parametrize("n", range(1, 300))
def test_next_power_of_two_bounds(n):
    power = next_power_of_two(n)
    assert power & (power - 1) == 0
    assert power >= n
    assert power // 2 < n


def test_next_power_of_two_zero_and_negative():
    assert next_power_of_two(0) == 1
    with pytest.raises(ValueError):
        next_power_of_two(-3)


def test_survivor_of_hundred():
    assert survivor(100) == 73


def test_two_egg_drop_hundred_floors():
    assert two_egg_drop(100) == 14


def test_two_egg_drop_is_monotonic():
    values = [two_egg_drop(floors) for floors in range(0, 500)]
    assert values == sorted(values)


def test_two_egg_drop_negative():
    with pytest.raises(ValueError):
        two_egg_drop(-1)


def test_monkey_steps_example():
    assert monkey_steps(10, 3, 2) == 8.0


def test_monkey_steps_no_progress():
    with pytest.raises(ValueError):
        monkey_steps(10, 2, 2)


@pytest.mark.parametrize("n", [0, 1, 5, 255, 4096, 2**31 - 1, 2**32 - 1])
def test_binary_round_trip(n):
    bits = binary(n)
    assert len(bits) == 32
    assert int(bits, 2) == n


def test_binary_negative_is_twos_complement():
    assert binary(-1) == "1" * 32
    assert int(binary(-8), 2) == 2**32 - 8


def test_is_power_of_two_matches_powers():
    found = {n for n in range(-50, 1025) if is_power_of_two(n)}
    assert found == {1 << k for k in range(11)}


def test_random_bytes_length_and_determinism():
    data = random_bytes(16, seed=7)
    assert len(data) == 16
    assert data == random_bytes(16, seed=7)
    assert random_bytes(8, seed=7) == data[:8]


def test_random_bytes_limits():
    assert random_bytes(0, seed=1) == b""
    assert len(random_bytes(64, seed=1)) == 64
    with pytest.raises(ValueError):
        random_bytes(65)
    with pytest.raises(ValueError):
        random_bytes(-1)