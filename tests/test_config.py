import pytest

from philosophers.config import Config, InputError, parse_args, parse_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n+17", 17),
        ("-200", -200),
        ("123abc", 123),
        ("\v\f\r8", 8),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "   ", "-", "+x5", "--5"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_stops_at_second_sign():
    assert parse_int("7-3") == 7


def test_parse_args_four_arguments():
    config = parse_args(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200, None)
    assert config.meals_required is None


def test_parse_args_five_arguments():
    config = parse_args(["4", "410", "200", "100", "7"])
    assert config.n_philo == 4
    assert config.time_to_die == 410
    assert config.time_to_eat == 200
    assert config.time_to_sleep == 100
    assert config.meals_required == 7


def test_parse_args_lenient_numbers():
    config = parse_args([" 3", "+600", "100xyz", "50"])
    assert config == Config(3, 600, 100, 50)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "9"],
    ],
)
def test_parse_args_wrong_count(args):
    with pytest.raises(InputError, match="Invalid Input"):
        parse_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "-1"],
    ],
)
def test_parse_args_rejects_non_positive(args):
    with pytest.raises(InputError):
        parse_args(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["1"])


def test_config_is_frozen():
    config = parse_args(["2", "100", "50", "50"])
    with pytest.raises(AttributeError):
        config.n_philo = 3
    assert config.n_philo == 2
    assert config == Config(2, 100, 50, 50)