import pytest

from lpyp.options import Key, Option, OptionFlag


@pytest.mark.parametrize(
    "value, member",
    [
        (0x80000000, Key.ARG),
        (0x80000001, Key.END),
        (0x80000002, Key.UNKNOWN),
    ],
)
def test_special_key_values(value, member):
    assert Key(value) is member
    option = Option(key=member, long_name="files")
    assert option.key == value


@pytest.mark.parametrize(
    "value, member",
    [
        (0x00, OptionFlag.NO_ARG),
        (0x01, OptionFlag.REQUIRED_ARG),
        (0x02, OptionFlag.OPTIONAL_ARG),
        (0x04, OptionFlag.DENY_DUPLICATE),
    ],
)
def test_flag_values(value, member):
    option = Option(key=1, short_name="x", flags=value)
    assert option.flags == member
    assert int(option.flags) == value


@pytest.mark.parametrize(
    "flags, expected",
    [
        (OptionFlag.NO_ARG, False),
        (OptionFlag.REQUIRED_ARG, True),
        (OptionFlag.OPTIONAL_ARG, True),
        (OptionFlag.DENY_DUPLICATE, False),
        (OptionFlag.REQUIRED_ARG | OptionFlag.DENY_DUPLICATE, True),
    ],
)
def test_takes_argument(flags, expected):
    assert Option(key=1, short_name="x", flags=flags).takes_argument() is expected


def test_plain_int_flags_become_option_flags():
    option = Option(key=1, short_name="x", flags=0x05)
    assert option.flags == OptionFlag.REQUIRED_ARG | OptionFlag.DENY_DUPLICATE
    assert option.flags & OptionFlag.DENY_DUPLICATE


def test_zero_key_rejected():
    with pytest.raises(ValueError):
        Option(key=0, short_name="v")


def test_long_short_name_rejected():
    with pytest.raises(ValueError):
        Option(key=1, short_name="vv")


def test_defaults():
    option = Option(key=7)
    assert option.short_name is None
    assert option.long_name is None
    assert option.flags == OptionFlag.NO_ARG
    assert option.takes_argument() is False