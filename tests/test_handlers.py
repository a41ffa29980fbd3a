import pytest
from lastdb_args.config.schema_config import LastdbConfig
from lastdb_args.constants import ChildTableType, SequenceFormat
from lastdb_args.errors import BadOptionValueError
from lastdb_args.handlers import OPTION_HANDLERS, parse_integer, parse_size, parse_unsigned
from lastdb_args.outcome import Halt
from lastdb_args.scanner import GRAMMAR_TABLE


@pytest.fixture
def config():
    return LastdbConfig()


def apply(config, option, value=None):
    return OPTION_HANDLERS[option](config, option, value)


def test_every_grammar_option_has_a_handler():
    assert set(OPTION_HANDLERS) == set(GRAMMAR_TABLE)


@pytest.mark.parametrize("value, expected", [
    ("0", 0), ("42", 42), ("-3", -3), ("+7", 7), (" 12 ", 12),
])
def test_parse_integer(value, expected):
    assert parse_integer('i', value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1.5", "12x", "1 2"])
def test_parse_integer_rejects(value):
    with pytest.raises(BadOptionValueError) as exc_info:
        parse_integer('i', value)
    assert exc_info.value.option == 'i'
    assert exc_info.value.value == value


def test_parse_unsigned_rejects_negative():
    with pytest.raises(BadOptionValueError):
        parse_unsigned('b', "-1")


@pytest.mark.parametrize("value, expected", [
    ("1000", 1000),
    ("64K", 64 * 1024),
    ("2M", 2 * 1024 ** 2),
    ("3G", 3 * 1024 ** 3),
    ("1 T", 1024 ** 4),
])
def test_parse_size(value, expected):
    assert parse_size('s', value) == expected


@pytest.mark.parametrize("value", ["", "G", "12Q", "1.5G", "-5", "4KB"])
def test_parse_size_rejects(value):
    with pytest.raises(BadOptionValueError):
        parse_size('s', value)


def test_help_and_version_halt(config):
    halt = apply(config, 'h')
    assert isinstance(halt, Halt)
    assert halt.status == 0
    assert "Advanced Options" in halt.text

    halt = apply(config, 'V')
    assert halt.status == 0
    assert halt.text.startswith("lastdb ")


def test_flags(config):
    for option in "pcx":
        assert apply(config, option) is None
    assert config.get('is_protein') is True
    assert config.get('is_case_sensitive') is True
    assert config.get('is_counts_only') is True


@pytest.mark.parametrize("value, keep_lowercase, tantan", [
    ("00", False, 0),
    ("01", False, 1),
    ("12", True, 2),
    ("10", True, 0),
])
def test_repeat_marking(config, value, keep_lowercase, tantan):
    apply(config, 'R', value)
    assert config.get('is_keep_lowercase') is keep_lowercase
    assert config.get('tantan_setting') == tantan


@pytest.mark.parametrize("value", ["123", "120", "ab", "20", "13", "1", "", "1a"])
def test_repeat_marking_rejects(config, value):
    with pytest.raises(BadOptionValueError) as exc_info:
        apply(config, 'R', value)
    assert str(exc_info.value) == f"bad option value: -R {value}"
    assert config.get('is_keep_lowercase') is True
    assert config.get('tantan_setting') == 0


def test_list_options_accumulate_in_order(config):
    apply(config, 'm', 'a')
    apply(config, 'm', 'b')
    apply(config, 'u', 'BISF')
    apply(config, 'u', 'yass.seed')
    assert config.get('seed_patterns') == ['a', 'b']
    assert config.get('subset_seed_files') == ['BISF', 'yass.seed']


def test_scalar_options_overwrite(config):
    apply(config, 'a', 'ACGT')
    apply(config, 'a', 'ACGTN')
    apply(config, 'i', '10')
    apply(config, 'i', '-2')
    assert config.get('user_alphabet') == 'ACGTN'
    assert config.get('min_seed_limit') == -2


def test_volume_size(config):
    apply(config, 's', '5G')
    assert config.get('volume_size') == 5 * 1024 ** 3


def test_index_step(config):
    apply(config, 'w', '5')
    assert config.get('index_step') == 5


@pytest.mark.parametrize("value", ["0", "-1", "two"])
def test_index_step_rejects(config, value):
    with pytest.raises(BadOptionValueError):
        apply(config, 'w', value)


def test_bucket_depth(config):
    apply(config, 'b', '12')
    assert config.get('bucket_depth') == 12


def test_child_table_type(config):
    apply(config, 'C', '3')
    assert config.get('child_table_type') is ChildTableType.FULL


@pytest.mark.parametrize("value", ["4", "-1"])
def test_child_table_type_rejects(config, value):
    with pytest.raises(BadOptionValueError) as exc_info:
        apply(config, 'C', value)
    assert exc_info.value.option == 'C'
    assert exc_info.value.value == value


def test_verbosity_counts(config):
    for _ in range(3):
        apply(config, 'v')
    assert config.get('verbosity') == 3


@pytest.mark.parametrize("value, expected", [
    ("0", SequenceFormat.FASTA),
    ("1", SequenceFormat.FASTQ_SANGER),
    ("3", SequenceFormat.FASTQ_ILLUMINA),
])
def test_input_format(config, value, expected):
    apply(config, 'Q', value)
    assert config.get('input_format') is expected


@pytest.mark.parametrize("value", ["4", "5", "9", "-1"])
def test_input_format_rejects_internal_formats(config, value):
    with pytest.raises(BadOptionValueError):
        apply(config, 'Q', value)


@pytest.mark.parametrize("parser, value", [
    (parse_integer, "٥"),
    (parse_integer, "1٢"),
    (parse_size, "٥K"),
])
def test_non_ascii_digits_rejected(parser, value):
    with pytest.raises(BadOptionValueError):
        parser('w', value)


def test_index_step_rejects_non_ascii_digit(config):
    with pytest.raises(BadOptionValueError):
        apply(config, 'w', "٥")
    assert config.get('index_step') == 0
