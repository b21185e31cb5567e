"""
Unit tests for the codec package (kinds, errors, registry, config).
"""

import pytest
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from initia_models.codec import (
    BIGINT,
    STRING,
    UINT64,
    CodecConfig,
    ConfigurationError,
    DURATION,
    Entity,
    Family,
    MalformedInputError,
    UnparsableNumberError,
    UnrecognizedTypeError,
    UnsupportedConversionError,
    WireFormat,
    configure,
    dec_from_atomics,
    dec_to_atomics,
    format_dec,
    format_duration,
    format_timestamp,
    load_config,
    parse_config,
    parse_dec,
    parse_duration,
    parse_integer,
    parse_timestamp,
    wire,
)
from initia_models import Coin, TextProposal


UTC = timezone.utc


# =============================================================================
# Numeric Kinds
# =============================================================================

class TestIntegers:
    """Integers are carried as decimal strings and never touch float."""

    def test_parse_integer_from_string(self):
        """Decimal strings beyond 64 bits parse exactly."""
        assert parse_integer("123456789012345678901234") == 123456789012345678901234

    def test_parse_integer_accepts_native_int(self):
        assert parse_integer(17) == 17

    def test_parse_integer_rejects_float(self):
        """Floats are refused even when integral."""
        with pytest.raises(UnparsableNumberError):
            parse_integer(1.0)

    def test_parse_integer_rejects_bool(self):
        with pytest.raises(UnparsableNumberError):
            parse_integer(True)

    @pytest.mark.parametrize("raw", ["", "1e5", "12a", " 1", "1.0", "+-1", "1\n"])
    def test_parse_integer_rejects_bad_strings(self, raw):
        with pytest.raises(UnparsableNumberError):
            parse_integer(raw)

    def test_uint64_range(self):
        """UINT64 refuses values outside 0..2^64-1."""
        assert UINT64.decode_json("18446744073709551615", WireFormat.DATA) == 2 ** 64 - 1
        with pytest.raises(UnparsableNumberError):
            UINT64.decode_json("18446744073709551616", WireFormat.DATA)
        with pytest.raises(UnparsableNumberError):
            UINT64.decode_json("-1", WireFormat.DATA)

    def test_bigint_renders_without_exponent(self):
        value = 10 ** 30
        assert BIGINT.encode_json(value, WireFormat.AMINO) == "1" + "0" * 30

    def test_bigint_proto_is_string(self):
        assert BIGINT.encode_proto(123456789012345678901234) == "123456789012345678901234"

    def test_encoding_float_amount_fails(self):
        """A float slipped into an amount field is an encode failure."""
        with pytest.raises(UnparsableNumberError) as exc_info:
            Coin("uinit", 1.5).to_data()
        assert exc_info.value.path == ("amount",)

    def test_negative_coin_amount_rejected(self):
        """Coin amounts are unsigned in every format."""
        with pytest.raises(UnparsableNumberError) as exc_info:
            Coin.from_data({"denom": "uinit", "amount": "-5"})
        assert exc_info.value.path == ("amount",)
        with pytest.raises(UnparsableNumberError):
            Coin("uinit", -5).to_amino()
        with pytest.raises(UnparsableNumberError):
            Coin("uinit", -5).to_proto()


class TestDecimals:
    def test_format_dec_has_18_places(self):
        assert format_dec(Decimal("0.5")) == "0.500000000000000000"

    def test_format_dec_large_value(self):
        """Values with many integer digits keep every digit."""
        assert format_dec(Decimal("123456789012345678901234.25")) == (
            "123456789012345678901234.250000000000000000"
        )

    def test_format_dec_int(self):
        assert format_dec(3) == "3.000000000000000000"

    def test_format_dec_rejects_float(self):
        with pytest.raises(UnparsableNumberError):
            format_dec(0.5)

    def test_parse_dec(self):
        assert parse_dec("1000.500000000000000000") == Decimal("1000.5")

    @pytest.mark.parametrize("raw", ["1e3", "NaN", "Infinity", ".5", "abc", ""])
    def test_parse_dec_rejects_bad_strings(self, raw):
        with pytest.raises(UnparsableNumberError):
            parse_dec(raw)

    def test_parse_dec_rejects_extra_fraction_digits(self):
        """A 19th fractional digit cannot be carried, so it is refused rather than dropped."""
        assert parse_dec("0.123456789012345678") == Decimal("0.123456789012345678")
        with pytest.raises(UnparsableNumberError):
            parse_dec("0.1234567890123456789")

    def test_format_dec_rejects_extra_fraction_digits(self):
        with pytest.raises(UnparsableNumberError):
            format_dec(Decimal("0.1234567890123456789"))

    def test_format_dec_accepts_trailing_zeros(self):
        """Extra digits that are all zero lose nothing."""
        assert format_dec(Decimal("0.50000000000000000000")) == "0.500000000000000000"

    def test_scaled_integer_form(self):
        assert dec_to_atomics(Decimal("1")) == "1000000000000000000"
        assert dec_to_atomics(Decimal("-0.5")) == "-500000000000000000"
        assert dec_to_atomics(Decimal("0")) == "0"
        assert dec_from_atomics("1000000000000000000") == Decimal(1)
        assert dec_from_atomics("1") == Decimal("0.000000000000000001")

    def test_scaled_integer_rejects_fraction(self):
        with pytest.raises(UnparsableNumberError):
            dec_from_atomics("1.5")


# =============================================================================
# Timestamps
# =============================================================================

class TestTimestamps:
    """ISO-8601 rendering and parsing."""

    def test_epoch_round_trip(self):
        epoch = datetime(1970, 1, 1, tzinfo=UTC)
        assert format_timestamp(epoch) == "1970-01-01T00:00:00Z"
        assert parse_timestamp("1970-01-01T00:00:00Z") == epoch

    def test_sub_second_round_trip(self):
        value = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)
        text = format_timestamp(value)
        assert text == "2024-05-06T07:08:09.123456Z"
        assert parse_timestamp(text) == value

    def test_millisecond_precision(self):
        value = datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)
        assert format_timestamp(value, "milliseconds") == "2024-01-01T00:00:00.123Z"

    def test_nanoseconds_truncated(self):
        """Node timestamps may carry nanoseconds; extra digits are dropped."""
        parsed = parse_timestamp("2024-01-01T00:00:00.123456789Z")
        assert parsed.microsecond == 123456

    def test_offset_normalized_to_utc(self):
        parsed = parse_timestamp("2024-01-01T02:00:00+02:00")
        assert parsed == datetime(2024, 1, 1, tzinfo=UTC)
        assert parsed.tzinfo == UTC

    @pytest.mark.parametrize("fmt", ["amino", "data", "proto"])
    def test_naive_datetime_round_trip(self, proposal, round_trip, fmt):
        """Naive datetimes are taken as UTC when the entity is built, so they survive a round trip."""
        naive = replace(proposal, submit_time=datetime(2024, 1, 1), voting_end_time=datetime(2024, 1, 9, 8))
        assert naive.submit_time == datetime(2024, 1, 1, tzinfo=UTC)
        assert naive.submit_time.tzinfo is not None
        assert round_trip(naive, fmt) == naive

    def test_aware_datetime_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        assert format_timestamp(datetime(2024, 1, 1, 2, tzinfo=plus_two)) == "2024-01-01T00:00:00Z"

    @pytest.mark.parametrize("raw", ["2024-01-01", "yesterday", "2024-13-01T00:00:00Z", 1704067200])
    def test_invalid_timestamps(self, raw):
        with pytest.raises(MalformedInputError):
            parse_timestamp(raw)


class TestDurations:
    """Data uses protobuf JSON ("3600s"); Amino the nanosecond count."""

    def test_format_whole_seconds(self):
        assert format_duration(timedelta(hours=1)) == "3600s"

    def test_format_fraction(self):
        assert format_duration(timedelta(seconds=1, microseconds=500000)) == "1.500000s"

    def test_format_negative(self):
        assert format_duration(timedelta(seconds=-1, microseconds=500000)) == "-0.500000s"

    def test_parse(self):
        assert parse_duration("86400s") == timedelta(days=1)
        assert parse_duration("1.5s") == timedelta(seconds=1, microseconds=500000)
        assert parse_duration("-0.5s") == timedelta(microseconds=-500000)
        assert parse_duration("0.000000001s") == timedelta(0)

    @pytest.mark.parametrize("raw", ["3600", "1h", "1.5.5s", "", 3600])
    def test_invalid(self, raw):
        with pytest.raises(MalformedInputError):
            parse_duration(raw)

    def test_amino_nanoseconds(self):
        assert DURATION.encode_json(timedelta(seconds=2), WireFormat.AMINO) == "2000000000"
        assert DURATION.decode_json("2000000000", WireFormat.AMINO) == timedelta(seconds=2)
        assert DURATION.decode_json("-1500", WireFormat.AMINO) == timedelta(microseconds=-1)

    def test_amino_rejects_text(self):
        with pytest.raises(UnparsableNumberError):
            DURATION.decode_json("2s", WireFormat.AMINO)


# =============================================================================
# Error Paths
# =============================================================================

class TestErrorPaths:
    """Errors name the first invalid field by its wire path."""

    def test_missing_field_path(self):
        with pytest.raises(MalformedInputError) as exc_info:
            TextProposal.from_data({"@type": "/cosmos.gov.v1beta1.TextProposal", "title": "T"})
        assert exc_info.value.path == ("description",)
        assert str(exc_info.value) == "description: missing required field"

    def test_null_counts_as_missing(self):
        with pytest.raises(MalformedInputError):
            Coin.from_data({"denom": "uinit", "amount": None})

    def test_wrong_shape(self):
        with pytest.raises(MalformedInputError) as exc_info:
            Coin.from_data({"denom": 5, "amount": "1"})
        assert exc_info.value.path == ("denom",)

    def test_non_object_input(self):
        with pytest.raises(MalformedInputError):
            Coin.from_data(["uinit", "1"])

    def test_unset_required_field_on_encode(self):
        with pytest.raises(MalformedInputError) as exc_info:
            TextProposal(title="T", description=None).to_amino()
        assert exc_info.value.path == ("description",)

    def test_invalid_json_text(self):
        with pytest.raises(MalformedInputError):
            Coin.from_json("{not json")


# =============================================================================
# Registry
# =============================================================================

TEST_FAMILY = Family("test family")


@TEST_FAMILY.register
@dataclass
class DataOnlyNote(Entity):
    """Variant without an Amino name."""
    proto_name = "initia.test.v1.DataOnlyNote"
    type_url = "/initia.test.v1.DataOnlyNote"

    note: str = wire(STRING, 1)


@dataclass
class MismatchedNote(Entity):
    proto_name = "initia.test.v1.MismatchedNote"
    type_url = "/initia.test.v1.SomethingElse"

    note: str = wire(STRING, 1)


@dataclass
class ImpostorNote(Entity):
    proto_name = "initia.test.v1.DataOnlyNote"
    type_url = "/initia.test.v1.DataOnlyNote"

    note: str = wire(STRING, 1)


class TestFamily:
    def test_membership(self):
        assert DataOnlyNote in TEST_FAMILY
        assert DataOnlyNote(note="x") in TEST_FAMILY
        assert TextProposal not in TEST_FAMILY

    def test_data_and_proto_dispatch(self):
        note = DataOnlyNote(note="hello")
        assert TEST_FAMILY.from_data(note.to_data()) == note
        assert TEST_FAMILY.unpack_any(note.pack_any()) == note

    def test_missing_amino_surfaces_on_use(self):
        """A variant lacking an Amino name fails when Amino is first requested."""
        with pytest.raises(UnsupportedConversionError):
            DataOnlyNote(note="hello").to_amino()
        with pytest.raises(UnsupportedConversionError):
            TEST_FAMILY.encode(DataOnlyNote(note="hello"), WireFormat.AMINO)

    def test_unknown_amino_tag(self):
        with pytest.raises(UnrecognizedTypeError) as exc_info:
            TEST_FAMILY.from_amino({"type": "test/DataOnlyNote", "value": {"note": "x"}})
        assert exc_info.value.path == ("type",)

    def test_missing_discriminator(self):
        with pytest.raises(MalformedInputError) as exc_info:
            TEST_FAMILY.from_data({"note": "x"})
        assert exc_info.value.path == ("@type",)

    def test_type_url_must_match_message(self):
        with pytest.raises(UnsupportedConversionError):
            Family("scratch").register(MismatchedNote)

    def test_conflicting_registration(self):
        """Two classes cannot claim the same discriminator."""
        with pytest.raises(UnsupportedConversionError):
            TEST_FAMILY.register(ImpostorNote)

    def test_non_member_encode(self):
        with pytest.raises(UnsupportedConversionError):
            TEST_FAMILY.encode(TextProposal(title="T", description="D"), WireFormat.DATA)

    def test_registration_is_idempotent(self):
        TEST_FAMILY.register(DataOnlyNote)
        assert TEST_FAMILY.lookup("/initia.test.v1.DataOnlyNote", WireFormat.PROTO) is DataOnlyNote


# =============================================================================
# Configuration
# =============================================================================

class TestConfig:
    def test_defaults(self):
        config = CodecConfig()
        assert config.reject_unknown_fields is False
        assert config.timestamp_precision == "auto"
        assert config.log_level == "WARNING"

    def test_parse_config(self):
        config = parse_config(
            "reject_unknown_fields: true\n"
            "timestamp_precision: milliseconds\n"
            "log_level: debug\n"
        )
        assert config.reject_unknown_fields is True
        assert config.timestamp_precision == "milliseconds"
        assert config.log_level == "DEBUG"

    def test_empty_config(self):
        assert parse_config("") == CodecConfig()

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            parse_config("strict: true\n")

    def test_invalid_values(self):
        with pytest.raises(ConfigurationError):
            parse_config("timestamp_precision: nanoseconds\n")
        with pytest.raises(ConfigurationError):
            parse_config("log_level: LOUD\n")
        with pytest.raises(ConfigurationError):
            parse_config("reject_unknown_fields: maybe\n")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            parse_config("- a\n- b\n")

    def test_load_config(self, tmp_path):
        path = tmp_path / "codec.yaml"
        path.write_text("reject_unknown_fields: true\n")
        assert load_config(str(path)).reject_unknown_fields is True

    def test_reject_unknown_fields(self):
        raw = {"@type": "/cosmos.gov.v1beta1.TextProposal", "title": "T", "description": "D", "extra": 1}
        assert TextProposal.from_data(raw) == TextProposal(title="T", description="D")

        configure(CodecConfig(reject_unknown_fields=True))
        with pytest.raises(MalformedInputError):
            TextProposal.from_data(raw)

    def test_timestamp_precision_applies_to_entities(self, proposal):
        configure(CodecConfig(timestamp_precision="milliseconds"))
        assert proposal.to_data()["submit_time"] == "2024-01-01T00:00:00.000Z"
        assert proposal.to_data()["voting_start_time"] == "2024-01-02T08:00:00.250Z"

    def test_millisecond_precision_drops_microseconds(self, proposal):
        """Millisecond rendering is lossy for timestamps finer than a millisecond."""
        configure(CodecConfig(timestamp_precision="milliseconds"))
        proposal.voting_start_time = datetime(2024, 1, 2, 8, 0, 0, 250123, tzinfo=UTC)
        decoded = type(proposal).from_data(proposal.to_data())
        assert decoded.voting_start_time == datetime(2024, 1, 2, 8, 0, 0, 250000, tzinfo=UTC)
        assert decoded != proposal
