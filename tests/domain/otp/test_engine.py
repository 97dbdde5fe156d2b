import pytest

from domain.otp import engine
from domain.otp.engine import OTP_DIGITS, format_code, generate, seconds_remaining, time_window, verify
from domain.otp.exceptions import CodeGenerationError

# RFC 6238 Appendix B (SHA1, 30 秒ステップ) の 8 桁値の下 6 桁
RFC6238_SECRET = "12345678901234567890"
RFC6238_VECTORS = [
    (59, 287082),
    (1111111109, 81804),
    (1111111111, 50471),
    (1234567890, 5924),
    (2000000000, 279037),
]


@pytest.mark.parametrize("timestamp, expected", RFC6238_VECTORS)
def test_generate_matches_rfc6238_vectors(timestamp, expected):
    assert generate(RFC6238_SECRET, 30, timestamp) == expected


def test_period_is_the_time_step_length():
    # 60 秒ステップの 118 秒目は 30 秒ステップの 59 秒目と同じウィンドウ 1
    assert generate(RFC6238_SECRET, 60, 118) == generate(RFC6238_SECRET, 30, 59)


def test_generate_is_deterministic():
    codes = {generate("S1", 300, 1_000_000_000) for _ in range(5)}
    assert len(codes) == 1


@pytest.mark.parametrize("timestamp", [0, 1, 299, 300, 1_000_000_000, 4_102_444_800])
def test_generate_stays_in_range(timestamp):
    code = generate("S1", 300, timestamp)
    assert 0 <= code < 10 ** OTP_DIGITS


def test_same_window_yields_same_code():
    # 1_000_000_000 // 300 == 3333333 ... 先頭は 999_999_900
    assert generate("S1", 300, 999_999_900) == generate("S1", 300, 1_000_000_199)


def test_different_secrets_yield_different_codes():
    assert generate("S1", 300, 1_000_000_000) != generate("S2", 300, 1_000_000_000)


def test_bytes_secret_is_equivalent_to_utf8_text():
    assert generate(b"S1", 300, 1_000_000_000) == generate("S1", 300, 1_000_000_000)


def test_verify_accepts_code_at_generation_time():
    code = generate("S1", 300, 1_000_000_000)
    assert verify("S1", code, 300, 1_000_000_000) is True


def test_verify_rejects_code_in_next_window():
    code = generate("S1", 300, 1_000_000_000)
    assert time_window(300, 1_000_000_000) != time_window(300, 1_000_000_301)
    assert verify("S1", code, 300, 1_000_000_301) is False


@pytest.mark.parametrize(
    "t1, t2, same_window",
    [
        (999_999_900, 1_000_000_199, True),
        (1_000_000_000, 1_000_000_000, True),
        (1_000_000_199, 1_000_000_200, False),
        (1_000_000_000, 999_999_899, False),
        (59, 60, False),
    ],
)
def test_window_boundary_property(t1, t2, same_window):
    period = 300 if t1 > 100 else 30
    code = generate("S1", period, t1)
    assert (time_window(period, t1) == time_window(period, t2)) is same_window
    assert verify("S1", code, period, t2) is same_window


def test_verify_has_no_grace_window():
    period = 30
    code = generate(RFC6238_SECRET, period, 59)
    assert verify(RFC6238_SECRET, code, period, 60) is False
    assert verify(RFC6238_SECRET, code, period, 29) is False


def test_verify_does_not_consume_code():
    code = generate("S1", 300, 1_000_000_000)
    assert verify("S1", code, 300, 1_000_000_000) is True
    assert verify("S1", code, 300, 1_000_000_000) is True


def test_verify_compares_leading_zero_codes():
    assert verify(RFC6238_SECRET, 5924, 30, 1234567890) is True
    assert format_code(5924) == "005924"


@pytest.mark.parametrize("code", [-1, 10 ** OTP_DIGITS, "287082", None, True, 287082.0])
def test_verify_rejects_out_of_range_or_non_integer_codes(code):
    assert verify(RFC6238_SECRET, code, 30, 59) is False


def test_verify_rejects_wrong_code():
    code = generate("S1", 300, 1_000_000_000)
    assert verify("S1", (code + 1) % 10 ** OTP_DIGITS, 300, 1_000_000_000) is False


@pytest.mark.parametrize("period", [0, -30, 1.5, None])
def test_generate_rejects_invalid_period(period):
    with pytest.raises(ValueError):
        generate("S1", period, 1_000_000_000)


@pytest.mark.parametrize("timestamp", [-1, 1.5, None])
def test_generate_rejects_invalid_timestamp(timestamp):
    with pytest.raises(ValueError):
        generate("S1", 300, timestamp)


def test_empty_secret_is_a_generation_failure():
    with pytest.raises(CodeGenerationError):
        generate("", 300, 1_000_000_000)


def test_unencodable_secret_is_a_generation_failure():
    with pytest.raises(CodeGenerationError):
        generate("\ud800", 300, 1_000_000_000)


def test_non_string_secret_is_a_generation_failure():
    with pytest.raises(CodeGenerationError):
        generate(12345, 300, 1_000_000_000)


def test_seconds_remaining():
    assert seconds_remaining(300, 999_999_900) == 300
    assert seconds_remaining(300, 1_000_000_000) == 200
    assert seconds_remaining(300, 1_000_000_199) == 1


def test_time_window():
    assert time_window(300, 1_000_000_000) == 3_333_333
    assert engine.time_window(30, 59) == 1
