from ocrref.validators import digit_runs, is_digit_string, mod10_check_digit


def test_mod10_check_digit_known_values() -> None:
    assert mod10_check_digit("123") == 0
    assert mod10_check_digit("12345678902") == 3
    assert mod10_check_digit("318872000") == 1


def test_mod10_check_digit_sums_digits_of_doubled_values() -> None:
    # 9 doubled is 18, which contributes 1 + 8.
    assert mod10_check_digit("9") == 1
    assert mod10_check_digit("0") == 0


def test_mod10_check_digit_handles_long_inputs() -> None:
    assert mod10_check_digit("1234567890123456789012") == mod10_check_digit(
        "0001234567890123456789012"
    )


def test_is_digit_string_is_ascii_only() -> None:
    assert is_digit_string("0123")
    assert not is_digit_string("")
    assert not is_digit_string("12a")
    assert not is_digit_string("١٢٣")


def test_digit_runs() -> None:
    runs = digit_runs("ab12 cd345;6")
    assert [run.group(0) for run in runs] == ["12", "345", "6"]
    assert runs[1].start() == 7
