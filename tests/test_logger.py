from datetime import datetime

import pytest

from blocky.logger import (
    BLogger,
    LogLevel,
    format_function_name,
    format_message,
    level_to_string,
    make_timestamp,
)


def test_empty_filename_reports_error(capsys):
    logger = BLogger("", to_console=True)
    captured = capsys.readouterr()
    assert "Error opening log file." in captured.err
    line = logger.log(LogLevel.DEBUG, "TestFunc", "still logs")
    assert line.endswith("still logs")


def test_level_names():
    assert level_to_string(LogLevel.DEBUG) == "DEBUG"
    assert level_to_string(LogLevel.INFO) == "INFO "
    assert level_to_string(LogLevel.WARN) == "WARN "
    assert level_to_string(LogLevel.ERROR) == "ERROR"
    assert level_to_string("bogus") == "UNKNOWN"


@pytest.mark.parametrize(
    "signature, expected",
    [
        ("void TestBLoggerFunc(const std::string&)", "TestBLoggerFunc"),
        ("static void BloggerClass::FuncBloggerClass()", "BloggerClass   "),
        ("static void BloggerClass::_funcBloggerClass(const std::string&)", "BloggerClass   "),
        ("static void BLoggerTest::Test()", "BLoggerTest    "),
        ("TestFunc", "TestFunc       "),
        ("", " " * 15),
    ],
)
def test_function_name_formatting(signature, expected):
    assert format_function_name(signature) == expected


def test_long_names_are_not_truncated():
    name = "AVeryLongFunctionNameIndeed"
    assert format_function_name(name) == name


def test_format_message_variants():
    assert format_message("Program update: 3") == "Program update: 3"
    assert format_message(0.0) == "(0.000000)"
    assert format_message((0.0, 0.0)) == "(0.000000, 0.000000)"
    with pytest.raises(TypeError):
        format_message(object())


def test_timestamp_format():
    stamp = make_timestamp(datetime(2024, 11, 13, 9, 5, 7, 45000))
    assert stamp == "09:05:07.045"


def test_no_file_output_when_disabled(tmp_path):
    path = tmp_path / "log.txt"
    logger = BLogger(str(path), to_console=False, to_file=False)
    logger.log(LogLevel.INFO, "TestFunc", "hidden")
    logger.close()
    assert path.read_text(encoding="utf-8") == ""