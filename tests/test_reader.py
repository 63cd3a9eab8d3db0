import io
from pathlib import Path

import pytest

from clef_reader import (
    ArgumentError,
    LogEventLevel,
    LogEventReader,
    RequiredFieldMissing,
    StreamFormatError,
    read_events,
)

TS = "2016-03-04T05:06:07.123+10:00"


def _reader(*lines):
    return LogEventReader(io.StringIO("\n".join(lines) + "\n"))


def test_timestamp_only_event_uses_defaults():
    evt = LogEventReader.read_from_string('{"@t":"%s"}' % TS)
    assert evt.level == LogEventLevel.INFORMATION
    assert evt.message_template.tokens == ()
    assert evt.properties == ()
    assert evt.exception is None
    assert evt.trace_id is None and evt.span_id is None


def test_blank_lines_are_skipped():
    with _reader("", "   ", '{"@t":"%s","N":1}' % TS, "\t", "") as reader:
        evt = reader.try_read()
        assert evt.get_property("N").value == 1
        assert reader.line_number == 3
        assert reader.try_read() is None                      # trailing blanks are not an error


def test_end_of_stream_is_clean():
    with _reader('{"@t":"%s"}' % TS, '{"@t":"%s"}' % TS) as reader:
        assert reader.try_read() is not None
        assert reader.try_read() is not None
        assert reader.try_read() is None
        assert reader.try_read() is None                      # stays exhausted

    assert LogEventReader(io.StringIO("")).try_read() is None


def test_missing_timestamp_reports_line_number():
    reader = _reader('{"@t":"%s"}' % TS, "", '{"@mt":"No time"}')
    reader.try_read()
    with pytest.raises(RequiredFieldMissing) as info:
        reader.try_read()
    assert info.value.line_number == 3
    assert "@t" in str(info.value)


def test_invalid_json_line_and_caller_may_continue():
    reader = _reader('{"@t":"%s","A":1}' % TS, "{not json", '{"@t":"%s","A":3}' % TS)
    assert reader.try_read().get_property("A").value == 1
    with pytest.raises(StreamFormatError) as info:
        reader.try_read()
    assert info.value.line_number == 2
    assert reader.try_read().get_property("A").value == 3   # skipping is the caller's choice


@pytest.mark.parametrize("line", ["[1, 2]", '"text"', "42", "null"])
def test_non_object_line_is_stream_error(line):
    with pytest.raises(StreamFormatError):
        _reader(line).try_read()


def test_reader_is_iterable():
    reader = _reader('{"@t":"%s","I":1}' % TS, "", '{"@t":"%s","I":2}' % TS)
    ids = [evt.get_property("I").value for evt in reader]
    assert ids == [1, 2]
    assert list(reader) == []                                 # not restartable


def test_read_from_string_validation():
    with pytest.raises(StreamFormatError) as info:
        LogEventReader.read_from_string("{broken")
    assert info.value.line_number == 1

    with pytest.raises(StreamFormatError):
        LogEventReader.read_from_string("[]")

    with pytest.raises(ArgumentError):
        LogEventReader.read_from_string(None)


def test_read_from_object():
    evt = LogEventReader.read_from_object({"@t": TS, "@l": "Error"})
    assert evt.level == LogEventLevel.ERROR

    with pytest.raises(ArgumentError):
        LogEventReader.read_from_object(None)
    with pytest.raises(ArgumentError):
        LogEventReader.read_from_object([{"@t": TS}])

    with pytest.raises(RequiredFieldMissing) as info:
        LogEventReader.read_from_object({})
    assert info.value.line_number == 1


def test_constructor_rejects_none():
    with pytest.raises(ArgumentError):
        LogEventReader(None)


def test_close_is_idempotent():
    source = io.StringIO('{"@t":"%s"}\n' % TS)
    reader = LogEventReader(source)
    reader.close()
    reader.close()
    assert source.closed
    assert reader.try_read() is None


def test_source_released_when_decode_fails():
    source = io.StringIO("nope\n")
    with pytest.raises(StreamFormatError):
        with LogEventReader(source) as reader:
            reader.try_read()
    assert source.closed


def test_read_events_from_file(tmp_path: Path, write_ndjson):
    p = tmp_path / "events.clef"
    write_ndjson(p, [
        {"@t": "2024-01-01T00:00:00Z", "@mt": "Started {App}", "App": "api"},
        "",
        {"@t": "2024-01-01T00:00:01Z", "@l": "Warning", "@m": "Slow {request}"},
    ])

    events = list(read_events(p))

    assert len(events) == 2
    assert events[0].render_message() == 'Started "api"'
    assert events[1].level == LogEventLevel.WARNING
    assert events[1].render_message() == "Slow {request}"


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_numbers_are_stream_errors(constant):
    with pytest.raises(StreamFormatError) as info:
        LogEventReader.read_from_string('{"@t":"%s","X":%s}' % (TS, constant))
    assert info.value.line_number == 1


def test_deep_nesting_is_stream_error():
    reader = _reader('{"@t":"%s"}' % TS, "[" * 5000, '{"@t":"%s","X":%s}' % (TS, '{"a":' * 65 + "1" + "}" * 65))
    reader.try_read()
    with pytest.raises(StreamFormatError) as info:
        reader.try_read()
    assert info.value.line_number == 2
    with pytest.raises(StreamFormatError) as info:
        reader.try_read()
    assert info.value.line_number == 3


def test_moderate_nesting_is_accepted():
    nested = '{"a":' * 10 + "1" + "}" * 10
    evt = LogEventReader.read_from_string('{"@t":"%s","X":%s}' % (TS, nested))
    assert evt.get_property("X").get("a") is not None


def test_constructor_rejects_plain_string():
    with pytest.raises(ArgumentError):
        LogEventReader('{"@t":"%s"}' % TS)


def test_undecodable_bytes_are_replaced(tmp_path: Path):
    p = tmp_path / "bytes.clef"
    p.write_bytes(b'{"@t":"2024-01-01T00:00:00Z","Name":"caf\xff"}\n')
    (evt,) = list(read_events(p))
    assert evt.get_property("Name").value == "caf\ufffd"
