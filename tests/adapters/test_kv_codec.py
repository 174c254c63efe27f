from __future__ import annotations

import time

import pytest

from lib_kvlog.adapters.kv_codec import KeyValueCodec


@pytest.fixture
def codec() -> KeyValueCodec:
    return KeyValueCodec()


@pytest.mark.parametrize(
    "line, text, pairs",
    [
        ("plain message", "plain message", ()),
        ("copied files=3", "copied", (("files", "3"),)),
        ("a=1 b=2", "", (("a", "1"), ("b", "2"))),
        ('saved path="/tmp/a b" ok=true', "saved", (("path", "/tmp/a b"), ("ok", "true"))),
        ('quote msg="say \\"hi\\""', "quote", (("msg", 'say "hi"'),)),
        ("url target=http://x/?a=b", "url", (("target", "http://x/?a=b"),)),
        ("empty key=", "empty", (("key", ""),)),
        ("dup k=1 k=2", "dup", (("k", "1"), ("k", "2"))),
    ],
)
def test_parse_splits_text_and_trailing_pairs(codec: KeyValueCodec, line: str, text: str, pairs: tuple) -> None:
    record = codec.parse(line)
    assert record.text == text
    assert record.pairs == pairs


def test_pairs_must_trail_the_line(codec: KeyValueCodec) -> None:
    record = codec.parse("x=1 happened later y=2")
    assert record.text == "x=1 happened later"
    assert record.pairs == (("y", "2"),)


def test_broken_quotes_leave_text_untouched(codec: KeyValueCodec) -> None:
    record = codec.parse('odd value="unterminated')
    assert record.text == 'odd value="unterminated'
    assert record.pairs == ()


def test_header_stays_part_of_text(codec: KeyValueCodec) -> None:
    record = codec.parse("2024/01/02 15:04:05 started job=7")
    assert record.text == "2024/01/02 15:04:05 started"
    assert record.pairs == (("job", "7"),)


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("n", 42, "n=42"),
        ("f", 1.5, "f=1.5"),
        ("b", False, "b=false"),
        ("none", None, "none=null"),
        ("s", "", 's=""'),
        ("s", "two words", 's="two words"'),
        ("s", 'a"b', 's="a\\"b"'),
        ("s", "a=b", 's="a=b"'),
        ("s", "line\nbreak", 's="line\\nbreak"'),
        ("s", "héllo", "s=héllo"),
        ("raw", b"bytes", "raw=bytes"),
        ("odd key", 1, '"odd key"=1'),
    ],
)
def test_format_pair_quotes_only_when_needed(codec: KeyValueCodec, key: str, value: object, expected: str) -> None:
    assert codec.format_pair(key, value) == expected


def test_quoted_values_survive_a_round_trip(codec: KeyValueCodec) -> None:
    line = "note " + codec.format_pair("msg", 'she said "ok", then left')
    assert codec.parse(line).pairs == (("msg", 'she said "ok", then left'),)


def test_quoted_keys_survive_a_round_trip(codec: KeyValueCodec) -> None:
    line = "done " + codec.format_pair("odd key", 1) + " " + codec.format_pair('say "x"', "y")
    record = codec.parse(line)
    assert record.text == "done"
    assert record.pairs == (("odd key", "1"), ('say "x"', "y"))


def test_quoted_key_pair_is_never_split_when_wrapping(make_writer) -> None:
    writer, out = make_writer(12)
    writer.write('started the job "odd key"=1\n')
    assert out.getvalue() == 'started the\n    job\n    "odd key"=1\n'


def test_trailing_whitespace_after_pairs_is_dropped(codec: KeyValueCodec) -> None:
    record = codec.parse("copied files=3   ")
    assert record.text == "copied"
    assert record.pairs == (("files", "3"),)


@pytest.mark.parametrize("tail, pairs", [("tail", ()), ("tail k=v", (("k", "v"),))])
def test_long_lines_parse_in_linear_time(codec: KeyValueCodec, tail: str, pairs: tuple) -> None:
    line = "k=v " * 32000 + tail
    started = time.perf_counter()
    record = codec.parse(line)
    elapsed = time.perf_counter() - started

    assert record.pairs == pairs
    assert record.text == (line if not pairs else line[: -len(" k=v")])
    assert elapsed < 1.0
