from __future__ import annotations

import pytest

from lib_kvlog.domain.records import LogRecord, RenderedMessage, display_width


def _format(key: str, value: object) -> str:
    return f"{key}={value}"


def test_display_width_counts_code_points() -> None:
    assert display_width("") == 0
    assert display_width("naïve") == 5
    assert display_width("日本") == 2


def test_log_record_keeps_pair_order_and_duplicates() -> None:
    record = LogRecord("msg", [("b", 1), ("a", 2), ("b", 3)])
    assert record.pairs == (("b", 1), ("a", 2), ("b", 3))


def test_log_record_from_flat_list() -> None:
    record = LogRecord.from_flat("msg", ["a", 1, "b", 2])
    assert record.pairs == (("a", 1), ("b", 2))


def test_log_record_from_flat_rejects_odd_length() -> None:
    with pytest.raises(ValueError, match="odd length"):
        LogRecord.from_flat("msg", ["a", 1, "b"])


@pytest.mark.parametrize(
    "pairs, error",
    [
        ([("a", 1, 2)], ValueError),
        ([("a",)], ValueError),
        (["ab"], TypeError),
        ([(1, "v")], TypeError),
        ([42], TypeError),
    ],
)
def test_log_record_rejects_malformed_pairs(pairs: list[object], error: type[Exception]) -> None:
    with pytest.raises(error):
        LogRecord("msg", pairs)  # type: ignore[arg-type]


def test_log_record_rejects_non_text_message() -> None:
    with pytest.raises(TypeError):
        LogRecord(b"bytes")  # type: ignore[arg-type]


def test_measure_computes_text_pair_and_total_widths() -> None:
    message = RenderedMessage.measure("héllo", [("k", "v"), ("key", "value")], _format)

    assert message.text_width == 5
    assert [(pair.text, pair.width) for pair in message.pairs] == [("k=v", 3), ("key=value", 9)]
    assert message.total_width == 5 + (3 + 1) + (9 + 1)


def test_measure_without_pairs() -> None:
    message = RenderedMessage.measure("", [], _format)
    assert message.text_width == 0
    assert message.total_width == 0
    assert message.pairs == ()
