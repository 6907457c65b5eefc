# -*- coding: utf-8 -*-
import pytest
from objmesh.loader.tokenizer import tokenize
from objmesh.loader.records import (
    PositionRecord, NormalRecord, FaceRecord, RECORD_TYPES,
    parse_position, parse_normal, parse_face, parse_record,
)
from objmesh.loader.errors import InvalidFieldCount, MalformedNumber


def _args(line):
    tokens = tokenize(line)
    return len(tokens) - 1, tokens


# ----------------------------------------------------------------------
# v
# ----------------------------------------------------------------------
def test_position_w_defaults_to_one():
    rec = parse_position(*_args("v 0 0 0"))
    assert list(rec) == [0.0, 0.0, 0.0, 1.0]
    assert rec.w == 1.0
    assert rec.color is None


def test_position_explicit_w():
    rec = parse_position(*_args("v 1 2 3 0.5"))
    assert rec.values == (1.0, 2.0, 3.0, 0.5)


def test_position_color_kept_when_enabled():
    rec = parse_position(*_args("v 0 0 0 1 0.5 0 0"), load_color_data=True)
    assert list(rec) == [0.0, 0.0, 0.0, 1.0, 0.5, 0.0, 0.0]


def test_position_color_dropped_when_disabled():
    rec = parse_position(*_args("v 0 0 0 1 0.5 0 0"), load_color_data=False)
    assert list(rec) == [0.0, 0.0, 0.0, 1.0]


def test_position_six_fields_with_color():
    rec = parse_position(*_args("v 1 2 3 0.1 0.2 0.3"), load_color_data=True)
    assert rec.w == 1.0
    assert rec.color == pytest.approx((0.1, 0.2, 0.3))
    assert len(rec) == 7


def test_position_color_enabled_without_color_fields():
    rec = parse_position(*_args("v 1 2 3"), load_color_data=True)
    assert len(rec) == 4
    assert rec.color is None


def test_position_discarded_color_is_still_validated():
    with pytest.raises(MalformedNumber) as info:
        parse_position(*_args("v 0 0 0 1 red 0 0"), load_color_data=False)
    assert info.value.token == "red"


@pytest.mark.parametrize("line", ["v", "v 1", "v 1 2", "v 1 2 3 4 5", "v 1 2 3 4 5 6 7 8"])
def test_position_invalid_field_count(line):
    with pytest.raises(InvalidFieldCount) as info:
        parse_position(*_args(line))
    assert info.value.keyword == "v"
    assert "three, four, six or seven" in str(info.value)


# ----------------------------------------------------------------------
# vn
# ----------------------------------------------------------------------
def test_normal():
    rec = parse_normal(*_args("vn 0 0 1"))
    assert isinstance(rec, NormalRecord)
    assert list(rec) == [0.0, 0.0, 1.0]
    assert (rec.x, rec.y, rec.z) == (0.0, 0.0, 1.0)


@pytest.mark.parametrize("line", ["vn 0 0", "vn 0 0 1 0"])
def test_normal_invalid_field_count(line):
    with pytest.raises(InvalidFieldCount) as info:
        parse_normal(*_args(line))
    assert info.value.expected == "three values"


# ----------------------------------------------------------------------
# f
# ----------------------------------------------------------------------
def test_face_is_zero_based():
    rec = parse_face(*_args("f 1 2 3"))
    assert isinstance(rec, FaceRecord)
    assert rec.indices == (0, 1, 2)


@pytest.mark.parametrize("line", ["f 1 2", "f 1 2 3 4"])
def test_face_invalid_field_count(line):
    with pytest.raises(InvalidFieldCount) as info:
        parse_face(*_args(line))
    assert info.value.found == len(line.split()) - 1


def test_face_rejects_slash_syntax():
    with pytest.raises(MalformedNumber) as info:
        parse_face(*_args("f 1//1 2//2 3//3"))
    assert info.value.token == "1//1"


# ----------------------------------------------------------------------
# таблица ключевых слов
# ----------------------------------------------------------------------
def test_record_table_counts():
    assert RECORD_TYPES["v"].counts == (3, 4, 6, 7)
    assert RECORD_TYPES["vn"].counts == (3,)
    assert RECORD_TYPES["f"].counts == (3,)


def test_parse_record_dispatch():
    assert isinstance(parse_record(tokenize("v 1 2 3")), PositionRecord)
    assert isinstance(parse_record(tokenize("vn 1 0 0")), NormalRecord)
    assert isinstance(parse_record(tokenize("f 3 2 1")), FaceRecord)


def test_parse_record_unknown_keyword():
    assert parse_record(tokenize("vt 0.5 0.5")) is None
    assert parse_record(tokenize("usemtl stone")) is None


def test_records_are_immutable_and_comparable():
    a = parse_normal(*_args("vn 0 1 0"))
    b = parse_normal(*_args("vn 0 1 0"))
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.foo = 1
