import pytest

from zonestash import (
    ErrorKind,
    Result,
    ZoneNotFound,
)
from zonestash.errors import exception_by_kind


def test_success():
    result = Result.success('asset:1')
    assert result
    assert result.ok
    assert result.kind is None
    assert result.message is None
    assert result.unwrap() == 'asset:1'
    assert repr(result) == "<Result ok value='asset:1'>"


def test_failure():
    result = Result.failure(ZoneNotFound('sidebar'), value=False)
    assert not result
    assert result.value is False
    assert result.kind is ErrorKind.ZONE_NOT_FOUND
    assert result.message == "Assets zone 'sidebar' does not exist."
    assert repr(result) == '<Result ZONE_NOT_FOUND "Assets zone \'sidebar\' does not exist.">'

    with pytest.raises(ZoneNotFound) as e:
        result.unwrap()
    assert e.value.zone == 'sidebar'
    assert e.value.id is None


def test_ok_must_match_error():
    with pytest.raises(AssertionError):
        Result(True, error=ZoneNotFound('head'))

    with pytest.raises(AssertionError):
        Result(False)


def test_equality():
    assert Result.success(1) == Result.success(1)
    assert Result.success(1) != Result.success(2)
    assert Result.failure(ZoneNotFound('a')) == Result.failure(ZoneNotFound('b'))
    assert Result.success(1) != 1


def test_exception_by_kind():
    assert {kind: exception.__name__ for kind, exception in exception_by_kind.items()} == {
        ErrorKind.ZONE_NOT_FOUND: 'ZoneNotFound',
        ErrorKind.ASSET_NOT_FOUND: 'AssetNotFound',
        ErrorKind.ZONE_ALREADY_RENDERED: 'ZoneAlreadyRendered',
    }
