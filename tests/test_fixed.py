import copy
import pickle

import pytest

from hexstr import FixedHexString, HexString, InvalidDigit, OddLength, WrongLength

MD5_EMPTY = 'd41d8cd98f00b204e9800998ecf8427e'


def test_parse_md5_and_compare_against_literals():
    u = FixedHexString[16].try_parse(MD5_EMPTY)
    assert u == MD5_EMPTY
    assert u == MD5_EMPTY.upper()
    assert MD5_EMPTY.upper() == u
    assert u.as_bytes() == bytes.fromhex(MD5_EMPTY)
    assert len(u) == 16


def test_parse_uppercase_formats_lowercase():
    u = FixedHexString[16].try_parse(MD5_EMPTY.upper())
    assert u.to_hex_string() == MD5_EMPTY
    assert str(u) == MD5_EMPTY
    assert u.to_upper() == MD5_EMPTY.upper()


def test_wrong_text_length():
    with pytest.raises(WrongLength) as exc:
        FixedHexString[1].try_parse('abcd')
    assert exc.value.expected == 2
    assert exc.value.actual == 4
    # odd input is a length mismatch for fixed types, not OddLength
    with pytest.raises(WrongLength):
        FixedHexString[16].try_parse(MD5_EMPTY[:-1])


def test_invalid_digit_in_final_pair():
    with pytest.raises(InvalidDigit) as exc:
        FixedHexString[16].try_parse(MD5_EMPTY[:-1] + 'g')
    assert exc.value.position == 31


def test_zz_is_invalid_digit():
    with pytest.raises(InvalidDigit):
        FixedHexString[1].try_parse('zz')


def test_from_bytes_checks_length():
    v = FixedHexString[2].from_bytes(b'\x01\xde')
    assert v == '01de'
    assert FixedHexString[2]([1, 0xde]) == v
    assert FixedHexString[2](bytearray(b'\x01\xde')) == v
    with pytest.raises(WrongLength) as exc:
        FixedHexString[2].from_bytes(b'\x01')
    assert (exc.value.expected, exc.value.actual) == (2, 1)


def test_from_bytes_rejects_text_and_ints():
    with pytest.raises(TypeError):
        FixedHexString[2].from_bytes('01de')  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        FixedHexString[2].from_bytes(2)  # type: ignore[arg-type]


def test_try_parse_rejects_non_text():
    with pytest.raises(TypeError):
        FixedHexString[2].try_parse(b'01de')  # type: ignore[arg-type]


def test_zero_length():
    z = FixedHexString[0].try_parse('')
    assert z == ''
    assert z.as_bytes() == b''


def test_class_is_cached_and_named():
    assert FixedHexString[16] is FixedHexString[16]
    assert FixedHexString[16] is not FixedHexString[32]
    assert FixedHexString[16].LENGTH == 16
    assert FixedHexString[16].__name__ == 'FixedHexString[16]'
    assert issubclass(FixedHexString[16], FixedHexString)


@pytest.mark.parametrize('bad,err', [(-1, ValueError), ('16', TypeError), (1.5, TypeError), (True, TypeError)])
def test_class_getitem_validates_length(bad, err):
    with pytest.raises(err):
        FixedHexString[bad]


def test_unparameterised_and_reparameterised():
    with pytest.raises(TypeError, match='length'):
        FixedHexString(b'')
    with pytest.raises(TypeError):
        FixedHexString[4][2]


def test_subclass_with_explicit_length():
    class Sha256(FixedHexString):
        LENGTH = 32

    h = Sha256.try_parse('ab' * 32)
    assert isinstance(h, Sha256)
    assert h == 'AB' * 32
    with pytest.raises(WrongLength):
        Sha256.try_parse('ab' * 16)


def test_strict_case_parsing():
    assert FixedHexString[2].try_parse_lower('abcd') == 'abcd'
    assert FixedHexString[2].try_parse_upper('ABCD') == 'abcd'
    with pytest.raises(InvalidDigit):
        FixedHexString[2].try_parse_lower('ABCD')
    with pytest.raises(InvalidDigit):
        FixedHexString[2].try_parse_upper('abcd')


def test_equality_and_hash():
    a = FixedHexString[2].try_parse('01de')
    b = FixedHexString[2].from_bytes(b'\x01\xde')
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a == b'\x01\xde'
    assert a != b'\x01\xdf'
    assert a != '01df'
    assert a != '01de00'
    assert a != 'zz'
    assert a != 0x01de
    assert a == HexString.try_parse('01DE')
    assert HexString.try_parse('01DE') == a


def test_equality_with_non_ascii_text():
    a = FixedHexString[1].try_parse('ab')
    assert a != 'ａｂ'


def test_immutable():
    a = FixedHexString[1].try_parse('ab')
    with pytest.raises(AttributeError):
        a._data = b'\x00'  # type: ignore[misc]
    with pytest.raises(AttributeError):
        a.extra = 1  # type: ignore[attr-defined]


def test_format_and_repr():
    a = FixedHexString[2].try_parse('01DE')
    assert f'{a}' == '01de'
    assert f'{a:x}' == '01de'
    assert f'{a:X}' == '01DE'
    assert f'{a:>6}' == '  01de'
    assert repr(a) == "FixedHexString[2]('01de')"
    assert str(a.as_upper()) == '01DE'
    assert a.as_lower() == '01de'


def test_sequence_protocol():
    a = FixedHexString[3].from_bytes(b'\x01\x02\x03')
    assert list(a) == [1, 2, 3]
    assert a[0] == 1
    assert a[1:] == b'\x02\x03'
    assert bytes(a) == b'\x01\x02\x03'


def test_conversion_from_variable():
    v = HexString.try_parse('01de')
    assert FixedHexString[2].from_hex_string(v) == v
    with pytest.raises(WrongLength):
        FixedHexString[3].from_hex_string(v)


def test_pickle_and_copy():
    a = FixedHexString[16].try_parse(MD5_EMPTY)
    b = pickle.loads(pickle.dumps(a))
    assert b == a
    assert type(b) is FixedHexString[16]
    assert copy.deepcopy(a) == a


def test_random_has_exact_length_lowercase():
    for _ in range(20):
        r = FixedHexString[16].random()
        text = r.to_hex_string()
        assert len(text) == 32
        assert text == text.lower()
        assert all(c in '0123456789abcdef' for c in text)


def test_odd_length_never_raised_for_fixed():
    with pytest.raises(WrongLength):
        FixedHexString[2].try_parse('abc')
    assert not issubclass(WrongLength, OddLength)
