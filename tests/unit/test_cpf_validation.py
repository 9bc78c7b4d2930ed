import pytest

from sara_forms.domain.validation import format_cpf, is_valid_cpf
from sara_forms.domain.value_objects.cpf import CPF

VALID = ["52998224725", "11144477735", "12345678909"]


@pytest.mark.parametrize("value", VALID)
def test_valid_cpf_digits(value):
    assert is_valid_cpf(value)


def test_valid_cpf_with_punctuation_and_noise():
    assert is_valid_cpf("529.982.247-25")
    assert is_valid_cpf(" 529 982 247 25 ")
    assert is_valid_cpf("cpf: 123.456.789/09")


@pytest.mark.parametrize("digit", "0123456789")
def test_repeated_digits_rejected(digit):
    assert not is_valid_cpf(digit * 11)


def test_wrong_check_digits_rejected():
    assert not is_valid_cpf("52998224726")
    assert not is_valid_cpf("52998224735")


@pytest.mark.parametrize("value", ["", "5299822472", "529982247250", "529.982.247-2", "abc", "1" * 12])
def test_wrong_length_rejected(value):
    assert not is_valid_cpf(value)


@pytest.mark.parametrize("value", ["52998224725", "11144477735"])
def test_single_digit_mutation_is_rejected(value):
    mutations = [
        value[:i] + d + value[i + 1 :]
        for i in range(len(value))
        for d in "0123456789"
        if d != value[i]
    ]
    assert not any(is_valid_cpf(m) for m in mutations)


def test_non_string_input_is_false():
    assert is_valid_cpf(None) is False
    assert is_valid_cpf(52998224725) is False


def test_format_cpf():
    assert format_cpf("52998224725") == "529.982.247-25"
    assert format_cpf("529.982.247-25") == "529.982.247-25"


def test_format_cpf_short_returns_digits():
    assert format_cpf("123.45") == "12345"
    assert format_cpf("") == ""


def test_format_cpf_keeps_extra_digits():
    assert format_cpf("123456789012") == "123.456.789-012"


@pytest.mark.parametrize("value", VALID + ["52998224726"])
def test_validation_ignores_formatting(value):
    assert is_valid_cpf(format_cpf(value)) == is_valid_cpf(value)


def test_cpf_value_object():
    cpf = CPF("529.982.247-25")
    assert cpf == "52998224725"
    assert cpf.formatted == "529.982.247-25"


@pytest.mark.parametrize("value", ["00000000000", "52998224726", "123"])
def test_cpf_value_object_rejects_invalid(value):
    with pytest.raises(ValueError, match="CPF inválido"):
        CPF(value)


def test_non_ascii_digits_are_stripped():
    fullwidth = "５２９９８２２４７２５"
    assert not is_valid_cpf(fullwidth)
    assert format_cpf(fullwidth) == ""
    assert format_cpf("５２９.98224725") == "98224725"


def test_cpf_formatted_matches_format_cpf():
    assert CPF("52998224725").formatted == format_cpf("52998224725")
