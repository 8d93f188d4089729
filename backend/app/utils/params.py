import re

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_int(value: str) -> int:
    """
    Converte um parâmetro de path/form em inteiro.

    Aceita apenas sinal opcional + dígitos decimais: nada de espaços,
    underscores ou string vazia (o int() do Python aceita os dois primeiros).
    Valores fora da faixa de 64 bits também são rejeitados.
    """
    if value is None or not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")

    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number
