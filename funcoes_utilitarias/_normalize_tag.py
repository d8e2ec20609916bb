from typing import Optional


def _normalize_tag(value: Optional[str]) -> str:
    '''Normaliza o valor de uma tag para comparação: sem espaços nas
    bordas e em minúsculas. Valor ausente vira string vazia.

    Parâmetros
    ----------
    value : str | None (valor original da tag)

    Retorno
    ---------
    str : valor normalizado
    '''

    return (value or "").strip().lower()
