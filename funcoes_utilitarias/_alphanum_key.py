import re
from typing import Tuple

_CHUNK_RE = re.compile(r"(\d+)")


def _alphanum_key(text: str) -> Tuple[Tuple[int, int, str], ...]:
    '''
    Chave de ordenação "natural" (alfanumérica): "2" < "10" < "10a".

    Parâmetros
    ----------
    text : str (ex.: número de porta)

    Retorno
    -------
    tuple : pedaços (é_texto, valor_numérico, texto) comparáveis entre si
    '''

    key = []
    for chunk in _CHUNK_RE.split(text.strip().lower()):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((0, int(chunk), ""))
        else:
            key.append((1, 0, chunk))
    return tuple(key)
