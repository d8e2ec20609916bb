from pathlib import Path
from typing import Sequence

import pandas as pd

from classes_de_elementos.osm_primitives import RelationMember
from classes_de_elementos.way_connection_type import WayConnectionType
from constantes.constantes import NAME_TAG

COLUMNS = [
    "index", "type", "id", "role", "name", "symbol", "direction",
    "loop", "oneway_follows_previous", "oneway_follows_next",
]


def connections_table(members: Sequence[RelationMember],
                      connections: Sequence[WayConnectionType]) -> pd.DataFrame:
    '''
    Monta a tabela de ligações (uma linha por membro) para exibição/exportação.

    Parâmetros
    ----------
    members     : membros na ordem analisada
    connections : descritores alinhados aos membros

    Retorno
    -------
    pd.DataFrame : colunas em COLUMNS
    '''

    if len(members) != len(connections):
        raise ValueError(
            f"Membros ({len(members)}) e descritores ({len(connections)}) desalinhados"
        )

    rows = []
    for idx, (member, wct) in enumerate(zip(members, connections)):
        rows.append({
            "index": idx,
            "type": member.type_name,
            "id": member.member.id,
            "role": member.role,
            "name": member.tags.get(NAME_TAG, ""),
            "symbol": wct.symbol(),
            "direction": wct.direction.value,
            "loop": wct.is_loop,
            "oneway_follows_previous": wct.oneway_follows_previous,
            "oneway_follows_next": wct.oneway_follows_next,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def write_connections_csv(table: pd.DataFrame, csv_path: Path) -> None:
    '''Grava a tabela de ligações em CSV (UTF-8, sem índice do pandas).'''
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(csv_path, index=False, encoding="utf-8")
