from pathlib import Path

from classes_de_elementos.osm_primitives import Relation
from funcoes_utilitarias.connections_table import connections_table, write_connections_csv
from osmgraph.connection_analyzer import ConnectionAnalyzer
from osmgraph.member_sequencer import MemberSequencer


def cli_connections(relation: Relation, sorted_first: bool = False, csv_out: Path | None = None) -> None:
    '''
    Calcula as ligações dos membros de uma relação e imprime a tabela;
    opcionalmente ordena antes e grava o CSV.

    Parâmetros
    ----------
    relation     : Relation
    sorted_first : bool (aplica o MemberSequencer antes da análise)
    csv_out      : Path | None (CSV de saída)

    Retorno
    -------
    None
    '''

    members = relation.members
    if sorted_first:
        members = MemberSequencer().sequence(members)
    connections = ConnectionAnalyzer().analyze(members)
    table = connections_table(members, connections)
    if table.empty:
        print("[]")
    else:
        print(table.to_string(index=False))
    if csv_out is not None:
        write_connections_csv(table, csv_out)
