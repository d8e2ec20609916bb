from classes_de_elementos.osm_primitives import Relation
from funcoes_utilitarias.print_members import print_members
from osmgraph.member_sequencer import MemberSequencer


def cli_sort(relation: Relation) -> None:
    '''
    Ordena os membros de uma relação por conectividade e imprime a nova ordem.

    Parâmetros
    ----------
    relation : Relation

    Retorno
    -------
    None
    '''

    print_members(MemberSequencer().sequence(relation.members))
