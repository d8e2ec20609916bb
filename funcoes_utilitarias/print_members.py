from typing import Sequence

from classes_de_elementos.osm_primitives import RelationMember
from constantes.constantes import NAME_TAG


def print_members(members: Sequence[RelationMember]) -> None:
    '''
    Imprime a sequência de membros, um por linha: posição, tipo/id, papel e nome.

    Parâmetros
    ----------
    members : membros na ordem a exibir
    '''

    for idx, member in enumerate(members):
        name = member.tags.get(NAME_TAG, "")
        print(f"{idx:>4} | {member.type_name} {member.member.id} | role=\"{member.role}\" | name=\"{name}\"")
    print(f"Total de membros: {len(members)}")
