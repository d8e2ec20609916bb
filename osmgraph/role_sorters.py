from typing import Callable, List, Sequence, Tuple

from classes_de_elementos.osm_primitives import RelationMember
from constantes.constantes import (
    FROM_VIA_TO_ROLES,
    HOUSE_ROLES,
    HOUSENUMBER_TAG,
    STOP_PLATFORM_PREFIXES,
    STREET_ROLES,
)
from funcoes_utilitarias._alphanum_key import _alphanum_key
from funcoes_utilitarias._normalize_tag import _normalize_tag

# Nomes dos grupos, na ordem em que aparecem no resultado
STREET_GROUP = "street"
HOUSE_GROUP = "house"
STOP_PLATFORM_GROUP = "stop_platform"
FROM_VIA_TO_GROUP = "from_via_to"


def _is_street(member: RelationMember) -> bool:
    return member.is_way and _normalize_tag(member.role) in STREET_ROLES


def _is_house(member: RelationMember) -> bool:
    return _normalize_tag(member.role) in HOUSE_ROLES


def _is_stop_or_platform(member: RelationMember) -> bool:
    return _normalize_tag(member.role).startswith(STOP_PLATFORM_PREFIXES)


def _is_from_via_to(member: RelationMember) -> bool:
    return _normalize_tag(member.role) in FROM_VIA_TO_ROLES


ROLE_GROUPS: List[Tuple[str, Callable[[RelationMember], bool]]] = [
    (STREET_GROUP, _is_street),
    (HOUSE_GROUP, _is_house),
    (STOP_PLATFORM_GROUP, _is_stop_or_platform),
    (FROM_VIA_TO_GROUP, _is_from_via_to),
]


def split_by_role(members: Sequence[RelationMember]) -> Tuple[List[Tuple[str, List[int]]], List[int]]:
    '''
    Separa os índices dos membros em grupos por papel. Cada membro vai para o
    primeiro grupo que o aceita; os demais ficam para a ordenação por
    conectividade.

    Parâmetros
    ----------
    members : sequência de RelationMember

    Retorno
    -------
    (grupos, restantes), onde:
      grupos    : [(nome_do_grupo, índices)] só com grupos não vazios, na ordem
                  de ROLE_GROUPS; casas e from/via/to já vêm ordenados
      restantes : índices sem grupo, na ordem original
    '''

    grouped = {name: [] for name, _ in ROLE_GROUPS}
    remaining: List[int] = []
    for idx, member in enumerate(members):
        for name, accepts in ROLE_GROUPS:
            if accepts(member):
                grouped[name].append(idx)
                break
        else:
            remaining.append(idx)

    grouped[HOUSE_GROUP] = sort_houses(members, grouped[HOUSE_GROUP])
    grouped[FROM_VIA_TO_GROUP] = sort_from_via_to(members, grouped[FROM_VIA_TO_GROUP])
    groups = [(name, grouped[name]) for name, _ in ROLE_GROUPS if grouped[name]]
    return groups, remaining


def sort_houses(members: Sequence[RelationMember], indices: List[int]) -> List[int]:
    '''
    Ordena casas/endereços por 'addr:housenumber' em ordem natural; membros sem
    número vão para o fim, mantendo a ordem original (ordenação estável).
    '''
    def key(idx: int):
        number = members[idx].tags.get(HOUSENUMBER_TAG)
        if not number:
            return (1, ())
        return (0, _alphanum_key(number))

    return sorted(indices, key=key)


def sort_from_via_to(members: Sequence[RelationMember], indices: List[int]) -> List[int]:
    '''Ordena os membros de uma restrição na sequência from, via, to.'''
    return sorted(indices, key=lambda idx: FROM_VIA_TO_ROLES.index(_normalize_tag(members[idx].role)))
