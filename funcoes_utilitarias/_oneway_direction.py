from typing import Dict

from classes_de_elementos.osm_primitives import RelationMember
from classes_de_elementos.way_connection_type import Direction
from constantes.constantes import (
    ONEWAY_BACKWARD_VALUES,
    ONEWAY_FORWARD_VALUES,
    ROLE_BACKWARD,
    ROLE_FORWARD,
)
from ._normalize_tag import _normalize_tag


def _oneway_from_tags(tags: Dict[str, str]) -> Direction:
    '''
    Interpreta a tag 'oneway' de uma way.

    Retorno
    -------
    Direction : FORWARD para yes/true/1, BACKWARD para -1/reverse e
                NONE (bidirecional) para no/false/0, ausente ou desconhecido
    '''

    oneway = _normalize_tag(tags.get("oneway"))
    if oneway in ONEWAY_FORWARD_VALUES:
        return Direction.FORWARD
    if oneway in ONEWAY_BACKWARD_VALUES:
        return Direction.BACKWARD
    return Direction.NONE


def _oneway_direction(member: RelationMember) -> Direction:
    '''
    Sentido de percurso efetivo de um membro da relação.

    Parâmetros
    ----------
    member : RelationMember

    Retorno
    -------
    Direction : FORWARD (ordem armazenada), BACKWARD (ordem inversa) ou NONE
                (bidirecional / não é way)

    Observações
    -----------
    - O papel 'forward'/'backward' tem prioridade sobre a tag 'oneway'.
    '''

    if not member.is_way:
        return Direction.NONE
    role = _normalize_tag(member.role)
    if role == ROLE_FORWARD:
        return Direction.FORWARD
    if role == ROLE_BACKWARD:
        return Direction.BACKWARD
    return _oneway_from_tags(member.way.tags)
