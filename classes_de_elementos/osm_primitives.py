from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class OsmNode:
    '''Nó OSM. Para a análise de conectividade só a identidade (id) importa.'''
    id: int
    lat: Optional[float] = None
    lon: Optional[float] = None
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class Way:
    '''
    Way OSM: lista ordenada de IDs de nós + tags.

    Observações
    -----------
    - Extremidades: primeiro e último nó.
    - Fechada (laço próprio) quando primeiro == último.
    - Com menos de dois nós a way é considerada malformada (não utilizável).
    '''
    id: int
    node_ids: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def first_node(self) -> Optional[int]:
        return self.node_ids[0] if self.node_ids else None

    @property
    def last_node(self) -> Optional[int]:
        return self.node_ids[-1] if self.node_ids else None

    @property
    def is_usable(self) -> bool:
        return len(self.node_ids) >= 2

    @property
    def is_closed(self) -> bool:
        return self.is_usable and self.first_node == self.last_node

    def other_end(self, node_id: int) -> Optional[int]:
        '''
        Retorna a extremidade oposta a 'node_id' (a própria, se a way for fechada).
        '''
        if node_id == self.first_node:
            return self.last_node
        if node_id == self.last_node:
            return self.first_node
        return None

    def reversed(self) -> "Way":
        '''Cópia com a ordem dos nós invertida; a way original não é alterada.'''
        return Way(self.id, list(reversed(self.node_ids)), dict(self.tags))


@dataclass
class Relation:
    '''Relação OSM: membros ordenados com papéis + tags.'''
    id: int
    members: List["RelationMember"] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class RelationMember:
    '''Referência com papel (role) a exatamente um nó, way ou relação.'''
    role: str
    member: Union[OsmNode, Way, Relation]

    @property
    def is_way(self) -> bool:
        return isinstance(self.member, Way)

    @property
    def is_node(self) -> bool:
        return isinstance(self.member, OsmNode)

    @property
    def is_relation(self) -> bool:
        return isinstance(self.member, Relation)

    @property
    def way(self) -> Optional[Way]:
        return self.member if isinstance(self.member, Way) else None

    @property
    def type_name(self) -> str:
        if self.is_way:
            return "way"
        if self.is_node:
            return "node"
        return "relation"

    @property
    def tags(self) -> Dict[str, str]:
        return self.member.tags
