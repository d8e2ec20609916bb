from typing import Dict, List, Optional, Sequence, Set

import networkx as nx

from classes_de_elementos.osm_primitives import RelationMember
from classes_de_elementos.way_connection_type import Direction
from funcoes_utilitarias._oneway_direction import _oneway_direction


class RelationNodeMap:
    '''
    Índice de extremidades dos membros de uma relação.

    - Vértices: IDs dos nós que são extremidade de alguma way
    - Arestas : uma por way utilizável, com chave = índice do membro na lista
      (way fechada vira laço próprio)

    Observações
    -----------
    Membros que não são way, ou ways com menos de dois nós, não entram no grafo
    e ficam em 'not_sortable' (na ordem original).
    '''

    def __init__(self, members: Sequence[RelationMember]) -> None:
        self.members = list(members)
        self.graph: nx.MultiGraph = nx.MultiGraph()
        self.not_sortable: List[int] = []
        self.travel: Dict[int, Direction] = {}

        for idx, member in enumerate(self.members):
            way = member.way
            if way is None or not way.is_usable:
                self.not_sortable.append(idx)
                continue
            self.graph.add_edge(way.first_node, way.last_node, key=idx)
            self.travel[idx] = _oneway_direction(member)

    def components(self) -> List[List[int]]:
        '''
        Componentes conexos como listas ordenadas de índices de membros,
        na ordem do menor índice de cada componente.
        '''
        result: List[List[int]] = []
        for node_set in nx.connected_components(self.graph):
            result.append(sorted({key for _, _, key in self.graph.edges(node_set, keys=True)}))
        result.sort(key=lambda comp: comp[0])
        return result

    def component_nodes(self, component: Sequence[int]) -> Set[int]:
        nodes: Set[int] = set()
        for idx in component:
            way = self.members[idx].way
            nodes.update((way.first_node, way.last_node))
        return nodes

    def degree(self, node_id: int) -> int:
        '''Grau do vértice (laço próprio conta duas vezes).'''
        return self.graph.degree(node_id)

    def incident(self, node_id: int) -> List[int]:
        '''Índices (ordenados, sem repetição) das ways com extremidade em node_id.'''
        if node_id not in self.graph:
            return []
        return sorted({key for _, _, key in self.graph.edges(node_id, keys=True)})

    def endpoints(self, idx: int) -> Set[int]:
        way = self.members[idx].way
        return {way.first_node, way.last_node}

    def other_end(self, idx: int, node_id: int) -> Optional[int]:
        return self.members[idx].way.other_end(node_id)

    def is_oneway(self, idx: int) -> bool:
        '''Mão única efetiva (way fechada nunca é).'''
        return self.travel[idx] is not Direction.NONE and not self.members[idx].way.is_closed

    def oneway_reach(self, node_id: int, barrier: int, visited: Set[int]) -> Set[int]:
        '''
        Vértices alcançáveis a partir de node_id só por ways de mão única ainda
        não visitadas, ignorando o sentido e sem atravessar 'barrier'.
        '''
        edges = [
            (u, v, key) for u, v, key in self.graph.edges(keys=True)
            if key not in visited and self.is_oneway(key)
        ]
        cluster = self.graph.edge_subgraph(edges).copy()
        if barrier in cluster:
            cluster.remove_node(barrier)
        if node_id not in cluster:
            return {node_id}
        return nx.node_connected_component(cluster, node_id)

    def can_leave(self, idx: int, node_id: int) -> bool:
        '''True se a way pode ser percorrida saindo de node_id.'''
        way = self.members[idx].way
        travel = self.travel[idx]
        if travel is Direction.NONE or way.is_closed:
            return True
        entry = way.first_node if travel is Direction.FORWARD else way.last_node
        return entry == node_id

    def can_arrive(self, idx: int, node_id: int) -> bool:
        '''True se a way pode ser percorrida chegando em node_id.'''
        way = self.members[idx].way
        travel = self.travel[idx]
        if travel is Direction.NONE or way.is_closed:
            return True
        exit_node = way.last_node if travel is Direction.FORWARD else way.first_node
        return exit_node == node_id
