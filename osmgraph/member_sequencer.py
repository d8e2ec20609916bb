import logging
from collections import deque
from typing import Generator, Iterator, List, Sequence, Set, Tuple

from classes_de_elementos.osm_primitives import RelationMember
from .relation_node_map import RelationNodeMap
from .role_sorters import STREET_GROUP, split_by_role

PATH = "path"
CYCLE = "cycle"
BRANCHED = "branched"


class MemberSequencer:
    '''
    Reordena os membros de uma relação para maximizar a continuidade física:
    ways ligadas ficam em sequência e cada sequência forma um caminho contínuo.

    Observações
    -----------
    - Heurística (não é solução ótima): desempate pela ordem original e
      preferência por extremidades de grau 1.
    - Trechos de mão única (pista dupla, laço de retorno) saem como arco de
      ida seguido do arco de volta, este percorrido ao contrário.
    - O resultado é sempre uma permutação da entrada.
    - Partes que a heurística não resolve mantêm a ordem original relativa.
    '''

    def sequence(self, members: Sequence[RelationMember]) -> List[RelationMember]:
        '''
        Parâmetros
        ----------
        members : sequência de RelationMember (em qualquer ordem)

        Retorno
        -------
        list[RelationMember] : os mesmos membros, reordenados
        '''

        members = list(members)
        groups, remaining = split_by_role(members)

        order: List[int] = []
        for name, indices in groups:
            if name == STREET_GROUP:
                indices = self.sort_by_connectivity(members, indices)
            logging.debug("Grupo por papel '%s': %d membros", name, len(indices))
            order.extend(indices)
        order.extend(self.sort_by_connectivity(members, remaining))
        return [members[idx] for idx in order]

    def sort_by_connectivity(self, members: Sequence[RelationMember], indices: Sequence[int]) -> List[int]:
        '''
        Ordena por conectividade os membros indicados por 'indices'.

        Retorno
        -------
        list[int] : os mesmos índices; componentes conexos em sequência e, ao
                    final, os membros não ordenáveis na ordem original
        '''
        indices = list(indices)
        node_map = RelationNodeMap([members[idx] for idx in indices])

        local_order: List[int] = []
        for component in node_map.components():
            local_order.extend(self._sort_component(node_map, component))
        local_order.extend(node_map.not_sortable)

        if node_map.not_sortable:
            logging.debug("%d membros sem conectividade ao final", len(node_map.not_sortable))
        return [indices[local] for local in local_order]

    # ------------------------------------------------------------------
    # Componentes
    # ------------------------------------------------------------------
    def _sort_component(self, node_map: RelationNodeMap, component: List[int]) -> List[int]:
        shape = self._component_shape(node_map, component)
        start, entry = self._pick_start(node_map, component, shape)
        logging.debug("Componente %s com %d ways, início no membro %d", shape, len(component), start)

        visited: Set[int] = {start}
        run = deque([start])
        run.extend(self._walk_forward(node_map, start, entry, visited))
        # o início não precisa ser a ponta do caminho: estende também para trás
        for idx in self._walk_backward(node_map, entry, visited):
            run.appendleft(idx)

        unresolved = [idx for idx in component if idx not in visited]
        if unresolved:
            logging.debug("Ramificação não resolvida: %d ways mantidas na ordem original", len(unresolved))
        return list(run) + unresolved

    @staticmethod
    def _component_shape(node_map: RelationNodeMap, component: List[int]) -> str:
        degrees = [node_map.degree(node_id) for node_id in node_map.component_nodes(component)]
        if any(degree > 2 for degree in degrees):
            return BRANCHED
        if all(degree == 2 for degree in degrees):
            return CYCLE
        return PATH

    @staticmethod
    def _pick_start(node_map: RelationNodeMap, component: List[int], shape: str) -> Tuple[int, int]:
        '''
        Escolhe a way inicial e o nó pelo qual o percurso entra nela.

        - caminho/ramificado: a way mais antiga que toca um vértice de grau 1,
          entrando por esse vértice
        - ciclo (ou ramificado sem ponta): a way mais antiga, entrando pelo
          primeiro nó
        '''
        if shape != CYCLE:
            for idx in component:
                way = node_map.members[idx].way
                for node_id in (way.first_node, way.last_node):
                    if node_map.degree(node_id) == 1:
                        return idx, node_id
        first_idx = component[0]
        return first_idx, node_map.members[first_idx].way.first_node

    # ------------------------------------------------------------------
    # Percurso guloso
    # ------------------------------------------------------------------
    def _walk_forward(self, node_map: RelationNodeMap, placed: int, node_id: int,
                      visited: Set[int]) -> Iterator[int]:
        '''
        Segue a partir da way 'placed' (que entrou por node_id) escolhendo, a
        cada vértice, uma way ainda não visitada. Uma way de mão única
        percorrida no seu sentido abre um laço de mão única (_oneway_loop).
        '''
        while True:
            next_node = node_map.other_end(placed, node_id)
            if node_map.is_oneway(placed) and node_map.can_leave(placed, node_id):
                next_node = yield from self._oneway_loop(node_map, node_id, next_node, visited)
            node_id = next_node

            candidates = [idx for idx in node_map.incident(node_id) if idx not in visited]
            if not candidates:
                return
            placed = self._choose_next(node_map, node_id, candidates, forward=True)
            visited.add(placed)
            yield placed

    def _walk_backward(self, node_map: RelationNodeMap, node_id: int,
                       visited: Set[int]) -> Iterator[int]:
        '''
        Anda no sentido contrário da rota a partir de node_id; as ways
        encontradas vão para a frente do resultado.
        '''
        while True:
            candidates = [idx for idx in node_map.incident(node_id) if idx not in visited]
            if not candidates:
                return
            chosen = self._choose_next(node_map, node_id, candidates, forward=False)
            visited.add(chosen)
            yield chosen
            node_id = node_map.other_end(chosen, node_id)

    def _oneway_loop(self, node_map: RelationNodeMap, entry: int, node_id: int,
                     visited: Set[int]) -> Generator[int, None, int]:
        '''
        Completa um laço de mão única cuja primeira way saiu de 'entry' e
        chegou em node_id.

        - Pista dupla (algum nó do laço tem via bidirecional): o arco de ida
          segue até o fim do laço; o de volta sai de 'entry' ao contrário até
          encontrar o arco de ida.
        - Laço de retorno (nenhuma saída bidirecional): o arco de ida é só a
          primeira way e o de volta percorre o resto do laço ao contrário.

        Retorno
        -------
        int : nó em que o percurso continua (fim do arco de ida)
        '''
        reach = node_map.oneway_reach(node_id, entry, visited)
        split = any(self._has_free_bidirectional(node_map, n, visited) for n in reach)

        arc_nodes = {node_id}
        while split and not self._end_of_loop(node_map, node_id, entry, visited):
            leaving = [
                idx for idx in node_map.incident(node_id)
                if idx not in visited and node_map.is_oneway(idx) and node_map.can_leave(idx, node_id)
            ]
            if not leaving:
                break
            chosen = leaving[0]
            visited.add(chosen)
            yield chosen
            node_id = node_map.other_end(chosen, node_id)
            arc_nodes.add(node_id)

        back = entry
        while back not in arc_nodes:
            arriving = [
                idx for idx in node_map.incident(back)
                if idx not in visited and node_map.is_oneway(idx) and node_map.can_arrive(idx, back)
            ]
            if not arriving:
                logging.debug("Arco de volta incompleto a partir do nó %s", entry)
                break
            chosen = arriving[0]
            visited.add(chosen)
            yield chosen
            back = node_map.other_end(chosen, back)
        return node_id

    @staticmethod
    def _has_free_bidirectional(node_map: RelationNodeMap, node_id: int, visited: Set[int]) -> bool:
        return any(idx not in visited and not node_map.is_oneway(idx) for idx in node_map.incident(node_id))

    def _end_of_loop(self, node_map: RelationNodeMap, node_id: int, entry: int, visited: Set[int]) -> bool:
        '''
        Fim do arco de ida: de volta à entrada, nó com via bidirecional livre
        ou com mais de uma mão única saindo.
        '''
        if node_id == entry or self._has_free_bidirectional(node_map, node_id, visited):
            return True
        leaving = [
            idx for idx in node_map.incident(node_id)
            if idx not in visited and node_map.is_oneway(idx) and node_map.can_leave(idx, node_id)
        ]
        return len(leaving) > 1

    @staticmethod
    def _choose_next(node_map: RelationNodeMap, node_id: int,
                     candidates: List[int], forward: bool) -> int:
        '''
        Preferência: (1) uma way cuja mão única permite seguir a partir de
        node_id; (2) a mais antiga na ordem original.
        '''
        def blocked(idx: int) -> bool:
            if forward:
                return not node_map.can_leave(idx, node_id)
            return not node_map.can_arrive(idx, node_id)

        return min(candidates, key=lambda idx: (blocked(idx), idx))
