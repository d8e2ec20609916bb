import logging
from typing import List, Optional, Sequence

from classes_de_elementos.osm_primitives import RelationMember, Way
from classes_de_elementos.way_connection_type import Direction, WayConnectionType
from funcoes_utilitarias._oneway_direction import _oneway_direction

NONE = Direction.NONE
FORWARD = Direction.FORWARD
BACKWARD = Direction.BACKWARD


class ConnectionAnalyzer:
    '''
    Calcula, para cada membro de uma relação, como ele se liga aos vizinhos
    na ordem atual: sentido, participação em laço e coerência de mão única.

    Observações
    -----------
    - Função pura: não altera membros nem ways, não guarda estado entre chamadas.
    - Membros que não são way recebem descritor inválido e são transparentes:
      não interrompem a ligação entre as ways ao seu redor.
    '''

    def analyze(self, members: Sequence[RelationMember]) -> List[WayConnectionType]:
        '''
        Parâmetros
        ----------
        members : sequência ordenada de RelationMember

        Retorno
        -------
        list[WayConnectionType] : um descritor por membro, no mesmo índice
        '''

        result = [WayConnectionType.invalid() for _ in members]
        positions = [idx for idx, member in enumerate(members) if member.is_way]
        if not positions:
            return result

        ways = [members[idx].way for idx in positions]
        travel = [_oneway_direction(members[idx]) for idx in positions]
        walk = _ConnectionWalk(ways, travel)
        for pos, wct in zip(positions, walk.run()):
            result[pos] = wct

        logging.debug("Ligações calculadas: %d membros, %d ways", len(result), len(ways))
        return result


class _ConnectionWalk:
    '''
    Percurso único sobre as ways (já sem os membros não-way), acumulando o
    estado da cadeia:

    - first_group_idx   : início do grupo de ways ligadas em andamento
    - last_forward_way  : última way do arco de ida de mão única
    - last_backward_way : última way do arco de volta de mão única
    - oneway_beginning  : arco de volta ainda não encontrado

    None em last_*_way significa "fora de trecho de mão única"; -1 indica que o
    trecho começa antes da primeira way.
    '''

    def __init__(self, ways: List[Way], travel: List[Direction]) -> None:
        self.ways = ways
        self.travel = travel
        self.con: List[WayConnectionType] = []
        self.first_group_idx = 0
        self.last_forward_way: Optional[int] = None
        self.last_backward_way: Optional[int] = None
        self.oneway_beginning = False

    def run(self) -> List[WayConnectionType]:
        for i in range(len(self.ways)):
            wct = self._next_connection(i)
            if i > 0:
                self.con[i - 1].link_next = wct.link_prev
            self.con.append(wct)
            if not wct.link_prev:
                if i > 0:
                    self._make_loop_if_needed(i - 1)
                self.first_group_idx = i
        self._make_loop_if_needed(len(self.ways) - 1)
        self._mark_oneway_follows()
        return self.con

    # ------------------------------------------------------------------
    # Passo do percurso
    # ------------------------------------------------------------------
    def _next_connection(self, i: int) -> WayConnectionType:
        way = self.ways[i]
        wct = WayConnectionType()
        if not way.is_usable:
            self.last_forward_way = None
            self.last_backward_way = None
            self.oneway_beginning = False
            return wct

        last = self.con[i - 1] if i > 0 else None
        wct.link_prev = last is not None and self.ways[i - 1].is_usable
        oneway = self._is_oneway(i)

        if oneway:
            if last is not None and last.is_oneway_tail:
                wct.is_oneway_head = True
            if self.last_forward_way is None and self.last_backward_way is None:
                # início de um novo trecho de mão única
                wct.is_oneway_head = True
                self.last_forward_way = i - 1
                self.last_backward_way = i - 1
                self.oneway_beginning = True

        if wct.link_prev:
            if self.last_forward_way is not None and self.last_backward_way is not None:
                self._determine_oneway_connection(i, wct, oneway)
            if not oneway:
                wct.direction = self._determine_direction(i - 1, last.direction, i)
                wct.link_prev = wct.direction is not NONE

        if not wct.link_prev:
            wct.direction = self._determine_direction_of_first(i)
            if oneway:
                wct.is_oneway_loop_forward_part = True
                self.last_forward_way = i
        return wct

    def _determine_oneway_connection(self, i: int, wct: WayConnectionType, oneway: bool) -> None:
        '''
        Tenta ligar a way i ao arco de ida (a partir de last_forward_way) e ao
        arco de volta (a partir de last_backward_way, percorrido ao contrário).
        '''
        if not oneway:
            # via bidirecional encerra o trecho de mão única
            self.last_forward_way = None
            self.last_backward_way = None
            return

        dir_fw = self._determine_direction(self.last_forward_way, self._direction_of(self.last_forward_way), i)

        if self.oneway_beginning and self.last_backward_way < 0:
            first = self.first_group_idx
            dir_bw = self._determine_direction(first, self.con[first].direction.reversed(), i, reverse=True)
        else:
            dir_bw = self._determine_direction(
                self.last_backward_way, self._direction_of(self.last_backward_way), i, reverse=True
            )
        if self.oneway_beginning and dir_bw is not NONE:
            self.oneway_beginning = False

        if dir_bw is not NONE:
            wct.direction = dir_bw
            self.last_backward_way = i
            wct.is_oneway_loop_backward_part = True
        if dir_fw is not NONE:
            wct.direction = dir_fw
            self.last_forward_way = i
            wct.is_oneway_loop_forward_part = True

        if dir_fw is NONE and dir_bw is NONE:
            wct.link_prev = False
            wct.is_oneway_head = True
            self.last_forward_way = i - 1
            self.last_backward_way = i - 1
            self.oneway_beginning = True

        if dir_fw is not NONE and dir_bw is not NONE:
            # fim do laço de mão única: os dois arcos se encontram nesta way
            if i + 1 < len(self.ways) and self._determine_direction(i, dir_fw, i + 1) is not NONE:
                wct.is_oneway_loop_backward_part = False
                wct.direction = dir_fw
            else:
                wct.is_oneway_loop_forward_part = False
                wct.direction = dir_bw
            wct.is_oneway_tail = True

    def _make_loop_if_needed(self, i: int) -> None:
        '''Marca is_loop no grupo [first_group_idx, i] se ele volta ao início.'''
        if i < 0:
            return
        first = self.first_group_idx
        if i == first:
            loop = self._determine_direction(i, FORWARD, i) is FORWARD
        else:
            back = self._determine_direction(i, self.con[i].direction, first)
            loop = back is not NONE and back is self.con[first].direction
        if loop:
            for j in range(first, i + 1):
                self.con[j].is_loop = True

    # ------------------------------------------------------------------
    # Encaixe entre ways
    # ------------------------------------------------------------------
    def _is_oneway(self, k: int) -> bool:
        way = self.ways[k]
        return way.is_usable and not way.is_closed and self.travel[k] is not NONE

    def _direction_of(self, k: Optional[int]) -> Direction:
        if k is None or k < 0:
            return NONE
        return self.con[k].direction

    def _determine_direction_of_first(self, i: int) -> Direction:
        '''Sentido da primeira way de um grupo: adivinhado pelo encaixe na seguinte.'''
        way = self.ways[i]
        if not way.is_usable:
            return NONE
        if way.is_closed:
            return FORWARD
        if self._is_oneway(i):
            return self.travel[i]
        if self._determine_direction(i, FORWARD, i + 1) is not NONE:
            return FORWARD
        if self._determine_direction(i, BACKWARD, i + 1) is not NONE:
            return BACKWARD
        return NONE

    def _determine_direction(self, ref: Optional[int], ref_direction: Direction, k: int,
                             reverse: bool = False) -> Direction:
        '''
        Sentido com que a way k se encaixa na way de referência 'ref', percorrida
        em 'ref_direction'. Com reverse=True procura o encaixe pelo fim do
        percurso de mão única (arco de volta).

        Retorno
        -------
        Direction : NONE se não houver encaixe
        '''
        if ref is None or ref < 0 or k >= len(self.ways) or ref_direction is NONE:
            return NONE
        ref_way, way = self.ways[ref], self.ways[k]
        if not (ref_way.is_usable and way.is_usable):
            return NONE

        if ref_way.is_closed:
            ref_nodes = ref_way.node_ids
        elif ref_direction is FORWARD:
            ref_nodes = [ref_way.last_node]
        else:
            ref_nodes = [ref_way.first_node]

        oneway = self._is_oneway(k)
        for node_id in ref_nodes:
            if way.is_closed:
                if node_id in way.node_ids:
                    return FORWARD
            elif oneway:
                travel = self.travel[k]
                entry = way.first_node if travel is FORWARD else way.last_node
                exit_node = way.last_node if travel is FORWARD else way.first_node
                if not reverse and node_id == entry:
                    return travel
                if reverse and node_id == exit_node:
                    return travel.reversed()
            else:
                if node_id == way.first_node:
                    return FORWARD
                if node_id == way.last_node:
                    return BACKWARD
        return NONE

    # ------------------------------------------------------------------
    # Coerência de mão única entre vizinhos
    # ------------------------------------------------------------------
    def _mark_oneway_follows(self) -> None:
        '''
        Para cada par de ways consecutivas que compartilham extremidade,
        verifica se o sentido obrigatório concorda com o vizinho. Os dois lados
        são calculados de forma independente; via bidirecional concorda sempre.
        '''
        for i in range(1, len(self.ways)):
            prev_way, way = self.ways[i - 1], self.ways[i]
            if not (prev_way.is_usable and way.is_usable):
                continue
            prev_oneway, oneway = self._is_oneway(i - 1), self._is_oneway(i)
            if not (prev_oneway or oneway):
                continue
            prev_ends = {prev_way.first_node, prev_way.last_node}
            ends = {way.first_node, way.last_node}
            if not prev_ends & ends:
                continue

            if prev_oneway and oneway:
                follows = (self._entry(i) == self._exit(i - 1)
                           or self._exit(i) == self._entry(i - 1))
                self.con[i].oneway_follows_previous = follows
                self.con[i - 1].oneway_follows_next = follows
            elif oneway:
                self.con[i].oneway_follows_previous = self._entry(i) in prev_ends
            else:
                self.con[i - 1].oneway_follows_next = self._exit(i - 1) in ends

    def _entry(self, k: int) -> int:
        way = self.ways[k]
        return way.first_node if self.travel[k] is FORWARD else way.last_node

    def _exit(self, k: int) -> int:
        way = self.ways[k]
        return way.last_node if self.travel[k] is FORWARD else way.first_node
