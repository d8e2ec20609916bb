from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    '''
    Sentido em que uma way é percorrida para continuar a rota.

    Observações
    -----------
    - FORWARD  : na ordem armazenada dos nós
    - BACKWARD : na ordem inversa
    - NONE     : sem ligação (ou, para sentido de mão única, via bidirecional)
    '''
    NONE = "NONE"
    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"

    def reversed(self) -> "Direction":
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        if self is Direction.BACKWARD:
            return Direction.FORWARD
        return Direction.NONE


@dataclass
class WayConnectionType:
    '''
    Descritor de ligação de um membro da relação, alinhado ao índice do membro.

    Campos
    ------
    valid                        : False para membros que não são way
    direction                    : Direction em relação ao membro anterior
    link_prev / link_next        : ligado à way anterior / seguinte no percurso
    is_loop                      : faz parte de um ciclo detectado
    is_oneway_loop_forward_part  : arco de ida de um laço de mão única (FP)
    is_oneway_loop_backward_part : arco de volta de um laço de mão única (BP)
    is_oneway_head / _tail       : início / fim de um trecho de mão única (H / T)
    oneway_follows_previous/next : sentido obrigatório concorda com o vizinho
    '''
    valid: bool = True
    direction: Direction = Direction.NONE
    link_prev: bool = False
    link_next: bool = False
    is_loop: bool = False
    is_oneway_loop_forward_part: bool = False
    is_oneway_loop_backward_part: bool = False
    is_oneway_head: bool = False
    is_oneway_tail: bool = False
    oneway_follows_previous: bool = True
    oneway_follows_next: bool = True

    @classmethod
    def invalid(cls) -> "WayConnectionType":
        '''Descritor de membro sem conectividade (nó, relação aninhada).'''
        return cls(valid=False)

    def symbol(self) -> str:
        '''
        Representação compacta: "I" para inválido; caso contrário as flags
        (L, FP, BP, H, T) seguidas do nome do sentido, ex.: "LFPH FORWARD".
        '''
        if not self.valid:
            return "I"
        flags = ""
        if self.is_loop:
            flags += "L"
        if self.is_oneway_loop_forward_part:
            flags += "FP"
        if self.is_oneway_loop_backward_part:
            flags += "BP"
        if self.is_oneway_head:
            flags += "H"
        if self.is_oneway_tail:
            flags += "T"
        if flags:
            return f"{flags} {self.direction.value}"
        return self.direction.value
