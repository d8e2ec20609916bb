"""
Testes das classes de elementos OSM e do descritor de ligação.
"""

from classes_de_elementos.osm_primitives import OsmNode, Relation, RelationMember, Way
from classes_de_elementos.way_connection_type import Direction, WayConnectionType


class TestWay:
    """Extremidades, fechamento e inversão."""

    def test_endpoints(self):
        """Primeiro e último nó."""
        w = Way(1, [10, 11, 12])
        assert (w.first_node, w.last_node) == (10, 12)
        assert w.is_usable and not w.is_closed

    def test_closed_way(self):
        """Primeiro nó igual ao último."""
        assert Way(1, [10, 11, 12, 10]).is_closed

    def test_malformed_way(self):
        """Menos de dois nós: não utilizável e nunca fechada."""
        for nodes in ([], [10]):
            w = Way(1, nodes)
            assert not w.is_usable
            assert not w.is_closed

    def test_other_end(self):
        """Extremidade oposta; None para nó que não é extremidade."""
        w = Way(1, [10, 11, 12])
        assert w.other_end(10) == 12
        assert w.other_end(12) == 10
        assert w.other_end(11) is None

    def test_reversed_is_a_copy(self):
        """Inverter não altera a way original."""
        w = Way(1, [10, 11, 12], {"oneway": "yes"})
        r = w.reversed()
        assert r.node_ids == [12, 11, 10]
        assert r.tags == w.tags and r.tags is not w.tags
        assert w.node_ids == [10, 11, 12]


class TestRelationMember:
    """Tipo do membro referenciado."""

    def test_way_member(self):
        """Membro way expõe a way e as tags dela."""
        w = Way(1, [1, 2], {"name": "Rua A"})
        m = RelationMember("", w)
        assert m.is_way and not m.is_node and not m.is_relation
        assert m.way is w
        assert m.type_name == "way"
        assert m.tags["name"] == "Rua A"

    def test_node_and_relation_members(self):
        """Nó e relação não têm way."""
        node = RelationMember("stop", OsmNode(5))
        rel = RelationMember("", Relation(7))
        assert node.way is None and node.type_name == "node"
        assert rel.way is None and rel.type_name == "relation"


class TestDirection:
    """Inversão do sentido."""

    def test_reversed(self):
        """FORWARD e BACKWARD trocam; NONE continua NONE."""
        assert Direction.FORWARD.reversed() is Direction.BACKWARD
        assert Direction.BACKWARD.reversed() is Direction.FORWARD
        assert Direction.NONE.reversed() is Direction.NONE


class TestWayConnectionTypeSymbol:
    """Representação compacta do descritor."""

    def test_invalid(self):
        """Membro que não é way vira 'I'."""
        assert WayConnectionType.invalid().symbol() == "I"

    def test_plain_direction(self):
        """Sem flags, só o sentido."""
        assert WayConnectionType(direction=Direction.BACKWARD).symbol() == "BACKWARD"
        assert WayConnectionType().symbol() == "NONE"

    def test_flags_order(self):
        """Flags na ordem L, FP, BP, H, T."""
        wct = WayConnectionType(
            direction=Direction.FORWARD,
            is_loop=True,
            is_oneway_loop_forward_part=True,
            is_oneway_head=True,
        )
        assert wct.symbol() == "LFPH FORWARD"
        tail = WayConnectionType(
            direction=Direction.BACKWARD,
            is_oneway_loop_backward_part=True,
            is_oneway_tail=True,
        )
        assert tail.symbol() == "BPT BACKWARD"

    def test_defaults(self):
        """Por padrão o descritor é válido e concorda com os vizinhos."""
        wct = WayConnectionType()
        assert wct.valid
        assert not wct.link_prev and not wct.link_next
        assert wct.oneway_follows_previous and wct.oneway_follows_next
