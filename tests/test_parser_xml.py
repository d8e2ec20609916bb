"""
Testes da leitura de relações a partir de XML OSM.
"""

import pytest

from classes_de_elementos.osm_primitives import OsmNode, Relation, Way
from osmgraph.parser_xml import parse_osm, parse_relations


class TestParseOsm:
    """Leitura bruta de nós, ways e relações."""

    def test_counts(self, osm_file):
        nodes, ways, raw_relations = parse_osm(osm_file)
        assert sorted(nodes) == [1, 2, 3, 4, 5]
        assert sorted(ways) == [10, 11, 12]
        assert sorted(raw_relations) == [100, 200]

    def test_way_nodes_and_tags(self, osm_file):
        _, ways, _ = parse_osm(osm_file)
        assert ways[11].node_ids == [3, 2]
        assert ways[12].tags == {"oneway": "yes"}

    def test_invalid_coordinates_kept(self, osm_file):
        """Nó com coordenada inválida continua presente, sem lat/lon."""
        nodes, _, _ = parse_osm(osm_file)
        assert nodes[5].lat is None and nodes[5].lon is None
        assert nodes[5].tags == {"name": "Ponto"}
        assert nodes[1].lat == pytest.approx(-22.90)


class TestParseRelations:
    """Resolução dos membros das relações."""

    def test_members_resolved_in_order(self, osm_file):
        relation = parse_relations(osm_file)[100]
        assert relation.tags == {"type": "route"}
        assert [(m.type_name, m.member.id, m.role) for m in relation.members] == [
            ("way", 12, ""),
            ("node", 5, "stop"),
            ("way", 10, ""),
            ("way", 11, ""),
            ("way", 999, ""),
            ("relation", 200, ""),
        ]

    def test_members_share_parsed_objects(self, osm_file):
        relation = parse_relations(osm_file)[100]
        assert relation.members[2].way.tags["name"] == "Rua A"
        assert isinstance(relation.members[1].member, OsmNode)

    def test_missing_member_becomes_placeholder(self, osm_file):
        """Way fora do arquivo vira way sem nós."""
        missing = parse_relations(osm_file)[100].members[4].member
        assert isinstance(missing, Way)
        assert missing.node_ids == []
        assert not missing.is_usable

    def test_nested_relations(self, osm_file):
        """Relações podem referenciar umas às outras."""
        relations = parse_relations(osm_file)
        child = relations[100].members[5].member
        assert isinstance(child, Relation)
        assert child is relations[200]
        assert relations[200].members[0].member is relations[100]

    def test_unknown_member_type(self, tmp_path):
        path = tmp_path / "ruim.osm"
        path.write_text(
            '<osm><relation id="1"><member type="area" ref="1" role=""/></relation></osm>',
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="tipo de membro"):
            parse_relations(path)
