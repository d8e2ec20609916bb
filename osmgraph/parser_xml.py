import logging
from pathlib import Path
from typing import Dict, List, Tuple
import xml.etree.ElementTree as ET

from classes_de_elementos.osm_primitives import OsmNode, Relation, RelationMember, Way

RawMember = Tuple[str, int, str]


def _read_tags(elem: ET.Element) -> Dict[str, str]:
    return {t.attrib["k"]: t.attrib.get("v", "") for t in elem.findall("tag")}


def parse_osm(osm_path: Path) -> Tuple[Dict[int, OsmNode], Dict[int, Way], Dict[int, Tuple[Dict[str, str], List[RawMember]]]]:
    '''
    Lê nós, ways e relações (ainda não resolvidas) de um arquivo .osm.

    Retorno
    -------
    (nodes, ways, raw_relations), onde raw_relations[id] = (tags, [(tipo, ref, papel)])

    Observações
    -----------
    - Usa iterparse e limpeza de elementos para controlar a memória.
    - Nós com lat/lon ausente ou inválido são mantidos sem coordenadas.
    '''

    nodes: Dict[int, OsmNode] = {}
    ways: Dict[int, Way] = {}
    raw_relations: Dict[int, Tuple[Dict[str, str], List[RawMember]]] = {}

    for _, elem in ET.iterparse(str(osm_path), events=("end",)):
        if elem.tag == "node":
            osmid = int(elem.attrib["id"])
            try:
                lat = float(elem.attrib["lat"])
                lon = float(elem.attrib["lon"])
            except (KeyError, ValueError):
                lat, lon = None, None
            nodes[osmid] = OsmNode(osmid, lat, lon, _read_tags(elem))
            elem.clear()
        elif elem.tag == "way":
            node_ids = [int(nd.attrib["ref"]) for nd in elem.findall("nd")]
            osmid = int(elem.attrib["id"])
            ways[osmid] = Way(osmid, node_ids, _read_tags(elem))
            elem.clear()
        elif elem.tag == "relation":
            members = [
                (m.attrib["type"], int(m.attrib["ref"]), m.attrib.get("role", ""))
                for m in elem.findall("member")
            ]
            raw_relations[int(elem.attrib["id"])] = (_read_tags(elem), members)
            elem.clear()

    return nodes, ways, raw_relations


def parse_relations(osm_path: Path) -> Dict[int, Relation]:
    '''
    Lê um arquivo .osm e devolve as relações com os membros resolvidos.

    Parâmetros
    ----------
    osm_path : caminho do arquivo .osm de entrada

    Retorno
    -------
    Dict[int, Relation] : relações por id

    Observações
    -----------
    - Membros que apontam para elementos fora do arquivo viram marcadores:
      way sem nós, nó sem coordenadas ou relação vazia.
    - Tipo de membro desconhecido gera ValueError.
    '''

    nodes, ways, raw_relations = parse_osm(osm_path)
    relations = {rid: Relation(rid, [], tags) for rid, (tags, _) in raw_relations.items()}

    missing = 0
    for rid, (_, raw_members) in raw_relations.items():
        for member_type, ref, role in raw_members:
            if member_type == "node":
                target = nodes.get(ref)
                placeholder = OsmNode
            elif member_type == "way":
                target = ways.get(ref)
                placeholder = Way
            elif member_type == "relation":
                target = relations.get(ref)
                placeholder = Relation
            else:
                raise ValueError(f"Relação {rid}: tipo de membro inválido {member_type!r}")
            if target is None:
                target = placeholder(ref)
                missing += 1
            relations[rid].members.append(RelationMember(role, target))

    if missing:
        logging.warning("%d membros referenciam elementos ausentes do arquivo", missing)
    logging.info("Lidas %d relações, %d ways e %d nós", len(relations), len(ways), len(nodes))
    return relations
