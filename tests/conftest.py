"""
Fixtures compartilhadas: arquivo .osm pequeno com uma rota embaralhada.
"""

import textwrap

import pytest

OSM_XML = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <osm version="0.6" generator="tests">
      <node id="1" lat="-22.90" lon="-43.20"/>
      <node id="2" lat="-22.91" lon="-43.21"/>
      <node id="3" lat="-22.92" lon="-43.22"/>
      <node id="4" lat="-22.93" lon="-43.23"/>
      <node id="5" lat="x" lon="-43.24">
        <tag k="name" v="Ponto"/>
      </node>
      <way id="10">
        <nd ref="1"/><nd ref="2"/>
        <tag k="highway" v="residential"/>
        <tag k="name" v="Rua A"/>
      </way>
      <way id="11">
        <nd ref="3"/><nd ref="2"/>
        <tag k="name" v="Rua B"/>
      </way>
      <way id="12">
        <nd ref="3"/><nd ref="4"/>
        <tag k="oneway" v="yes"/>
      </way>
      <relation id="100">
        <member type="way" ref="12" role=""/>
        <member type="node" ref="5" role="stop"/>
        <member type="way" ref="10" role=""/>
        <member type="way" ref="11" role=""/>
        <member type="way" ref="999" role=""/>
        <member type="relation" ref="200" role=""/>
        <tag k="type" v="route"/>
      </relation>
      <relation id="200">
        <member type="relation" ref="100" role=""/>
      </relation>
    </osm>
""")


@pytest.fixture
def osm_file(tmp_path):
    path = tmp_path / "rota.osm"
    path.write_text(OSM_XML, encoding="utf-8")
    return path
