import argparse

from constantes.constantes import DEFAULT_LOG_LEVEL


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in", dest="osm_in", required=True, help="Caminho do arquivo .osm de entrada")
    parser.add_argument("--relation", dest="relation_id", type=int, required=True, help="ID da relação")
    parser.add_argument("--log-level", dest="log_level", default=DEFAULT_LOG_LEVEL,
                        help="Nível de log (ex.: INFO, DEBUG)")


# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relsort",
        description=(
            "Analisa e ordena os membros de uma relação OSM:\n"
            " - connections: sentido, laços e mão única de cada membro\n"
            " - sort: ordem dos membros por conectividade"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    connections = subparsers.add_parser("connections", help="Tabela de ligações dos membros")
    _add_common_arguments(connections)
    connections.add_argument("--sorted", dest="sorted_first", action="store_true",
                             help="Ordena os membros antes de analisar")
    connections.add_argument("--csv", dest="csv_out", default=None, help="Caminho do CSV de saída (opcional)")

    sort = subparsers.add_parser("sort", help="Ordem dos membros por conectividade")
    _add_common_arguments(sort)
    return parser
