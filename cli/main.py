#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
relsort: ligações e ordenação de membros de relações OSM
----------------------------------------------------------------------------
Lê um arquivo OSM (.osm, XML) e, para a relação escolhida:
  1) connections : imprime, por membro, sentido (FORWARD/BACKWARD/NONE),
                   laço (L), arcos de mão única (FP/BP, H/T) e coerência
                   de mão única com os vizinhos; opcionalmente grava CSV
  2) sort        : imprime os membros reordenados por conectividade

Códigos de saída
----------------
- 0: sucesso
- 1: arquivo de entrada ou relação inexistente
- 2: falha no processamento
============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from constantes.constantes import LOG_FORMAT
from osmgraph.parser_xml import parse_relations
from ._build_arg_parser import _build_arg_parser
from .cli_connections import cli_connections
from .cli_sort import cli_sort


def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    osm_path = Path(args.osm_in).expanduser().resolve()
    if not osm_path.exists():
        logging.error("Arquivo de entrada não existe: %s", osm_path)
        return 1

    try:
        relations = parse_relations(osm_path)
        relation = relations.get(args.relation_id)
        if relation is None:
            logging.error("Relação %s não encontrada em %s", args.relation_id, osm_path)
            return 1

        if args.command == "connections":
            csv_out = Path(args.csv_out).expanduser().resolve() if args.csv_out else None
            cli_connections(relation, args.sorted_first, csv_out)
            if csv_out is not None:
                logging.info("Tabela de ligações gravada em %s", csv_out)
        else:
            cli_sort(relation)
    except Exception as exc:  # noqa: BLE001
        logging.exception("Falha ao processar relação: %s", exc)
        return 2

    logging.info("Concluído.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
