#!/usr/bin/env python3
"""
Search report

Turns a SearchOutcome into a JSON-ready dict and writes it to disk.

Output:
 - {"status": ..., "path": [{"id": ..., "label": ...}], "cost": ..., "rounds": ..., ...}
 - with include_graph, also "nodes" (sorted ids) and "edges" ([src, dst, weight], sorted)
"""

import json


def vertex_entry(vertex):
    return {'id': vertex.id, 'label': vertex.label}


def build_report(outcome, include_graph=False):
    discovery = outcome.discovery
    graph = discovery.graph

    report = {
        'status': outcome.status,
        'seed': vertex_entry(discovery.seed),
        'target': vertex_entry(discovery.target),
        'path': [vertex_entry(v) for v in outcome.path],
        'cost': outcome.cost,
        'rounds': discovery.rounds,
        'visited': discovery.visited,
        'failed': sorted(discovery.failed),
        'node_count': len(graph),
        'edge_count': graph.edge_count(),
    }

    if include_graph:
        # sorted for deterministic output
        report['nodes'] = sorted(v.id for v in graph.nodes())
        report['edges'] = sorted([src.id, dst.id, w] for src, dst, w in graph.edges())

    return report


def write_report(outpath, report):
    with open(outpath, 'w', encoding='utf-8') as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
