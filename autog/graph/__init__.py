"""Directed graph model: nodes, edges, layers, graph sources and layout parameters."""