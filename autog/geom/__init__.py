"""Plane geometry for edge routing: points, shapes, triangulation, shortest paths, root solving and Bezier splines."""