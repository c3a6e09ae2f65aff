'''
Text output of the mesh as semicolon separated WKT (e.g. for QGIS).
'''


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt;finite;info\n")
    for v in V:
        fh.write("{0};POINT({1});{2};{3}\n".format(
            id(v), v, v.is_finite, v.info))


def output_triangles(T, fh):
    """Output list of triangles (3-tuples of vertices) as WKT to text file"""
    fh.write("id;wkt;v0;v1;v2;finite\n")
    for i, t in enumerate(T):
        ring = list(t) + [t[0]]
        fh.write("{0};POLYGON(({1}));"
                 "{2[0]};{2[1]};{2[2]};"
                 "{3}\n".format(
                    i, ", ".join(str(v) for v in ring),
                    [id(v) for v in t],
                    all(v.is_finite for v in t)))


def output_edges(E, fh):
    """Output edges (quarter-edges) as WKT linestrings to text file"""
    fh.write("id;quad;wkt\n")
    for i, e in enumerate(E):
        fh.write("{0};{1};"
                 "LINESTRING({2[0][0]} {2[0][1]}, {2[1][0]} {2[1][1]})".format(
                    i, e.quad, e.segment))
        fh.write("\n")
