import numpy as np
import pyvista as pv

from ..geometry.primitives import ShapeKind


def shape_to_pyvista(shape):
    kind = shape.kind
    if kind == ShapeKind.BOX:
        h = shape.half_extents
        poly = pv.Box(bounds=(-h[0], h[0], -h[1], h[1], -h[2], h[2]))
        M = np.eye(4)
        M[:3, :3] = shape.rotation
        M[:3, 3] = shape.center
        return poly.transform(M, inplace=False)
    if kind == ShapeKind.SPHERE:
        return pv.Sphere(radius=max(shape.radius, 1e-6), center=shape.center)
    if kind == ShapeKind.CAPSULE:
        parts = [
            pv.Sphere(radius=max(shape.radius, 1e-6), center=shape.start),
            pv.Sphere(radius=max(shape.radius, 1e-6), center=shape.end),
        ]
        axis = shape.end - shape.start
        length = float(np.linalg.norm(axis))
        if length > 0:
            parts.append(pv.Cylinder(center=0.5 * (shape.start + shape.end), direction=axis,
                                     radius=max(shape.radius, 1e-6), height=length))
        merged = parts[0]
        for p in parts[1:]:
            merged = merged.merge(p)
        return merged
    if kind == ShapeKind.SEGMENT:
        return pv.Line(shape.start, shape.end)
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


def visualize_pairs(shapes, pairs, segments=()):
    """Draw shapes (translucent), query segments and closest pairs (red line between the two points)."""
    pl = pv.Plotter()
    pl.set_background("white")
    for i, shape in enumerate(shapes):
        pl.add_mesh(shape_to_pyvista(shape), color="lightgray", opacity=0.4, show_edges=True, label=f"{shape.kind.name.lower()} {i}")
    for a, b in segments:
        pl.add_mesh(pv.Line(np.asarray(a, float), np.asarray(b, float)), color="blue", line_width=3)
    for p, q in pairs:
        p = np.asarray(p, float)
        q = np.asarray(q, float)
        pl.add_mesh(pv.PolyData(np.vstack([p, q])), color="red", render_points_as_spheres=True, point_size=10.0)
        if np.linalg.norm(q - p) > 0:
            pl.add_mesh(pv.Line(p, q), color="red", line_width=2)
    pl.add_axes(line_width=2)
    pl.add_legend(bcolor="white")
    pl.show()
