# geom3d/hull.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Dict, List, Optional, Set, Tuple

from .numeric import as_precision
from .point import Point
from .predicates import collinear, distance_squared_to_plane, normal3, orient3d, side_of_plane

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]          # орієнтоване ребро (u, v)
UEdge = Tuple[int, int]         # неорієнтоване ребро (min(u,v), max(u,v))


@dataclass
class Face:
    """
    Трикутна грань опуклої оболонки.
    v: індекси вершин із узгодженою орієнтацією (нормаль назовні).
    nbr[i]: сусідня грань через локальне ребро i (0:(a,b), 1:(b,c), 2:(c,a)), або None.
    conflict: точки, які бачать цю грань.
    """
    v: Tuple[int, int, int]
    nbr: List[Optional[int]] = field(default_factory=lambda: [None, None, None])
    alive: bool = True
    conflict: Set[int] = field(default_factory=set)

    def edge(self, i: int) -> Edge:
        a, b, c = self.v
        return ((a, b), (b, c), (c, a))[i]


class ConvexHull3D:
    """
    Рандомізований інкрементальний 3D convex hull із conflict graph.

    Вхід: список Point (мінімум 4, не всі копланарні).
    Предикати — під моделлю точності tol: для Exact оболонка точна, точки на
    гранях і ребрах до вершин не потрапляють.
    """

    def __init__(self, points: List[Point], tol=None, seed: Optional[int] = 0):
        if len(points) < 4:
            raise ValueError("Need at least 4 points")
        self.P: List[Point] = list(points)
        self.tol = as_precision(tol, *self.P)
        self._rng = Random(seed)

        self.faces_list: List[Face] = []
        self.edge2face: Dict[UEdge, List[Tuple[int, int]]] = {}
        self.point2faces: Dict[int, Set[int]] = {}
        self.inner: Point = self.P[0]

        base_faces = self._build_initial_tetra()
        self._init_conflicts(base_faces)
        self._expand_until_done()

    # ---------------- Публічний API ----------------
    def faces(self) -> List[Tuple[int, int, int]]:
        """Активні грані (трикутники) як індекси вершин."""
        return [f.v for f in self.faces_list if f.alive]

    def vertices(self) -> List[int]:
        """Індекси вершин оболонки у порядку зростання."""
        return sorted({i for f in self.faces() for i in f})

    def vertex_points(self) -> List[Point]:
        return [self.P[i] for i in self.vertices()]

    def extreme_points(self) -> List[Point]:
        """
        Вершини, інцидентні щонайменше трьом різним площинам граней. Вершини
        стартового тетраедра, що опинилися на ребрі чи грані, відкидаються.
        """
        normals: Dict[int, list] = {}
        for f in self.faces():
            n = normal3(*(self.P[i] for i in f))
            for i in f:
                normals.setdefault(i, []).append(n)
        out = []
        for i in self.vertices():
            distinct: list = []
            for n in normals[i]:
                if not any(n.is_scalar_multiple(m, self.tol) and n.dot(m) > 0 for m in distinct):
                    distinct.append(n)
            if len(distinct) >= 3:
                out.append(self.P[i])
        return out

    # ---------------- Внутрішні методи ----------------
    def _visible(self, fid: int, p_idx: int) -> bool:
        a, b, c = (self.P[i] for i in self.faces_list[fid].v)
        return side_of_plane(a, b, c, self.P[p_idx], self.tol) > 0

    def _add_face(self, v0: int, v1: int, v2: int) -> int:
        fid = len(self.faces_list)
        face = Face((v0, v1, v2))
        self.faces_list.append(face)
        for ei in range(3):
            u, v = face.edge(ei)
            self.edge2face.setdefault((min(u, v), max(u, v)), []).append((fid, ei))
        return fid

    def _set_neighbor(self, fid_a: int, edge_a: int, fid_b: Optional[int]) -> None:
        self.faces_list[fid_a].nbr[edge_a] = fid_b

    def _rebuild_all_adjacencies(self) -> None:
        for face in self.faces_list:
            face.nbr = [None, None, None]
        for lst in self.edge2face.values():
            if len(lst) == 2:
                (fa, ea), (fb, eb) = lst
                self._set_neighbor(fa, ea, fb)
                self._set_neighbor(fb, eb, fa)

    def _orient_outward(self, a: int, b: int, c: int) -> Tuple[int, int, int]:
        # внутрішня точка має лежати з протилежного від нормалі боку
        if orient3d(self.P[a], self.P[b], self.P[c], self.inner) > 0:
            return a, c, b
        return a, b, c

    def _build_initial_tetra(self) -> List[int]:
        """
        Знайти перші 4 не копланарні точки і побудувати з них тетраедр
        із гранями, орієнтованими назовні.
        """
        idx = list(range(len(self.P)))
        self._rng.shuffle(idx)
        tol = self.tol

        base = None
        for i in range(len(idx) - 2):
            for j in range(i + 1, len(idx) - 1):
                for k in range(j + 1, len(idx)):
                    if not collinear(self.P[idx[i]], self.P[idx[j]], self.P[idx[k]], tol):
                        base = idx[i], idx[j], idx[k]
                        break
                if base:
                    break
            if base:
                break
        if base is None:
            raise ValueError("All points collinear: cannot form a base triangle")
        p0, p1, p2 = base

        p3 = None
        for t in idx:
            if t in base:
                continue
            if side_of_plane(self.P[p0], self.P[p1], self.P[p2], self.P[t], tol) != 0:
                p3 = t
                break
        if p3 is None:
            raise ValueError("All points coplanar: 3D hull is impossible")

        # центроїд стартового тетраедра лишається всередині оболонки, що росте
        s = self.P[p0].vector + self.P[p1].vector + self.P[p2].vector + self.P[p3].vector
        self.inner = Point.from_vector(s / 4)

        F = [self._add_face(*self._orient_outward(*tri))
             for tri in ((p0, p1, p2), (p0, p2, p3), (p0, p3, p1), (p1, p3, p2))]
        self._rebuild_all_adjacencies()
        return F

    def _init_conflicts(self, base_faces: List[int]) -> None:
        base_vs = set()
        for fid in base_faces:
            base_vs.update(self.faces_list[fid].v)
        for pi in range(len(self.P)):
            if pi in base_vs:
                continue
            for fid in base_faces:
                if self._visible(fid, pi):
                    self.faces_list[fid].conflict.add(pi)
                    self.point2faces.setdefault(pi, set()).add(fid)

    def _pick_face_with_conflict(self) -> Optional[int]:
        for fid, f in enumerate(self.faces_list):
            if f.alive and f.conflict:
                return fid
        return None

    def _pick_farthest_point(self, fid: int) -> int:
        """Найвіддаленіша від грані точка з її conflict-сету."""
        a, b, c = (self.P[i] for i in self.faces_list[fid].v)
        # min за індексом при рівних відстанях: детермінований вибір
        return max(sorted(self.faces_list[fid].conflict),
                   key=lambda pi: distance_squared_to_plane(a, b, c, self.P[pi]))

    def _collect_visible_region(
        self, seed_fid: int, p_idx: int
    ) -> Tuple[Set[int], List[Tuple[Edge, int, int]]]:
        """
        Обхід видимих граней від seed_fid; горизонт — ребра, за якими
        невидима грань: ((u, v), opp_fid, opp_edge) з opp_fid = -1, якщо сусіда немає.
        """
        visible: Set[int] = set()
        stack = [seed_fid]
        while stack:
            fid = stack.pop()
            if fid in visible:
                continue
            f = self.faces_list[fid]
            if not f.alive or not self._visible(fid, p_idx):
                continue
            visible.add(fid)
            for nb in f.nbr:
                if nb is not None and nb not in visible:
                    stack.append(nb)

        horizon: List[Tuple[Edge, int, int]] = []
        for fid in visible:
            f = self.faces_list[fid]
            for ei in range(3):
                nb = f.nbr[ei]
                if nb is not None and nb in visible:
                    continue
                u, v = f.edge(ei)
                opp_edge_idx = -1
                if nb is not None:
                    nb_f = self.faces_list[nb]
                    for ej in range(3):
                        uu, vv = nb_f.edge(ej)
                        if {uu, vv} == {u, v}:
                            opp_edge_idx = ej
                            break
                horizon.append(((u, v), nb if nb is not None else -1, opp_edge_idx))
        return visible, horizon

    def _add_point_and_update(self, p_idx: int, seed_fid: int) -> None:
        """Додати точку: прибрати видимий ковпак, пришити нові грані до горизонту."""
        visible, horizon = self._collect_visible_region(seed_fid, p_idx)

        conflict_points: Set[int] = set()
        for fid in visible:
            conflict_points.update(self.faces_list[fid].conflict)

        for fid in visible:
            f = self.faces_list[fid]
            f.alive = False
            for ei in range(3):
                u, v = f.edge(ei)
                key = (min(u, v), max(u, v))
                self.edge2face[key] = [(fa, ea) for (fa, ea) in self.edge2face.get(key, []) if fa != fid]
            for pi in f.conflict:
                s = self.point2faces.get(pi)
                if s is not None:
                    s.discard(fid)
            f.conflict.clear()

        new_fids: List[int] = []
        edgeP_map: Dict[UEdge, Tuple[int, int]] = {}
        for (u, v), opp_fid, opp_ei in horizon:
            # ребро горизонту (u, v) орієнтоване як у видимої грані: нова грань
            # (u, v, p) зберігає зовнішню орієнтацію
            nf = self._add_face(u, v, p_idx)
            new_fids.append(nf)
            if opp_fid != -1 and opp_ei != -1:
                self._set_neighbor(nf, 0, opp_fid)
                self._set_neighbor(opp_fid, opp_ei, nf)
            for (x, y), e_local in (((v, p_idx), 1), ((p_idx, u), 2)):
                key = (min(x, y), max(x, y))
                if key in edgeP_map:
                    ofid, oei = edgeP_map.pop(key)
                    self._set_neighbor(nf, e_local, ofid)
                    self._set_neighbor(ofid, oei, nf)
                else:
                    edgeP_map[key] = (nf, e_local)

        conflict_points.discard(p_idx)
        for pi in conflict_points:
            faces_for_pi = set()
            for nf in new_fids:
                if self._visible(nf, pi):
                    self.faces_list[nf].conflict.add(pi)
                    faces_for_pi.add(nf)
            if faces_for_pi:
                self.point2faces[pi] = faces_for_pi
            else:
                self.point2faces.pop(pi, None)

    def _expand_until_done(self) -> None:
        added = 0
        while True:
            fid = self._pick_face_with_conflict()
            if fid is None:
                break
            p_idx = self._pick_farthest_point(fid)
            self._add_point_and_update(p_idx, fid)
            added += 1
        logger.debug("hull: %d points, %d added incrementally, %d faces",
                     len(self.P), added, len(self.faces()))

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожне неорієнтоване ребро зустрічається рівно у 2 активних гранях;
          - сусідства симетричні;
          - внутрішня точка з невід'ємного боку жодної грані не лежить.
        Порожні списки у відповіді = все гаразд.
        """
        faces = [f for f in self.faces_list if f.alive]

        edge_count: Dict[UEdge, int] = {}
        for f in faces:
            for ei in range(3):
                u, v = f.edge(ei)
                key = (min(u, v), max(u, v))
                edge_count[key] = edge_count.get(key, 0) + 1
        bad_edges = [(e, k) for e, k in edge_count.items() if k != 2]

        bad_nbr: List[Tuple[int, int, str]] = []
        for fid, f in enumerate(self.faces_list):
            if not f.alive:
                continue
            for ei in range(3):
                nb = f.nbr[ei]
                if nb is None or not self.faces_list[nb].alive:
                    bad_nbr.append((fid, ei, "missing_or_dead_neighbor"))
                    continue
                u, v = f.edge(ei)
                nb_f = self.faces_list[nb]
                if not any({u, v} == set(nb_f.edge(ej)) and nb_f.nbr[ej] == fid for ej in range(3)):
                    bad_nbr.append((fid, ei, f"no_backlink_to_{nb}"))

        bad_orient = [fid for fid, f in enumerate(self.faces_list)
                      if f.alive and orient3d(*(self.P[i] for i in f.v), self.inner) >= 0]

        return {
            "faces": len(faces),
            "unique_vertices": len({i for f in faces for i in f.v}),
            "bad_edges": bad_edges,
            "bad_neighbors": bad_nbr,
            "bad_orient_faces": bad_orient,
        }

    def to_off(self) -> str:
        """Експорт активних граней у формат OFF."""
        faces = self.faces()
        used = self.vertices()
        remap = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(faces)} 0"]
        for i in used:
            p = self.P[i]
            lines.append(f"{float(p.x)} {float(p.y)} {float(p.z)}")
        for a, b, c in faces:
            lines.append(f"3 {remap[a]} {remap[b]} {remap[c]}")
        return "\n".join(lines) + "\n"
