"""Data Management Structures

Surface-aligned containers. The dimension list and every collection allocated from it are owned by the same
object, so the surface count of all of them is the same by construction.

"""
import copy
import ctypes as ct
import numpy as np

import vmtypes.utils.exceptions as exceptions
import vmtypes.utils.types as types
from vmtypes.utils.constants import NDIM, vertex_correction


class SurfaceGrid(object):
    """
    Dimension list of a set of lattice surfaces, and allocator of collections aligned with it.

    Attributes:
        dimensions (list(IntPair)): ``(chordwise panels, spanwise panels)`` of each surface
        n_surf (int): number of surfaces

    Args:
        dimensions: ``(rows, cols)`` pairs or ``np.ndarray`` ``[n_surf x 2]``
    """
    def __init__(self, dimensions):
        self.dimensions = types.to_dimensions(dimensions)
        self.n_surf = len(self.dimensions)

    def allocate(self, correction=0, initial_value=0.0):
        """One matrix per surface, see :func:`~vmtypes.utils.types.allocate_vec_mat`"""
        return types.allocate_vec_mat([], self.dimensions, correction, initial_value)

    def allocate_fields(self, n_dim, correction=0):
        """``n_dim`` matrices per surface, see :func:`~vmtypes.utils.types.allocate_from_dimensions`"""
        return types.allocate_from_dimensions([], n_dim, self.dimensions, correction)

    def check_aligned(self, mat, correction=0):
        """
        Checks that ``mat`` has one entry per surface with the grid size plus ``correction``.

        ``mat`` can be a flat collection (``[n_surf][rows x cols]``) or a per-field one
        (``[n_surf][n_dim][rows x cols]``).

        Raises:
            exceptions.MisalignedSurfaces: the number of surfaces differs
            exceptions.InvalidDimensions: the size of a matrix differs
        """
        if len(mat) != self.n_surf:
            raise exceptions.MisalignedSurfaces(self.n_surf, len(mat))
        expected = types.corrected_dimensions(self.dimensions, correction)
        for i_surf, entry in enumerate(mat):
            fields = [entry] if isinstance(entry, np.ndarray) else entry
            for field in fields:
                if field.shape != tuple(expected[i_surf]):
                    raise exceptions.InvalidDimensions('Matrix of shape %s, expected %s'
                                                       % (str(field.shape), str(tuple(expected[i_surf]))),
                                                       i_surf=i_surf)

    def wake(self, m_star):
        """Grid of the wakes shed by each surface: ``m_star`` streamwise panels, same spanwise panels."""
        return SurfaceGrid([(m_star, dim.cols) for dim in self.dimensions])

    def as_array(self):
        return np.array(self.dimensions, dtype=int).reshape((self.n_surf, 2))

    def ct_dimensions(self):
        """``dimensions`` as a ``[n_surf x 2]`` array of ``ct.c_uint``, to pass to a compiled solver."""
        return self.as_array().astype(dtype=ct.c_uint, copy=True)

    def __len__(self):
        return self.n_surf

    def __eq__(self, other):
        if not isinstance(other, SurfaceGrid):
            return NotImplemented
        return self.dimensions == other.dimensions


class AeroTimeStepInfo(object):
    """
    Aerodynamic time step storage.

    Attributes:
        grid (SurfaceGrid): grid of the solid surfaces
        grid_star (SurfaceGrid): grid of the wakes
        dimensions (list(IntPair)): ``[n_surf]`` of ``(chordwise panels, spanwise panels)``
        dimensions_star (list(IntPair)): ``[n_surf]`` of ``(streamwise panels, spanwise panels)``
        n_surf (int): number of surfaces. Each surface has an associated wake.

        zeta (list(list(np.ndarray))): Location of solid grid vertices
          ``[n_surf][3][(chordwise panels + 1) x (spanwise panels + 1)]``
        zeta_dot (list(list(np.ndarray))): Time derivative of ``zeta``
        u_ext (list(list(np.ndarray))): Background flow velocity on solid grid vertices
        normals (list(list(np.ndarray))): Normal direction at the panel centres
          ``[n_surf][3][chordwise panels x spanwise panels]``
        forces (list(list(np.ndarray))): Forces and moments not associated to time derivatives on vertices
          ``[n_surf][6][(chordwise panels + 1) x (spanwise panels + 1)]``
        dynamic_forces (list(list(np.ndarray))): Forces and moments associated to time derivatives
        gamma (list(np.ndarray)): Circulation of solid panels ``[n_surf][chordwise panels x spanwise panels]``
        gamma_dot (list(np.ndarray)): Time derivative of ``gamma``
        zeta_star (list(list(np.ndarray))): Location of wake grid vertices
          ``[n_surf][3][(m_star + 1) x (spanwise panels + 1)]``
        gamma_star (list(np.ndarray)): Circulation of wake panels ``[n_surf][m_star x spanwise panels]``

    Args:
        dimensions: ``(chordwise panels, spanwise panels)`` of each surface
        m_star (int): streamwise wake panels
    """
    def __init__(self, dimensions, m_star=0):
        self.grid = SurfaceGrid(dimensions)
        self.grid_star = self.grid.wake(m_star)
        self.m_star = int(m_star)

        self.zeta = self.grid.allocate_fields(NDIM, vertex_correction)
        self.zeta_dot = self.grid.allocate_fields(NDIM, vertex_correction)
        self.u_ext = self.grid.allocate_fields(NDIM, vertex_correction)
        self.normals = self.grid.allocate_fields(NDIM)

        self.forces = self.grid.allocate_fields(2*NDIM, vertex_correction)
        # same layout as forces
        self.dynamic_forces = types.allocate_from_template([], self.forces, n_dim=2*NDIM)

        self.gamma = self.grid.allocate()
        self.gamma_dot = self.grid.allocate()

        self.zeta_star = self.grid_star.allocate_fields(NDIM, vertex_correction)
        self.gamma_star = self.grid_star.allocate()

    @property
    def n_surf(self):
        return self.grid.n_surf

    @property
    def dimensions(self):
        return self.grid.dimensions

    @property
    def dimensions_star(self):
        return self.grid_star.dimensions

    def copy(self):
        """
        Returns a deep copy of the :class:`AeroTimeStepInfo`. No array is shared with the original.
        """
        copied = AeroTimeStepInfo(self.dimensions, self.m_star)
        for name in ['zeta', 'zeta_dot', 'u_ext', 'normals', 'forces', 'dynamic_forces',
                     'gamma', 'gamma_dot', 'zeta_star', 'gamma_star']:
            setattr(copied, name, copy.deepcopy(getattr(self, name)))
        return copied
