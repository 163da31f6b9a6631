"""Lattice Types and Allocation

Containers for per-surface matrix data of a vortex lattice solver, and the routines that size them.

Every collection is indexed by surface first: surface ``i`` refers to the same physical surface in the
dimension list and in every allocated collection. Matrices are two-dimensional ``np.ndarray`` of
``ctypes.c_double``.

The ``correction`` argument of the allocation routines is added to both grid axes. It converts panel
counts into vertex counts (``+1``) and back (``-1``).

All routines validate their inputs before modifying the target collection, so a call that raises
:class:`~vmtypes.utils.exceptions.InvalidDimensions` leaves the target untouched.
"""
import collections
import numpy as np

import vmtypes.utils.cout_utils as cout
import vmtypes.utils.exceptions as exceptions
from vmtypes.utils.constants import real_type


def as_integer(value, name):
    """
    Returns ``value`` as an ``int``. Sizes, counts and corrections are never rounded.

    Raises:
        exceptions.InvalidDimensions: ``value`` is not a whole number
    """
    try:
        int_value = int(value)
    except (TypeError, ValueError, OverflowError):
        raise exceptions.InvalidDimensions('%s must be an integer, got %r' % (name, value))
    if isinstance(value, (bool, np.bool_)) or int_value != value:
        raise exceptions.InvalidDimensions('%s must be an integer, got %r' % (name, value))
    return int_value


class IntPair(collections.namedtuple('IntPair', ['rows', 'cols'])):
    """
    Grid extent of one surface, ``(rows, cols)``, e.g. ``(chordwise panels, spanwise panels)``.

    Either component may be zero (empty surface), neither may be negative.
    """
    __slots__ = ()

    def __new__(cls, rows, cols):
        rows = as_integer(rows, 'rows')
        cols = as_integer(cols, 'cols')
        if rows < 0 or cols < 0:
            raise exceptions.InvalidDimensions('Negative grid dimensions (%i, %i)' % (rows, cols))
        return super().__new__(cls, rows, cols)

    def corrected(self, correction=0):
        return IntPair(self.rows + correction, self.cols + correction)


# type aliases, kept for readability of signatures and docstrings
VecDimensions = list
VecMatrixX = list
VecVecMatrixX = list


class Fill(object):
    """
    Fill policy of newly allocated matrices.

    The policy only chooses the numpy primitive used; ``Fill.zero()`` and ``Fill.constant(0.)`` produce
    identical matrices.

    Examples:

        >>> Fill.zero().matrix(2, 3)
        array([[0., 0., 0.],
               [0., 0., 0.]])
    """
    ZERO = 'zero'
    ONE = 'one'
    CONSTANT = 'constant'

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    @classmethod
    def zero(cls):
        return cls(cls.ZERO, 0.)

    @classmethod
    def one(cls):
        return cls(cls.ONE, 1.)

    @classmethod
    def constant(cls, value):
        return cls(cls.CONSTANT, float(value))

    @classmethod
    def from_value(cls, value):
        """Returns ``value`` if it already is a :class:`Fill`, ``Fill.constant(value)`` otherwise."""
        if isinstance(value, cls):
            return value
        return cls.constant(value)

    def matrix(self, m, n):
        if self.kind == self.ZERO:
            return np.zeros((m, n), dtype=real_type)
        elif self.kind == self.ONE:
            return np.ones((m, n), dtype=real_type)
        return np.full((m, n), self.value, dtype=real_type)

    def __eq__(self, other):
        if not isinstance(other, Fill):
            return NotImplemented
        return self.matrix(1, 1).tobytes() == other.matrix(1, 1).tobytes()

    def __hash__(self):
        return hash(self.matrix(1, 1).tobytes())

    def __repr__(self):
        if self.kind == self.CONSTANT:
            return 'Fill.constant(%r)' % self.value
        return 'Fill.%s()' % self.kind


def to_dimensions(dimensions):
    """
    Converts ``dimensions`` to a list of :class:`IntPair`.

    Args:
        dimensions: sequence of ``(rows, cols)`` pairs or ``np.ndarray`` of shape ``(n_surf, 2)``

    Returns:
        list(IntPair): dimension list
    """
    dims = []
    for i_surf, pair in enumerate(dimensions):
        if len(pair) != 2:
            raise exceptions.InvalidDimensions('Dimension pairs need exactly two entries, got %s' % str(pair),
                                               i_surf=i_surf)
        dims.append(IntPair(pair[0], pair[1]))
    return dims


def generate_dimensions(mat):
    """
    Dimension list of a per-surface, per-field collection.

    The size of each surface is read from its first field.

    Args:
        mat (list(list(np.ndarray))): ``[n_surf][n_dim][rows x cols]``

    Returns:
        list(IntPair): ``(rows, cols)`` of every surface

    Raises:
        exceptions.InvalidDimensions: a surface has no fields
    """
    dimensions = []
    for i_surf, surf in enumerate(mat):
        if len(surf) == 0:
            raise exceptions.InvalidDimensions('No fields to read the dimensions from', i_surf=i_surf)
        dimensions.append(IntPair(surf[0].shape[0], surf[0].shape[1]))
    return dimensions


def corrected_dimensions(dimensions, correction=0):
    """
    Applies ``correction`` to both axes of every surface.

    Raises:
        exceptions.InvalidDimensions: a resulting dimension is negative or ``correction`` is not an integer
    """
    correction = as_integer(correction, 'correction')
    out = []
    for i_surf, (rows, cols) in enumerate(to_dimensions(dimensions)):
        m = rows + correction
        n = cols + correction
        if m < 0 or n < 0:
            raise exceptions.InvalidDimensions('Dimensions (%i, %i) with correction %i give a negative size'
                                               % (rows, cols, correction), i_surf=i_surf)
        out.append(IntPair(m, n))
    return out


def _check_count(name, value):
    value = as_integer(value, 'number of ' + name)
    if value < 0:
        raise exceptions.InvalidDimensions('Number of %s cannot be negative (%i)' % (name, value))
    return value


def allocate_vec_mat(mat, dimensions, correction=0, initial_value=0.0):
    """
    Appends one matrix per surface to ``mat``.

    Matrix ``i_surf`` has shape ``(dimensions[i_surf][0] + correction, dimensions[i_surf][1] + correction)``
    and all its entries equal to ``initial_value``. Entries already in ``mat`` are kept.

    Args:
        mat (list(np.ndarray)): target collection
        dimensions (list(IntPair)): dimension list
        correction (int): offset added to both axes
        initial_value (float or Fill): value of every entry

    Returns:
        list(np.ndarray): ``mat``
    """
    fill = Fill.from_value(initial_value)
    sizes = corrected_dimensions(dimensions, correction)
    for m, n in sizes:
        mat.append(fill.matrix(m, n))
    _notify('Allocated %u matrices, correction %i, %s' % (len(sizes), correction, repr(fill)))
    return mat


def allocate_uniform(mat, n_surf, n_dim, m, n):
    """
    Resizes ``mat`` to ``n_surf`` surfaces of ``n_dim`` zero matrices of shape ``(m, n)``.

    The previous content of ``mat`` is discarded.

    Args:
        mat (list(list(np.ndarray))): target collection
        n_surf (int): number of surfaces
        n_dim (int): number of fields per surface
        m (int): rows of every matrix
        n (int): columns of every matrix

    Returns:
        list(list(np.ndarray)): ``mat``
    """
    n_surf = _check_count('surfaces', n_surf)
    n_dim = _check_count('fields', n_dim)
    size = corrected_dimensions([(m, n)])[0]
    mat[:] = [[Fill.zero().matrix(*size) for _ in range(n_dim)] for _ in range(n_surf)]
    _notify('Allocated %u surfaces x %u fields of (%u, %u)' % (n_surf, n_dim, size.rows, size.cols))
    return mat


def allocate_from_dimensions(mat, n_dim, dimensions, correction=0):
    """
    Resizes ``mat`` to one entry per surface in ``dimensions``, each with ``n_dim`` zero matrices.

    All fields of surface ``i_surf`` have shape
    ``(dimensions[i_surf][0] + correction, dimensions[i_surf][1] + correction)``.
    The previous content of ``mat`` is discarded.

    Returns:
        list(list(np.ndarray)): ``mat``
    """
    n_dim = _check_count('fields', n_dim)
    sizes = corrected_dimensions(dimensions, correction)
    mat[:] = [[Fill.zero().matrix(m, n) for _ in range(n_dim)] for m, n in sizes]
    _notify('Allocated %u surfaces x %u fields, correction %i' % (len(sizes), n_dim, correction))
    return mat


def allocate_from_template(mat, in_dimensions, correction=0, strict=False, n_dim=None):
    """
    Resizes ``mat`` following the layout of another per-surface, per-field collection.

    Surface ``i_surf`` of ``mat`` gets ``n_dim`` fields, all zero and with the shape of
    ``in_dimensions[i_surf][0]`` plus ``correction`` on both axes. If ``n_dim`` is not given, each surface
    gets as many fields as the template surface.

    Only the first field of each template surface is read unless ``strict`` is set, in which case all the
    fields of a template surface need to share that shape.

    Args:
        mat (list(list(np.ndarray))): target collection
        in_dimensions (list(list(np.ndarray))): template collection. Not modified.
        correction (int): offset added to both axes
        strict (bool): check that all the fields of each template surface have the same shape
        n_dim (int): number of fields per surface (optional)

    Returns:
        list(list(np.ndarray)): ``mat``

    Raises:
        exceptions.InvalidDimensions: a template surface has no fields, its fields disagree in size
            (``strict`` only) or a resulting size is negative
    """
    if n_dim is not None:
        n_dim = _check_count('fields', n_dim)
    dimensions = generate_dimensions(in_dimensions)
    if strict:
        for i_surf, surf in enumerate(in_dimensions):
            for i_dim, field in enumerate(surf):
                if field.shape[:2] != tuple(dimensions[i_surf]):
                    raise exceptions.InvalidDimensions('Field %u has shape %s, field 0 has %s'
                                                       % (i_dim, str(field.shape), str(tuple(dimensions[i_surf]))),
                                                       i_surf=i_surf)
    sizes = corrected_dimensions(dimensions, correction)
    if n_dim is None:
        n_fields = [len(surf) for surf in in_dimensions]
    else:
        n_fields = [n_dim] * len(sizes)
    mat[:] = [[Fill.zero().matrix(m, n) for _ in range(n_fields[i_surf])]
              for i_surf, (m, n) in enumerate(sizes)]
    _notify('Allocated %u surfaces from template, correction %i' % (len(sizes), correction))
    return mat


def _notify(message):
    cout.cout_wrap(message, 1)
