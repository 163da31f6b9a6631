import unittest
import ctypes as ct
import numpy as np

import vmtypes.utils.datastructures as datastructures
import vmtypes.utils.types as types
import vmtypes.utils.exceptions as exceptions
import vmtypes.utils.cout_utils as cout


class TestSurfaceGrid(unittest.TestCase):

    def setUp(self):
        cout.cout_quiet()
        self.grid = datastructures.SurfaceGrid(np.array([[3, 4], [5, 2]]))

    def test_dimensions(self):
        self.assertEqual(self.grid.n_surf, 2)
        self.assertEqual(len(self.grid), 2)
        self.assertEqual(self.grid.dimensions, [(3, 4), (5, 2)])
        np.testing.assert_array_equal(self.grid.as_array(), np.array([[3, 4], [5, 2]]))

        ct_dims = self.grid.ct_dimensions()
        self.assertEqual(ct_dims.dtype, np.dtype(ct.c_uint))
        self.assertEqual(ct_dims.shape, (2, 2))

        self.assertEqual(datastructures.SurfaceGrid([]).as_array().shape, (0, 2))

        with self.assertRaises(exceptions.InvalidDimensions):
            datastructures.SurfaceGrid([(1, -1)])

    def test_allocate(self):
        gamma = self.grid.allocate(initial_value=2.)
        self.grid.check_aligned(gamma)
        self.assertTrue(np.all(gamma[1] == 2.))

        zeta = self.grid.allocate_fields(3, correction=1)
        self.grid.check_aligned(zeta, correction=1)
        self.assertEqual(zeta[1][2].shape, (6, 3))

    def test_check_aligned(self):
        with self.assertRaises(exceptions.MisalignedSurfaces) as context:
            self.grid.check_aligned(self.grid.allocate()[:1])
        self.assertEqual(context.exception.n_surf_expected, 2)
        self.assertEqual(context.exception.n_surf_found, 1)

        with self.assertRaises(exceptions.InvalidDimensions):
            self.grid.check_aligned(self.grid.allocate(correction=1))

        zeta = self.grid.allocate_fields(3, correction=1)
        zeta[0][1] = np.zeros((2, 2))
        with self.assertRaises(exceptions.InvalidDimensions):
            self.grid.check_aligned(zeta, correction=1)

    def test_wake(self):
        wake = self.grid.wake(10)
        self.assertEqual(wake.dimensions, [(10, 4), (10, 2)])
        self.assertEqual(wake, datastructures.SurfaceGrid([(10, 4), (10, 2)]))


class TestAeroTimeStepInfo(unittest.TestCase):

    def setUp(self):
        cout.cout_quiet()
        self.dimensions = np.array([[4, 10], [2, 6]])
        self.tstep = datastructures.AeroTimeStepInfo(self.dimensions, m_star=8)

    def test_sizes(self):
        tstep = self.tstep
        self.assertEqual(tstep.n_surf, 2)
        self.assertEqual(tstep.dimensions_star, [(8, 10), (8, 6)])

        self.assertEqual(len(tstep.zeta[0]), 3)
        self.assertEqual(tstep.zeta[0][0].shape, (5, 11))
        self.assertEqual(tstep.u_ext[1][2].shape, (3, 7))
        self.assertEqual(tstep.normals[1][0].shape, (2, 6))
        self.assertEqual(len(tstep.forces[0]), 6)
        self.assertEqual(len(tstep.dynamic_forces[1]), 6)
        self.assertEqual(tstep.dynamic_forces[1][5].shape, (3, 7))
        self.assertEqual(tstep.gamma[0].shape, (4, 10))
        self.assertEqual(tstep.gamma_star[1].shape, (8, 6))
        self.assertEqual(tstep.zeta_star[0][1].shape, (9, 11))

        # panel and vertex quantities are one row and column apart
        self.assertEqual(types.generate_dimensions(tstep.zeta),
                         types.corrected_dimensions(types.generate_dimensions(tstep.normals), 1))

    def test_copy(self):
        self.tstep.gamma[0][1, 1] = 3.
        self.tstep.zeta[1][2][0, 0] = -1.
        copied = self.tstep.copy()
        self.assertEqual(copied.gamma[0][1, 1], 3.)
        self.assertEqual(copied.zeta[1][2][0, 0], -1.)

        copied.gamma[0][1, 1] = 0.
        self.assertEqual(self.tstep.gamma[0][1, 1], 3.)
        self.assertEqual(copied.m_star, 8)


if __name__ == '__main__':
    unittest.main()
