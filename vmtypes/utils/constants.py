import ctypes as ct

NDIM = int(3)

# working precision of every allocated matrix
real_type = ct.c_double

# panel grid -> vertex (corner) grid
vertex_correction = 1
