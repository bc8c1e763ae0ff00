"""Double-double precision BLAS and LAPACK building blocks.

Modules: options, errors, numeric, machine, blas1, level2, level3, eigen2,
rotations, matrix_aux, norms, householder, orthogonal and cholesky.
"""

__version__ = "0.1.0"