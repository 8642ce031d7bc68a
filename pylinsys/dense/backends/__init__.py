"""
Dense solver backends.

Available backends:
    CPUGaussBackend: In-place Gaussian elimination with pivot repair
    CPULapackBackend: LAPACK LU reference solve (SciPy)
"""

from pylinsys.dense.backends.cpu import CPUGaussBackend, CPULapackBackend

__all__ = [
    "CPUGaussBackend",
    "CPULapackBackend",
]
