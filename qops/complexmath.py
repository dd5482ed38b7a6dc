# qops/complexmath.py
import numpy as np

DEFAULT_DTYPE = np.complex128

def _scalar_type(dtype):
    return np.dtype(dtype).type

def zero(dtype=DEFAULT_DTYPE):
    """Default scalar (0, 0) of the given complex dtype."""
    return _scalar_type(dtype)(0)

def scalar(re: float = 0.0, im: float = 0.0, dtype=DEFAULT_DTYPE):
    return _scalar_type(dtype)(complex(re, im))

def promote(x, dtype=DEFAULT_DTYPE):
    """Lift a real or complex number to a complex scalar (real -> imag 0)."""
    return _scalar_type(dtype)(x)

def add(x, y):
    return x + y

def multiply(x, y):
    return x * y

def conjugate(x):
    return np.conj(x)

def complex_dtype(*dtypes):
    """Smallest complex dtype that holds every given dtype."""
    return np.result_type(np.complex64, *dtypes)
