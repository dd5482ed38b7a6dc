# qops/gates.py
import numpy as np
from dataclasses import dataclass

@dataclass(frozen=True, eq=False)
class Gate:
    name: str
    matrix: np.ndarray  # square, rows x columns

    @property
    def unitary_matrix(self) -> np.ndarray:
        return self.matrix

def I(n: int = 1, dtype=np.float64) -> np.ndarray:
    return np.eye(1 << n, dtype=dtype)

def H(dtype=np.float64) -> np.ndarray:
    s = np.sqrt(0.5).astype(np.float32 if dtype in (np.float32, np.complex64) else np.float64)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def X(dtype=np.float64) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def CNOT(dtype=np.float64) -> np.ndarray:
    # 4x4 in order 00,01,10,11 (control is the first factor of entangle)
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

# Complex-valued; not part of the real gate set returned by get()
def RZ(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

def RX(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

_FIXED = {"I": I, "X": X, "H": H, "CNOT": CNOT}

def get(name: str) -> Gate:
    """Named fixed gate; raises KeyError for unknown names."""
    return Gate(name, _FIXED[name]())
