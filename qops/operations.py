# qops/operations.py
"""Tensor products, gate application and bra/ket algebra over state vectors.

Every function accepts either a State (anything with an ``as_numpy()``
accessor) or a raw amplitude sequence. Gates are anything with a
``unitary_matrix`` property, or a raw 2-D matrix. Inputs are never mutated
and every result is freshly allocated.

Accumulations use complexmath.add/multiply in ascending index order, so
results are reproducible bit for bit.
"""
import logging
from typing import Optional, Sequence

import numpy as np

from . import complexmath as cm
from .state import State

logger = logging.getLogger(__name__)

# ---------- accessors ----------

def _amplitudes(q) -> np.ndarray:
    psi = q.as_numpy() if hasattr(q, "as_numpy") else np.asarray(q)
    if not np.issubdtype(psi.dtype, np.complexfloating):
        psi = psi.astype(np.complex128)
    return psi

def _matrix(gate):
    return gate.unitary_matrix if hasattr(gate, "unitary_matrix") else gate

def _dtype_of(matrix):
    # entries of a nested-list matrix are promoted like a numpy array would be
    dtype = getattr(matrix, "dtype", None)
    return dtype if dtype is not None else np.asarray(matrix).dtype

# ---------- dense kernels ----------

def _matmul(a, b, dtype) -> np.ndarray:
    """(r x m) times (m x c); entry [i][j] sums a[i][k]*b[k][j] over ascending k."""
    rows, inner, cols = len(a), b.shape[0], b.shape[1]
    out = np.empty((rows, cols), dtype=dtype)
    for i in range(rows):
        for j in range(cols):
            total = cm.zero(dtype)
            for k in range(inner):
                total = cm.add(total, cm.multiply(cm.promote(a[i][k], dtype),
                                                  cm.promote(b[k][j], dtype)))
            out[i, j] = total
    return out

def _tensor(psi1: np.ndarray, psi2: np.ndarray, dtype) -> np.ndarray:
    len1, len2 = psi1.shape[0], psi2.shape[0]
    out = np.empty(len1 * len2, dtype=dtype)
    k = 0
    for i in range(len1):
        for j in range(len2):
            out[k] = cm.multiply(cm.promote(psi1[i], dtype), cm.promote(psi2[j], dtype))
            k += 1
    return out

def _column(psi: np.ndarray) -> np.ndarray:
    return psi.reshape(-1, 1)

def _bra(psi: np.ndarray, conjugate: bool) -> np.ndarray:
    row = _transpose(psi)
    if conjugate:
        row = cm.conjugate(row)
    return row

def _transpose(psi: np.ndarray) -> np.ndarray:
    return np.array(psi).reshape(1, -1)

# ---------- tensor product ----------

def entangle(q1, q2, dtype=None) -> State:
    """Tensor product |q1>|q2>; amplitude i*len(q2)+j is q1[i]*q2[j]."""
    psi1, psi2 = _amplitudes(q1), _amplitudes(q2)
    if dtype is None:
        dtype = cm.complex_dtype(psi1.dtype, psi2.dtype)
    return State(_tensor(psi1, psi2, dtype))

def entangle_all(qubits: Sequence, dtype=None) -> Optional[State]:
    """Left fold of entangle over two or more states, e.g. |0>,|0>,|1> -> |001>.

    Returns None when fewer than two states are given.
    """
    if len(qubits) < 2:
        logger.debug("entangle_all: need at least 2 states, got %d", len(qubits))
        return None
    acc = entangle(qubits[0], qubits[1], dtype=dtype)
    for q in qubits[2:]:
        acc = entangle(acc, q, dtype=dtype)
    return acc

# ---------- gate application ----------

def apply_gate(q, gate, dtype=None) -> State:
    """Return M|q> for a D x N matrix M (or a gate exposing one) and length-N q.

    Real matrix entries are promoted to complex before the multiply. Every
    row of M must have length N; this is asserted, not handled.
    """
    psi = _amplitudes(q)
    M = _matrix(gate)
    assert all(len(row) == psi.shape[0] for row in M), \
        f"gate rows must have length {psi.shape[0]}"
    if dtype is None:
        dtype = cm.complex_dtype(psi.dtype, _dtype_of(M))
    return State(_matmul(M, _column(psi), dtype).reshape(-1))

# ---------- bra / ket algebra ----------

def transpose(q) -> np.ndarray:
    """|q> -> <q| as a 1 x N matrix, no conjugation."""
    return _transpose(_amplitudes(q))

def outer_product(q1, q2, conjugate: bool = False, dtype=None) -> Optional[np.ndarray]:
    """|q1><q2| as an N x N matrix; None if the lengths differ.

    The bra is not conjugated unless conjugate=True.
    """
    psi1, psi2 = _amplitudes(q1), _amplitudes(q2)
    if psi1.shape[0] != psi2.shape[0]:
        logger.debug("outer_product: length mismatch %d != %d", psi1.shape[0], psi2.shape[0])
        return None
    if dtype is None:
        dtype = cm.complex_dtype(psi1.dtype, psi2.dtype)
    return _matmul(_column(psi1), _bra(psi2, conjugate), dtype)

def inner_product(q1, q2, conjugate: bool = False, dtype=None):
    """<q1|q2> as a complex scalar; zero if the lengths differ.

    The bra is not conjugated unless conjugate=True.
    """
    psi1, psi2 = _amplitudes(q1), _amplitudes(q2)
    if dtype is None:
        dtype = cm.complex_dtype(psi1.dtype, psi2.dtype)
    if psi1.shape[0] != psi2.shape[0]:
        logger.debug("inner_product: length mismatch %d != %d", psi1.shape[0], psi2.shape[0])
        return cm.zero(dtype)
    return _matmul(_bra(psi1, conjugate), _column(psi2), dtype)[0, 0]
