# qops/state.py
import numpy as np
from dataclasses import dataclass

@dataclass(frozen=True, eq=False)
class State:
    psi: np.ndarray  # shape (2**n,), dtype complex64/128, read-only

    def __post_init__(self):
        psi = np.array(self.psi)
        if not np.issubdtype(psi.dtype, np.complexfloating):
            psi = psi.astype(np.complex128)
        psi = psi.reshape(-1)
        psi.setflags(write=False)
        object.__setattr__(self, "psi", psi)

    @staticmethod
    def zero(n: int, dtype=np.complex128) -> "State":
        return State.basis(n, 0, dtype=dtype)

    @staticmethod
    def basis(n: int, index: int, dtype=np.complex128) -> "State":
        """Computational basis state |index> on n qubits."""
        N = 1 << n
        if not 0 <= index < N:
            raise ValueError(f"basis index {index} out of range for {n} qubits")
        psi = np.zeros(N, dtype=dtype)
        psi[index] = 1.0 + 0.0j
        return State(psi)

    @property
    def n(self) -> int:
        # length is a power of two by construction; never checked
        return len(self).bit_length() - 1

    @property
    def dtype(self):
        return self.psi.dtype

    def __len__(self) -> int:
        return self.psi.shape[0]

    def as_numpy(self) -> np.ndarray:
        return self.psi

    def __repr__(self) -> str:
        return f"State(n={self.n}, dtype={self.dtype}, psi={self.psi!r})"
