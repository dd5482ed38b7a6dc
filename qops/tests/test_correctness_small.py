# qops/tests/test_correctness_small.py
import logging
import numpy as np
import pytest
from qops import complexmath as cm
from qops import gates as G
from qops.operations import (apply_gate, entangle, entangle_all, inner_product,
                             outer_product, transpose)
from qops.state import State

S = np.sqrt(0.5)

def vec(*amps):
    return State(np.array(amps, dtype=np.complex128))

# ---------- entangle ----------

def test_entangle_zero_one():
    # |0>|1> -> |01>
    out = entangle(State.basis(1, 0), State.basis(1, 1))
    np.testing.assert_array_equal(out.as_numpy(), [0, 1, 0, 0])

def test_entangle_index_law():
    a = vec(0.6, 0.8j)
    b = vec(1 + 2j, -0.5, 0.25j, 3)
    out = entangle(a, b).as_numpy()
    assert len(out) == 8
    for i in range(2):
        for j in range(4):
            assert out[i * 4 + j] == cm.multiply(a.psi[i], b.psi[j])

def test_entangle_all_matches_pairwise_fold():
    a, b, c = vec(S, S), vec(0.6, 0.8j), vec(1j, 0)
    folded = entangle_all([a, b, c])
    pairwise = entangle(entangle(a, b), c)
    np.testing.assert_array_equal(folded.as_numpy(), pairwise.as_numpy())

def test_entangle_all_dimension_law():
    for n in range(2, 6):
        out = entangle_all([vec(S, S)] * n)
        assert len(out) == 2 ** n
        assert out.n == n

def test_entangle_all_three_basis_states():
    # |0>,|0>,|1> -> |001>
    out = entangle_all([State.basis(1, 0), State.basis(1, 0), State.basis(1, 1)])
    np.testing.assert_array_equal(out.as_numpy(), State.basis(3, 1).as_numpy())

@pytest.mark.parametrize("qubits", [[], [State.zero(1)]])
def test_entangle_all_needs_two(qubits, caplog):
    with caplog.at_level(logging.DEBUG, logger="qops.operations"):
        assert entangle_all(qubits) is None
    assert "at least 2" in caplog.text

def test_entangle_raw_sequences():
    out = entangle([1, 0], [0, 1])
    assert isinstance(out, State)
    assert out.dtype == np.complex128
    np.testing.assert_array_equal(out.as_numpy(), [0, 1, 0, 0])

# ---------- apply_gate ----------

def test_x_flips():
    np.testing.assert_array_equal(apply_gate([1, 0], G.X()).as_numpy(), [0, 1])
    np.testing.assert_array_equal(apply_gate([0, 1], G.X()).as_numpy(), [1, 0])

def test_identity_gate_returns_input():
    q = vec(0.6, 0.8j, -0.5 + 0.25j, 1j)
    out = apply_gate(q, G.I(2))
    np.testing.assert_array_equal(out.as_numpy(), q.as_numpy())

def test_gate_object_and_raw_matrix_agree():
    q = vec(S, -S * 1j)
    via_gate = apply_gate(q, G.get("H"))
    via_matrix = apply_gate(q, G.H().tolist())
    np.testing.assert_array_equal(via_gate.as_numpy(), via_matrix.as_numpy())

def test_h_on_zero():
    out = apply_gate(State.zero(1), G.H())
    np.testing.assert_allclose(out.as_numpy(), [S, S], atol=1e-12)

def test_cnot_control_off_noop():
    q = entangle(State.basis(1, 0), State.basis(1, 1))
    np.testing.assert_array_equal(apply_gate(q, G.CNOT()).as_numpy(), [0, 1, 0, 0])

def test_cnot_control_on_flips():
    # |10> -> |11>
    q = entangle(State.basis(1, 1), State.basis(1, 0))
    np.testing.assert_array_equal(apply_gate(q, G.CNOT()).as_numpy(), [0, 0, 0, 1])

def test_bell_state():
    q = entangle(apply_gate(State.zero(1), G.H()), State.zero(1))
    bell = apply_gate(q, G.CNOT())
    np.testing.assert_allclose(bell.as_numpy(), [S, 0, 0, S], atol=1e-12)

def test_complex_gate_matrix():
    out = apply_gate(State.basis(1, 1), G.RZ(np.pi))
    np.testing.assert_allclose(out.as_numpy(), [0, 1j], atol=1e-12)

def test_rectangular_matrix():
    # D x N with D != N: output has D amplitudes
    out = apply_gate(vec(1 + 1j, 2), [[1, 1]])
    np.testing.assert_array_equal(out.as_numpy(), [3 + 1j])

def test_empty_vector_through_one_row_matrix():
    out = apply_gate([], [[]])
    assert len(out) == 1
    np.testing.assert_array_equal(out.as_numpy(), [0])

def test_jagged_matrix_asserts():
    with pytest.raises(AssertionError):
        apply_gate([1, 0], [[1, 0], [0]])

def test_real_entries_promoted_to_complex():
    out = apply_gate([1.0, 0.0], np.array([[0.0, 1.0], [1.0, 0.0]]))
    assert out.dtype == np.complex128

# ---------- transpose ----------

def test_transpose_round_trip():
    q = vec(0.6, 0.8j, -1, 2 - 3j)
    row = transpose(q)
    assert row.shape == (1, 4)
    np.testing.assert_array_equal(row[0], q.as_numpy())

def test_transpose_does_not_conjugate():
    np.testing.assert_array_equal(transpose([1j, 2])[0], [1j, 2])

# ---------- outer_product ----------

def test_outer_product_dimension_law():
    m = outer_product(vec(1, 0, 0, 0), vec(0, 1, 0, 0))
    assert m.shape == (4, 4)
    expect = np.zeros((4, 4)); expect[0, 1] = 1
    np.testing.assert_array_equal(m, expect)

def test_outer_product_length_mismatch(caplog):
    with caplog.at_level(logging.DEBUG, logger="qops.operations"):
        assert outer_product([1, 0], [1, 0, 0]) is None
    assert "length mismatch" in caplog.text

def test_outer_product_no_conjugate_by_default():
    m = outer_product([1j, 0], [1j, 0])
    assert m[0, 0] == -1

def test_outer_product_conjugate():
    m = outer_product([1j, 0], [1j, 0], conjugate=True)
    assert m[0, 0] == 1

# ---------- inner_product ----------

def test_inner_product_orthonormal_basis():
    assert inner_product([1, 0], [1, 0]) == 1
    assert inner_product([1, 0], [0, 1]) == 0

def test_inner_product_states():
    assert inner_product(State.basis(2, 3), State.basis(2, 3)) == 1

def test_inner_product_empty():
    z = inner_product([], [])
    assert z == 0
    assert isinstance(z, np.complex128)

def test_outer_product_empty():
    assert outer_product([], []).shape == (0, 0)

def test_inner_product_length_mismatch():
    z = inner_product([1, 0], [1, 0, 0, 0])
    assert z == cm.zero()
    assert isinstance(z, np.complex128)

def test_inner_product_no_conjugate_by_default():
    assert inner_product([1j, 0], [1j, 0]) == -1
    assert inner_product([1j, 0], [1j, 0], conjugate=True) == 1

def test_inner_and_outer_share_convention():
    a, b = vec(0.6, 0.8j), vec(1j, 1)
    for conj in (False, True):
        trace = np.trace(outer_product(b, a, conjugate=conj))
        assert trace == pytest.approx(inner_product(a, b, conjugate=conj))
