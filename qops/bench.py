# qops/bench.py
import argparse, csv, logging, os, socket, subprocess, time
from datetime import datetime
from functools import reduce
import numpy as np
from . import gates as G
from .logger import set_logger
from .operations import apply_gate, entangle_all
from .state import State

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

log = logging.getLogger(__name__)

def meta_row(dtype=np.complex128):
    commit = ""
    try:
        commit = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                         stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        pass
    return {
        "hostname": socket.gethostname(),
        "commit": commit,
        "dtype": np.dtype(dtype).name,
        "timestamp": datetime.now().isoformat(timespec="seconds"),
    }

HEADER = ["qubits","op","amplitudes","wall_ms","hostname","commit","dtype","timestamp"]

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow(row)

# ---------------------------------------------------------------------
# workloads

def plus_states(n, dtype=np.complex128):
    s = np.sqrt(0.5)
    return [State(np.array([s, s], dtype=dtype)) for _ in range(n)]

def hadamard_all(n):
    """Dense 2^n x 2^n H⊗...⊗H (real)."""
    return reduce(np.kron, [G.H()] * n)

def time_entangle(n, dtype=np.complex128):
    qs = plus_states(max(n, 2), dtype=dtype)
    t0 = time.perf_counter()
    out = entangle_all(qs)
    return (time.perf_counter() - t0) * 1e3, len(out)

def time_apply(n, dtype=np.complex128):
    q = State.zero(n, dtype=dtype)
    M = hadamard_all(n)
    t0 = time.perf_counter()
    out = apply_gate(q, M)
    return (time.perf_counter() - t0) * 1e3, len(out)

OPS = {"entangle": time_entangle, "apply": time_apply}

# ---------------------------------------------------------------------

def bench_qubits(op, ns, out_path, dtype=np.complex128):
    log.info("Qubits scaling [%s] -> %s", op, out_path)
    new_csv(out_path)
    timer = OPS[op]
    for n in ns:
        wall, amps = timer(n, dtype=dtype)
        m = meta_row(dtype)
        write_row(out_path, {
            "qubits": n, "op": op, "amplitudes": amps, "wall_ms": f"{wall:.3f}",
            "hostname": m["hostname"], "commit": m["commit"], "dtype": m["dtype"], "timestamp": m["timestamp"]
        })
        log.info("  n=%d  amplitudes=%d  wall=%.2f ms", n, amps, wall)
    log.info("done.")

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="qops benchmarks -> data/<op>.csv")
    p.add_argument("op", choices=sorted(OPS))
    p.add_argument("--ns", type=str, required=True)
    p.add_argument("--dtype", type=str, default="complex128", choices=["complex64","complex128"])
    p.add_argument("--out", type=str, default=None)
    p.add_argument("--loglevel", type=str, default="INFO")
    p.add_argument("--logfile", type=str, default=None)
    args = p.parse_args(argv)

    set_logger(__name__, level=getattr(logging, args.loglevel.upper()), file=args.logfile)
    ns = [int(x) for x in args.ns.split(",")]
    out_path = args.out or os.path.join(DATA_DIR, f"{args.op}.csv")
    bench_qubits(args.op, ns, out_path, dtype=np.dtype(args.dtype))

if __name__ == "__main__":
    main()
