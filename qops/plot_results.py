# qops/plot_results.py
import csv, logging, os
from collections import defaultdict
from statistics import median
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from .logger import set_logger

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

log = logging.getLogger(__name__)

def load_rows(path):
    rows = []
    with open(path, "r") as f:
        r = csv.DictReader(f)
        for row in r:
            row["qubits"]     = int(row["qubits"])
            row["amplitudes"] = int(row["amplitudes"])
            row["wall_ms"]    = float(row["wall_ms"])
            rows.append(row)
    return rows

def median_by_qubits(rows):
    buckets = defaultdict(list)
    for r in rows:
        buckets[r["qubits"]].append(r["wall_ms"])
    return sorted((n, float(median(v))) for n, v in buckets.items())

def plot_runtime_vs_qubits(rows, op, outdir):
    pts = median_by_qubits(rows)
    if not pts:
        return None
    xs, ys = zip(*pts)
    plt.figure()
    plt.plot(xs, ys, marker="o", label=op)
    plt.xlabel("Qubits (n)")
    plt.ylabel("Runtime (ms, log scale)")
    plt.title(f"Runtime vs Qubits [{op}]")
    plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    path = os.path.join(outdir, f"runtime_vs_qubits_{op}.png")
    plt.savefig(path, dpi=200)
    plt.close()
    return path

def main(data_dir=None):
    data_dir = data_dir or DATA_DIR
    set_logger(__name__, level=logging.INFO)
    csvs = []
    for root, _, files in os.walk(data_dir):
        for f in files:
            if f.endswith(".csv"):
                csvs.append(os.path.join(root, f))

    if not csvs:
        log.warning("No CSV files found under %s", data_dir)
        return []

    saved = []
    for path in sorted(csvs):
        op = os.path.splitext(os.path.basename(path))[0]
        try:
            rows = load_rows(path)
        except (OSError, KeyError, ValueError) as e:
            log.warning("Skipping %s: %s", path, e)
            continue
        log.info("Plotting from %s.csv (%d rows)...", op, len(rows))
        out = plot_runtime_vs_qubits(rows, op, os.path.dirname(path))
        if out:
            saved.append(out)
    log.info("Saved %d plot(s)", len(saved))
    return saved

if __name__ == "__main__":
    main()
