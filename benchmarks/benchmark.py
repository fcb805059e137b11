import math

from pyinstrument import Profiler
from gisscale import prepare_rows


def make_rows(n_rows=2_000, n_points=200):
    rows = []
    for r in range(n_rows):
        cx, cy = (r % 50) * 10.0, (r // 50) * 10.0
        ring = [
            f"{cx + 4 * math.cos(2 * math.pi * i / n_points):.6f} {cy + 4 * math.sin(2 * math.pi * i / n_points):.6f}"
            for i in range(n_points)
        ]
        ring.append(ring[0])
        rows.append(f"'POLYGON(({','.join(ring)}))',4326")
    return rows


def benchmark_large():
    rows = make_rows()
    print(f"Generated {len(rows)} polygon rows")

    profiler = Profiler()
    profiler.start()

    N = 5
    print(f"Starting scaling ({N} iterations)...")
    for _ in range(N):
        scale, scaled = prepare_rows(rows, 1200, 800)
    print("Scaling finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("gisscale_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
