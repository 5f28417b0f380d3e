import argparse
import random
import time
from datetime import date, timedelta

from shiftgrid import build_grid

parser = argparse.ArgumentParser()
parser.add_argument("--staff", type=int, default=200)
parser.add_argument("--days", type=int, default=92)
parser.add_argument("--runs", type=int, default=5)
parser.add_argument("--align", choices=["date", "position"], default="date")
parser.add_argument("--seed", type=int, default=123)
args = parser.parse_args()

rng = random.Random(args.seed)
start = date(2024, 11, 1)
days = [(start + timedelta(days=i)).isoformat() for i in range(args.days)]
payload = {
    "staff": [
        {
            "id": s,
            "name": f"Staff {s:03d}",
            "shifts": [
                {"id": s * args.days + i, "date": d, "code": rng.choice("-----CSNVO")}
                for i, d in enumerate(days)
            ],
        }
        for s in range(args.staff)
    ]
}

timings = []
for _ in range(args.runs):
    t0 = time.time()
    grid = build_grid(payload, config={"align": args.align})
    html = grid.to_html()
    timings.append(time.time() - t0)

best = min(timings)
print(f"Best: {best:.3f}s | Mean: {sum(timings) / len(timings):.3f}s | "
      f"Rows: {len(grid.body)} | Columns: {len(grid.columns)} | HTML: {len(html) // 1024} KiB")
