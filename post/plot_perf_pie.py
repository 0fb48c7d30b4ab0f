import os
import csv
import math
import argparse


def read_perf(path: str):
    data = []
    with open(path, "r", newline="") as f:
        r = csv.reader(f)
        header = next(r)
        idx = {n: i for i, n in enumerate(header)}
        for row in r:
            if not row:
                continue
            data.append((
                row[idx["key"]],
                float(row[idx["exclusive_sec"]]),
                int(row[idx["count"]]),
                float(row[idx["percent"]]),
            ))
    return data


def make_legend_labels(items):
    return [f"{key} ({pct:.2f}%, {cnt} calls, {tot * 1e3:.3f} ms)" for key, tot, cnt, pct in items]


def plot_pie(items, out_png: str, title: str):
    import matplotlib.pyplot as plt
    sizes = [pct for _, _, _, pct in items]
    fig, ax = plt.subplots(figsize=(7.5, 7.5))
    wedges, _texts = ax.pie(sizes, labels=None, startangle=90, counterclock=False)
    for w, (_, _, _, pct) in zip(wedges, items):
        if pct < 6.0:
            continue
        ang = math.radians((w.theta2 + w.theta1) / 2.0)
        ax.text(0.65 * math.cos(ang), 0.65 * math.sin(ang), f"{pct:.2f}%", ha='center', va='center', fontsize=11)
    ax.legend(wedges, make_legend_labels(items), loc='center left', bbox_to_anchor=(0.93, 0.5), prop={'size': 10})
    ax.set_title(title, pad=10)
    plt.tight_layout()
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_png, bbox_inches='tight', pad_inches=0.1)
    plt.close(fig)


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--perf", type=str, required=True)
    p.add_argument("--out", type=str, default=None)
    args = p.parse_args()
    items = sorted(read_perf(args.perf), key=lambda x: x[3], reverse=True)
    title = os.path.basename(os.path.dirname(os.path.abspath(args.perf)))
    out_png = args.out or os.path.join(os.path.dirname(os.path.abspath(args.perf)), "perf_pie.png")
    plot_pie(items, out_png, title)


if __name__ == "__main__":
    main()
