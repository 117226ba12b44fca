from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd
from sklearn.datasets import load_iris

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))
from hoeffding_split import HoeffdingNumericSplit  # type: ignore


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--bins", type=int, default=10)
    p.add_argument("--observations-before-binning", type=int, default=50)
    p.add_argument("--fitness", type=str, default="gini", help="gini or info_gain")
    p.add_argument("--seed", type=int, default=42, help="Shuffle seed for the stream order")
    p.add_argument("--checkpoint", type=str, default="", help="Optional JSON path for the best feature's state")
    p.add_argument("--verbose", type=int, default=0)
    return p.parse_args()


def main():
    args = parse_args()
    data = load_iris(as_frame=True)
    frame = data.frame.sample(frac=1.0, random_state=args.seed).reset_index(drop=True)
    n_classes = len(data.target_names)

    splits = {
        name: HoeffdingNumericSplit(
            n_classes,
            bins=args.bins,
            observations_before_binning=args.observations_before_binning,
            fitness=args.fitness,
            verbose=args.verbose,
        )
        for name in data.feature_names
    }

    # One sample at a time, every feature sees it
    for _, row in frame.iterrows():
        label = int(row["target"])
        for name, split in splits.items():
            split.train(row[name], label)

    rows = []
    for name, split in splits.items():
        best, _ = split.evaluate_fitness()
        rows.append({
            "feature": name,
            "fitness": best,
            "majority": data.target_names[split.majority_class()],
            "boundaries": " ".join(f"{p:.2f}" for p in split.split_points),
        })
    report = pd.DataFrame(rows).sort_values("fitness", ascending=False)
    print(report.to_string(index=False))

    best_feature = report.iloc[0]["feature"]
    child_majorities, _ = splits[best_feature].split()
    print(f"\nBest feature: {best_feature}")
    print("Child predictions:", [data.target_names[c] for c in child_majorities])

    if args.checkpoint:
        splits[best_feature].save(args.checkpoint)
        print(f"Saved state to {args.checkpoint}")


if __name__ == "__main__":
    main()
