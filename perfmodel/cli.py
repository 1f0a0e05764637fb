"""
Command-line front end.

    perfmodel stats    DATA [--sample N]
    perfmodel train    DATA [--ridge LAMBDA] [--train-ratio R] [--seed S]
    perfmodel evaluate DATA [--ridge LAMBDA] [--train-ratio R] [--seed S] [--report PATH]
    perfmodel cv       DATA --folds K [--ridge LAMBDA]
    perfmodel predict  DATA --features MYCT MMIN MMAX CACH CHMIN CHMAX [--ridge LAMBDA]

Exit status is 0 on success, 1 when the computation fails (message on
stderr) and 2 for usage errors.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from perfmodel.core.exceptions import PerfModelError
from perfmodel.datasets import (
    COLUMN_NAMES,
    describe,
    load_machine_data,
    to_examples,
    train_test_split,
)
from perfmodel.metrics import evaluate, prediction_table, report
from perfmodel.regression import FEATURE_NAMES, LinearRegression, cross_validate


def _fit(model: LinearRegression, examples, ridge: float | None) -> None:
    if ridge is None:
        model.train(examples)
    else:
        model.train_ridge(examples, ridge)


def _split_examples(args: argparse.Namespace):
    records = load_machine_data(args.data)
    train, test = train_test_split(records, args.train_ratio, seed=args.seed)
    print(f"Dataset split: {len(train)} training samples, {len(test)} test samples")
    return to_examples(train), to_examples(test)


def cmd_stats(args: argparse.Namespace) -> int:
    records = load_machine_data(args.data)
    print(f"Loaded {len(records)} data points from {args.data}")
    print("\n=== Dataset Statistics ===")
    for column in describe(records):
        print(column.format())

    shown = records[:args.sample]
    print(f"\n=== Sample Data ({len(shown)} points) ===")
    print(f"{COLUMN_NAMES[0]:>12}{COLUMN_NAMES[1]:>15}"
          + "".join(f"{name:>8}" for name in COLUMN_NAMES[2:]))
    print("-" * 91)
    for record in shown:
        print(record.format())
    return 0


def cmd_train(args: argparse.Namespace) -> int:
    train, _ = _split_examples(args)
    model = LinearRegression()
    _fit(model, train, args.ridge)
    print(model.summary())
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    train, test = _split_examples(args)
    model = LinearRegression()
    _fit(model, train, args.ridge)

    results = evaluate(model, test)
    print(results.summary())
    print()
    print(prediction_table(results.actuals, results.predictions, results.residuals, 15))

    if args.report is not None:
        Path(args.report).write_text(report(model, test) + "\n", encoding='utf-8')
        print(f"\nEvaluation report saved to: {args.report}")
    return 0


def cmd_cv(args: argparse.Namespace) -> int:
    examples = to_examples(load_machine_data(args.data))
    print(f"Performing {args.folds}-fold cross-validation...")
    solution = cross_validate(examples, args.folds, ridge_lambda=args.ridge)
    print(solution.summary())
    if not solution.succeeded:
        print("Cross-validation failed: no fold could be trained", file=sys.stderr)
        return 1
    return 0


def cmd_predict(args: argparse.Namespace) -> int:
    model = LinearRegression()
    _fit(model, to_examples(load_machine_data(args.data)), args.ridge)
    prediction = model.predict(args.features)
    print(f"Predicted Relative Performance: {prediction:.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='perfmodel',
        description='Predict relative CPU performance with normal-equation linear regression',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    def add_data(p: argparse.ArgumentParser) -> None:
        p.add_argument('data', type=Path, help='Path to machine.data')

    def add_ridge(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            '--ridge', type=float, default=None, metavar='LAMBDA',
            help='Use ridge regression with this penalty instead of ordinary least squares',
        )

    def add_split(p: argparse.ArgumentParser) -> None:
        p.add_argument('--train-ratio', type=float, default=0.8,
                       help='Fraction of records used for training (default: 0.8)')
        p.add_argument('--seed', type=int, default=None,
                       help='Seed for the train/test shuffle')

    p = sub.add_parser('stats', help='Load the dataset and print descriptive statistics')
    add_data(p)
    p.add_argument('--sample', type=int, default=10, help='Number of records to show')
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser('train', help='Train on a split and print the model')
    add_data(p)
    add_ridge(p)
    add_split(p)
    p.set_defaults(func=cmd_train)

    p = sub.add_parser('evaluate', help='Train on a split and evaluate on the held-out part')
    add_data(p)
    add_ridge(p)
    add_split(p)
    p.add_argument('--report', type=Path, default=None,
                   help='Also write a full evaluation report to this file')
    p.set_defaults(func=cmd_evaluate)

    p = sub.add_parser('cv', help='K-fold cross-validation over the whole dataset')
    add_data(p)
    add_ridge(p)
    p.add_argument('--folds', type=int, required=True, help='Number of folds')
    p.set_defaults(func=cmd_cv)

    p = sub.add_parser('predict', help='Train on the whole dataset and predict one machine')
    add_data(p)
    add_ridge(p)
    p.add_argument('--features', type=float, nargs=len(FEATURE_NAMES), required=True,
                   metavar=FEATURE_NAMES, help='Feature values in this order')
    p.set_defaults(func=cmd_predict)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (PerfModelError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
