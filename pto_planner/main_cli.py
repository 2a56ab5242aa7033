# pto_planner/main_cli.py
from __future__ import annotations

import argparse
from datetime import datetime
from typing import List, Optional

from pto_planner.config import DEFAULT_CONFIG, local_today
from pto_planner.io_layer.errors import InputError
from pto_planner.io_layer.loader import load_schedule, load_settings
from pto_planner.io_layer.paths import InputPaths
from pto_planner.reporting.export_xlsx import export_result_xlsx
from pto_planner.reporting.report import build_accrual_table, build_summary, build_vacation_table, format_table
from pto_planner.simulation.accrual import simulate_settings
from pto_planner.validation.validator import ValidationError, validate_all


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(prog="pto-planner", description="Check whether planned vacations fit the PTO balance")
    p.add_argument("--accrual", "-a", type=float, default=None, help="PTO hours accrued per week (overrides config)")
    p.add_argument("--bank", "-b", type=float, default=None, help="current PTO balance in hours (overrides config)")
    p.add_argument("--config", "-c", default=DEFAULT_CONFIG.default_config_file, help="settings TOML with holidays")
    p.add_argument("--sched", "-s", required=True, help="vacation schedule (.toml or .xlsx)")
    p.add_argument("--today", default=None, help="reference date YYYY-MM-DD (default: today)")
    p.add_argument("--out", default=None, help="also write the result to this xlsx")
    p.add_argument("--verbose", action="store_true", help="print every weekly accrual")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = DEFAULT_CONFIG

    if args.today:
        try:
            today = datetime.strptime(args.today, "%Y-%m-%d").date()
        except ValueError:
            print(f"[ERROR] --today must be YYYY-MM-DD: {args.today}")
            return 1
    else:
        today = local_today(cfg)

    paths = InputPaths(config_file=args.config, schedule_file=args.sched)

    try:
        schedule = load_schedule(paths)
        settings = load_settings(
            paths,
            bank=args.bank,
            weekly_rate=args.accrual,
            extra_holidays=schedule.extra_holidays,
        )
    except InputError as e:
        print(f"[ERROR] {e}")
        return 1

    try:
        for w in validate_all(settings, schedule.vacations):
            print(f"[WARN] {w.message}")
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1

    print("Let's go on vacation!")
    print(f"[INFO] PTO bank:    {settings.bank} hours")
    print(f"[INFO] PTO accrual: {settings.weekly_rate} hours / week")
    print(f"[INFO] Holidays in config: {len(settings.holidays)} days")

    result = simulate_settings(today, settings, schedule.vacations)

    if result.is_empty:
        print("[RESULT] No vacations in your schedule :(")
        return 0

    if args.verbose:
        for e in result.accruals:
            where = " during vacation" if e.during_vacation else ""
            print(f"[ACCRUAL] {e.day.isoformat()}{where}: +{e.hours} hours (balance: {e.balance:.2f})")

    vacation_df = build_vacation_table(result, cfg)
    print(format_table(vacation_df))
    print(f"[RESULT] Final PTO balance: {result.final_balance:.2f} hours")

    if args.out:
        out_path = export_result_xlsx(args.out, vacation_df, build_accrual_table(result), build_summary(result, settings))
        print(f"[RESULT] Written: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
