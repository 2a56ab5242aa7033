# pto_planner/gui/app.py
from __future__ import annotations

import streamlit as st

from pto_planner.config import DEFAULT_CONFIG, local_today
from pto_planner.io_layer.errors import InputError
from pto_planner.io_layer.loader import load_schedule, load_settings
from pto_planner.io_layer.paths import InputPaths
from pto_planner.reporting.export_xlsx import export_result_bytes
from pto_planner.reporting.report import build_accrual_table, build_summary, build_vacation_table
from pto_planner.simulation.accrual import simulate_settings
from pto_planner.validation.validator import ValidationError, validate_all


def main():
    cfg = DEFAULT_CONFIG

    st.title("PTO planner")

    st.header("Input")
    config_file = st.text_input("Settings TOML (holidays)", value=cfg.default_config_file).strip()
    schedule_file = st.text_input("Vacation schedule (.toml / .xlsx)").strip()
    today = st.date_input("Today", value=local_today(cfg))

    st.subheader("Overrides (blank = use settings file)")
    bank_text = st.text_input("PTO bank (hours)").strip()
    rate_text = st.text_input("PTO accrual (hours / week)").strip()

    run = st.button("Simulate")
    if not run:
        st.stop()

    if not schedule_file:
        st.error("Vacation schedule path is empty.")
        st.stop()

    try:
        bank = float(bank_text) if bank_text else None
        rate = float(rate_text) if rate_text else None
    except ValueError:
        st.error("PTO bank / accrual must be numbers.")
        st.stop()

    paths = InputPaths(config_file=config_file, schedule_file=schedule_file)

    try:
        schedule = load_schedule(paths)
        settings = load_settings(paths, bank=bank, weekly_rate=rate, extra_holidays=schedule.extra_holidays)
    except InputError as e:
        st.error(f"Could not read input: {e}")
        st.stop()

    try:
        for w in validate_all(settings, schedule.vacations):
            st.warning(w.message)
    except ValidationError as e:
        st.error(e.message)
        st.stop()

    result = simulate_settings(today, settings, schedule.vacations)
    if result.is_empty:
        st.info("No vacations in your schedule :(")
        st.stop()

    vacation_df = build_vacation_table(result, cfg)
    accrual_df = build_accrual_table(result)
    summary_df = build_summary(result, settings)

    st.metric("Final PTO balance (hours)", f"{result.final_balance:.2f}")

    tab1, tab2, tab3 = st.tabs(["Vacations", "Accruals", "Summary"])
    with tab1:
        st.dataframe(vacation_df, use_container_width=True)
    with tab2:
        st.dataframe(accrual_df, use_container_width=True)
    with tab3:
        st.dataframe(summary_df, use_container_width=True)

    st.download_button(
        label="Download result xlsx",
        data=export_result_bytes(vacation_df, accrual_df, summary_df),
        file_name="pto_result.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )


if __name__ == "__main__":
    main()
