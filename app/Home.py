"""numcmp - interactive baseline vs target comparison."""

import streamlit as st
import plotly.express as px

from numcmp.core.config import TAIL_POLICIES, ComparisonConfig
from numcmp.core.errors import NumcmpError
from numcmp.core.sample import as_sorted_sample
from numcmp.data.reader import parse_numbers
from numcmp.experiment.analysis import summaries_to_dataframe
from numcmp.experiment.comparison import compare_samples

st.set_page_config(page_title="numcmp", page_icon="", layout="wide")

st.title("numcmp: Bootstrap Sample Comparison")

st.markdown("""
Upload two files with **one number per line**. The target's mean and
percentiles are compared against bootstrap replicates drawn from the
baseline, each the size of the target.

The **tail probability** is the fraction of replicates the target's
statistic exceeded. Values near 0 or 1 suggest a difference larger than
sampling noise.
""")

if "comparison" not in st.session_state:
    st.session_state.comparison = None

col_a, col_b = st.columns(2)
with col_a:
    st.header("Baseline")
    baseline_file = st.file_uploader("Baseline numbers", type=["txt", "csv", "dat"], key="baseline")
with col_b:
    st.header("Target")
    target_file = st.file_uploader("Target numbers", type=["txt", "csv", "dat"], key="target")

st.markdown("---")
st.subheader("Run Comparison")

sim_col1, sim_col2, sim_col3 = st.columns(3)
with sim_col1:
    iterations = st.number_input("Iterations", 100, 200000, 10000, step=1000,
                                 help="More = more reliable but slower")
with sim_col2:
    seed = st.number_input("Random seed", 0, 2**31 - 1, 42)
with sim_col3:
    tail_policy = st.selectbox("Tail policy", TAIL_POLICIES, index=0)


def _load(uploaded, label):
    text = uploaded.getvalue().decode("utf-8")
    values = parse_numbers(text.splitlines(), source=label)
    if not values:
        raise NumcmpError(f"{label} contains no numbers")
    return as_sorted_sample(values)


run_comparison = st.button("Run Comparison", type="primary", use_container_width=True)

if run_comparison:
    if baseline_file is None or target_file is None:
        st.error("Please upload both a baseline and a target file.")
    else:
        try:
            baseline = _load(baseline_file, baseline_file.name)
            target = _load(target_file, target_file.name)
            config = ComparisonConfig(
                iterations=int(iterations),
                random_seed=int(seed),
                tail_policy=tail_policy,
            )
            with st.spinner(f"Running {int(iterations)} bootstrap iterations..."):
                st.session_state.comparison = compare_samples(baseline, target, config)
        except (NumcmpError, UnicodeDecodeError) as e:
            st.session_state.comparison = None
            st.error(f"Comparison failed: {e}")

comparison = st.session_state.comparison

if comparison is not None:
    st.markdown("---")
    st.subheader("Summary")
    st.dataframe(
        summaries_to_dataframe(comparison.baseline_summary, comparison.target_summary),
        use_container_width=True,
    )

    st.subheader("Comparison")
    st.dataframe(comparison.metrics, use_container_width=True, hide_index=True)

    fig = px.bar(
        comparison.metrics,
        x="name",
        y="tail_probability",
        labels={"name": "Estimator", "tail_probability": "Tail probability"},
        range_y=[0, 1],
    )
    fig.add_hline(y=0.5, line_dash="dash", line_color="grey")
    st.plotly_chart(fig, use_container_width=True)

    sig = comparison.significant_differences(alpha=0.05)
    if len(sig) > 0:
        st.success(f"Estimators outside the 5% tails: {', '.join(sig['name'])}")
    else:
        st.info("No estimator falls outside the 5% tails.")
